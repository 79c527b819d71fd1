"""Environment variables held by the shell."""

from dataclasses import dataclass

from .strutil import compare_prefix, key_length, split_words

__all__ = ["EnvVar", "parse_environ", "fetch_path", "load_env"]


@dataclass
class EnvVar:
    """One environment variable."""

    key: str
    value: str


def parse_environ(entries):
    """Build a list of variables from ``KEY=VALUE`` strings, keeping order."""
    env = []
    for entry in entries:
        length = key_length(entry)
        value = entry[length + 1:] if entry[length:length + 1] == "=" else ""
        env.append(EnvVar(entry[:length], value))
    return env


def fetch_path(env):
    """Return the directories of the first variable whose key starts with PATH.

    Returns ``None`` when no such variable exists.
    """
    for var in env:
        if compare_prefix(var.key, "PATH", 4) == 0:
            return split_words(var.value, ":")
    return None


def load_env(env):
    """Return the variables as ``KEY=VALUE`` strings."""
    return [f"{var.key}={var.value}" for var in env]