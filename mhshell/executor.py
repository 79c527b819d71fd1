"""Running a tokenised command line."""

import os
import subprocess
import sys

from .environment import fetch_path, load_env, parse_environ
from .tokens import Token, TokenType, command_words, full_command

__all__ = [
    "ShellError",
    "CommandNotFoundError",
    "find_executable",
    "apply_redirections",
    "run",
    "main",
]


class ShellError(Exception):
    """A command line that cannot be run."""


class CommandNotFoundError(ShellError):
    """No executable for the command was found on PATH."""


def find_executable(paths, cmd):
    """Return the first ``dir/cmd`` in ``paths`` that is executable, or ``None``."""
    for directory in paths or ():
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def apply_redirections(tokens):
    """Open the redirection targets in order.

    Input files must be readable. Output files are created or truncated
    with mode 0644; the last one is returned open for writing, or ``None``
    when there is none. Failure to open raises ``OSError``.
    """
    output = None
    try:
        for token in tokens:
            if token.type == TokenType.REDIRECT_IN:
                with open(token.data, "rb"):
                    pass
            elif token.type == TokenType.REDIRECT_OUT:
                if output is not None:
                    output.close()
                fd = os.open(token.data, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
                output = os.fdopen(fd, "wb")
    except OSError:
        if output is not None:
            output.close()
        raise
    return output


def run(tokens, env):
    """Run the first command of ``tokens`` and return its exit status."""
    tokens = list(tokens)
    stdout = apply_redirections(tokens)
    try:
        words = command_words(tokens)
        if not words:
            raise ShellError("empty command")
        cmd_path = find_executable(fetch_path(env), words[0])
        if cmd_path is None:
            raise CommandNotFoundError(words[0])
        argv = full_command(tokens)
        if not argv:
            raise ShellError("empty command")
        environment = dict(entry.split("=", 1) for entry in load_env(env))
        completed = subprocess.run(
            argv, executable=cmd_path, env=environment, stdout=stdout, check=False
        )
        return completed.returncode
    finally:
        if stdout is not None:
            stdout.close()


_OPERATORS = {
    "<": TokenType.REDIRECT_IN,
    ">": TokenType.REDIRECT_OUT,
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
}


def _tokenize(args):
    tokens = []
    items = iter(args)
    for arg in items:
        if arg == "|":
            tokens.append(Token(arg, TokenType.PIPE))
        elif arg in _OPERATORS:
            target = next(items, None)
            if target is None:
                raise ShellError("syntax error near unexpected token `newline'")
            tokens.append(Token(target, _OPERATORS[arg]))
        else:
            tokens.append(Token(arg, TokenType.WORD))
    return tokens


def main(argv=None):
    """Run the command given as arguments with the current environment."""
    args = sys.argv[1:] if argv is None else list(argv)
    env = parse_environ(f"{key}={value}" for key, value in os.environ.items())
    try:
        return run(_tokenize(args), env)
    except CommandNotFoundError:
        sys.stderr.write("mhd: command not found\n")
    except ShellError as exc:
        sys.stderr.write(f"Minishell: {exc}\n")
    except OSError as exc:
        sys.stderr.write(f"Minishell: {exc.strerror or exc}\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())