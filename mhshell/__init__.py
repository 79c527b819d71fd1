"""A small shell core: environment parsing, command tokens and running a command with redirections."""

__version__ = "0.1.0"