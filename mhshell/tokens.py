"""Tokens of a command line and the command words drawn from them."""

from dataclasses import dataclass
from enum import IntEnum

from .strutil import split_words

__all__ = [
    "TokenType",
    "Token",
    "command_words",
    "full_command",
    "group_commands",
    "count_pipes",
]


class TokenType(IntEnum):
    """Kind of a token; redirection tokens carry the file name as data."""

    WORD = 0
    REDIRECT_IN = 1
    REDIRECT_OUT = 2
    HEREDOC = 3
    APPEND = 4
    PIPE = 5


_REDIRECTIONS = frozenset(
    {TokenType.REDIRECT_IN, TokenType.REDIRECT_OUT, TokenType.HEREDOC, TokenType.APPEND}
)


@dataclass
class Token:
    """A piece of a command line."""

    data: str
    type: TokenType = TokenType.WORD


def command_words(tokens):
    """Return the data of every word token, across all pipe groups."""
    return [token.data for token in tokens if token.type == TokenType.WORD]


def full_command(tokens):
    """Return the argument list of the first pipe group.

    Redirection tokens are skipped and the words are re-split on spaces.
    """
    words = []
    for token in tokens:
        if token.type == TokenType.PIPE:
            break
        if token.type in _REDIRECTIONS:
            continue
        words.append(token.data)
    return split_words(" ".join(words), " ")


def group_commands(tokens):
    """Return the text of each pipe group, redirection targets included."""
    text = "".join(
        token.data if token.type == TokenType.PIPE else f"{token.data} "
        for token in tokens
    )
    return split_words(text, "|")


def count_pipes(tokens):
    """Return the number of pipe tokens."""
    return sum(1 for token in tokens if token.type == TokenType.PIPE)