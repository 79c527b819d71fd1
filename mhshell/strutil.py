"""Small string helpers used by the shell."""

from itertools import islice, zip_longest

__all__ = ["split_words", "compare_prefix", "key_length"]


def split_words(s, sep):
    """Split ``s`` on ``sep`` and drop empty pieces.

    Runs of separators count as one, and leading or trailing separators
    produce nothing. ``None`` yields an empty list.
    """
    if s is None:
        return []
    return [word for word in s.split(sep) if word]


def compare_prefix(s1, s2, n):
    """Compare at most ``n`` bytes of two strings.

    Returns zero when they match, otherwise the difference between the
    first pair of bytes that differ. A shorter string compares as if it
    were padded with NUL bytes, and comparison stops once both end.
    """
    pairs = zip_longest(s1.encode(), s2.encode(), fillvalue=0)
    for a, b in islice(pairs, n):
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def key_length(entry):
    """Return the length of the key part of a ``KEY=VALUE`` entry.

    The scan stops at the first ``=`` but never looks at the final
    character, so an entry without ``=`` yields one less than its length.
    """
    limit = max(len(entry) - 1, 0)
    position = entry[:limit].find("=")
    return limit if position < 0 else position