import pytest

from mhshell.strutil import compare_prefix, key_length, split_words


def test_split_words_on_colon():
    assert split_words("/bin:/usr/bin", ":") == ["/bin", "/usr/bin"]


def test_split_words_drops_empty_pieces():
    assert split_words("::cat::minishell.h:", ":") == ["cat", "minishell.h"]


def test_split_words_only_separators():
    assert split_words("   ", " ") == []


def test_split_words_none():
    assert split_words(None, " ") == []


def test_split_words_join_round_trip():
    words = ["cat", "minishell.h", "moha", "uy"]
    assert split_words(" ".join(words), " ") == words


def test_compare_prefix_equal():
    assert compare_prefix("PATH", "PATH", 4) == 0


def test_compare_prefix_only_first_n():
    assert compare_prefix("PATHEXT", "PATH", 4) == 0


def test_compare_prefix_longer_n_differs():
    assert compare_prefix("PATHEXT", "PATH", 5) > 0


def test_compare_prefix_shorter_string():
    assert compare_prefix("PAT", "PATH", 4) < 0


def test_compare_prefix_sign_follows_bytes():
    assert compare_prefix("abd", "abc", 3) > 0
    assert compare_prefix("abc", "abd", 3) < 0


def test_compare_prefix_is_antisymmetric():
    assert compare_prefix("HOME", "PATH", 4) == -compare_prefix("PATH", "HOME", 4)


def test_compare_prefix_zero_length():
    assert compare_prefix("abc", "xyz", 0) == 0


@pytest.mark.parametrize("entry", ["PATH=/bin", "HOME=/root", "A=b=c", "LONGKEY=v"])
def test_key_length_stops_at_equals(entry):
    assert key_length(entry) == entry.index("=")


def test_key_length_without_equals_skips_last_char():
    assert key_length("PATH") == len("PATH") - 1


def test_key_length_empty():
    assert key_length("") == 0