import pytest

from ftlib.splitting import (
    split,
    split_quotes,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


# split

def test_split_basic_words():
    assert split("hello world  foo", " ") == ["hello", "world", "foo"]


def test_split_drops_empty_words():
    words = split(",,a,,b,", ",")
    assert words == ["a", "b"]
    assert all(words)


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_no_separator_gives_whole_string():
    assert split("abc", ",") == ["abc"]


def test_split_rejoin_round_trip():
    text = "one two three"
    assert " ".join(split(text, " ")) == text


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


# split_quotes

def test_split_quotes_keeps_quoted_text_together():
    assert split_quotes("echo 'hello world' x", " ") == ["echo", "hello world", "x"]


def test_split_quotes_double_quotes():
    assert split_quotes('say "a b c"', " ") == ["say", "a b c"]


def test_split_quotes_empty_quotes_give_empty_word():
    assert split_quotes("a '' b", " ") == ["a", "", "b"]


def test_split_quotes_word_ends_at_quote():
    assert split_quotes("ab'cd'", " ") == ["ab", "cd"]


def test_split_quotes_unclosed_quote_drops_last_char():
    assert split_quotes("'abc", " ") == ["ab"]
    assert split_quotes("'", " ") == [""]


def test_split_quotes_without_quotes_matches_split():
    text = "  foo bar   baz "
    assert split_quotes(text, " ") == split(text, " ")


def test_split_quotes_empty_input():
    assert split_quotes("", " ") == []


def test_split_quotes_rejects_bad_separator():
    with pytest.raises(ValueError):
        split_quotes("a b", "")


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


# substr

def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clamped_to_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 50, 3) == ""


def test_substr_zero_length():
    assert substr("hello", 1, 0) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


# strlcpy

def test_strlcpy_fits():
    assert strlcpy("bonjour", 20) == ("bonjour", 7)


def test_strlcpy_truncates():
    copied, total = strlcpy("bonjour", 4)
    assert copied == "bon"
    assert total == len("bonjour")


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcpy_size_one_copies_nothing():
    assert strlcpy("abc", 1) == ("", 3)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


# strlcat

def test_strlcat_fits():
    result, total = strlcat("Hello", " World!", 15)
    assert result == "Hello World!"
    assert total == len("Hello") + len(" World!")


def test_strlcat_truncates():
    result, total = strlcat("Hello", " World!", 9)
    assert result == "Hello Wo"
    assert total == len("Hello World!")
    assert len(result) == 9 - 1


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("Hello", "abc", 3)
    assert result == "Hello"
    assert total == 3 + len("abc")


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -5)


# strmapi

def test_strmapi_replaces_characters():
    result = strmapi("aaaah bah bravo", lambda i, c: "o" if c == "a" else c)
    assert result == "ooooh boh brovo"


def test_strmapi_receives_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert strmapi("abcd", record) == "abcd"
    assert seen == [0, 1, 2, 3]


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c.upper()) == ""


# striteri

def test_striteri_modifies_in_place():
    chars = list("banana")
    assert striteri(chars, lambda i, c: "o" if c == "a" else None) is None
    assert "".join(chars) == "bonono"


def test_striteri_none_keeps_items():
    chars = list("xyz")
    striteri(chars, lambda i, c: None)
    assert chars == ["x", "y", "z"]


def test_striteri_passes_indices_in_order():
    items = ["a", "b", "c"]
    striteri(items, lambda i, c: f"{c}{i}")
    assert items == ["a0", "b1", "c2"]