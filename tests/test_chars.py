import string

import pytest

from ftlib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ALL_BYTES = range(256)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_space_matches_whitespace(code):
    assert is_space(code) == (chr(code) in string.whitespace)


def test_is_alpha_accepts_strings():
    assert is_alpha("a") is True
    assert is_alpha("Z") is True
    assert is_alpha("@") is False
    assert is_alpha("[") is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("é") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False
    assert is_print("~") is True


def test_to_lower_int():
    assert to_lower(65) == 97
    assert to_lower(90) == 122
    assert to_lower(97) == 97
    assert to_lower(48) == 48


def test_to_upper_int():
    assert to_upper(97) == 65
    assert to_upper(122) == 90
    assert to_upper(65) == 65


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("ch", string.punctuation + string.digits + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_non_ascii_case_unchanged():
    assert to_upper("é") == "é"
    assert to_lower("À") == "À"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_upper(None)