import re

import pytest

from otpx import InvalidCharset, InvalidLength, charset
from otpx.charset import build_alphabet, generate_otp


def test_default_is_six_digits():
    assert re.fullmatch(r"\d{6}", generate_otp())


@pytest.mark.parametrize("name, length, pattern", [
    ("numeric", 8, r"\d{8}"),
    ("alphabetic", 10, r"[A-Za-z]{10}"),
    ("alphanumeric", 12, r"[A-Za-z0-9]{12}"),
    ("hex", 16, r"[0-9a-f]{16}"),
])
def test_builtin_charsets(name, length, pattern):
    assert re.fullmatch(pattern, generate_otp(length, name))


def test_exclude_similar():
    for _ in range(20):
        assert not re.search(r"[O0Il]", generate_otp(40, "alphanumeric", exclude_similar=True))


def test_case_options():
    assert re.fullmatch(r"[A-Z]{10}", generate_otp(10, "alphabetic", case="upper"))
    assert re.fullmatch(r"[a-z]{10}", generate_otp(10, "alphabetic", case="lower"))
    assert re.fullmatch(r"[A-Za-z]{10}", generate_otp(10, "alphabetic", case="mixed"))


def test_case_folding_removes_duplicates():
    alphabet = build_alphabet("alphabetic", case="lower")
    assert alphabet == "abcdefghijklmnopqrstuvwxyz"


def test_exclusion_happens_before_case_change():
    alphabet = build_alphabet("alphabetic", exclude_similar=True, case="upper")
    # "O" and "I" were dropped, but upper-casing "o" and "i" brings them back
    assert "O" in alphabet and "I" in alphabet
    assert "L" in alphabet
    assert len(alphabet) == len(set(alphabet)) == 26


def test_custom_charset():
    assert re.fullmatch(r"[aeiou]{6}", generate_otp(6, custom="aeiou"))
    assert generate_otp(5, "hex", custom="x") == "xxxxx"


def test_run_callback_called_once():
    seen = []
    otp = generate_otp(6, "numeric", run=seen.append)
    assert seen == [otp]


@pytest.mark.parametrize("length", [0, -1, 1.5])
def test_invalid_length(length):
    with pytest.raises(InvalidLength):
        generate_otp(length)


@pytest.mark.parametrize("kwargs", [
    {"charset": "invalid"},
    {"charset": None},
    {"custom": ""},
    {"custom": "O0Il", "exclude_similar": True},
    {"case": "title"},
])
def test_invalid_charset(kwargs):
    with pytest.raises(InvalidCharset):
        generate_otp(6, **kwargs)


def test_charset_tables_are_read_only():
    with pytest.raises(TypeError):
        charset.CHARSETS["numeric"] = "01"


def test_shorthands():
    assert re.fullmatch(r"\d{8}", charset.numeric(8))
    assert re.fullmatch(r"[A-Za-z]{7}", charset.alphabetic(7))
    assert re.fullmatch(r"[A-Z]{7}", charset.alphabetic(7, case="upper"))
    assert re.fullmatch(r"[A-Za-z0-9]{9}", charset.alphanumeric(9))
    assert re.fullmatch(r"[a-f0-9]{10}", charset.hex(10))
