# ./tests/test_reference.py
# Tests for parsing "Book Chapter:Verse" references.

import pytest

from utils.reference import parse_reference, format_reference, MalformedReference


def test_parses_simple_reference():
    assert parse_reference("João 3:16") == ("João", 3, 16)


def test_book_names_with_spaces_and_digits():
    parsed = parse_reference("1 João 4:8")
    assert parsed.book == "1 João"
    assert parsed.chapter == 4
    assert parsed.verse == 8


def test_leading_zeros_are_accepted():
    assert parse_reference("Salmos 023:001") == ("Salmos", 23, 1)


@pytest.mark.parametrize("reference", [
    "João3:16",
    "João 3",
    "João 3:",
    "João :16",
    " 3:16",
    "3:16",
    "João 3:16 ",
    "João 3-16",
    "João 3:16a",
    "",
    "João ٣:١٦",  # Arabic-Indic digits
])
def test_malformed_references(reference):
    with pytest.raises(MalformedReference):
        parse_reference(reference)


def test_non_string_is_malformed():
    with pytest.raises(MalformedReference):
        parse_reference(None)


def test_malformed_reference_is_a_value_error():
    with pytest.raises(ValueError) as exc_info:
        parse_reference("João3:16")
    assert exc_info.value.reference == "João3:16"
    assert "Book Chapter:Verse" in str(exc_info.value)


def test_format_reference():
    assert format_reference("João", 3, 16) == "João 3:16"
