"""Tests for contact field format rules."""

import pytest

from address_book.contacts.validation import (
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_place,
    is_valid_zip,
    validate_contact_fields,
    validate_field,
)
from address_book.exceptions import ValidationError


@pytest.mark.parametrize("value", ["Amit", "Kumar", "Joe", "McDonald"])
def test_valid_names(value):
    assert is_valid_name(value)


@pytest.mark.parametrize("value", ["am", "Am", "amit", "Am1t", "Amit Kumar", "O'Neil", "", "Amit\n"])
def test_invalid_names(value):
    assert not is_valid_name(value)


def test_address():
    assert is_valid_address("Sector 12")
    assert is_valid_address("12 B")
    assert not is_valid_address("12B")
    assert not is_valid_address("Flat #4")


def test_place():
    assert is_valid_place("Delhi")
    assert is_valid_place("New Delhi")
    assert not is_valid_place("Goa")
    assert not is_valid_place("Delhi 6")


def test_zip_keeps_leading_zeros():
    assert is_valid_zip("011001")
    assert not is_valid_zip("11001")
    assert not is_valid_zip("1100110")
    assert not is_valid_zip(110011)


def test_phone():
    assert is_valid_phone("0987654321")
    assert not is_valid_phone("98765 43210")
    assert not is_valid_phone("987654321")


def test_phone_rejects_non_ascii_digits():
    assert not is_valid_phone("٩٨٧٦٥٤٣٢١٠")


def test_email_is_permissive():
    assert is_valid_email("amit.kumar@example.com")
    assert is_valid_email("a-b_c@mail.example.co")
    assert is_valid_email("a..b@example..com")
    assert not is_valid_email("amit.example.com")
    assert not is_valid_email("amit@example")
    assert not is_valid_email("amit@example.c")
    assert not is_valid_email("amit@example.c0m")


def test_validate_field_raises_with_field_name():
    with pytest.raises(ValidationError) as exc_info:
        validate_field("phone", "12345")
    assert exc_info.value.field == "phone"


def test_validate_field_unknown_field():
    with pytest.raises(ValueError, match="Unknown contact field"):
        validate_field("nickname", "Ami")


def test_validate_contact_fields_reports_first_in_declaration_order():
    with pytest.raises(ValidationError) as exc_info:
        validate_contact_fields(email="bad", city="Goa", last_name="x")
    assert exc_info.value.field == "last_name"


def test_unicode_whitespace_accepted_between_words():
    assert is_valid_address("Sector\u00a012")
    assert is_valid_place("New\u2028Delhi")


def test_letters_and_word_characters_stay_ascii():
    assert not is_valid_name("Émile")
    assert not is_valid_place("Zürich")
    assert not is_valid_email("jürgen@example.com")
