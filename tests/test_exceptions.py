"""Tests for exception hierarchy."""

from address_book.exceptions import (
    AddressBookError,
    ContactLookupError,
    DuplicateContactError,
    InvalidFieldError,
    NotFoundError,
    ValidationError,
)


def test_all_inherit_from_base():
    for exc_class in [
        ValidationError,
        ContactLookupError, DuplicateContactError, NotFoundError,
        InvalidFieldError,
    ]:
        assert issubclass(exc_class, AddressBookError)


def test_lookup_hierarchy():
    assert issubclass(DuplicateContactError, ContactLookupError)
    assert issubclass(NotFoundError, ContactLookupError)


def test_validation_error_fields():
    e = ValidationError("zip", "should be exactly 6 digits")
    assert e.field == "zip"
    assert e.reason == "should be exactly 6 digits"
    assert str(e) == "Invalid zip: should be exactly 6 digits"


def test_not_found_error_fields():
    e = NotFoundError("Nobody Here", "delete")
    assert e.full_name == "Nobody Here"
    assert e.operation == "delete"
    assert "Nobody Here" in str(e)


def test_duplicate_and_invalid_field_messages():
    assert "Amit Kumar" in str(DuplicateContactError("Amit Kumar"))
    assert InvalidFieldError("email").field == "email"
