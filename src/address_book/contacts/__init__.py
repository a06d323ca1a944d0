"""Validated contact records and the address book that holds them."""

from address_book.contacts.book import AddressBook
from address_book.contacts.models import Contact, ContactField, ContactResult, try_create_contact
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

__all__ = [
    "AddressBook",
    "Contact",
    "ContactField",
    "ContactResult",
    "try_create_contact",
    "is_valid_address",
    "is_valid_email",
    "is_valid_name",
    "is_valid_phone",
    "is_valid_place",
    "is_valid_zip",
    "validate_contact_fields",
    "validate_field",
]
