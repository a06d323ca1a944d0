"""Data models for the contacts module."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from address_book.contacts.validation import validate_contact_fields
from address_book.exceptions import ValidationError


class ContactField(str, Enum):
    """Fields an address book can be sorted by."""

    CITY = "city"
    STATE = "state"
    ZIP = "zip"


@dataclass(frozen=True)
class Contact:
    """A validated personal contact record.

    All fields are validated once on construction; a ``Contact`` that exists
    is always valid. Zip and phone stay strings so leading zeros survive.

    Raises:
        ValidationError: naming the first field that fails its format rule.
    """

    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str

    def __post_init__(self):
        validate_contact_fields(**self.to_dict())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        return (
            f"{self.full_name}, {self.address}, {self.city}, {self.state}, "
            f"{self.zip}, {self.phone}, {self.email}"
        )


@dataclass
class ContactResult:
    """Outcome of ``try_create_contact``: either a contact or the error."""

    contact: Contact | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Contact:
        if self.error is not None:
            raise self.error
        return self.contact


def try_create_contact(
    first_name: str,
    last_name: str,
    address: str,
    city: str,
    state: str,
    zip: str,
    phone: str,
    email: str,
) -> ContactResult:
    """Build a Contact without raising on invalid input.

    Returns:
        ContactResult with ``contact`` set on success, ``error`` on failure.
    """
    try:
        contact = Contact(first_name, last_name, address, city, state, zip, phone, email)
    except ValidationError as e:
        return ContactResult(error=e)
    return ContactResult(contact=contact)
