"""Unified exception hierarchy for address-book."""

from __future__ import annotations


class AddressBookError(Exception):
    """Base exception for all address-book errors."""


# Validation
class ValidationError(AddressBookError):
    """A contact field failed its format rule."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


# Lookup
class ContactLookupError(AddressBookError):
    """Base exception for name-keyed address book operations."""


class DuplicateContactError(ContactLookupError):
    """A contact with the same first and last name already exists."""

    def __init__(self, full_name: str):
        super().__init__(f"Duplicate contact entry is not allowed: {full_name}")
        self.full_name = full_name


class NotFoundError(ContactLookupError):
    """No contact matched the given full name."""

    def __init__(self, full_name: str, operation: str):
        super().__init__(f"Contact not found for {operation}: {full_name}")
        self.full_name = full_name
        self.operation = operation


# Sorting
class InvalidFieldError(AddressBookError):
    """Unrecognized sort field selector."""

    def __init__(self, field: object):
        super().__init__(f"Cannot sort by {field!r}; expected one of city, state, zip")
        self.field = field
