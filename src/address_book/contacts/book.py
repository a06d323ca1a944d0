"""In-memory address book of validated contacts."""

from __future__ import annotations

import locale
import logging
import os
import unicodedata
from contextlib import contextmanager
from typing import Iterator

from address_book.contacts.models import Contact, ContactField
from address_book.exceptions import (
    AddressBookError,
    DuplicateContactError,
    InvalidFieldError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_COLLATION_LOCALE = os.environ.get("ADDRESS_BOOK_LOCALE", "")

_SORT_KEYS = {
    ContactField.CITY: lambda c: c.city,
    ContactField.STATE: lambda c: c.state,
    ContactField.ZIP: lambda c: c.zip,
}


def collation_key(value: str) -> tuple[str, str, str]:
    """Sort key ordering letters first, then accents, then case.

    ``"agra"`` sorts before ``"Delhi"`` and ``"Mcabe"`` before ``"McDonald"``;
    ties on letters are broken by accents and finally lowercase-first.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), value.swapcase()


@contextmanager
def _collation(locale_name: str) -> Iterator[None]:
    """Temporarily switch the process-wide LC_COLLATE; a falsy name is a no-op."""
    if not locale_name:
        yield
        return
    previous = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, locale_name)
    try:
        yield
    finally:
        locale.setlocale(locale.LC_COLLATE, previous)


def _resolve_field(field: ContactField | str) -> ContactField:
    try:
        return ContactField(field)
    except (ValueError, TypeError):
        raise InvalidFieldError(field) from None


def _matches_place(contact: Contact, city_or_state: str) -> bool:
    return contact.city == city_or_state or contact.state == city_or_state


class AddressBook:
    """Ordered, duplicate-free collection of contacts.

    Contacts are unique by (first_name, last_name). Lookups use the exact
    full name ``"First Last"``; city and state matching is exact as well.
    Every query returns a snapshot, so callers cannot reorder the book
    behind its back.

    Args:
        collation_locale: Optional locale whose LC_COLLATE rules refine
            ``collation_key`` when sorting. Defaults to the
            ``ADDRESS_BOOK_LOCALE`` environment variable. When empty, sorting
            never touches the process locale.
    """

    def __init__(self, collation_locale: str | None = None):
        if collation_locale is None:
            collation_locale = DEFAULT_COLLATION_LOCALE
        try:
            with _collation(collation_locale):
                pass
        except locale.Error as e:
            raise AddressBookError(
                f"Collation locale {collation_locale!r} is not available"
            ) from e
        self.collation_locale = collation_locale
        self._contacts: list[Contact] = []

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(tuple(self._contacts))

    def __contains__(self, contact: object) -> bool:
        return contact in self._contacts

    def _sort_key(self, value: str) -> tuple[str, ...]:
        key = collation_key(value)
        if self.collation_locale:
            return tuple(locale.strxfrm(part) for part in key)
        return key

    def _index_of(self, full_name: str) -> int:
        for i, contact in enumerate(self._contacts):
            if contact.full_name == full_name:
                return i
        return -1

    def _has_name(self, contact: Contact, skip: int = -1) -> bool:
        return any(
            i != skip
            and c.first_name == contact.first_name
            and c.last_name == contact.last_name
            for i, c in enumerate(self._contacts)
        )

    def add_contact(self, contact: Contact) -> None:
        """Append a contact; duplicates by first and last name are rejected."""
        if self._has_name(contact):
            logger.warning(f"Rejected duplicate contact {contact.full_name}")
            raise DuplicateContactError(contact.full_name)
        self._contacts.append(contact)
        logger.info(f"Added contact {contact.full_name}")

    def edit_contact(self, full_name: str, new_contact: Contact) -> None:
        """Replace the first contact named ``full_name`` in place.

        The replacement may carry a different name, but not one already used
        by another entry.
        """
        index = self._index_of(full_name)
        if index == -1:
            raise NotFoundError(full_name, "edit")
        if self._has_name(new_contact, skip=index):
            logger.warning(f"Rejected rename of {full_name} to existing {new_contact.full_name}")
            raise DuplicateContactError(new_contact.full_name)
        self._contacts[index] = new_contact
        logger.info(f"Edited contact {full_name} -> {new_contact.full_name}")

    def delete_contact(self, full_name: str) -> None:
        """Remove every contact named ``full_name``."""
        remaining = [c for c in self._contacts if c.full_name != full_name]
        removed = len(self._contacts) - len(remaining)
        if removed == 0:
            raise NotFoundError(full_name, "delete")
        self._contacts = remaining
        logger.info(f"Deleted {removed} contact(s) named {full_name}")

    def find_contact(self, full_name: str) -> Contact | None:
        index = self._index_of(full_name)
        return self._contacts[index] if index != -1 else None

    def count_contacts(self) -> int:
        return len(self._contacts)

    def search_by_city_or_state(self, full_name: str, city_or_state: str) -> list[Contact]:
        """Contacts named ``full_name`` living in the given city or state."""
        return [
            c for c in self._contacts
            if c.full_name == full_name and _matches_place(c, city_or_state)
        ]

    def view_by_city_or_state(self, city_or_state: str) -> list[Contact]:
        return [c for c in self._contacts if _matches_place(c, city_or_state)]

    def count_by_city_or_state(self, city_or_state: str) -> int:
        return sum(1 for c in self._contacts if _matches_place(c, city_or_state))

    def sort_by_name(self) -> list[Contact]:
        """Sort in place by collated full name and return the new order."""
        with _collation(self.collation_locale):
            self._contacts.sort(key=lambda c: self._sort_key(c.full_name))
        logger.debug(f"Sorted {len(self._contacts)} contacts by name")
        return list(self._contacts)

    def sort_by_city_state_or_zip(self, field: ContactField | str) -> list[Contact]:
        """Sort in place by city, state or zip and return the new order.

        Raises:
            InvalidFieldError: ``field`` is not city, state or zip. The book
                is left in its current order.
        """
        selector = _resolve_field(field)
        key = _SORT_KEYS[selector]
        with _collation(self.collation_locale):
            self._contacts.sort(key=lambda c: self._sort_key(key(c)))
        logger.debug(f"Sorted {len(self._contacts)} contacts by {selector.value}")
        return list(self._contacts)
