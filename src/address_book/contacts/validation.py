"""Format rules for contact fields.

Letter, digit and word classes are ASCII-only; whitespace follows Unicode,
so a no-break space between address words is accepted.
"""

from __future__ import annotations

import re

from address_book.exceptions import ValidationError

_NAME_RE = re.compile(r"[A-Z][a-zA-Z]{2,}")
_ADDRESS_RE = re.compile(r"[a-zA-Z0-9\s]{4,}")
_PLACE_RE = re.compile(r"[a-zA-Z\s]{4,}")
_ZIP_RE = re.compile(r"[0-9]{6}")
_PHONE_RE = re.compile(r"[0-9]{10}")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9_.-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def _fullmatch(pattern: re.Pattern, value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_name(value: object) -> bool:
    """One uppercase letter followed by two or more letters."""
    return _fullmatch(_NAME_RE, value)


def is_valid_address(value: object) -> bool:
    return _fullmatch(_ADDRESS_RE, value)


def is_valid_place(value: object) -> bool:
    """City or state: letters and whitespace, at least 4 characters."""
    return _fullmatch(_PLACE_RE, value)


def is_valid_zip(value: object) -> bool:
    return _fullmatch(_ZIP_RE, value)


def is_valid_phone(value: object) -> bool:
    return _fullmatch(_PHONE_RE, value)


def is_valid_email(value: object) -> bool:
    """Permissive check: no length caps, consecutive dots allowed."""
    return _fullmatch(_EMAIL_RE, value)


# Declaration order is also the order rules are checked in.
FIELD_RULES = {
    "first_name": (is_valid_name, "should start with a capital letter and have at least 3 letters"),
    "last_name": (is_valid_name, "should start with a capital letter and have at least 3 letters"),
    "address": (is_valid_address, "should be letters, digits or spaces and have at least 4 characters"),
    "city": (is_valid_place, "should be letters or spaces and have at least 4 characters"),
    "state": (is_valid_place, "should be letters or spaces and have at least 4 characters"),
    "zip": (is_valid_zip, "should be exactly 6 digits"),
    "phone": (is_valid_phone, "should be exactly 10 digits"),
    "email": (is_valid_email, "is not a valid email address"),
}


def validate_field(field: str, value: object) -> None:
    """Raise ValidationError if ``value`` breaks the rule for ``field``."""
    try:
        check, reason = FIELD_RULES[field]
    except KeyError:
        raise ValueError(f"Unknown contact field: {field!r}") from None
    if not check(value):
        raise ValidationError(field, reason)


def validate_contact_fields(**fields: object) -> None:
    """Validate every known field present in ``fields``, first failure wins.

    Fields are checked in declaration order regardless of keyword order.
    """
    unknown = set(fields) - set(FIELD_RULES)
    if unknown:
        raise ValueError(f"Unknown contact field(s): {', '.join(sorted(unknown))}")
    for name in FIELD_RULES:
        if name in fields:
            validate_field(name, fields[name])
