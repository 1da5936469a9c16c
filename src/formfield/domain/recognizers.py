"""Character-class recognizers for email and numeric string formats.

These are structural checks, not an RFC 5322 parser. Every pattern must
consume the whole input: a valid prefix followed by anything else is
rejected.

The empty string is neither numeric nor non-numeric. Fields that may be
left blank wrap their checks in ``formfield.fields.string.optional``.
"""

from __future__ import annotations

import re

# local@domain.label: local and domain >= 2 chars, final label >= 2 alphanumerics.
EMAIL_PATTERN: re.Pattern[str] = re.compile(
    r"[A-Za-z0-9._%+\-]{2,}@[A-Za-z0-9.\-]{2,}\.[A-Za-z0-9]{2,}"
)
NUMERIC_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+")
NON_NUMERIC_PATTERN: re.Pattern[str] = re.compile(r"[^0-9]+")


def is_email(text: str) -> bool:
    """Check whether *text* is shaped like ``local@domain.tld``.

    Examples:
        >>> is_email("ab@cd.ef")
        True
        >>> is_email("ab@cd")
        False
        >>> is_email("ab@cd.ef ")
        False
    """
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_numeric(text: str) -> bool:
    """Check whether *text* is one or more ASCII decimal digits."""
    return NUMERIC_PATTERN.fullmatch(text) is not None


def is_non_numeric(text: str) -> bool:
    """Check whether *text* is non-empty and contains no ASCII digit."""
    return NON_NUMERIC_PATTERN.fullmatch(text) is not None
