"""
Scalar field parsers shared by the line handlers.

Cabrillo stores dates as ``YYYY-MM-DD`` and times as ``HHMM`` (UTC, no
seconds). Integers are plain decimal; flags are ``YES``/``NO``. Each
parser raises a ``FormatError`` (or ``UnknownEmailError``) on bad input
so the dispatcher can report it with a line number.
"""

from __future__ import annotations

import re
from datetime import datetime

from pydantic.networks import validate_email

from cabrillo.exceptions import FormatError, UnknownEmailError

# strptime alone accepts single-digit hours and minutes, so pin the widths first
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}$", re.ASCII)
_TIME_PATTERN = re.compile(r"\d{4}$", re.ASCII)
_INT_PATTERN = re.compile(r"[+-]?\d+$", re.ASCII)
_OPERATOR_SEPARATORS = re.compile(r"[,\s]+")

TIMESTAMP_FORMAT = "%Y-%m-%d %H%M"


def parse_timestamp(date: str, time: str) -> datetime:
    """Combine a ``YYYY-MM-DD`` date and ``HHMM`` time into a naive datetime.

    Raises:
        FormatError: If either token has the wrong shape or is not a
            valid calendar date/time.
    """
    if not _DATE_PATTERN.match(date):
        raise FormatError(f"cannot parse date {date!r}, expected YYYY-MM-DD")
    if not _TIME_PATTERN.match(time):
        raise FormatError(f"cannot parse time {time!r}, expected HHMM")
    try:
        return datetime.strptime(f"{date} {time}", TIMESTAMP_FORMAT)
    except ValueError as e:
        raise FormatError(f"cannot parse timestamp {date} {time}: {e}") from e


def parse_int(value: str) -> int:
    """Parse a plain decimal integer (optional sign)."""
    if not _INT_PATTERN.match(value):
        raise FormatError(f"cannot parse {value!r} as an integer")
    return int(value)


def parse_yes_no(value: str) -> bool:
    """Parse a case-insensitive ``YES``/``NO`` flag."""
    normalized = value.strip().upper()
    if normalized == "YES":
        return True
    if normalized == "NO":
        return False
    raise FormatError(f"cannot parse {normalized!r} as either YES or NO")


def parse_email(value: str) -> str:
    """Validate a mail address and return the normalized address.

    Accepts both bare addresses and the ``Display Name <addr>`` form;
    only the address part is returned.
    """
    try:
        _, address = validate_email(value)
    except ValueError as e:
        raise UnknownEmailError(f"parsing email address {value!r}: {e}") from e
    return address


def split_operators(value: str) -> list[str]:
    """Split an OPERATORS value on commas and/or whitespace.

    Empty pieces are dropped; host-station markers such as ``@K1ABC``
    are kept verbatim.
    """
    return [piece for piece in _OPERATOR_SEPARATORS.split(value.strip()) if piece]
