"""
OFFTIME parsing.

    OFFTIME: 2002-03-22 0300 2002-03-22 0743
             -----begin----- ------end------
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from cabrillo.exceptions import FormatError, StructuralError
from cabrillo.parsers.fields import parse_timestamp


@dataclass(frozen=True)
class OffTime:
    """A declared interval during which the station was off the air."""

    begin: datetime
    end: datetime


def parse_offtime(text: str) -> OffTime:
    """Parse ``"<begin-date> <begin-time> <end-date> <end-time>"``.

    Raises:
        StructuralError: If the text does not split into exactly 4 tokens.
        FormatError: If either date/time pair is invalid.
    """
    pieces = text.split()
    if len(pieces) != 4:
        raise StructuralError(
            f"invalid number of fields in offtime: got {len(pieces)}, expected 4"
        )

    try:
        begin = parse_timestamp(pieces[0], pieces[1])
    except FormatError as e:
        raise FormatError(f"parsing begin time: {e.message}") from e

    try:
        end = parse_timestamp(pieces[2], pieces[3])
    except FormatError as e:
        raise FormatError(f"parsing end time: {e.message}") from e

    return OffTime(begin=begin, end=end)
