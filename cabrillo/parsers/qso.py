"""
QSO (contact) line parsing.

A QSO line carries a fixed head followed by the sent and received
halves of the contact. Each half's exchange is ``k`` whitespace-separated
tokens, where ``k`` depends on the contest (1 for a bare serial number,
3 for "name serial QTH", ...)::

    QSO: freq mo date       time call          rst exch   call          rst exch   t
    QSO: 7030 CW 2017-11-25 2134 K1IR          599 5      IQ3R          599 15

Token layout for exchange width ``k``:

    [0]            tag (``QSO:`` or ``X-QSO:``)
    [1]            frequency (kHz below 30 MHz, band label above)
    [2]            mode
    [3], [4]       date, time
    [5]            sender call sign
    [6]            sender RST
    [7, 7+k)       sender exchange
    [7+k]          receiver call sign
    [8+k]          receiver RST
    [9+k, 9+2k)    receiver exchange
    [9+2k]         transmitter number (optional)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, TypeVar

from cabrillo.exceptions import FormatError, StructuralError
from cabrillo.parsers.fields import parse_int, parse_timestamp
from cabrillo.parsers.rst import RST, parse_rst

# tag, frequency, mode, date, time, sender call, sender RST, receiver call, receiver RST
_FIXED_FIELDS = 9

T = TypeVar("T")


@dataclass
class Info:
    """One side (sender or receiver) of a contact."""

    callsign: str = ""
    signal_report: RST = field(default_factory=RST)
    exchange: str = ""


@dataclass
class QSO:
    """A single logged contact."""

    frequency: str
    mode: str
    timestamp: datetime
    tx_info: Info
    rx_info: Info
    transmitter: int = 0


def expected_field_counts(exchange_fields: int) -> tuple[int, int]:
    """Return the (without transmitter, with transmitter) token counts."""
    fields_min = _FIXED_FIELDS + 2 * exchange_fields
    return fields_min, fields_min + 1


def _sub_field(name: str, parse: Callable[..., T], *args: str) -> T:
    """Run a sub-parser, prefixing any FormatError with the sub-field name."""
    try:
        return parse(*args)
    except FormatError as e:
        raise FormatError(f"parsing {name}: {e.message}") from e


def parse_qso(line: str, exchange_fields: int = 1) -> QSO:
    """Parse a QSO or X-QSO line.

    Args:
        line: The raw line, tag included.
        exchange_fields: Number of tokens in one side's exchange.

    Returns:
        The parsed QSO. ``transmitter`` is 0 when the line has no
        transmitter column.

    Raises:
        ValueError: If ``exchange_fields`` is less than 1.
        StructuralError: If the token count is neither ``9 + 2k`` nor
            ``10 + 2k``.
        FormatError: If the timestamp, either RST or the transmitter
            number cannot be parsed.
    """
    if exchange_fields < 1:
        raise ValueError(f"exchange_fields must be at least 1, got {exchange_fields}")

    fields = line.split()
    k = exchange_fields
    fields_min, fields_max = expected_field_counts(k)

    if len(fields) not in (fields_min, fields_max):
        raise StructuralError(
            f"invalid number of fields in QSO: got {len(fields)}, "
            f"expected {fields_min} or {fields_max} - {line.strip()!r}"
        )

    rx_call = 7 + k
    rx_rst = rx_call + 1
    rx_exchange = rx_rst + 1

    timestamp = _sub_field("timestamp", parse_timestamp, fields[3], fields[4])
    tx_rst = _sub_field("sender RST", parse_rst, fields[6])
    rx_rst_value = _sub_field("receiver RST", parse_rst, fields[rx_rst])

    transmitter = 0
    if len(fields) == fields_max:
        transmitter = _sub_field("transmitter", parse_int, fields[-1])

    return QSO(
        frequency=fields[1],
        mode=fields[2],
        timestamp=timestamp,
        tx_info=Info(
            callsign=fields[5],
            signal_report=tx_rst,
            exchange=" ".join(fields[7:rx_call]),
        ),
        rx_info=Info(
            callsign=fields[rx_call],
            signal_report=rx_rst_value,
            exchange=" ".join(fields[rx_exchange:rx_exchange + k]),
        ),
        transmitter=transmitter,
    )
