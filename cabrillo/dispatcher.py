"""
Line dispatcher: turns Cabrillo text into a ``ParseResult``.

Algorithm:
1. Decode bytes as UTF-8 and split the text on ``"\\n"``.
2. Split each line on whitespace; lines with fewer than 2 tokens are
   skipped (blank lines, bare ``END-OF-LOG:`` and the like).
3. Classify the leading token (``tags.classify_tag``).
4. Route by tag kind: exact tags to ``_EXACT_HANDLERS``, category tags
   to ``Log.add_category``, extension tags to
   ``Log.add_extensible_field``. Unrecognized tags become diagnostics.
5. The first ``CabrilloError`` aborts the parse; its ``line`` is set to
   the 0-based index of the offending line before it propagates.
"""

from __future__ import annotations

import logging
from typing import Callable

from cabrillo import tags
from cabrillo.config import ParserConfig
from cabrillo.exceptions import CabrilloError, FormatError, UnrecognizedTagError
from cabrillo.models import Diagnostic, Log, ParseResult
from cabrillo.parsers.fields import parse_email, parse_int, parse_yes_no
from cabrillo.parsers.offtime import parse_offtime
from cabrillo.parsers.qso import parse_qso
from cabrillo.tags import Tag, TagKind

logger = logging.getLogger(__name__)

Handler = Callable[[Log, list[str], str, ParserConfig], None]


# ---------------------------------------------------------------------------
# Exact-tag handlers
# ---------------------------------------------------------------------------
# Each handler receives the log, the value tokens (tag removed), the raw
# line and the config.

def _joined(values: list[str]) -> str:
    return " ".join(values)


def _address(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.add_address_line(_joined(values))


def _address_city(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.address.city = _joined(values)


def _address_country(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.address.country = _joined(values)


def _address_postalcode(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.address.postal_code = _joined(values)


def _address_state_province(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.address.state_province = _joined(values)


def _callsign(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.callsign = values[0]


def _certificate(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.certificate = parse_yes_no(values[0])


def _claimed_score(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.claimed_score = parse_int(values[0])


def _club(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.club = _joined(values)


def _contest(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.contest = _joined(values)


def _created_by(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.created_by = _joined(values)


def _email(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.email = parse_email(_joined(values))


def _end_of_log(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    pass


def _grid_locator(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.grid_locator = _joined(values)


def _location(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.location = _joined(values)


def _name(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.set_name(_joined(values))


def _offtime(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.off_times.append(parse_offtime(_joined(values)))


def _operators(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.add_operators(_joined(values))


def _qso(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.qsos.append(parse_qso(line, config.exchange_fields))


def _soapbox(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.add_soapbox(_joined(values))


def _start_of_log(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.version = values[0]


def _x_qso(log: Log, values: list[str], line: str, config: ParserConfig) -> None:
    log.x_qsos.append(parse_qso(line, config.exchange_fields))


_EXACT_HANDLERS: dict[str, Handler] = {
    tags.ADDRESS: _address,
    tags.ADDRESS_CITY: _address_city,
    tags.ADDRESS_COUNTRY: _address_country,
    tags.ADDRESS_POSTALCODE: _address_postalcode,
    tags.ADDRESS_STATE_PROVINCE: _address_state_province,
    tags.CALLSIGN: _callsign,
    tags.CERTIFICATE: _certificate,
    tags.CLAIMED_SCORE: _claimed_score,
    tags.CLUB: _club,
    tags.CONTEST: _contest,
    tags.CREATED_BY: _created_by,
    tags.EMAIL: _email,
    tags.END_OF_LOG: _end_of_log,
    tags.GRID_LOCATOR: _grid_locator,
    tags.LOCATION: _location,
    tags.NAME: _name,
    tags.OFFTIME: _offtime,
    tags.OPERATORS: _operators,
    tags.QSO: _qso,
    tags.SOAPBOX: _soapbox,
    tags.START_OF_LOG: _start_of_log,
    tags.X_QSO: _x_qso,
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _dispatch(
    tag: Tag,
    log: Log,
    values: list[str],
    line: str,
    config: ParserConfig,
) -> str | None:
    """Apply one classified line to the log.

    Returns a diagnostic message for unrecognized tags, else ``None``.
    """
    if tag.kind is TagKind.EXACT:
        _EXACT_HANDLERS[tag.name](log, values, line, config)
    elif tag.kind is TagKind.CATEGORY:
        log.add_category(tag.name, _joined(values))
    elif tag.kind is TagKind.EXTENSION:
        log.add_extensible_field(tag.name, _joined(values))
    else:
        message = f"unknown tag {tag.name!r}"
        if config.strict_tags:
            raise UnrecognizedTagError(message)
        return message
    return None


def _decode(data: bytes) -> str:
    """Decode UTF-8 input, reporting bad bytes against the line they sit on."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        line_num = data.count(b"\n", 0, e.start)
        column = e.start - (data.rfind(b"\n", 0, e.start) + 1)
        raise FormatError(
            f"invalid UTF-8 byte {data[e.start:e.start + 1]!r} at column {column}",
            line=line_num,
        ) from e


def parse_log(data: str | bytes, config: ParserConfig | None = None) -> ParseResult:
    """Parse an entire Cabrillo log.

    Args:
        data: The log text. ``bytes`` are decoded as UTF-8; undecodable
            input raises ``FormatError`` on the line holding the bad byte.
        config: Parser settings; defaults to ``ParserConfig()``
            (single-token exchange, lenient tags).

    Returns:
        ``ParseResult`` with the log and any non-fatal diagnostics.

    Raises:
        CabrilloError: The first fatal error, with ``line`` set to the
            0-based index of the offending line. No partial log is
            returned.
    """
    if config is None:
        config = ParserConfig()
    if isinstance(data, bytes):
        data = _decode(data)

    log = Log()
    diagnostics: list[Diagnostic] = []

    for line_num, line in enumerate(data.split("\n")):
        parts = line.split()
        if len(parts) < 2:
            continue

        tag = tags.classify_tag(parts[0])
        logger.debug("Line %d: %s tag %s", line_num, tag.kind.value, tag.name)

        try:
            message = _dispatch(tag, log, parts[1:], line, config)
        except CabrilloError as e:
            e.line = line_num
            logger.debug("Parse failed at line %d: %s", line_num, e.message)
            raise

        if message is not None:
            logger.warning("Line %d: %s", line_num, message)
            diagnostics.append(
                Diagnostic(line=line_num, tag=tag.name, text=line.rstrip("\r"), message=message)
            )

    logger.info(
        "Parsed log for %s: %d QSOs, %d X-QSOs, %d categories, %d diagnostics",
        log.callsign or "<unknown>",
        len(log.qsos),
        len(log.x_qsos),
        len(log.categories),
        len(diagnostics),
    )
    return ParseResult(log=log, diagnostics=diagnostics)
