"""
The parsed log aggregate and its field collectors.

``Log`` is built up line by line by the dispatcher. The collector
methods (``add_address_line``, ``set_name``, ``add_category``, ...)
enforce the Cabrillo bounds and raise without mutating on failure.

``ParseResult`` pairs the finished ``Log`` with the non-fatal
diagnostics collected while parsing (unrecognized tags).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cabrillo.categories import VALID_CATEGORIES, Category
from cabrillo.exceptions import CardinalityError, LengthError, UnknownCategoryError
from cabrillo.parsers.fields import split_operators
from cabrillo.parsers.offtime import OffTime
from cabrillo.parsers.qso import QSO

MAX_ADDRESS_LINES = 6
MAX_LENGTH_ADDRESS = 45
MAX_LENGTH_NAME = 75


@dataclass
class Address:
    """Postal address. ``lines`` holds up to 6 street-address lines."""

    lines: list[str] = field(default_factory=list)
    city: str = ""
    state_province: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass
class ExtensibleField:
    """An ``X-<name>:`` field; one entry in ``values`` per occurrence."""

    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class Log:
    """An entire Cabrillo log.

    ``certificate`` defaults to True: the format treats a missing
    CERTIFICATE tag as YES.
    """

    address: Address = field(default_factory=Address)
    callsign: str = ""
    categories: list[Category] = field(default_factory=list)
    certificate: bool = True
    claimed_score: int = 0
    club: str = ""
    contest: str = ""
    created_by: str = ""
    email: str = ""
    extensible_fields: list[ExtensibleField] = field(default_factory=list)
    grid_locator: str = ""
    location: str = ""
    name: str = ""
    off_times: list[OffTime] = field(default_factory=list)
    operators: list[str] = field(default_factory=list)
    qsos: list[QSO] = field(default_factory=list)
    soapbox: list[str] = field(default_factory=list)
    version: str = ""
    x_qsos: list[QSO] = field(default_factory=list)

    # -----------------------------------------------------------------
    # Categories
    # -----------------------------------------------------------------

    def category(self, name: str, default: str = "") -> str:
        """Return the value of a category, or *default* if it was never set."""
        for category in self.categories:
            if category.name == name:
                return category.value
        return default

    def add_category(self, name: str, value: str) -> None:
        """Record a category value; a repeated name overwrites in place.

        Raises:
            UnknownCategoryError: If *name* is not a recognized category.
        """
        if name not in VALID_CATEGORIES:
            raise UnknownCategoryError(f"unknown category {name!r}")
        for category in self.categories:
            if category.name == name:
                category.value = value
                return
        self.categories.append(Category(name=name, value=value))

    # -----------------------------------------------------------------
    # Extensible fields
    # -----------------------------------------------------------------

    def extensible_field(self, name: str) -> list[str]:
        """Return every value recorded for ``X-<name>:``, in input order."""
        for ext in self.extensible_fields:
            if ext.name == name:
                return ext.values
        return []

    def add_extensible_field(self, name: str, value: str) -> None:
        for ext in self.extensible_fields:
            if ext.name == name:
                ext.values.append(value)
                return
        self.extensible_fields.append(ExtensibleField(name=name, values=[value]))

    # -----------------------------------------------------------------
    # Bounded collectors
    # -----------------------------------------------------------------

    def add_address_line(self, line: str) -> None:
        """Append an ADDRESS line.

        Raises:
            LengthError: If the line is longer than 45 characters.
            CardinalityError: If this would be the 7th line.
        """
        if len(line) > MAX_LENGTH_ADDRESS:
            raise LengthError(
                f"address too long (maximum length {MAX_LENGTH_ADDRESS} characters)"
            )
        if len(self.address.lines) >= MAX_ADDRESS_LINES:
            raise CardinalityError(f"only allowed up to {MAX_ADDRESS_LINES} ADDRESS lines")
        self.address.lines.append(line)

    def set_name(self, name: str) -> None:
        if len(name) > MAX_LENGTH_NAME:
            raise LengthError(f"name too long (maximum length {MAX_LENGTH_NAME} characters)")
        self.name = name

    def add_operators(self, value: str) -> None:
        self.operators.extend(split_operators(value))

    def add_soapbox(self, line: str) -> None:
        self.soapbox.append(line)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while parsing.

    Attributes:
        line: 0-based index of the input line.
        tag: The upper-cased leading token.
        text: The raw line.
        message: Human-readable description.
    """

    line: int
    tag: str
    text: str
    message: str

    def __str__(self) -> str:
        return f"{self.line}: {self.message}"


@dataclass
class ParseResult:
    """Output of ``parse_log()``.

    Attributes:
        log: The fully parsed log.
        diagnostics: Non-fatal findings, in line order.
    """

    log: Log
    diagnostics: list[Diagnostic] = field(default_factory=list)
