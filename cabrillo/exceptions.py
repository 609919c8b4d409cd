"""
Custom exception hierarchy for pycabrillo.

Every fatal parse error is a ``CabrilloError`` subclass. Parsers raise
them without a line number; the dispatcher stamps the 0-based index of
the offending line onto the error and re-raises it, so callers can catch
a specific kind (``CardinalityError``, ``FormatError``, ...) and still
read ``err.line``.

``str(err)`` renders as ``"<line>: <message>"`` once the line is known.
"""

from __future__ import annotations


class CabrilloError(Exception):
    """Base exception for all pycabrillo errors.

    Attributes:
        message: Human-readable description of the violated constraint.
        line: 0-based index of the input line, or ``None`` when the error
            was raised outside of ``parse_log()``.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.line}: {self.message}"


class StructuralError(CabrilloError):
    """Raised when a record has the wrong number of tokens.

    For example, a QSO line with 8 tokens when the exchange width
    requires 11 or 12, or an OFFTIME line without exactly 4 tokens.
    """


class FormatError(CabrilloError):
    """Raised when a token cannot be parsed (date, time, digit, integer, YES/NO)."""


class LengthError(CabrilloError):
    """Raised when a NAME or ADDRESS line exceeds its maximum length."""


class CardinalityError(CabrilloError):
    """Raised when too many ADDRESS lines are supplied."""


class UnknownCategoryError(CabrilloError):
    """Raised when a CATEGORY-<X> tag names a category outside the allow-list."""


class UnknownEmailError(CabrilloError):
    """Raised when the EMAIL field is not a valid mail address."""


class UnrecognizedTagError(CabrilloError):
    """Raised for an unknown tag, only when ``ParserConfig.strict_tags`` is set.

    In the default mode unknown tags are reported as diagnostics instead.
    """


class CategoryRuleError(CabrilloError):
    """Raised by the category rule pass when a value is not permitted."""


class ConfigValidationError(CabrilloError):
    """Raised when a configuration or rule YAML file is unusable.

    This can happen if:
    - The file is empty.
    - The top-level structure is not the expected mapping.
    """
