"""
pycabrillo: Python library for parsing Cabrillo contest logs.

Public API surface:

- ``parse_log(data, config=None)`` -- **main entry point**. Parses the
  full log text (``str`` or ``bytes``) and returns a ``ParseResult``
  holding the ``Log`` and any non-fatal diagnostics. The first fatal
  problem raises a ``CabrilloError`` subclass whose ``line`` attribute
  is the 0-based index of the offending line.

- ``validate_categories(categories, rules=None)`` -- optional second
  pass checking category values against a rule set (``DEFAULT_RULES``
  unless given). Not run by ``parse_log()``.

- ``parse_qso`` / ``parse_rst`` / ``parse_offtime`` -- the individual
  line parsers, usable on their own.

- ``load_config`` / ``save_config`` -- YAML I/O for ``ParserConfig``.

Example::

    import cabrillo

    result = cabrillo.parse_log(open("k1ir.log", "rb").read())
    log = result.log
    cabrillo.validate_categories(log.categories)
    for diag in result.diagnostics:
        print(diag)
"""

from __future__ import annotations

from cabrillo.categories import (
    DEFAULT_RULES,
    VALID_CATEGORIES,
    Category,
    CategoryRule,
    load_rules,
    validate_categories,
)
from cabrillo.config import ParserConfig, load_config, save_config
from cabrillo.dispatcher import parse_log
from cabrillo.exceptions import CabrilloError
from cabrillo.models import Address, Diagnostic, ExtensibleField, Log, ParseResult
from cabrillo.parsers import QSO, RST, Info, OffTime, parse_offtime, parse_qso, parse_rst

__all__ = [
    "parse_log",
    "validate_categories",
    "load_rules",
    "parse_qso",
    "parse_rst",
    "parse_offtime",
    "load_config",
    "save_config",
    "ParserConfig",
    "ParseResult",
    "Diagnostic",
    "Log",
    "Address",
    "ExtensibleField",
    "Category",
    "CategoryRule",
    "DEFAULT_RULES",
    "VALID_CATEGORIES",
    "QSO",
    "Info",
    "RST",
    "OffTime",
    "CabrilloError",
]
