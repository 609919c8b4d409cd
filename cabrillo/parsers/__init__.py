"""
Parsers sub-package for pycabrillo.

Contains the per-field parsers the dispatcher routes lines to:

- fields.py: timestamps, integers, YES/NO flags, e-mail, operator lists.
- rst.py: signal reports (``RST``, ``parse_rst``).
- offtime.py: OFFTIME intervals (``OffTime``, ``parse_offtime``).
- qso.py: QSO / X-QSO contact lines (``QSO``, ``Info``, ``parse_qso``).

Each parser works on already-tokenized or raw line text and raises a
``CabrilloError`` subclass without a line number; the dispatcher adds it.
"""

from cabrillo.parsers.offtime import OffTime, parse_offtime
from cabrillo.parsers.qso import QSO, Info, parse_qso
from cabrillo.parsers.rst import RST, parse_rst

__all__ = ["OffTime", "parse_offtime", "QSO", "Info", "parse_qso", "RST", "parse_rst"]
