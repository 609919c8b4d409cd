"""
Tag classification for Cabrillo lines.

Every non-blank line starts with a tag token. ``classify_tag()`` maps the
upper-cased token to exactly one ``TagKind``:

1. EXACT: one of the fixed tags in ``EXACT_TAGS`` (checked first, so
   ``X-QSO:`` is exact rather than an extension).
2. CATEGORY: ``CATEGORY-<X>:``; ``name`` is ``<X>``.
3. EXTENSION: ``X-<Y>`` with an optional trailing colon; ``name`` is ``<Y>``.
4. UNRECOGNIZED: anything else.

The dispatcher consumes the resulting ``Tag`` in a single routing step.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ADDRESS = "ADDRESS:"
ADDRESS_CITY = "ADDRESS-CITY:"
ADDRESS_COUNTRY = "ADDRESS-COUNTRY:"
ADDRESS_POSTALCODE = "ADDRESS-POSTALCODE:"
ADDRESS_STATE_PROVINCE = "ADDRESS-STATE-PROVINCE:"
CALLSIGN = "CALLSIGN:"
CERTIFICATE = "CERTIFICATE:"
CLAIMED_SCORE = "CLAIMED-SCORE:"
CLUB = "CLUB:"
CONTEST = "CONTEST:"
CREATED_BY = "CREATED-BY:"
EMAIL = "EMAIL:"
END_OF_LOG = "END-OF-LOG:"
GRID_LOCATOR = "GRID-LOCATOR:"
LOCATION = "LOCATION:"
NAME = "NAME:"
OFFTIME = "OFFTIME:"
OPERATORS = "OPERATORS:"
QSO = "QSO:"
SOAPBOX = "SOAPBOX:"
START_OF_LOG = "START-OF-LOG:"
X_QSO = "X-QSO:"

EXACT_TAGS: frozenset[str] = frozenset({
    ADDRESS, ADDRESS_CITY, ADDRESS_COUNTRY, ADDRESS_POSTALCODE,
    ADDRESS_STATE_PROVINCE, CALLSIGN, CERTIFICATE, CLAIMED_SCORE, CLUB,
    CONTEST, CREATED_BY, EMAIL, END_OF_LOG, GRID_LOCATOR, LOCATION, NAME,
    OFFTIME, OPERATORS, QSO, SOAPBOX, START_OF_LOG, X_QSO,
})

_CATEGORY_PREFIX = "CATEGORY-"
_EXTENSION_PREFIX = "X-"


class TagKind(Enum):
    EXACT = "exact"
    CATEGORY = "category"
    EXTENSION = "extension"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Tag:
    """A classified tag.

    ``name`` is the full tag for EXACT and UNRECOGNIZED, and the
    category / extension name (prefix and colon removed) otherwise.
    """

    kind: TagKind
    name: str


def classify_tag(token: str) -> Tag:
    """Classify a line's leading token (case-insensitive)."""
    tag = token.upper()

    if tag in EXACT_TAGS:
        return Tag(TagKind.EXACT, tag)

    if tag.startswith(_CATEGORY_PREFIX) and tag.endswith(":"):
        return Tag(TagKind.CATEGORY, tag[len(_CATEGORY_PREFIX):-1])

    if tag.startswith(_EXTENSION_PREFIX):
        name = tag[len(_EXTENSION_PREFIX):].removesuffix(":")
        if name:
            return Tag(TagKind.EXTENSION, name)

    return Tag(TagKind.UNRECOGNIZED, tag)
