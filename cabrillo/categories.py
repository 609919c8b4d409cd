"""
Category names and the optional category value rules.

Cabrillo 3 recognizes nine ``CATEGORY-<X>:`` tags. The allow-list is
checked during parsing (``Log.add_category``); the value rules are a
separate pass callers run afterwards via ``validate_categories()``.

Rules can be loaded from YAML::

    rules:
      - field: POWER
        permissible_values: [HIGH, LOW, QRP]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import yaml
from pydantic import BaseModel, Field

from cabrillo.exceptions import CategoryRuleError, ConfigValidationError

logger = logging.getLogger(__name__)

CATEGORY_ASSISTED = "ASSISTED"
CATEGORY_BAND = "BAND"
CATEGORY_MODE = "MODE"
CATEGORY_OPERATOR = "OPERATOR"
CATEGORY_POWER = "POWER"
CATEGORY_STATION = "STATION"
CATEGORY_TIME = "TIME"
CATEGORY_TRANSMITTER = "TRANSMITTER"
CATEGORY_OVERLAY = "OVERLAY"

VALID_CATEGORIES: frozenset[str] = frozenset({
    CATEGORY_ASSISTED,
    CATEGORY_BAND,
    CATEGORY_MODE,
    CATEGORY_OPERATOR,
    CATEGORY_POWER,
    CATEGORY_STATION,
    CATEGORY_TIME,
    CATEGORY_TRANSMITTER,
    CATEGORY_OVERLAY,
})


@dataclass
class Category:
    """A ``CATEGORY-<name>: <value>`` entry."""

    name: str
    value: str


class CategoryRule(BaseModel):
    """Restricts one category to a fixed list of values.

    An empty ``permissible_values`` list leaves the field unconstrained.
    """

    field: str = Field(..., description="Category name the rule applies to")
    permissible_values: list[str] = Field(default_factory=list)

    def evaluate(self, category: Category) -> None:
        """Check a category against this rule.

        Categories for other fields are ignored.

        Raises:
            CategoryRuleError: If the value is not permitted.
        """
        if category.name != self.field or not self.permissible_values:
            return
        if category.value not in self.permissible_values:
            raise CategoryRuleError(
                f"CATEGORY-{category.name}: value {category.value!r} not in "
                f"possible values {','.join(self.permissible_values)!r}"
            )


DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(field=CATEGORY_ASSISTED, permissible_values=["ASSISTED", "NON-ASSISTED"]),
    CategoryRule(
        field=CATEGORY_BAND,
        permissible_values=[
            "ALL", "160M", "80M", "40M", "20M", "15M", "10M", "6M", "4M", "2M",
            "222", "432", "902", "1.2G", "2.3G", "3.4G", "5.7G", "10G", "24G",
            "47G", "75G", "123G", "134G", "241G", "Light", "VHF-3-BAND",
            "VHF-FM-ONLY",
        ],
    ),
    CategoryRule(field=CATEGORY_MODE, permissible_values=["CW", "DIGI", "FM", "RTTY", "SSB", "MIXED"]),
    CategoryRule(field=CATEGORY_OPERATOR, permissible_values=["SINGLE-OP", "MULTI-OP", "CHECKLOG"]),
    CategoryRule(field=CATEGORY_POWER, permissible_values=["HIGH", "LOW", "QRP"]),
    # TODO: only enforce for MULTI-OP entries once rules can see other categories
    CategoryRule(
        field=CATEGORY_TRANSMITTER,
        permissible_values=["ONE", "TWO", "LIMITED", "UNLIMITED", "SWL"],
    ),
)


def validate_categories(
    categories: Iterable[Category],
    rules: Iterable[CategoryRule] | None = None,
) -> None:
    """Check every category against the rule set.

    Args:
        categories: Parsed categories, typically ``log.categories``.
        rules: Rules to apply. ``None`` uses ``DEFAULT_RULES``.

    Raises:
        CategoryRuleError: On the first category whose value a rule rejects.
    """
    rules = DEFAULT_RULES if rules is None else tuple(rules)
    categories = list(categories)
    for category in categories:
        for rule in rules:
            rule.evaluate(category)
    logger.debug("Validated %d categories against %d rules", len(categories), len(rules))


def load_rules(path: str | Path) -> list[CategoryRule]:
    """Load a category rule set from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty or has no ``rules`` list.
        pydantic.ValidationError: If a rule entry is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Rules file is empty: {path}")
    if not isinstance(raw, dict) or not isinstance(raw.get("rules"), list):
        raise ConfigValidationError(f"Rules file must contain a 'rules' list: {path}")
    rules = [CategoryRule.model_validate(entry) for entry in raw["rules"]]
    logger.info("Loaded %d category rules from %s", len(rules), path)
    return rules
