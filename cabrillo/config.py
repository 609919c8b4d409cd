"""
Parser configuration and YAML I/O for pycabrillo.

``ParserConfig`` controls the contest-dependent parts of parsing:

- exchange_fields: tokens per side of a QSO exchange (1 for a serial
  number, 3 for "name serial QTH", ...).
- strict_tags: escalate unrecognized tags to ``UnrecognizedTagError``
  instead of reporting them as diagnostics.
- rules_path: YAML file with category value rules; the built-in
  ``DEFAULT_RULES`` are used when unset.

Example ``cabrillo.yaml``::

    exchange_fields: 3
    strict_tags: false
    rules_path: rules/naqp.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from cabrillo.categories import DEFAULT_RULES, CategoryRule, load_rules
from cabrillo.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Settings for ``parse_log()``."""

    exchange_fields: int = Field(
        1, ge=1, description="Whitespace-separated tokens in one side's QSO exchange"
    )
    strict_tags: bool = Field(
        False, description="If True, an unrecognized tag aborts the parse"
    )
    rules_path: str | None = Field(
        None, description="YAML file of category value rules (defaults built in)"
    )

    def category_rules(self) -> list[CategoryRule]:
        """Return the configured rule set for ``validate_categories()``."""
        if self.rules_path is None:
            return list(DEFAULT_RULES)
        return load_rules(self.rules_path)


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a YAML config into a ParserConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ParserConfig.model_validate(raw)


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# pycabrillo parser configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
