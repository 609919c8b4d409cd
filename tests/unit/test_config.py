"""
Unit tests for ParserConfig and YAML I/O (cabrillo.config).
"""

import pytest
from pydantic import ValidationError

from cabrillo.categories import DEFAULT_RULES
from cabrillo.config import ParserConfig, load_config, save_config
from cabrillo.exceptions import ConfigValidationError


class TestParserConfig:

    def test_defaults(self):
        cfg = ParserConfig()
        assert cfg.exchange_fields == 1
        assert cfg.strict_tags is False
        assert cfg.rules_path is None

    def test_exchange_fields_must_be_positive(self):
        with pytest.raises(ValidationError, match="exchange_fields"):
            ParserConfig(exchange_fields=0)

    def test_default_category_rules(self):
        assert ParserConfig().category_rules() == list(DEFAULT_RULES)

    def test_rules_from_file(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("rules:\n  - field: MODE\n    permissible_values: [CW]\n")
        rules = ParserConfig(rules_path=str(rules_file)).category_rules()
        assert [r.field for r in rules] == ["MODE"]


class TestConfigIO:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "sub" / "cabrillo.yaml"
        cfg = ParserConfig(exchange_fields=3, strict_tags=True)
        save_config(cfg, path)
        assert path.read_text(encoding="utf-8").startswith("# pycabrillo")
        assert load_config(path) == cfg

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "cabrillo.yaml"
        path.write_text("exchange_fields: 2\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.exchange_fields == 2
        assert cfg.strict_tags is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "cabrillo.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_config(path)

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "cabrillo.yaml"
        path.write_text("exchange_fields: many\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)
