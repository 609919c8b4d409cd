"""
Unit tests for category names and value rules (cabrillo.categories).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cabrillo.categories import (
    DEFAULT_RULES,
    VALID_CATEGORIES,
    Category,
    CategoryRule,
    load_rules,
    validate_categories,
)
from cabrillo.exceptions import CategoryRuleError, ConfigValidationError


# ---------------------------------------------------------------------------
# Allow-list
# ---------------------------------------------------------------------------

class TestValidCategories:

    def test_nine_names(self):
        assert VALID_CATEGORIES == {
            "ASSISTED", "BAND", "MODE", "OPERATOR", "POWER",
            "STATION", "TIME", "TRANSMITTER", "OVERLAY",
        }

    def test_immutable(self):
        with pytest.raises(AttributeError):
            VALID_CATEGORIES.add("CONTEST")  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# CategoryRule
# ---------------------------------------------------------------------------

class TestCategoryRule:
    """Tests for CategoryRule.evaluate()."""

    rule = CategoryRule(field="BLAH", permissible_values=["VALUE1", "VALUE2"])

    def test_matches_value(self):
        self.rule.evaluate(Category(name="BLAH", value="VALUE2"))

    def test_does_not_match_value(self):
        with pytest.raises(CategoryRuleError, match="'VALUE3' not in possible values"):
            self.rule.evaluate(Category(name="BLAH", value="VALUE3"))

    def test_other_field_ignored(self):
        self.rule.evaluate(Category(name="BLAHBLAH", value="VALUE3"))

    def test_empty_list_is_unconstrained(self):
        CategoryRule(field="BLAH").evaluate(Category(name="BLAH", value="anything"))

    def test_case_sensitive(self):
        with pytest.raises(CategoryRuleError):
            self.rule.evaluate(Category(name="BLAH", value="value1"))

    def test_field_required(self):
        with pytest.raises(ValidationError, match="field"):
            CategoryRule(permissible_values=["A"])


# ---------------------------------------------------------------------------
# validate_categories / DEFAULT_RULES
# ---------------------------------------------------------------------------

class TestValidateCategories:

    def test_default_rule_fields(self):
        assert {r.field for r in DEFAULT_RULES} == {
            "ASSISTED", "BAND", "MODE", "OPERATOR", "POWER", "TRANSMITTER",
        }

    def test_power_high_accepted(self):
        validate_categories([Category(name="POWER", value="HIGH")])

    def test_power_medium_rejected(self):
        with pytest.raises(CategoryRuleError, match="CATEGORY-POWER"):
            validate_categories([Category(name="POWER", value="MEDIUM")])

    @pytest.mark.parametrize("name", ["STATION", "TIME", "OVERLAY"])
    def test_unruled_fields_unconstrained(self, name):
        validate_categories([Category(name=name, value="WHATEVER")])

    def test_first_violation_reported(self):
        categories = [
            Category(name="BAND", value="40M"),
            Category(name="MODE", value="PH"),
            Category(name="POWER", value="MEDIUM"),
        ]
        with pytest.raises(CategoryRuleError, match="CATEGORY-MODE"):
            validate_categories(categories)

    def test_custom_rules_replace_defaults(self):
        rules = [CategoryRule(field="MODE", permissible_values=["CW", "PH"])]
        validate_categories(
            [Category(name="MODE", value="PH"), Category(name="POWER", value="MEDIUM")],
            rules,
        )

    def test_empty_rules(self):
        validate_categories([Category(name="POWER", value="MEDIUM")], [])


# ---------------------------------------------------------------------------
# load_rules
# ---------------------------------------------------------------------------

class TestLoadRules:

    def test_load(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "rules:\n"
            "  - field: MODE\n"
            "    permissible_values: [CW, PH]\n"
            "  - field: STATION\n",
            encoding="utf-8",
        )
        rules = load_rules(path)
        assert [r.field for r in rules] == ["MODE", "STATION"]
        assert rules[0].permissible_values == ["CW", "PH"]
        assert rules[1].permissible_values == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_rules(path)

    def test_missing_rules_key(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("field: MODE\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="'rules' list"):
            load_rules(path)

    def test_malformed_entry(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("rules:\n  - permissible_values: [CW]\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_rules(path)
