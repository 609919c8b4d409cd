"""
Unit tests for signal report parsing (cabrillo.parsers.rst).
"""

from __future__ import annotations

import pytest

from cabrillo.exceptions import FormatError
from cabrillo.parsers.rst import RST, parse_rst


class TestRSTString:
    """Tests for RST.__str__()."""

    def test_with_tone(self):
        assert str(RST(readability=5, strength=9, tone=9)) == "599"

    def test_without_tone(self):
        assert str(RST(readability=5, strength=9, tone=0)) == "59"

    def test_round_trip_without_tone(self):
        rst = RST(readability=3, strength=7)
        assert str(parse_rst(str(rst))) == str(rst)


class TestParseRST:
    """Tests for parse_rst()."""

    @pytest.mark.parametrize("report", ["59", "599", "11", "339"])
    def test_valid_reports_render_back(self, report):
        assert str(parse_rst(report)) == report

    def test_digits_assigned_in_order(self):
        rst = parse_rst("478")
        assert rst == RST(readability=4, strength=7, tone=8)

    def test_zero_tone_is_absent(self):
        """A trailing 0 cannot be told apart from a missing tone digit."""
        rst = parse_rst("590")
        assert rst.tone == 0
        assert str(rst) == "59"

    @pytest.mark.parametrize("report", ["", "5", "5999"])
    def test_invalid_length(self, report):
        with pytest.raises(FormatError, match="invalid RST report length"):
            parse_rst(report)

    @pytest.mark.parametrize(
        "report, digit",
        [
            ("a9", "readability"),
            ("5a", "strength"),
            ("59a", "tone"),
            ("5-", "strength"),
        ],
    )
    def test_non_digit_names_position(self, report, digit):
        with pytest.raises(FormatError, match=f"parsing {digit} digit"):
            parse_rst(report)

    def test_non_ascii_digit_rejected(self):
        with pytest.raises(FormatError, match="strength"):
            parse_rst("5٩")

    def test_error_has_no_line(self):
        with pytest.raises(FormatError) as exc_info:
            parse_rst("x9")
        assert exc_info.value.line is None
