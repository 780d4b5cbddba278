"""Tests for kinsenas.domain.amounts."""

import pytest

from kinsenas.domain.amounts import parse_amount


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("26000", 26000.0),
            ("1157.50", 1157.5),
            ("0", 0.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("-250", -250.0),
            ("+12", 12.0),
            ("1e3", 1000.0),
        ],
    )
    def test_numeric_text(self, text: str, expected: float) -> None:
        """Should parse plain decimal numbers."""
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "abc",
            "12abc",
            " 12",
            "12 ",
            "1,000",
            "1_000",
            "inf",
            "nan",
            "-",
            ".",
            "₱100",
            "1e400",
            "-1e400",
            "１２３",
            "١٢",
        ],
    )
    def test_non_numeric_text_is_zero(self, text: str) -> None:
        """Should treat anything that isn't a plain number as zero."""
        assert parse_amount(text) == 0.0
