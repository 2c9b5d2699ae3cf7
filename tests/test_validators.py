"""
==============================================================================
Validator Tests
==============================================================================
"""

from decimal import Decimal

import pytest

from shopcart.utils import ProductIdValidator, QuantityValidator


class TestProductIdValidator:
    """Tests for product id parsing."""
    
    @pytest.mark.parametrize("raw, expected", [("1", 1), (" 7 ", 7), ("25", 25), ("-3", -3)])
    def test_valid(self, raw: str, expected: int):
        """Integer segments parse."""
        assert ProductIdValidator().validate(raw) == (True, expected, None)
    
    @pytest.mark.parametrize("raw", [None, "", "  ", "abc", "1.5", "1e2", "1_0", "0x10"])
    def test_invalid(self, raw):
        """Non-integer segments are rejected."""
        is_valid, value, error = ProductIdValidator().validate(raw)
        assert is_valid is False
        assert value is None
        assert error
    
    def test_is_valid(self):
        """Quick check mirrors validate()."""
        validator = ProductIdValidator()
        assert validator.is_valid("12")
        assert not validator.is_valid("twelve")


class TestQuantityValidator:
    """Tests for quantity parsing."""
    
    @pytest.mark.parametrize("raw, expected", [
        ("3", Decimal("3")),
        (" 2 ", Decimal("2")),
        ("2.5", Decimal("2.5")),
        (".5", Decimal("0.5")),
        ("1e2", Decimal("100")),
    ])
    def test_valid(self, raw: str, expected: Decimal):
        """Positive numbers parse."""
        is_valid, value, error = QuantityValidator().validate(raw)
        assert is_valid is True
        assert value == expected
        assert error is None
    
    @pytest.mark.parametrize("raw", [None, "", " ", "0", "0.0", "-2", "abc", "nan", "inf", "Infinity", "3x"])
    def test_invalid(self, raw):
        """Non-numeric, non-finite and non-positive quantities are rejected."""
        is_valid, value, error = QuantityValidator().validate(raw)
        assert is_valid is False
        assert value is None
        assert error
    
    @pytest.mark.parametrize("raw", ["1e400", "1e999999999999999999", "1e-400", "0.1e-330"])
    def test_out_of_float_range(self, raw: str):
        """Quantities that would become infinite or zero as JSON numbers are rejected."""
        is_valid, value, error = QuantityValidator().validate(raw)
        assert is_valid is False
        assert value is None
        assert error == "Quantity is out of range"
    
    def test_float_range_boundaries(self):
        """Large and small quantities that stay representable are accepted."""
        validator = QuantityValidator()
        assert validator.is_valid("1e308")
        assert validator.is_valid("1e-300")
    
    @pytest.mark.parametrize("raw", ["٣", "３", "١.٥"])
    def test_non_ascii_digits(self, raw: str):
        """Digits outside ASCII are not numbers."""
        assert not QuantityValidator().is_valid(raw)


class TestProductIdValidatorDigits:
    """Tests for product id digit handling."""
    
    @pytest.mark.parametrize("raw", ["١", "１", "१२"])
    def test_non_ascii_digits(self, raw: str):
        """Arabic-Indic, fullwidth and Devanagari digits are rejected."""
        is_valid, value, _ = ProductIdValidator().validate(raw)
        assert is_valid is False
        assert value is None
