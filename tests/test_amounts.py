"""
Test suite for amounts module

Tests Decimal coercion of caller input and display formatting.
"""

import pytest
from decimal import Decimal

from card_accounts.amounts import (
    decimal_from_string, to_amount, is_positive_amount, format_amount
)


class TestDecimalFromString:
    """Test string parsing"""
    
    def test_plain_numbers(self):
        assert decimal_from_string("100") == Decimal('100')
        assert decimal_from_string("100.50") == Decimal('100.50')
        assert decimal_from_string("-5") == Decimal('-5')
    
    def test_symbols_and_separators(self):
        """Test currency symbols and separators are handled"""
        assert decimal_from_string("5 000₽") == Decimal('5000')
        assert decimal_from_string("$1,234.56") == Decimal('1234.56')
        assert decimal_from_string("12,5") == Decimal('12.5')
        assert decimal_from_string("1,234") == Decimal('1234')
        assert decimal_from_string("1,234,567") == Decimal('1234567')
    
    def test_exponent_notation(self):
        """Test scientific notation keeps its value"""
        assert decimal_from_string("1e3") == Decimal('1000')
        assert decimal_from_string("1E+3") == Decimal('1000')
        assert decimal_from_string(" 2.5e-1 ") == Decimal('0.25')
    
    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "5 rub 3", "12abc", "1O0", "$5$5"])
    def test_invalid_strings(self, value):
        with pytest.raises(ValueError):
            decimal_from_string(value)


class TestToAmount:
    """Test amount coercion"""
    
    def test_decimal_passthrough(self):
        value = Decimal('1.005')
        assert to_amount(value) is value
    
    def test_int_and_float(self):
        assert to_amount(5000) == Decimal('5000')
        assert to_amount(0.1) == Decimal('0.1')  # via str(), not binary float
    
    def test_string(self):
        assert to_amount("2000") == Decimal('2000')
    
    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="boolean"):
            to_amount(True)
    
    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Unsupported amount type"):
            to_amount([1])


class TestAmountHelpers:
    """Test validation and formatting helpers"""
    
    def test_is_positive_amount(self):
        assert is_positive_amount(Decimal('0.01'))
        assert not is_positive_amount(Decimal('0'))
        assert not is_positive_amount(Decimal('-1'))
        assert not is_positive_amount(Decimal('NaN'))
        assert not is_positive_amount(Decimal('Infinity'))
    
    def test_format_amount(self):
        assert format_amount(Decimal('5000')) == "5,000.00"
        assert format_amount(Decimal('1234.565'), "₽") == "1,234.57₽"
        assert format_amount(Decimal('0'), "$") == "0.00$"
    
    def test_format_amount_beyond_default_precision(self):
        """Test amounts wider than the decimal context still format"""
        assert format_amount(Decimal(10) ** 27) == "1,000,000,000,000,000,000,000,000,000.00"
        assert format_amount(Decimal('123456789012345678901234567890.125'), "₽") == (
            "123,456,789,012,345,678,901,234,567,890.13₽"
        )
    
    def test_format_non_finite(self):
        assert format_amount(Decimal('Infinity'), "$") == "Infinity$"
    
    def test_to_amount_exponent_string(self):
        assert to_amount("1e3") == Decimal('1000')
