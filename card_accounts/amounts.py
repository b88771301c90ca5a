"""
Amount Handling Module

Coerces caller input to Decimal and formats amounts for display.
NEVER uses float for arithmetic: floats are converted through str().
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union
import re


AmountLike = Union[Decimal, int, float, str]

ZERO = Decimal('0')


CURRENCY_SYMBOLS = "₽$€£¥"

# Digits with optional sign and group/decimal separators, nothing else
_SEPARATED_NUMBER = re.compile(r'^[+\-]?[\d.,]+$')


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Plain Decimal syntax (including exponents such as "1e3") is tried first.
    Otherwise only currency symbols, whitespace and group separators are
    removed; any other character makes the value invalid.

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    try:
        return Decimal(value.strip())
    except InvalidOperation:
        pass

    clean_value = re.sub(r'\s', '', value)
    clean_value = clean_value.strip(CURRENCY_SYMBOLS)
    if not _SEPARATED_NUMBER.match(clean_value):
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    # Handle comma as decimal separator (European format)
    if ',' in clean_value and '.' in clean_value:
        # Both comma and dot - assume comma is thousands separator
        clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') == 1:
        # Single comma - could be decimal separator
        parts = clean_value.split(',')
        if len(parts[1]) <= 2:
            clean_value = clean_value.replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') > 1:
        clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert caller input to a Decimal amount

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal value (sign and precision untouched)

    Raises:
        ValueError: If the value is not a number
    """
    # bool is an int subclass but never a sensible amount
    if isinstance(value, bool):
        raise ValueError("Amount must be a number, not a boolean")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        return decimal_from_string(value)
    raise ValueError(f"Unsupported amount type: {type(value).__name__}")


def is_positive_amount(amount: Decimal) -> bool:
    """Check that amount is a finite number greater than zero"""
    return amount.is_finite() and amount > ZERO


def format_amount(amount: Decimal, symbol: str = "") -> str:
    """Format for display with grouping and two decimal places"""
    if not amount.is_finite():
        return f"{amount}{symbol}"

    # quantize needs room for every integer digit plus two decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        rounded = amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    return f"{rounded:,.2f}{symbol}"
