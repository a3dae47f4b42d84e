"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Any


def parse_amount(value: Any) -> Decimal:
    """Parse a JSON amount into a Decimal.

    Accepts JSON numbers and plain numeric strings such as "123.45" or
    "-12". Currency symbols, thousands separators and accounting
    parentheses are not amounts.

    Args:
        value: Amount as int, float, Decimal or string

    Returns:
        Finite Decimal amount

    Raises:
        ValueError: If the value is not a finite number
    """
    # bool is an int subclass, but true/false are never amounts
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not an amount: {value!r}")

    if isinstance(value, (int, float, Decimal)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = _parse_amount_string(value)
    else:
        raise ValueError(f"Not an amount: {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return amount


def _parse_amount_string(amount_str: str) -> Decimal:
    amount_str = amount_str.strip()
    if not amount_str:
        raise ValueError("Empty amount string")
    # Decimal() also takes digit separators like "1_000"
    if "_" in amount_str:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
