"""Payload field readers shared by the domain services.

Each reader pulls one field out of a decoded JSON object, normalises it and
raises ValidationError with the client-facing message when it is unusable.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from bookkeeper.domain.errors import (
    INVALID_JSON,
    ValidationError,
    is_required,
    must_be_greater_than_zero,
    must_be_iso_date,
    must_be_positive_integer,
)
from bookkeeper.utils.amount_parser import parse_amount
from bookkeeper.utils.date_parser import parse_iso_date

# Largest value SQLite stores in an INTEGER column
MAX_ID = 2**63 - 1

# Money columns are Numeric(14, 2)
MAX_AMOUNT = Decimal("999999999999.99")


def require_object(payload: Any) -> dict[str, Any]:
    """Ensure the decoded request body is a JSON object."""
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_JSON)
    return payload


def read_text(payload: dict[str, Any], field: str, upper: bool = False, lower: bool = False) -> str:
    """Read a required, trimmed string field."""
    value = payload.get(field)
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")

    value = value.strip()
    if not value:
        raise ValidationError(is_required(field))
    if upper:
        return value.upper()
    if lower:
        return value.lower()
    return value


def read_optional_text(payload: dict[str, Any], field: str) -> Optional[str]:
    """Read an optional string field; blank values become None."""
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip() or None


def _is_integer(value: Any) -> bool:
    # bool is an int subclass, but true/false are never ids
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_id(value: Any) -> bool:
    """Return True for an integer in 1..MAX_ID."""
    return _is_integer(value) and 0 < value <= MAX_ID


def read_positive_id(payload: dict[str, Any], field: str) -> int:
    """Read a required positive integer id."""
    value = payload.get(field)
    if not is_valid_id(value):
        raise ValidationError(must_be_positive_integer(field))
    return value


def read_optional_positive_id(payload: dict[str, Any], field: str) -> Optional[int]:
    """Read an optional positive integer id."""
    if payload.get(field) is None:
        return None
    return read_positive_id(payload, field)


def _check_money(field: str, amount: Decimal) -> Decimal:
    if abs(amount) > MAX_AMOUNT:
        raise ValidationError(f"{field} is out of range")
    # Trailing zeros past the cent are fine
    _, digits, exponent = amount.as_tuple()
    past_cents = digits[max(0, len(digits) + exponent + 2):] if exponent < -2 else ()
    if any(past_cents):
        raise ValidationError(f"{field} must have at most two decimal places")
    return amount


def read_positive_amount(payload: dict[str, Any], field: str) -> Decimal:
    """Read a finite amount that must be greater than zero."""
    try:
        amount = parse_amount(payload.get(field))
    except ValueError:
        raise ValidationError(must_be_greater_than_zero(field)) from None
    if amount <= 0:
        raise ValidationError(must_be_greater_than_zero(field))
    return _check_money(field, amount)


def read_amount(payload: dict[str, Any], field: str, default: Decimal = Decimal("0")) -> Decimal:
    """Read a finite amount of any sign, defaulting when omitted."""
    value = payload.get(field)
    if value is None:
        return default
    try:
        amount = parse_amount(value)
    except ValueError:
        raise ValidationError(f"{field} must be a finite number") from None
    return _check_money(field, amount)


def read_positive_count(payload: dict[str, Any], field: str) -> int:
    """Read an integer count that must be greater than zero."""
    value = payload.get(field)
    if not _is_integer(value) or not 0 < value <= MAX_ID:
        raise ValidationError(must_be_greater_than_zero(field))
    return value


def read_date(payload: dict[str, Any], field: str, required_message: bool = False) -> date:
    """Read a strict YYYY-MM-DD date.

    Args:
        required_message: Report a missing value as "<field> is required"
            instead of the format message
    """
    value = payload.get(field)
    if required_message and (value is None or (isinstance(value, str) and not value.strip())):
        raise ValidationError(is_required(field))
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(must_be_iso_date(field)) from None


def read_bool(payload: dict[str, Any], field: str, default: bool = False) -> bool:
    """Read a JSON boolean, defaulting when omitted."""
    value = payload.get(field)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be a boolean")
    return value


def read_id_set(payload: dict[str, Any], field: str) -> list[int]:
    """Read a list of positive integer ids as a sorted, de-duplicated list.

    A missing field is an empty set.
    """
    value = payload.get(field)
    if value is None:
        return []
    if not isinstance(value, list) or not all(_is_integer(item) for item in value):
        raise ValidationError(f"{field} must be an array of integers")
    if not all(is_valid_id(item) for item in value):
        raise ValidationError(f"{field} must contain only positive integers")
    return sorted(set(value))
