"""Conversion of domain entities into JSON-ready dicts."""

from dataclasses import asdict, is_dataclass
from datetime import date
from decimal import Decimal
from typing import Any


def _json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        # Money goes out as a JSON number, not Flask's default string.
        # Stored amounts carry at most two decimal places and twelve integer
        # digits, so the shortest float repr prints the same digits back.
        return float(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _json_value(item) for key, item in value.items()}
    return value


def serialize(entity: Any) -> dict[str, Any]:
    """Convert a domain entity (frozen dataclass) into a JSON-ready dict."""
    if not is_dataclass(entity):
        raise TypeError(f"Cannot serialize {type(entity).__name__}")
    return _json_value(asdict(entity))


def serialize_all(entities: list[Any]) -> list[dict[str, Any]]:
    """Convert a list of domain entities."""
    return [serialize(entity) for entity in entities]
