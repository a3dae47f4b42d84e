"""Utility functions for bookkeeper."""

from bookkeeper.utils.date_parser import parse_iso_date
from bookkeeper.utils.amount_parser import parse_amount

__all__ = ["parse_iso_date", "parse_amount"]
