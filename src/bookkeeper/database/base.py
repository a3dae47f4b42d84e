"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from bookkeeper.domain.entities import Country, CreditCardCurrency


class RowConstraintError(Exception):
    """A write was rejected by a database constraint.

    ``kind`` is ``"unique"``, ``"foreign_key"`` or ``"other"``.
    """

    def __init__(self, kind: str, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    @classmethod
    def from_message(cls, detail: str) -> "RowConstraintError":
        """Classify a driver error message."""
        lowered = detail.lower()
        if "unique" in lowered:
            return cls("unique", detail)
        if "foreign key" in lowered:
            return cls("foreign_key", detail)
        return cls("other", detail)


class Database(ABC):
    """Abstract database interface for bookkeeper.

    Rows are addressed by table name; every read returns the domain entity for
    that table.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables, seed countries)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group several writes into a single commit.

        Writes issued inside the block are committed when the outermost block
        exits and rolled back if it raises.
        """
        pass

    # Country operations
    @abstractmethod
    def list_countries(self) -> list[Country]:
        """List seeded countries ordered by code."""
        pass

    @abstractmethod
    def country_exists(self, code: str) -> bool:
        """Check whether a country code is known."""
        pass

    # Generic row operations
    @abstractmethod
    def insert_row(self, table: str, values: dict[str, Any]) -> int:
        """Insert a row. Returns its ID."""
        pass

    @abstractmethod
    def get_row(self, table: str, row_id: int) -> Optional[Any]:
        """Get a row by ID."""
        pass

    @abstractmethod
    def list_rows(self, table: str, **filters: Any) -> list[Any]:
        """List rows ordered by ID, optionally filtered by column equality."""
        pass

    @abstractmethod
    def update_row(self, table: str, row_id: int, values: dict[str, Any]) -> bool:
        """Replace the given columns of a row. Returns False if it does not exist."""
        pass

    @abstractmethod
    def delete_row(self, table: str, row_id: int) -> bool:
        """Delete a row. Returns False if it does not exist."""
        pass

    @abstractmethod
    def row_exists(self, table: str, row_id: int) -> bool:
        """Check whether a row exists."""
        pass

    @abstractmethod
    def count_rows(self, table: str, **filters: Any) -> int:
        """Count rows matching column equality filters."""
        pass

    # Credit card currency operations
    @abstractmethod
    def list_credit_card_currencies(self, credit_card_id: int) -> list[CreditCardCurrency]:
        """List currency links of a credit card ordered by currency ID."""
        pass

    @abstractmethod
    def reconcile_credit_card_currencies(
        self, credit_card_id: int, currency_ids: list[int]
    ) -> tuple[set[int], set[int]]:
        """Make the card's currency links equal to ``currency_ids``.

        Links whose currency left the set are deleted, new currencies are
        inserted and unchanged links are kept.

        Returns:
            Tuple of (added currency IDs, removed currency IDs)
        """
        pass
