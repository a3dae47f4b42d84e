"""Generic validated resource service.

Every entity service is a ResourceService configured with its table, its
references to other tables, its uniqueness rules and the tables that block its
deletion. The subclass only turns a payload into column values and adds any
rule the declarations cannot express.
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar

from bookkeeper.database.base import Database, RowConstraintError
from bookkeeper.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    in_use,
    must_exist,
    not_found,
)
from bookkeeper.domain.validation import require_object

logger = logging.getLogger(__name__)

E = TypeVar("E")


@dataclass(frozen=True)
class Reference:
    """A column that must point at an existing row of another table."""

    field: str
    table: str
    label: str


@dataclass(frozen=True)
class Dependent:
    """A table whose rows reference this resource and block its deletion."""

    table: str
    field: str


def join_labels(labels: list[str]) -> str:
    """Join labels as "a", "a and b" or "a, b and c"."""
    if len(labels) <= 1:
        return "".join(labels)
    return f"{', '.join(labels[:-1])} and {labels[-1]}"


def _fold(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


class ResourceService(Generic[E]):
    """Create, update, remove and list rows of one table with validation."""

    table: ClassVar[str]
    label: ClassVar[str]
    references: ClassVar[tuple[Reference, ...]] = ()
    unique_rules: ClassVar[tuple[tuple[str, ...], ...]] = ()
    duplicate_code: ClassVar[str] = "conflict"
    duplicate_message: ClassVar[str] = "record must be unique"
    dependents: ClassVar[tuple[Dependent, ...]] = ()
    in_use_code: ClassVar[str] = "in_use"

    def __init__(self, db: Database):
        """Initialize the service.

        Args:
            db: Database instance
        """
        self.db = db

    # Hooks for subclasses
    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Turn a request payload into column values.

        Raises:
            ValidationError: If a field is missing or malformed
        """
        raise NotImplementedError

    def validate(self, values: dict[str, Any], record_id: Optional[int]) -> None:
        """Check rules beyond references and uniqueness.

        Args:
            values: Normalized column values
            record_id: ID of the record being updated, or None on create
        """

    # Queries
    def list(self) -> list[E]:
        """List all records ordered by ID."""
        return self.db.list_rows(self.table)

    def get(self, record_id: int) -> E:
        """Get a record by ID.

        Raises:
            NotFoundError: If the record does not exist
        """
        record = self.db.get_row(self.table, record_id)
        if record is None:
            raise NotFoundError(not_found(self.label))
        return record

    # Commands
    def create(self, payload: Any) -> E:
        """Validate a payload and insert a new record.

        Args:
            payload: Decoded JSON request body

        Returns:
            The created record with its server-assigned ID

        Raises:
            ValidationError: If the payload is invalid or a reference is missing
            ConflictError: If a uniqueness rule is violated
        """
        values = self.normalize(require_object(payload))
        self.check(values, None)
        record_id = self._insert(values)
        logger.info("Created %s %d", self.label, record_id)
        return self.get(record_id)

    def update(self, record_id: int, payload: Any) -> E:
        """Validate a payload and replace an existing record.

        Raises:
            ValidationError: If the payload is invalid or a reference is missing
            NotFoundError: If the record does not exist
            ConflictError: If a uniqueness rule is violated
        """
        values = self.normalize(require_object(payload))
        self.get(record_id)
        self.check(values, record_id)
        self._update(record_id, values)
        logger.info("Updated %s %d", self.label, record_id)
        return self.get(record_id)

    def remove(self, record_id: int) -> None:
        """Delete a record nothing else depends on.

        Raises:
            NotFoundError: If the record does not exist
            DependencyError: If other records still reference it
        """
        self.get(record_id)
        self.check_dependents(record_id)
        try:
            self.db.delete_row(self.table, record_id)
        except RowConstraintError as e:
            if e.kind != "foreign_key":
                raise
            raise self.in_use_error() from e
        logger.info("Deleted %s %d", self.label, record_id)

    # Rule checks
    def check(self, values: dict[str, Any], record_id: Optional[int]) -> None:
        """Run reference, custom and uniqueness checks in that order."""
        self.check_references(values)
        self.validate(values, record_id)
        self.check_unique(values, record_id)

    def check_references(self, values: dict[str, Any]) -> None:
        """Reject values pointing at rows that do not exist."""
        for reference in self.references:
            target_id = values.get(reference.field)
            if target_id is None:
                continue
            if not self.db.row_exists(reference.table, target_id):
                raise ValidationError(must_exist(reference.label))

    def check_unique(
        self, values: dict[str, Any], record_id: Optional[int], rows: Optional[Sequence[E]] = None
    ) -> None:
        """Scan existing rows for a case-insensitive duplicate.

        Args:
            values: Normalized column values
            record_id: ID excluded from the scan (the record being updated)
            rows: Rows to scan; defaults to the whole table
        """
        if not self.unique_rules:
            return
        if rows is None:
            rows = self.db.list_rows(self.table)

        for fields in self.unique_rules:
            key = tuple(_fold(values.get(field)) for field in fields)
            for row in rows:
                if row.id == record_id:
                    continue
                if tuple(_fold(getattr(row, field)) for field in fields) == key:
                    raise self.duplicate_error()

    def check_dependents(self, record_id: int) -> None:
        """Reject deletion while other rows reference the record."""
        for dependent in self.dependents:
            if self.db.count_rows(dependent.table, **{dependent.field: record_id}) > 0:
                raise self.in_use_error()

    # Errors
    def duplicate_error(self) -> ConflictError:
        return ConflictError(self.duplicate_message, self.duplicate_code)

    def in_use_error(self) -> DependencyError:
        return DependencyError(in_use(self.label), self.in_use_code)

    def missing_reference_error(self) -> ValidationError:
        return ValidationError(must_exist(join_labels([r.label for r in self.references])))

    def constraint_error(self, error: RowConstraintError) -> Exception:
        """Translate a constraint violation the scans did not catch."""
        if error.kind == "unique":
            return self.duplicate_error()
        if error.kind == "foreign_key":
            return self.missing_reference_error()
        return error

    # Persistence
    def _insert(self, values: dict[str, Any]) -> int:
        try:
            return self.db.insert_row(self.table, values)
        except RowConstraintError as e:
            raise self.constraint_error(e) from e

    def _update(self, record_id: int, values: dict[str, Any]) -> None:
        try:
            self.db.update_row(self.table, record_id, values)
        except RowConstraintError as e:
            raise self.constraint_error(e) from e
