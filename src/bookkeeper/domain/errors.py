"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Every error carries a machine readable ``code`` and the human readable
    message that clients render verbatim. ``status`` is the HTTP status the
    API layer answers with.
    """

    status = 400
    default_code = "invalid_payload"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    status = 404
    default_code = "not_found"


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""

    status = 409
    default_code = "conflict"


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""

    status = 409
    default_code = "in_use"


def not_found(label: str) -> str:
    """Return message for a missing entity."""
    return f"{label} not found"


def must_exist(label: str) -> str:
    """Return message for a reference to a missing row."""
    return f"{label} must exist"


def is_required(field: str) -> str:
    """Return message for a missing or blank text field."""
    return f"{field} is required"


def must_be_positive_integer(field: str) -> str:
    """Return message for an id field that is not a positive integer."""
    return f"{field} must be a positive integer"


def must_be_greater_than_zero(field: str) -> str:
    """Return message for a number that must be strictly positive."""
    return f"{field} must be greater than zero"


def must_be_iso_date(field: str) -> str:
    """Return message for a malformed date."""
    return f"{field} must be a valid date in YYYY-MM-DD format"


def in_use(label: str) -> str:
    """Return message when a row is still referenced by others."""
    return f"{label} is in use"


INVALID_JSON = "request body must be valid JSON"
