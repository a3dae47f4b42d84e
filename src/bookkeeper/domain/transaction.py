"""Transaction domain service."""

from typing import Any

from bookkeeper.domain.entities import Transaction
from bookkeeper.domain.errors import ValidationError
from bookkeeper.domain.resource import Reference, ResourceService
from bookkeeper.domain.validation import (
    read_date,
    read_optional_text,
    read_positive_amount,
    read_positive_id,
)

TRANSACTION_TYPES = ("income", "expense")


class TransactionService(ResourceService[Transaction]):
    """Service for managing transactions."""

    table = "transactions"
    label = "transaction"
    references = (
        Reference("person_id", "people", "person"),
        Reference("bank_account_id", "bank_accounts", "bank account"),
        Reference("category_id", "transaction_categories", "transaction category"),
    )

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        transaction_type = payload.get("type")
        if isinstance(transaction_type, str):
            transaction_type = transaction_type.strip().lower()
        if transaction_type not in TRANSACTION_TYPES:
            raise ValidationError("type must be either income or expense")

        return {
            "transaction_date": read_date(payload, "transaction_date", required_message=True),
            "type": transaction_type,
            "amount": read_positive_amount(payload, "amount"),
            "notes": read_optional_text(payload, "notes"),
            "person_id": read_positive_id(payload, "person_id"),
            "bank_account_id": read_positive_id(payload, "bank_account_id"),
            "category_id": read_positive_id(payload, "category_id"),
        }
