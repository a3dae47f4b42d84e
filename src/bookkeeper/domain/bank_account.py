"""Bank account domain service."""

from typing import Any

from bookkeeper.domain.entities import BankAccount
from bookkeeper.domain.resource import Dependent, Reference, ResourceService
from bookkeeper.domain.validation import read_amount, read_positive_id, read_text


class BankAccountService(ResourceService[BankAccount]):
    """Service for managing bank accounts."""

    table = "bank_accounts"
    label = "bank account"
    references = (
        Reference("bank_id", "banks", "bank"),
        Reference("currency_id", "currencies", "currency"),
    )
    unique_rules = (("bank_id", "currency_id", "account_number"),)
    duplicate_code = "duplicate_bank_account"
    duplicate_message = "bank, currency and account number combination must be unique"
    dependents = (Dependent("transactions", "bank_account_id"),)
    in_use_code = "bank_account_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "bank_id": read_positive_id(payload, "bank_id"),
            "currency_id": read_positive_id(payload, "currency_id"),
            "account_number": read_text(payload, "account_number"),
            "balance": read_amount(payload, "balance"),
        }
