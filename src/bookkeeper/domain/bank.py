"""Bank domain service."""

from typing import Any, Optional

from bookkeeper.domain.entities import Bank
from bookkeeper.domain.errors import ValidationError, must_exist
from bookkeeper.domain.resource import Dependent, ResourceService
from bookkeeper.domain.validation import read_text


class BankService(ResourceService[Bank]):
    """Service for managing banks."""

    table = "banks"
    label = "bank"
    unique_rules = (("name", "country"),)
    duplicate_code = "duplicate_bank"
    duplicate_message = "name and country combination must be unique"
    dependents = (
        Dependent("bank_accounts", "bank_id"),
        Dependent("credit_cards", "bank_id"),
    )
    in_use_code = "bank_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": read_text(payload, "name"),
            "country": read_text(payload, "country", upper=True),
        }

    def validate(self, values: dict[str, Any], record_id: Optional[int]) -> None:
        if not self.db.country_exists(values["country"]):
            raise ValidationError(must_exist("country"))

    def missing_reference_error(self) -> ValidationError:
        return ValidationError(must_exist("country"))
