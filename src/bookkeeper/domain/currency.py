"""Currency domain service."""

from typing import Any

from bookkeeper.domain.entities import Currency
from bookkeeper.domain.resource import Dependent, ResourceService
from bookkeeper.domain.validation import read_text


class CurrencyService(ResourceService[Currency]):
    """Service for managing currencies.

    Name and code are each unique on their own, compared case-insensitively.
    """

    table = "currencies"
    label = "currency"
    unique_rules = (("name",), ("code",))
    duplicate_code = "duplicate_currency"
    duplicate_message = "name and code must be unique"
    dependents = (
        Dependent("bank_accounts", "currency_id"),
        Dependent("credit_card_currencies", "currency_id"),
        Dependent("credit_card_cycle_balances", "currency_id"),
        Dependent("credit_card_installments", "currency_id"),
        Dependent("credit_card_subscriptions", "currency_id"),
    )
    in_use_code = "currency_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": read_text(payload, "name"),
            "code": read_text(payload, "code", upper=True),
        }
