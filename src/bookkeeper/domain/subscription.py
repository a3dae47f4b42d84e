"""Credit card subscription domain service."""

from typing import Any

from bookkeeper.domain.entities import CreditCardSubscription
from bookkeeper.domain.resource import Reference, ResourceService
from bookkeeper.domain.validation import read_positive_amount, read_positive_id, read_text


class CreditCardSubscriptionService(ResourceService[CreditCardSubscription]):
    """Service for managing recurring subscriptions charged to credit cards."""

    table = "credit_card_subscriptions"
    label = "credit card subscription"
    references = (
        Reference("credit_card_id", "credit_cards", "credit card"),
        Reference("currency_id", "currencies", "currency"),
    )
    unique_rules = (("credit_card_id", "currency_id", "concept"),)
    duplicate_code = "duplicate_credit_card_subscription"
    duplicate_message = "credit card, currency and concept combination must be unique"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "credit_card_id": read_positive_id(payload, "credit_card_id"),
            "currency_id": read_positive_id(payload, "currency_id"),
            "concept": read_text(payload, "concept"),
            "amount": read_positive_amount(payload, "amount"),
        }
