"""Credit card installment domain service."""

from typing import Any

from bookkeeper.domain.entities import CreditCardInstallment
from bookkeeper.domain.resource import Reference, ResourceService
from bookkeeper.domain.validation import (
    read_date,
    read_positive_amount,
    read_positive_count,
    read_positive_id,
    read_text,
)


class CreditCardInstallmentService(ResourceService[CreditCardInstallment]):
    """Service for managing installment plans charged to credit cards."""

    table = "credit_card_installments"
    label = "credit card installment"
    references = (
        Reference("credit_card_id", "credit_cards", "credit card"),
        Reference("currency_id", "currencies", "currency"),
    )
    unique_rules = (("credit_card_id", "currency_id", "concept"),)
    duplicate_code = "duplicate_credit_card_installment"
    duplicate_message = "credit card, currency and concept combination must be unique"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "credit_card_id": read_positive_id(payload, "credit_card_id"),
            "currency_id": read_positive_id(payload, "currency_id"),
            "concept": read_text(payload, "concept"),
            "amount": read_positive_amount(payload, "amount"),
            "start_date": read_date(payload, "start_date"),
            "count": read_positive_count(payload, "count"),
        }
