"""Credit card domain service."""

import logging
from typing import Any, Optional

from bookkeeper.database.base import RowConstraintError
from bookkeeper.domain.entities import CreditCard, CreditCardCurrency
from bookkeeper.domain.errors import ValidationError, must_exist
from bookkeeper.domain.resource import Dependent, Reference, ResourceService
from bookkeeper.domain.validation import (
    read_id_set,
    read_optional_text,
    read_positive_id,
    read_text,
    require_object,
)

logger = logging.getLogger(__name__)

CURRENCY_FIELDS = frozenset({"currency_ids"})


class CreditCardService(ResourceService[CreditCard]):
    """Service for managing credit cards and the currencies they accept.

    The card row and its currency links are always written in one database
    transaction, so a rejected link leaves no half-created card behind.
    """

    table = "credit_cards"
    label = "credit card"
    references = (
        Reference("bank_id", "banks", "bank"),
        Reference("person_id", "people", "person"),
    )
    unique_rules = (("number",),)
    duplicate_code = "duplicate_credit_card"
    duplicate_message = "credit card number must be unique"
    dependents = (
        Dependent("credit_card_cycles", "credit_card_id"),
        Dependent("credit_card_installments", "credit_card_id"),
        Dependent("credit_card_subscriptions", "credit_card_id"),
    )
    in_use_code = "credit_card_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "bank_id": read_positive_id(payload, "bank_id"),
            "person_id": read_positive_id(payload, "person_id"),
            "number": read_text(payload, "number"),
            "name": read_optional_text(payload, "name"),
            "currency_ids": read_id_set(payload, "currency_ids"),
        }

    def validate(self, values: dict[str, Any], record_id: Optional[int]) -> None:
        self.check_currencies(values["currency_ids"])

    def check_currencies(self, currency_ids: list[int]) -> None:
        """Reject a currency set naming a currency that does not exist."""
        for currency_id in currency_ids:
            if not self.db.row_exists("currencies", currency_id):
                raise ValidationError(must_exist("all currencies"))

    def create(self, payload: Any) -> CreditCard:
        """Create a credit card together with its currency links.

        Raises:
            ValidationError: If the payload is invalid or a reference is missing
            ConflictError: If the card number is already used
        """
        values = self.normalize(require_object(payload))
        self.check(values, None)
        currency_ids = values.pop("currency_ids")

        try:
            with self.db.transaction():
                card_id = self.db.insert_row(self.table, values)
                self.db.reconcile_credit_card_currencies(card_id, currency_ids)
        except RowConstraintError as e:
            raise self.constraint_error(e) from e

        logger.info("Created credit card %d with currencies %s", card_id, currency_ids)
        return self.get(card_id)

    def update(self, record_id: int, payload: Any) -> CreditCard:
        """Replace a credit card and its currency set.

        An omitted ``currency_ids`` clears the card's currencies.

        Raises:
            ValidationError: If the payload is invalid or a reference is missing
            NotFoundError: If the card does not exist
            ConflictError: If the card number is already used
        """
        values = self.normalize(require_object(payload))
        self.get(record_id)
        self.check(values, record_id)
        currency_ids = values.pop("currency_ids")

        try:
            with self.db.transaction():
                self.db.update_row(self.table, record_id, values)
                added, removed = self.db.reconcile_credit_card_currencies(record_id, currency_ids)
        except RowConstraintError as e:
            raise self.constraint_error(e) from e

        logger.info(
            "Updated credit card %d (currencies added %s, removed %s)",
            record_id,
            sorted(added),
            sorted(removed),
        )
        return self.get(record_id)

    def list_currencies(self, card_id: int) -> list[CreditCardCurrency]:
        """List the currency links of a card ordered by currency ID.

        Raises:
            NotFoundError: If the card does not exist
        """
        self.get(card_id)
        return self.db.list_credit_card_currencies(card_id)

    def replace_currencies(self, card_id: int, payload: Any) -> list[CreditCardCurrency]:
        """Replace the whole currency set of a card.

        Args:
            card_id: Credit card ID
            payload: Object with a single ``currency_ids`` array

        Returns:
            The card's currency links after the replacement

        Raises:
            ValidationError: If the payload is invalid or a currency is missing
            NotFoundError: If the card does not exist
        """
        payload = require_object(payload)
        for field in payload:
            if field not in CURRENCY_FIELDS:
                raise ValidationError(f'request body contains unknown field "{field}"')
        currency_ids = read_id_set(payload, "currency_ids")

        self.get(card_id)
        self.check_currencies(currency_ids)

        try:
            with self.db.transaction():
                added, removed = self.db.reconcile_credit_card_currencies(card_id, currency_ids)
        except RowConstraintError as e:
            if e.kind != "foreign_key":
                raise
            raise ValidationError(must_exist("all currencies")) from e

        logger.info(
            "Replaced currencies of credit card %d (added %s, removed %s)",
            card_id,
            sorted(added),
            sorted(removed),
        )
        return self.db.list_credit_card_currencies(card_id)
