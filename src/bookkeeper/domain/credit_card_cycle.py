"""Credit card cycle and cycle balance domain services."""

import logging
from typing import Any, Optional

from bookkeeper.domain.entities import CreditCardCycle, CreditCardCycleBalance
from bookkeeper.domain.errors import NotFoundError, ValidationError, not_found
from bookkeeper.domain.resource import Reference, ResourceService
from bookkeeper.domain.validation import (
    read_amount,
    read_bool,
    read_date,
    read_positive_id,
    require_object,
)

logger = logging.getLogger(__name__)


class CreditCardCycleService(ResourceService[CreditCardCycle]):
    """Service for managing credit card billing cycles.

    Deleting a cycle removes its balances with it.
    """

    table = "credit_card_cycles"
    label = "credit card cycle"
    references = (Reference("credit_card_id", "credit_cards", "credit card"),)
    unique_rules = (("credit_card_id", "closing_date", "due_date"),)
    duplicate_code = "duplicate_credit_card_cycle"
    duplicate_message = "credit card cycle already exists"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        values = {
            "credit_card_id": read_positive_id(payload, "credit_card_id"),
            "closing_date": read_date(payload, "closing_date"),
            "due_date": read_date(payload, "due_date"),
        }
        if values["due_date"] < values["closing_date"]:
            raise ValidationError("due_date must be on or after closing_date")
        return values


class CreditCardCycleBalanceService(ResourceService[CreditCardCycleBalance]):
    """Service for the per-currency balances nested under a cycle.

    The ``*_for_cycle`` operations address a balance through its cycle; a
    balance that belongs to another cycle is reported as not found.
    """

    table = "credit_card_cycle_balances"
    label = "credit card cycle balance"
    references = (
        Reference("credit_card_cycle_id", "credit_card_cycles", "credit card cycle"),
        Reference("currency_id", "currencies", "currency"),
    )
    unique_rules = (("credit_card_cycle_id", "currency_id"),)
    duplicate_code = "duplicate_credit_card_cycle_balance"
    duplicate_message = "credit card cycle and currency combination must be unique"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "credit_card_cycle_id": read_positive_id(payload, "credit_card_cycle_id"),
            "currency_id": read_positive_id(payload, "currency_id"),
            "balance": read_amount(payload, "balance"),
            "paid": read_bool(payload, "paid"),
        }

    def _require_cycle(self, cycle_id: int) -> None:
        if not self.db.row_exists("credit_card_cycles", cycle_id):
            raise NotFoundError(not_found("credit card cycle"))

    def _normalize_for_cycle(self, cycle_id: int, payload: Any) -> dict[str, Any]:
        payload = require_object(payload)
        if payload.get("credit_card_cycle_id") is None:
            payload = {**payload, "credit_card_cycle_id": cycle_id}

        values = self.normalize(payload)
        if values["credit_card_cycle_id"] != cycle_id:
            raise ValidationError("credit_card_cycle_id must match route id")
        return values

    def _check_for_cycle(self, cycle_id: int, values: dict[str, Any], record_id: Optional[int]) -> None:
        self.check_references(values)
        self.check_unique(
            values, record_id, rows=self.db.list_rows(self.table, credit_card_cycle_id=cycle_id)
        )

    def list_for_cycle(self, cycle_id: int) -> list[CreditCardCycleBalance]:
        """List the balances of a cycle ordered by ID.

        Raises:
            NotFoundError: If the cycle does not exist
        """
        self._require_cycle(cycle_id)
        return self.db.list_rows(self.table, credit_card_cycle_id=cycle_id)

    def get_for_cycle(self, cycle_id: int, balance_id: int) -> CreditCardCycleBalance:
        """Get one balance of a cycle.

        Raises:
            NotFoundError: If the cycle or the balance does not exist, or the
                balance belongs to another cycle
        """
        self._require_cycle(cycle_id)
        balance = self.db.get_row(self.table, balance_id)
        if balance is None or balance.credit_card_cycle_id != cycle_id:
            raise NotFoundError(not_found(self.label))
        return balance

    def create_for_cycle(self, cycle_id: int, payload: Any) -> CreditCardCycleBalance:
        """Add a currency balance to a cycle."""
        self._require_cycle(cycle_id)
        values = self._normalize_for_cycle(cycle_id, payload)
        self._check_for_cycle(cycle_id, values, None)
        balance_id = self._insert(values)
        logger.info("Created balance %d for credit card cycle %d", balance_id, cycle_id)
        return self.get(balance_id)

    def update_for_cycle(
        self, cycle_id: int, balance_id: int, payload: Any
    ) -> CreditCardCycleBalance:
        """Replace a balance of a cycle."""
        self._require_cycle(cycle_id)
        values = self._normalize_for_cycle(cycle_id, payload)
        self.get_for_cycle(cycle_id, balance_id)
        self._check_for_cycle(cycle_id, values, balance_id)
        self._update(balance_id, values)
        logger.info("Updated balance %d of credit card cycle %d", balance_id, cycle_id)
        return self.get(balance_id)

    def remove_for_cycle(self, cycle_id: int, balance_id: int) -> None:
        """Delete a balance of a cycle."""
        self.get_for_cycle(cycle_id, balance_id)
        self.db.delete_row(self.table, balance_id)
        logger.info("Deleted balance %d of credit card cycle %d", balance_id, cycle_id)
