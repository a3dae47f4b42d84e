"""Domain model entities for bookkeeper.

These are pure data classes representing business concepts, independent of
the database schema. Services and the API only ever see these, never the
SQLAlchemy models.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Country:
    """ISO country reference entity."""

    code: str
    name: str


@dataclass(frozen=True)
class Currency:
    """Currency domain entity."""

    id: int
    name: str
    code: str


@dataclass(frozen=True)
class Bank:
    """Bank domain entity."""

    id: int
    name: str
    country: str


@dataclass(frozen=True)
class Person:
    """Person domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class TransactionCategory:
    """Transaction category domain entity with hierarchical structure."""

    id: int
    name: str
    parent_id: Optional[int]
    parent_name: Optional[str]


@dataclass(frozen=True)
class BankAccount:
    """Bank account domain entity."""

    id: int
    bank_id: int
    currency_id: int
    account_number: str
    balance: Decimal


@dataclass(frozen=True)
class CreditCard:
    """Credit card domain entity."""

    id: int
    bank_id: int
    person_id: int
    number: str
    name: Optional[str]
    currency_ids: tuple[int, ...]


@dataclass(frozen=True)
class CreditCardCurrency:
    """Link between a credit card and one of its currencies."""

    id: int
    credit_card_id: int
    currency_id: int


@dataclass(frozen=True)
class CreditCardCycle:
    """Credit card billing cycle domain entity."""

    id: int
    credit_card_id: int
    closing_date: date
    due_date: date


@dataclass(frozen=True)
class CreditCardCycleBalance:
    """Amount owed in one currency for a billing cycle."""

    id: int
    credit_card_cycle_id: int
    currency_id: int
    balance: Decimal
    paid: bool


@dataclass(frozen=True)
class CreditCardInstallment:
    """Fixed-count installment plan on a credit card."""

    id: int
    credit_card_id: int
    currency_id: int
    concept: str
    amount: Decimal
    start_date: date
    count: int


@dataclass(frozen=True)
class CreditCardSubscription:
    """Open-ended recurring charge on a credit card."""

    id: int
    credit_card_id: int
    currency_id: int
    concept: str
    amount: Decimal


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    transaction_date: date
    type: str
    amount: Decimal
    notes: Optional[str]
    person_id: int
    bank_account_id: int
    category_id: int
