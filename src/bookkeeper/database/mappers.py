"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic so the services never handle ORM
objects directly.
"""

from decimal import Decimal
from typing import Any, Callable

from bookkeeper.domain import entities as domain
from bookkeeper.database import models as orm


def country_to_domain(orm_country: orm.Country) -> domain.Country:
    """Convert SQLAlchemy Country model to domain Country entity."""
    return domain.Country(code=orm_country.code, name=orm_country.name)


def currency_to_domain(orm_currency: orm.Currency) -> domain.Currency:
    """Convert SQLAlchemy Currency model to domain Currency entity."""
    return domain.Currency(id=orm_currency.id, name=orm_currency.name, code=orm_currency.code)


def bank_to_domain(orm_bank: orm.Bank) -> domain.Bank:
    """Convert SQLAlchemy Bank model to domain Bank entity."""
    return domain.Bank(id=orm_bank.id, name=orm_bank.name, country=orm_bank.country)


def person_to_domain(orm_person: orm.Person) -> domain.Person:
    """Convert SQLAlchemy Person model to domain Person entity."""
    return domain.Person(id=orm_person.id, name=orm_person.name)


def transaction_category_to_domain(
    orm_category: orm.TransactionCategory,
) -> domain.TransactionCategory:
    """Convert SQLAlchemy TransactionCategory model to domain entity.

    The parent's name is resolved through the relationship so list views do not
    need a second lookup.
    """
    parent = orm_category.parent
    return domain.TransactionCategory(
        id=orm_category.id,
        name=orm_category.name,
        parent_id=orm_category.parent_id,
        parent_name=parent.name if parent is not None else None,
    )


def bank_account_to_domain(orm_account: orm.BankAccount) -> domain.BankAccount:
    """Convert SQLAlchemy BankAccount model to domain BankAccount entity."""
    return domain.BankAccount(
        id=orm_account.id,
        bank_id=orm_account.bank_id,
        currency_id=orm_account.currency_id,
        account_number=orm_account.account_number,
        balance=_to_decimal(orm_account.balance),
    )


def credit_card_to_domain(orm_card: orm.CreditCard) -> domain.CreditCard:
    """Convert SQLAlchemy CreditCard model to domain CreditCard entity."""
    return domain.CreditCard(
        id=orm_card.id,
        bank_id=orm_card.bank_id,
        person_id=orm_card.person_id,
        number=orm_card.number,
        name=orm_card.name,
        currency_ids=tuple(sorted(link.currency_id for link in orm_card.currencies)),
    )


def credit_card_currency_to_domain(orm_link: orm.CreditCardCurrency) -> domain.CreditCardCurrency:
    """Convert SQLAlchemy CreditCardCurrency model to domain entity."""
    return domain.CreditCardCurrency(
        id=orm_link.id,
        credit_card_id=orm_link.credit_card_id,
        currency_id=orm_link.currency_id,
    )


def credit_card_cycle_to_domain(orm_cycle: orm.CreditCardCycle) -> domain.CreditCardCycle:
    """Convert SQLAlchemy CreditCardCycle model to domain entity."""
    return domain.CreditCardCycle(
        id=orm_cycle.id,
        credit_card_id=orm_cycle.credit_card_id,
        closing_date=orm_cycle.closing_date,
        due_date=orm_cycle.due_date,
    )


def credit_card_cycle_balance_to_domain(
    orm_balance: orm.CreditCardCycleBalance,
) -> domain.CreditCardCycleBalance:
    """Convert SQLAlchemy CreditCardCycleBalance model to domain entity."""
    return domain.CreditCardCycleBalance(
        id=orm_balance.id,
        credit_card_cycle_id=orm_balance.credit_card_cycle_id,
        currency_id=orm_balance.currency_id,
        balance=_to_decimal(orm_balance.balance),
        paid=bool(orm_balance.paid),
    )


def credit_card_installment_to_domain(
    orm_installment: orm.CreditCardInstallment,
) -> domain.CreditCardInstallment:
    """Convert SQLAlchemy CreditCardInstallment model to domain entity."""
    return domain.CreditCardInstallment(
        id=orm_installment.id,
        credit_card_id=orm_installment.credit_card_id,
        currency_id=orm_installment.currency_id,
        concept=orm_installment.concept,
        amount=_to_decimal(orm_installment.amount),
        start_date=orm_installment.start_date,
        count=orm_installment.count,
    )


def credit_card_subscription_to_domain(
    orm_subscription: orm.CreditCardSubscription,
) -> domain.CreditCardSubscription:
    """Convert SQLAlchemy CreditCardSubscription model to domain entity."""
    return domain.CreditCardSubscription(
        id=orm_subscription.id,
        credit_card_id=orm_subscription.credit_card_id,
        currency_id=orm_subscription.currency_id,
        concept=orm_subscription.concept,
        amount=_to_decimal(orm_subscription.amount),
    )


def transaction_to_domain(orm_transaction: orm.Transaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        transaction_date=orm_transaction.transaction_date,
        type=orm_transaction.type,
        amount=_to_decimal(orm_transaction.amount),
        notes=orm_transaction.notes,
        person_id=orm_transaction.person_id,
        bank_account_id=orm_transaction.bank_account_id,
        category_id=orm_transaction.category_id,
    )


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# Table name -> (ORM model, mapper). The generic database operations dispatch
# through this registry.
TABLES: dict[str, tuple[type, Callable[[Any], Any]]] = {
    "currencies": (orm.Currency, currency_to_domain),
    "banks": (orm.Bank, bank_to_domain),
    "people": (orm.Person, person_to_domain),
    "transaction_categories": (orm.TransactionCategory, transaction_category_to_domain),
    "bank_accounts": (orm.BankAccount, bank_account_to_domain),
    "credit_cards": (orm.CreditCard, credit_card_to_domain),
    "credit_card_currencies": (orm.CreditCardCurrency, credit_card_currency_to_domain),
    "credit_card_cycles": (orm.CreditCardCycle, credit_card_cycle_to_domain),
    "credit_card_cycle_balances": (orm.CreditCardCycleBalance, credit_card_cycle_balance_to_domain),
    "credit_card_installments": (orm.CreditCardInstallment, credit_card_installment_to_domain),
    "credit_card_subscriptions": (orm.CreditCardSubscription, credit_card_subscription_to_domain),
    "transactions": (orm.Transaction, transaction_to_domain),
}
