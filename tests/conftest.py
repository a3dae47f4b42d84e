"""Shared pytest fixtures for bookkeeper tests."""

import tempfile
import os

import pytest

from bookkeeper.api import create_app
from bookkeeper.database.factories import create_sqlite_database
from bookkeeper.domain.bank import BankService
from bookkeeper.domain.bank_account import BankAccountService
from bookkeeper.domain.category import TransactionCategoryService
from bookkeeper.domain.country import CountryService
from bookkeeper.domain.credit_card import CreditCardService
from bookkeeper.domain.credit_card_cycle import (
    CreditCardCycleBalanceService,
    CreditCardCycleService,
)
from bookkeeper.domain.currency import CurrencyService
from bookkeeper.domain.installment import CreditCardInstallmentService
from bookkeeper.domain.person import PersonService
from bookkeeper.domain.subscription import CreditCardSubscriptionService
from bookkeeper.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def country_service(temp_db):
    """Create a CountryService with a temporary database."""
    return CountryService(temp_db)


@pytest.fixture
def currency_service(temp_db):
    """Create a CurrencyService with a temporary database."""
    return CurrencyService(temp_db)


@pytest.fixture
def bank_service(temp_db):
    """Create a BankService with a temporary database."""
    return BankService(temp_db)


@pytest.fixture
def person_service(temp_db):
    """Create a PersonService with a temporary database."""
    return PersonService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a TransactionCategoryService with a temporary database."""
    return TransactionCategoryService(temp_db)


@pytest.fixture
def bank_account_service(temp_db):
    """Create a BankAccountService with a temporary database."""
    return BankAccountService(temp_db)


@pytest.fixture
def credit_card_service(temp_db):
    """Create a CreditCardService with a temporary database."""
    return CreditCardService(temp_db)


@pytest.fixture
def cycle_service(temp_db):
    """Create a CreditCardCycleService with a temporary database."""
    return CreditCardCycleService(temp_db)


@pytest.fixture
def balance_service(temp_db):
    """Create a CreditCardCycleBalanceService with a temporary database."""
    return CreditCardCycleBalanceService(temp_db)


@pytest.fixture
def installment_service(temp_db):
    """Create a CreditCardInstallmentService with a temporary database."""
    return CreditCardInstallmentService(temp_db)


@pytest.fixture
def subscription_service(temp_db):
    """Create a CreditCardSubscriptionService with a temporary database."""
    return CreditCardSubscriptionService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def usd(currency_service):
    """Create a US dollar currency."""
    return currency_service.create({"name": "US Dollar", "code": "usd"})


@pytest.fixture
def eur(currency_service):
    """Create a euro currency."""
    return currency_service.create({"name": "Euro", "code": "EUR"})


@pytest.fixture
def sample_bank(bank_service):
    """Create a sample bank."""
    return bank_service.create({"name": "First Bank", "country": "us"})


@pytest.fixture
def sample_person(person_service):
    """Create a sample person."""
    return person_service.create({"name": "Alex"})


@pytest.fixture
def sample_account(bank_account_service, sample_bank, usd):
    """Create a sample bank account."""
    return bank_account_service.create(
        {
            "bank_id": sample_bank.id,
            "currency_id": usd.id,
            "account_number": "0001-2345",
            "balance": 1500.25,
        }
    )


@pytest.fixture
def sample_card(credit_card_service, sample_bank, sample_person, usd):
    """Create a sample credit card accepting US dollars."""
    return credit_card_service.create(
        {
            "bank_id": sample_bank.id,
            "person_id": sample_person.id,
            "number": "4111 1111 1111 1111",
            "name": "Everyday card",
            "currency_ids": [usd.id],
        }
    )


@pytest.fixture
def sample_cycle(cycle_service, sample_card):
    """Create a sample billing cycle."""
    return cycle_service.create(
        {
            "credit_card_id": sample_card.id,
            "closing_date": "2024-03-05",
            "due_date": "2024-03-20",
        }
    )


@pytest.fixture
def sample_categories(category_service):
    """Create a small category tree and return the categories by path."""
    food = category_service.create({"name": "Food & Dining"})
    groceries = category_service.create({"name": "Groceries", "parent_id": food.id})
    salary = category_service.create({"name": "Salary"})
    return {
        "Food & Dining": food,
        "Food & Dining > Groceries": groceries,
        "Salary": salary,
    }


@pytest.fixture
def sample_transaction(transaction_service, sample_person, sample_account, sample_categories):
    """Create a sample expense transaction."""
    return transaction_service.create(
        {
            "transaction_date": "2024-03-01",
            "type": "expense",
            "amount": "42.50",
            "notes": "weekly shop",
            "person_id": sample_person.id,
            "bank_account_id": sample_account.id,
            "category_id": sample_categories["Food & Dining > Groceries"].id,
        }
    )


@pytest.fixture
def app(temp_db):
    """Create the API application on the temporary database."""
    app = create_app(db=temp_db)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
