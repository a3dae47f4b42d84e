"""Tests for the bank account service."""

from decimal import Decimal

import pytest

from bookkeeper.domain.errors import ConflictError, DependencyError, ValidationError


def test_create_bank_account(sample_account, sample_bank, usd):
    """Test creating a bank account."""
    assert sample_account.bank_id == sample_bank.id
    assert sample_account.currency_id == usd.id
    assert sample_account.account_number == "0001-2345"
    assert sample_account.balance == Decimal("1500.25")


def test_balance_defaults_to_zero(bank_account_service, sample_bank, usd):
    """Test that an omitted balance is zero."""
    account = bank_account_service.create(
        {"bank_id": sample_bank.id, "currency_id": usd.id, "account_number": "X-1"}
    )
    assert account.balance == Decimal("0")


def test_balance_must_be_finite(bank_account_service, sample_bank, usd):
    """Test that a non-numeric balance is rejected."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {
                "bank_id": sample_bank.id,
                "currency_id": usd.id,
                "account_number": "X-1",
                "balance": "NaN",
            }
        )
    assert excinfo.value.message == "balance must be a finite number"


def test_balance_has_at_most_two_decimal_places(bank_account_service, sample_bank, usd):
    """Test that a sub-cent balance is rejected instead of rounded."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {
                "bank_id": sample_bank.id,
                "currency_id": usd.id,
                "account_number": "X-1",
                "balance": -1.005,
            }
        )
    assert excinfo.value.message == "balance must have at most two decimal places"
    assert bank_account_service.list() == []


def test_balance_must_fit_money_column(bank_account_service, sample_bank, usd):
    """Test that a balance beyond twelve integer digits is rejected."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {
                "bank_id": sample_bank.id,
                "currency_id": usd.id,
                "account_number": "X-1",
                "balance": "1000000000000",
            }
        )
    assert excinfo.value.message == "balance is out of range"


def test_bank_id_must_be_positive_integer(bank_account_service, usd):
    """Test that ids must be positive integers and never booleans."""
    for bank_id in (0, -3, "1", True, 1.5, None, 10**20, 2**63):
        with pytest.raises(ValidationError) as excinfo:
            bank_account_service.create(
                {"bank_id": bank_id, "currency_id": usd.id, "account_number": "X-1"}
            )
        assert excinfo.value.message == "bank_id must be a positive integer"


def test_largest_bank_id_reaches_reference_check(bank_account_service, usd):
    """Test that the largest storable id is a valid id that simply does not exist."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {"bank_id": 2**63 - 1, "currency_id": usd.id, "account_number": "X-1"}
        )
    assert excinfo.value.message == "bank must exist"


def test_bank_must_exist(bank_account_service, usd):
    """Test that the referenced bank must exist."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {"bank_id": 99, "currency_id": usd.id, "account_number": "X-1"}
        )
    assert excinfo.value.message == "bank must exist"


def test_currency_must_exist(bank_account_service, sample_bank):
    """Test that the referenced currency must exist."""
    with pytest.raises(ValidationError) as excinfo:
        bank_account_service.create(
            {"bank_id": sample_bank.id, "currency_id": 99, "account_number": "X-1"}
        )
    assert excinfo.value.message == "currency must exist"


def test_duplicate_bank_account(bank_account_service, sample_account):
    """Test that (bank, currency, account number) is unique."""
    with pytest.raises(ConflictError) as excinfo:
        bank_account_service.create(
            {
                "bank_id": sample_account.bank_id,
                "currency_id": sample_account.currency_id,
                "account_number": " 0001-2345 ",
            }
        )

    assert excinfo.value.code == "duplicate_bank_account"
    assert (
        excinfo.value.message
        == "bank, currency and account number combination must be unique"
    )


def test_same_number_other_currency(bank_account_service, sample_account, eur):
    """Test that the same number is allowed for another currency."""
    account = bank_account_service.create(
        {
            "bank_id": sample_account.bank_id,
            "currency_id": eur.id,
            "account_number": sample_account.account_number,
        }
    )
    assert account.currency_id == eur.id


def test_update_bank_account(bank_account_service, sample_account):
    """Test replacing a bank account."""
    updated = bank_account_service.update(
        sample_account.id,
        {
            "bank_id": sample_account.bank_id,
            "currency_id": sample_account.currency_id,
            "account_number": "9999",
            "balance": "-10.50",
        },
    )
    assert updated.account_number == "9999"
    assert updated.balance == Decimal("-10.50")


def test_delete_bank_account_in_use(bank_account_service, sample_transaction, sample_account):
    """Test that an account with transactions cannot be deleted."""
    with pytest.raises(DependencyError) as excinfo:
        bank_account_service.remove(sample_account.id)
    assert excinfo.value.code == "bank_account_in_use"
