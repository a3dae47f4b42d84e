"""Tests for the currency service."""

import pytest

from bookkeeper.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)


def test_create_currency_normalizes_code(currency_service):
    """Test that codes are trimmed and upper-cased."""
    currency = currency_service.create({"name": "  Peso  ", "code": " ars "})

    assert currency.id > 0
    assert currency.name == "Peso"
    assert currency.code == "ARS"


def test_create_currency_requires_name_and_code(currency_service):
    """Test that blank fields are rejected."""
    with pytest.raises(ValidationError) as excinfo:
        currency_service.create({"name": "   ", "code": "USD"})
    assert excinfo.value.message == "name is required"

    with pytest.raises(ValidationError) as excinfo:
        currency_service.create({"name": "Dollar"})
    assert excinfo.value.message == "code is required"
    assert excinfo.value.code == "invalid_payload"


def test_create_currency_rejects_non_object(currency_service):
    """Test that a payload that is not an object is rejected."""
    with pytest.raises(ValidationError) as excinfo:
        currency_service.create(["USD"])
    assert excinfo.value.message == "request body must be valid JSON"


def test_duplicate_currency_name_case_insensitive(currency_service, usd):
    """Test that reusing a name in another case is a conflict."""
    with pytest.raises(ConflictError) as excinfo:
        currency_service.create({"name": "us dollar", "code": "USN"})

    assert excinfo.value.code == "duplicate_currency"
    assert excinfo.value.message == "name and code must be unique"
    assert excinfo.value.status == 409


def test_duplicate_currency_code(currency_service, usd):
    """Test that reusing a code is a conflict."""
    with pytest.raises(ConflictError) as excinfo:
        currency_service.create({"name": "Dollar", "code": "Usd"})
    assert excinfo.value.code == "duplicate_currency"


def test_update_currency_keeps_own_values(currency_service, usd):
    """Test that an update does not conflict with the record itself."""
    updated = currency_service.update(usd.id, {"name": "US DOLLAR", "code": "usd"})

    assert updated.id == usd.id
    assert updated.name == "US DOLLAR"
    assert updated.code == "USD"


def test_update_currency_conflicts_with_other(currency_service, usd, eur):
    """Test that an update cannot take another currency's code."""
    with pytest.raises(ConflictError):
        currency_service.update(eur.id, {"name": "Euro", "code": "USD"})


def test_update_missing_currency(currency_service):
    """Test updating a currency that does not exist."""
    with pytest.raises(NotFoundError) as excinfo:
        currency_service.update(999, {"name": "Euro", "code": "EUR"})
    assert excinfo.value.message == "currency not found"


def test_update_validates_before_lookup(currency_service):
    """Test that a malformed payload is reported before a missing record."""
    with pytest.raises(ValidationError):
        currency_service.update(999, {"name": "", "code": "EUR"})


def test_currency_round_trip(currency_service):
    """Test create, list, update and delete."""
    currency = currency_service.create({"name": "Yen", "code": "JPY"})
    assert currency.id in [c.id for c in currency_service.list()]

    currency_service.update(currency.id, {"name": "Japanese Yen", "code": "JPY"})
    assert [c.name for c in currency_service.list() if c.id == currency.id] == ["Japanese Yen"]

    currency_service.remove(currency.id)
    assert currency.id not in [c.id for c in currency_service.list()]


def test_list_currencies_ordered_by_id(currency_service):
    """Test that lists come back in creation order."""
    first = currency_service.create({"name": "Zloty", "code": "PLN"})
    second = currency_service.create({"name": "Baht", "code": "THB"})

    assert [c.id for c in currency_service.list()] == [first.id, second.id]


def test_delete_currency_in_use(currency_service, sample_account, usd):
    """Test that a currency used by a bank account cannot be deleted."""
    with pytest.raises(DependencyError) as excinfo:
        currency_service.remove(usd.id)

    assert excinfo.value.code == "currency_in_use"
    assert excinfo.value.message == "currency is in use"
    assert currency_service.get(usd.id) == usd


def test_delete_missing_currency(currency_service):
    """Test deleting a currency that does not exist."""
    with pytest.raises(NotFoundError):
        currency_service.remove(42)
