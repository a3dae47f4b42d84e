"""HTTP routes for the bookkeeping API."""

import re
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from bookkeeper.api.serializers import serialize, serialize_all
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
from bookkeeper.domain.errors import ValidationError
from bookkeeper.domain.installment import CreditCardInstallmentService
from bookkeeper.domain.person import PersonService
from bookkeeper.domain.resource import ResourceService
from bookkeeper.domain.subscription import CreditCardSubscriptionService
from bookkeeper.domain.transaction import TransactionService
from bookkeeper.domain.validation import is_valid_id

api = Blueprint("api", __name__, url_prefix="/api")

_DIGITS = re.compile(r"[0-9]+")

# URL segment -> (service class, label used in id errors)
RESOURCES: dict[str, tuple[type[ResourceService], str]] = {
    "currencies": (CurrencyService, "currency"),
    "banks": (BankService, "bank"),
    "bank-accounts": (BankAccountService, "bank account"),
    "people": (PersonService, "person"),
    "transaction-categories": (TransactionCategoryService, "transaction category"),
    "credit-cards": (CreditCardService, "credit card"),
    "credit-card-cycles": (CreditCardCycleService, "credit card cycle"),
    "credit-card-installments": (CreditCardInstallmentService, "credit card installment"),
    "credit-card-subscriptions": (CreditCardSubscriptionService, "credit card subscription"),
    "transactions": (TransactionService, "transaction"),
}


def get_db():
    """Return the database bound to the running application."""
    return current_app.extensions["bookkeeper_db"]


def parse_id(value: str) -> int | None:
    """Parse a path segment as a positive integer, or return None."""
    if not _DIGITS.fullmatch(value):
        return None
    number = int(value)
    return number if is_valid_id(number) else None


def require_id(value: str, label: str) -> int:
    """Parse a path id or raise ``invalid_id``."""
    number = parse_id(value)
    if number is None:
        raise ValidationError(f"{label} id must be a positive integer", "invalid_id")
    return number


def read_payload() -> Any:
    """Decode the JSON request body; undecodable bodies come back as None."""
    return request.get_json(force=True, silent=True)


def created(entity: Any, location: str) -> Response:
    response = jsonify(serialize(entity))
    response.status_code = 201
    response.headers["Location"] = location
    return response


def no_content() -> Response:
    return Response(status=204)


def register_resource(
    blueprint: Blueprint, segment: str, service_class: type[ResourceService], label: str
) -> None:
    """Register list/create and read/replace/delete routes for one resource.

    Args:
        blueprint: Blueprint to register on
        segment: URL segment under /api, e.g. "bank-accounts"
        service_class: ResourceService subclass handling the resource
        label: Human name used in id error messages
    """
    endpoint = segment.replace("-", "_")

    def collection():
        service = service_class(get_db())
        if request.method == "POST":
            entity = service.create(read_payload())
            return created(entity, f"/api/{segment}/{entity.id}")
        return jsonify(serialize_all(service.list()))

    def item(resource_id: str):
        record_id = require_id(resource_id, label)
        service = service_class(get_db())
        if request.method == "PUT":
            return jsonify(serialize(service.update(record_id, read_payload())))
        if request.method == "DELETE":
            service.remove(record_id)
            return no_content()
        return jsonify(serialize(service.get(record_id)))

    blueprint.add_url_rule(
        f"/{segment}", f"{endpoint}_collection", collection, methods=["GET", "POST"]
    )
    blueprint.add_url_rule(
        f"/{segment}/<resource_id>",
        f"{endpoint}_item",
        item,
        methods=["GET", "PUT", "DELETE"],
    )


for _segment, (_service_class, _label) in RESOURCES.items():
    register_resource(api, _segment, _service_class, _label)


@api.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "message": "backend is up"})


@api.route("/countries", methods=["GET"])
def countries():
    return jsonify(serialize_all(CountryService(get_db()).list_countries()))


@api.route("/credit-cards/<card_id>/currencies", methods=["GET", "PUT"])
def credit_card_currencies(card_id: str):
    record_id = require_id(card_id, "credit card")
    service = CreditCardService(get_db())
    if request.method == "PUT":
        links = service.replace_currencies(record_id, read_payload())
    else:
        links = service.list_currencies(record_id)
    return jsonify(serialize_all(links))


@api.route("/credit-card-cycles/<cycle_id>/balances", methods=["GET", "POST"])
def cycle_balances(cycle_id: str):
    route_cycle_id = require_id(cycle_id, "credit card cycle")
    service = CreditCardCycleBalanceService(get_db())
    if request.method == "POST":
        balance = service.create_for_cycle(route_cycle_id, read_payload())
        return created(
            balance, f"/api/credit-card-cycles/{route_cycle_id}/balances/{balance.id}"
        )
    return jsonify(serialize_all(service.list_for_cycle(route_cycle_id)))


@api.route(
    "/credit-card-cycles/<cycle_id>/balances/<balance_id>", methods=["GET", "PUT", "DELETE"]
)
def cycle_balance(cycle_id: str, balance_id: str):
    route_cycle_id = parse_id(cycle_id)
    record_id = parse_id(balance_id)
    if route_cycle_id is None or record_id is None:
        raise ValidationError(
            "credit card cycle id and balance id must be positive integers", "invalid_id"
        )

    service = CreditCardCycleBalanceService(get_db())
    if request.method == "PUT":
        balance = service.update_for_cycle(route_cycle_id, record_id, read_payload())
        return jsonify(serialize(balance))
    if request.method == "DELETE":
        service.remove_for_cycle(route_cycle_id, record_id)
        return no_content()
    return jsonify(serialize(service.get_for_cycle(route_cycle_id, record_id)))
