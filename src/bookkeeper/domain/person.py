"""Person domain service."""

from typing import Any

from bookkeeper.domain.entities import Person
from bookkeeper.domain.resource import Dependent, ResourceService
from bookkeeper.domain.validation import read_text


class PersonService(ResourceService[Person]):
    """Service for managing people."""

    table = "people"
    label = "person"
    dependents = (
        Dependent("credit_cards", "person_id"),
        Dependent("transactions", "person_id"),
    )
    in_use_code = "person_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"name": read_text(payload, "name")}
