"""Transaction category domain service."""

from typing import Any, Optional

from bookkeeper.domain.entities import TransactionCategory
from bookkeeper.domain.errors import ValidationError
from bookkeeper.domain.resource import Dependent, ResourceService
from bookkeeper.domain.validation import read_optional_positive_id, read_text


class TransactionCategoryService(ResourceService[TransactionCategory]):
    """Service for managing the transaction category tree."""

    table = "transaction_categories"
    label = "transaction category"
    unique_rules = (("name", "parent_id"),)
    duplicate_code = "duplicate_transaction_category"
    duplicate_message = "category name must be unique under the same parent"
    dependents = (
        Dependent("transaction_categories", "parent_id"),
        Dependent("transactions", "category_id"),
    )
    in_use_code = "category_in_use"

    def normalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": read_text(payload, "name"),
            "parent_id": read_optional_positive_id(payload, "parent_id"),
        }

    def validate(self, values: dict[str, Any], record_id: Optional[int]) -> None:
        parent_id = values["parent_id"]
        if parent_id is None:
            return
        if parent_id == record_id:
            raise ValidationError("category cannot be its own parent")
        if not self.db.row_exists(self.table, parent_id):
            raise ValidationError("parent category must exist")
        if record_id is not None and record_id in self._ancestor_ids(parent_id):
            raise ValidationError("category cannot be moved under its own descendant")

    def missing_reference_error(self) -> ValidationError:
        return ValidationError("parent category must exist")

    def _ancestor_ids(self, category_id: int) -> list[int]:
        """Return the IDs from ``category_id`` up to its root."""
        ids = []
        current_id: Optional[int] = category_id
        while current_id is not None and current_id not in ids:
            ids.append(current_id)
            category = self.db.get_row(self.table, current_id)
            current_id = category.parent_id if category is not None else None
        return ids

    def list_children(self, parent_id: Optional[int] = None) -> list[TransactionCategory]:
        """List categories directly under a parent.

        Args:
            parent_id: Parent category ID, or None for root categories

        Returns:
            List of category entities ordered by ID
        """
        return self.db.list_rows(self.table, parent_id=parent_id)

    def get_tree(self) -> list[dict]:
        """Get full category tree.

        Returns:
            List of root categories as dicts with nested ``children`` lists
        """
        categories = self.list()
        nodes = {
            c.id: {"id": c.id, "name": c.name, "parent_id": c.parent_id, "children": []}
            for c in categories
        }

        roots = []
        for category in categories:
            node = nodes[category.id]
            if category.parent_id is None or category.parent_id not in nodes:
                roots.append(node)
            else:
                nodes[category.parent_id]["children"].append(node)
        return roots

    def format_category_path(self, category_id: int) -> str:
        """Get full path for a category.

        Args:
            category_id: Category ID

        Returns:
            Full category path (e.g., "Food & Dining > Groceries"), or an
            empty string if the category does not exist
        """
        names = []
        for ancestor_id in self._ancestor_ids(category_id):
            category = self.db.get_row(self.table, ancestor_id)
            if category is None:
                break
            names.append(category.name)
        return " > ".join(reversed(names))
