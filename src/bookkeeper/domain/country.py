"""Country domain service."""

from bookkeeper.database.base import Database
from bookkeeper.domain.entities import Country


class CountryService:
    """Read access to the seeded country list."""

    def __init__(self, db: Database):
        """Initialize country service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_countries(self) -> list[Country]:
        """List all countries ordered by ISO code."""
        return self.db.list_countries()

    def exists(self, code: str) -> bool:
        """Check whether an ISO code is a known country."""
        return self.db.country_exists(code.strip().upper())
