"""Domain layer for bookkeeper application.

Services are imported from their modules (``bookkeeper.domain.currency`` and
so on) so the database layer can depend on ``bookkeeper.domain.entities``
without a cycle.
"""
