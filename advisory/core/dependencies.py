"""Dependency providers for API handlers."""

from __future__ import annotations

from advisory.database.table_reader import TableReader
from advisory.services.terms_service import TermsService


def get_table_reader() -> TableReader:
    """Create a reader bound to a fresh session; use it as a context manager."""
    return TableReader()


def get_terms_service() -> TermsService:
    return TermsService()
