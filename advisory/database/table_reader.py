"""Generic `{table, filter, order}` read interface over backend tables."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Column, Table, select
from sqlalchemy.exc import SQLAlchemyError

from advisory.core.exceptions import DatabaseError, ValidationError
from advisory.models import Base
from advisory.services.base_service import BaseService


class TableReader(BaseService):
    """Read rows from a known table as plain dictionaries."""

    def _table(self, name: str) -> Table:
        table = Base.metadata.tables.get(name)
        if table is None:
            raise ValidationError(f"Unknown table: {name}")
        return table

    @staticmethod
    def _column(table: Table, name: str) -> Column:
        if name not in table.c:
            raise ValidationError(f"Unknown column {name} on {table.name}")
        return table.c[name]

    def fetch(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return rows of *table* matching every equality in *filters*."""
        target = self._table(table)
        stmt = select(target)
        for name, value in (filters or {}).items():
            stmt = stmt.where(self._column(target, name) == value)
        if order_by:
            column = self._column(target, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        try:
            rows = self.db.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise DatabaseError(f"Failed to read {table}: {exc}") from exc
        return [dict(row) for row in rows]

    def fetch_one(self, table: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        rows = self.fetch(table, filters=filters)
        return rows[0] if rows else None
