"""Session ownership shared by the database-backed services."""

from __future__ import annotations

from sqlalchemy.orm import Session

from advisory.database import db as db_module


class BaseService:
    """Wraps a SQLAlchemy session; closes it on exit only if it opened it.

    A caller that passes ``db`` keeps ownership of that session.
    """

    def __init__(self, db: Session | None = None) -> None:
        self._owns_session = db is None
        self.db = db if db is not None else db_module.SessionLocal()

    def commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.db.rollback()
        if self._owns_session:
            self.db.close()
