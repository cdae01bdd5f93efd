"""Payment approval chain over the administrator-defined status catalog.

The catalog is the list of active payment status definitions ordered by
``display_order``. Non-terminal statuses form the approval chain a payment
request walks through; terminal statuses end it and never count as a step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from advisory.core.enums import SignatureType
from advisory.database.table_reader import TableReader

logger = logging.getLogger(__name__)


def _signature_type(value: Any) -> SignatureType:
    try:
        return SignatureType(value or SignatureType.NONE.value)
    except ValueError:
        return SignatureType.NONE


@dataclass(frozen=True)
class PaymentStatus:
    code: str
    name: str
    display_order: int
    is_terminal: bool = False
    id: str | None = None
    name_en: str | None = None
    description: str | None = None
    color: str = "#6B7280"
    icon: str | None = None
    is_system: bool = False
    is_active: bool = True
    notify_on_enter: bool = True
    notify_roles: tuple[str, ...] = field(default_factory=tuple)
    requires_signature: bool = False
    signature_type: SignatureType = SignatureType.NONE

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PaymentStatus":
        return cls(
            id=row.get("id"),
            code=row["code"],
            name=row["name"],
            name_en=row.get("name_en"),
            description=row.get("description"),
            color=row.get("color") or "#6B7280",
            icon=row.get("icon"),
            is_system=bool(row.get("is_system", False)),
            is_terminal=bool(row.get("is_terminal", False)),
            is_active=bool(row.get("is_active", True)),
            display_order=int(row.get("display_order") or 0),
            notify_on_enter=bool(row.get("notify_on_enter", True)),
            notify_roles=tuple(row.get("notify_roles") or ()),
            requires_signature=bool(row.get("requires_signature", False)),
            signature_type=_signature_type(row.get("signature_type")),
        )


@dataclass(frozen=True)
class NextStep:
    code: str
    name: str
    requires_signature: bool
    signature_type: SignatureType
    color: str

    @classmethod
    def from_status(cls, status: PaymentStatus) -> "NextStep":
        return cls(
            code=status.code,
            name=status.name,
            requires_signature=status.requires_signature,
            signature_type=status.signature_type,
            color=status.color,
        )


def fetch_active_statuses(reader: TableReader) -> list[PaymentStatus]:
    rows = reader.fetch(
        "payment_status_definitions",
        filters={"is_active": True},
        order_by="display_order",
    )
    return [PaymentStatus.from_row(row) for row in rows]


class ApprovalChain:
    """Read-through cache of the status catalog with chain lookups.

    The catalog is fetched on first use and kept until ``refresh()``. A failed
    fetch records ``error`` and keeps whatever catalog was loaded before.
    """

    def __init__(self, fetch: Callable[[], list[PaymentStatus]]) -> None:
        self._fetch = fetch
        self._statuses: tuple[PaymentStatus, ...] = ()
        self._loaded = False
        self.error: str | None = None

    @classmethod
    def from_reader(cls, reader: TableReader) -> "ApprovalChain":
        return cls(lambda: fetch_active_statuses(reader))

    @property
    def is_loading(self) -> bool:
        return not self._loaded

    @property
    def statuses(self) -> tuple[PaymentStatus, ...]:
        self._ensure_loaded()
        return self._statuses

    @property
    def steps(self) -> tuple[PaymentStatus, ...]:
        """Non-terminal statuses in chain order."""
        return tuple(status for status in self.statuses if not status.is_terminal)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def refresh(self) -> None:
        try:
            fetched = self._fetch()
        except Exception as exc:
            logger.warning(
                "approval_chain.fetch_failed",
                extra={"event": "approval_chain.fetch_failed"},
                exc_info=True,
            )
            self.error = str(exc)
        else:
            self._statuses = tuple(sorted(fetched, key=lambda status: status.display_order))
            self.error = None
        finally:
            self._loaded = True

    def get_next_step(self, current_code: str) -> NextStep | None:
        """Return the first non-terminal status after *current_code*.

        Terminal statuses in between are skipped. An unknown code and a code
        with nothing after it both give ``None``.
        """
        statuses = self.statuses
        current_index = next(
            (index for index, status in enumerate(statuses) if status.code == current_code),
            None,
        )
        if current_index is None:
            return None
        for status in statuses[current_index + 1:]:
            if not status.is_terminal:
                return NextStep.from_status(status)
        return None

    def is_terminal(self, code: str) -> bool:
        status = self.get_status_by_code(code)
        return status.is_terminal if status is not None else False

    def current_step_index(self, code: str) -> int:
        for index, status in enumerate(self.steps):
            if status.code == code:
                return index
        return -1

    def get_status_by_code(self, code: str) -> PaymentStatus | None:
        return next((status for status in self.statuses if status.code == code), None)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.refresh()
