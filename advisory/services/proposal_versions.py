"""Proposal version history and version-to-version comparison."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from advisory.database.table_reader import TableReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProposalVersion:
    id: str
    proposal_id: str
    version_number: int
    price: float
    timeline_days: int
    scope_text: str | None = None
    terms: str | None = None
    change_reason: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ProposalVersion":
        return cls(
            id=str(row["id"]),
            proposal_id=str(row["proposal_id"]),
            version_number=int(row["version_number"]),
            price=float(row["price"]),
            timeline_days=int(row["timeline_days"]),
            scope_text=row.get("scope_text"),
            terms=row.get("terms"),
            change_reason=row.get("change_reason"),
            created_by=row.get("created_by"),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class VersionComparison:
    price_change: float
    price_change_percent: int
    timeline_change: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def compare_versions(v1: ProposalVersion, v2: ProposalVersion) -> VersionComparison:
    """Describe the change from *v1* to *v2*; positive values are increases."""
    price_change = v2.price - v1.price
    price_change_percent = round_half_up(price_change / v1.price * 100) if v1.price > 0 else 0
    return VersionComparison(
        price_change=price_change,
        price_change_percent=price_change_percent,
        timeline_change=v2.timeline_days - v1.timeline_days,
    )


def fetch_proposal_versions(reader: TableReader, proposal_id: str) -> list[ProposalVersion]:
    rows = reader.fetch(
        "proposal_versions",
        filters={"proposal_id": proposal_id},
        order_by="version_number",
        descending=True,
    )
    return [ProposalVersion.from_row(row) for row in rows]


class ProposalVersionHistory:
    """Versions of one proposal, most recent first."""

    def __init__(
        self,
        proposal_id: str | None,
        fetch: Callable[[str], list[ProposalVersion]],
    ) -> None:
        self.proposal_id = proposal_id
        self._fetch = fetch
        self._versions: tuple[ProposalVersion, ...] = ()
        self._loaded = False
        self.loading = False
        self.error: str | None = None

    @classmethod
    def from_reader(cls, reader: TableReader, proposal_id: str | None) -> "ProposalVersionHistory":
        return cls(proposal_id, lambda pid: fetch_proposal_versions(reader, pid))

    @property
    def versions(self) -> tuple[ProposalVersion, ...]:
        if not self._loaded:
            self.refresh()
        return self._versions

    def refresh(self) -> None:
        if not self.proposal_id:
            return

        self.loading = True
        self.error = None
        try:
            fetched = self._fetch(self.proposal_id)
        except Exception as exc:
            logger.warning(
                "proposal_versions.fetch_failed",
                extra={"event": "proposal_versions.fetch_failed", "proposal_id": self.proposal_id},
                exc_info=True,
            )
            self.error = str(exc)
        else:
            self._versions = tuple(sorted(fetched, key=lambda v: v.version_number, reverse=True))
        finally:
            self.loading = False
            self._loaded = True

    def get_version_by_id(self, version_id: str) -> ProposalVersion | None:
        return next((v for v in self.versions if v.id == version_id), None)

    def get_latest_version(self) -> ProposalVersion | None:
        versions = self.versions
        return versions[0] if versions else None

    @staticmethod
    def compare_versions(v1: ProposalVersion, v2: ProposalVersion) -> VersionComparison:
        return compare_versions(v1, v2)
