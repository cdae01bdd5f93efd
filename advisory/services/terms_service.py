"""Terms-of-service acceptance for the authenticated-route gate."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from advisory.core.config import get_config
from advisory.core.exceptions import NotFoundError
from advisory.models import Profile
from advisory.models.base import utcnow
from advisory.services.base_service import BaseService

logger = logging.getLogger(__name__)


class TermsService(BaseService):
    """Record that a user accepted the current terms of service."""

    def __init__(self, db: Session | None = None, tos_version: str | None = None) -> None:
        super().__init__(db=db)
        self.tos_version = tos_version or get_config().TOS_VERSION

    def accept_terms(self, user_id: str) -> Profile:
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is None:
            raise NotFoundError(f"Profile not found for user: {user_id}")

        profile.tos_accepted_at = utcnow()
        profile.tos_version = self.tos_version
        self.commit()
        self.db.refresh(profile)
        logger.info(
            "terms.accepted",
            extra={"event": "terms.accepted", "user_id": user_id, "tos_version": self.tos_version},
        )
        return profile
