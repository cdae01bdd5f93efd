"""Process bootstrap run from the application lifespan."""

from __future__ import annotations

import logging

from advisory.core.config import get_config
from advisory.core.logging_config import configure_logging
from advisory.database.db import get_active_database_url, verify_database_connection

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Check the backend is reachable; fail only when connectivity is required."""
    config = get_config()
    if not verify_database_connection():
        if config.DB_CONNECTIVITY_REQUIRED:
            raise RuntimeError("Database connectivity check failed.")
        logger.warning(
            "startup.database.unreachable",
            extra={"event": "startup.database.unreachable"},
        )

    logger.info(
        "startup.ready",
        extra={
            "event": "startup.ready",
            "env": config.ENV,
            "database": get_active_database_url().split("://", 1)[0],
            "auth_grace_ms": config.AUTH_GRACE_PERIOD_MS,
            "tos_version": config.TOS_VERSION,
        },
    )


def bootstrap() -> None:
    configure_logging()
    validate_startup_config()
