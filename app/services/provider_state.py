from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.repositories.provider_repository import ProviderRepository

logger = logging.getLogger(__name__)


def check_providers_loaded(session: Session) -> bool:
    """Return True when the providers table has at least one row."""
    try:
        return ProviderRepository(session).count() > 0
    except Exception:
        logger.exception("Failed to check providers load state")
        return False
