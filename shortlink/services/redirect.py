from typing import Tuple
import logging

from sqlalchemy.orm import Session

from shortlink.core.exceptions import LinkNotFound
from shortlink.db import repository

logger = logging.getLogger(__name__)


class RedirectService:

    @staticmethod
    def resolve(db: Session, alias: str) -> Tuple[str, int]:
        """Count a visit and return (target, clicks after the visit)."""
        resolved = repository.increment_clicks(db, alias)
        if resolved is None:
            raise LinkNotFound()
        target, clicks = resolved
        logger.debug("Resolved %s -> %s (clicks=%d)", alias, target[:50], clicks)
        return target, clicks
