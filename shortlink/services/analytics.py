from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from shortlink.core.config import settings
from shortlink.core.exceptions import LinkNotFound
from shortlink.db import repository
from shortlink.db.models import Link
from shortlink.schemas.link import LinkInfoResponse

RECENT_LINKS_LIMIT = 50


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LinkStats:

    @staticmethod
    def list_recent(db: Session, limit: int = RECENT_LINKS_LIMIT) -> List[Link]:
        return repository.list_recent(db, min(limit, RECENT_LINKS_LIMIT))

    @staticmethod
    def get_by_alias(db: Session, alias: str) -> Link:
        link = repository.get_link_by_alias(db, alias)
        if link is None:
            raise LinkNotFound()
        return link

    @staticmethod
    def to_response(link: Link) -> LinkInfoResponse:
        return LinkInfoResponse(
            alias=link.alias,
            target=link.target,
            short_url=settings.short_url(link.alias),
            clicks=link.clicks or 0,
            created_at=_as_utc(link.created_at),
        )
