from typing import List, Optional, Tuple
from sqlalchemy import update
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from shortlink.db.models import Link

logger = logging.getLogger(__name__)


class AliasConflict(Exception):
    """The store rejected an insert because the alias already exists."""

    def __init__(self, alias: str):
        super().__init__(alias)
        self.alias = alias


def get_link_by_alias(db: Session, alias: str) -> Optional[Link]:
    return db.query(Link).filter(Link.alias == alias).first()


def alias_exists(db: Session, alias: str) -> bool:
    return db.query(Link.id).filter(Link.alias == alias).first() is not None


def _is_alias_violation(e: IntegrityError) -> bool:
    error_msg = str(e.orig).lower() if getattr(e, "orig", None) is not None else str(e).lower()
    return "unique" in error_msg or "duplicate" in error_msg or "alias" in error_msg


def insert_link(db: Session, alias: str, target: str) -> Link:
    db_link = Link(alias=alias, target=target, clicks=0)
    try:
        db.add(db_link)
        db.commit()
        db.refresh(db_link)
        return db_link
    except IntegrityError as e:
        db.rollback()
        if _is_alias_violation(e):
            logger.info("Insert rejected, alias already stored: %s", alias)
            raise AliasConflict(alias) from e
        logger.warning("IntegrityError creating link alias=%s target=%s: %s", alias, target[:50], str(e))
        raise


def increment_clicks(db: Session, alias: str) -> Optional[Tuple[str, int]]:
    """Bump the counter in one statement and return (target, clicks), or None if absent."""
    stmt = (
        update(Link)
        .where(Link.alias == alias)
        .values(clicks=Link.clicks + 1)
        .returning(Link.target, Link.clicks)
        .execution_options(synchronize_session=False)
    )
    row = db.execute(stmt).first()
    db.commit()
    if row is None:
        return None
    return row.target, row.clicks


def list_recent(db: Session, limit: int) -> List[Link]:
    return (
        db.query(Link)
        .order_by(Link.created_at.desc(), Link.id.desc())
        .limit(limit)
        .all()
    )
