from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

ALIAS_MAX_LENGTH = 20


def _utcnow():
    return datetime.now(timezone.utc)


class Link(Base):
    __tablename__ = "links"

    # Surrogate key, only used to order links created in the same instant
    id = Column(Integer, primary_key=True, autoincrement=True)

    # The unique constraint on alias is what decides allocation races
    alias = Column(String(ALIAS_MAX_LENGTH), unique=True, index=True, nullable=False)
    target = Column(String, nullable=False)
    clicks = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
