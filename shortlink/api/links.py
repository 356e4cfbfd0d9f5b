from datetime import datetime, timezone
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from shortlink.core.exceptions import LinkError
from shortlink.db import database
from shortlink.schemas.link import HealthResponse, LinkInfoResponse
from shortlink.services.analytics import RECENT_LINKS_LIMIT, LinkStats

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["links"])

@router.get("/health", response_model=HealthResponse, tags=["health"])
def health_check():
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))

# readiness: check DB connectivity
@router.get("/ready", tags=["health"])
def readiness(db: Session = Depends(database.get_db)):
    db_ok = database.verify_database_connection(db.get_bind())
    body = {"ready": db_ok, "details": {"db": "ok" if db_ok else "error"}}
    if not db_ok:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body

@router.get("/links", response_model=List[LinkInfoResponse])
def list_links_endpoint(
    limit: int = Query(RECENT_LINKS_LIMIT, ge=1, le=RECENT_LINKS_LIMIT),
    db: Session = Depends(database.get_db)
):
    """Most recently created links, newest first."""
    links = LinkStats.list_recent(db, limit)
    return [LinkStats.to_response(link) for link in links]

@router.get("/stats/{alias}", response_model=LinkInfoResponse)
def get_link_statistics_endpoint(alias: str, db: Session = Depends(database.get_db)):
    try:
        db_link = LinkStats.get_by_alias(db, alias)
    except LinkError as e:
        logger.warning(f"Stats 404: alias not found: {alias}")
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return LinkStats.to_response(db_link)
