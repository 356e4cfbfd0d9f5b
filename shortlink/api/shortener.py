from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
import logging

from shortlink.core.exceptions import LinkError
from shortlink.db import database
from shortlink.schemas.link import LinkCreateRequest, LinkInfoResponse
from shortlink.services.analytics import LinkStats
from shortlink.services.redirect import RedirectService
from shortlink.services.shortener import LinkService
from shortlink.utils.aliases import RESERVED_ALIAS

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/api/shorten", response_model=LinkInfoResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(link_request: LinkCreateRequest, db: Session = Depends(database.get_db)):
    try:
        db_link = LinkService.create_link(db, link_request.target, link_request.custom_alias)
    except LinkError as e:
        target_str = str(link_request.target)
        logger.error(f"Failed to create short URL for {target_str[:50]}.. due to: {str(e)}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    logger.info(f"API success: Shortened {db_link.target[:50]}... to {db_link.alias}")
    return LinkStats.to_response(db_link)

@router.get("/{alias}", tags=["redirect"])
def redirect_to_url_endpoint(alias: str, db: Session = Depends(database.get_db)):
    if alias == RESERVED_ALIAS:
        raise HTTPException(status_code=404, detail="Not found")
    try:
        target, _ = RedirectService.resolve(db, alias)
    except LinkError as e:
        logger.warning(f"Redirect {e.status_code}: alias not found: {alias}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)
