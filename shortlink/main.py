from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shortlink.core.config import settings
from shortlink.core.exceptions import StoreUnavailable
from shortlink.core.logging_config import configure_logging
from shortlink.db import database
from shortlink.db.models import Base
from shortlink.api import links, shortener

logger = configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    if not database.verify_database_connection():
        raise StoreUnavailable("Cannot reach the link database at startup")
    Base.metadata.create_all(bind=database.engine)
    logger.info("Database models initialized/checked.")
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Short links with visit counting",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# /api routes first so they are never taken for an alias
app.include_router(links.router)
app.include_router(shortener.router)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
