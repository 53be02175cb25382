"""FastAPI application entrypoint. No business logic; only wiring, middleware and the catch-all error handler."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.middleware.sessions import SessionMiddleware

from clubhouse.api import router
from clubhouse.core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Clubhouse",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url=None,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET.get_secret_value(),
    session_cookie=settings.SESSION_COOKIE_NAME,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.SESSION_HTTPS_ONLY,
)

app.include_router(router)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> PlainTextResponse:
    """Database and hashing failures end here as an unstructured 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
