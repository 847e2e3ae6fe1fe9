"""Shared FastAPI dependencies."""
import logging
import secrets

from fastapi import HTTPException, Request, status

from invite_app.config import Settings

logger = logging.getLogger(__name__)

ADMIN_COOKIE = "admin_token"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_admin(request: Request) -> None:
    """Reject the request unless the admin cookie carries the session secret."""
    secret = get_settings(request).SESSION_SECRET
    token = request.cookies.get(ADMIN_COOKIE)
    if not secret or not token or not secrets.compare_digest(token, secret):
        logger.warning("Unauthorized admin request to %s", request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
