"""Admin session routes: a single shared password exchanged for a cookie."""
import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException, Response, status

from invite_app.config import Settings
from invite_app.dependencies import ADMIN_COOKIE, get_settings
from invite_app.schemas.admin import AdminLogin
from invite_app.schemas.invitation import SuccessOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=SuccessOut)
def login(payload: AdminLogin, response: Response, settings: Settings = Depends(get_settings)):
    """Set the admin cookie when the password matches ADMIN_PASSWORD."""
    expected = settings.ADMIN_PASSWORD
    if not expected or not secrets.compare_digest(payload.password, expected):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")

    response.set_cookie(
        ADMIN_COOKIE,
        settings.SESSION_SECRET,
        path="/",
        httponly=True,
        max_age=settings.ADMIN_COOKIE_MAX_AGE,
    )
    logger.info("Admin logged in")
    return SuccessOut()


@router.post("/logout", response_model=SuccessOut)
def logout(response: Response):
    response.delete_cookie(ADMIN_COOKIE, path="/")
    return SuccessOut()
