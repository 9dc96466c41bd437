import logging

from fastapi import APIRouter, Response

from app.config import Settings
from app.dependencies import SESSION_COOKIE, SettingsDep, TokenServiceDep
from app.schemas.auth import IdentityClaim
from app.schemas.responses import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def cookie_options(settings: Settings) -> dict:
    """Cookie attributes shared by issue and revoke; browsers only clear a cookie set with the same ones."""
    if settings.is_production:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "strict"}


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(
    claim: IdentityClaim,
    response: Response,
    tokens: TokenServiceDep,
    settings: SettingsDep,
) -> SuccessResponse:
    token = tokens.issue(claim.model_dump())
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=int(tokens.ttl.total_seconds()),
        **cookie_options(settings),
    )
    logger.info("Session issued for %s", claim.email)
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response, settings: SettingsDep) -> SuccessResponse:
    response.delete_cookie(SESSION_COOKIE, **cookie_options(settings))
    return SuccessResponse()
