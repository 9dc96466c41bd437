from typing import Annotated, Any

from fastapi import Depends, Request

from app.config import Settings
from app.services.bookings import BookingService
from app.services.reviews import ReviewService
from app.services.rooms import RoomCatalogService
from app.services.tokens import TokenService

SESSION_COOKIE = "token"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_room_service(request: Request) -> RoomCatalogService:
    return request.app.state.room_service


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
RoomServiceDep = Annotated[RoomCatalogService, Depends(get_room_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]


def verify_session(request: Request, tokens: TokenServiceDep) -> dict[str, Any]:
    """Decode the session cookie into the caller's identity claim."""
    return tokens.verify(request.cookies.get(SESSION_COOKIE))


SessionClaimDep = Annotated[dict[str, Any], Depends(verify_session)]
