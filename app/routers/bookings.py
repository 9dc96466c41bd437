import logging

from fastapi import APIRouter

from app.dependencies import BookingServiceDep, SessionClaimDep
from app.exceptions.custom import ForbiddenError, MissingParameterError
from app.schemas.booking import BookingDateUpdate, BookingRequest
from app.schemas.responses import InsertResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/book-room", response_model=InsertResponse, status_code=201)
async def book_room(booking: BookingRequest, service: BookingServiceDep) -> InsertResponse:
    result = await service.create_booking(booking.model_dump())
    return InsertResponse(**result)


@router.get("/myBookings")
async def my_bookings(
    service: BookingServiceDep,
    claim: SessionClaimDep,
    email: str | None = None,
) -> list[dict]:
    if not email:
        raise MissingParameterError("Email query parameter is required.")
    if claim.get("email") != email:
        logger.warning("Session for %s asked for bookings of %s", claim.get("email"), email)
        raise ForbiddenError()
    return await service.list_bookings_for(email)


@router.delete("/bookings/{booking_id}", response_model=MessageResponse)
async def cancel_booking(booking_id: str, service: BookingServiceDep) -> MessageResponse:
    await service.cancel_booking(booking_id)
    return MessageResponse(message="Booking cancelled successfully")


@router.put("/bookings/{booking_id}", response_model=MessageResponse)
async def update_booking_date(
    booking_id: str, update: BookingDateUpdate, service: BookingServiceDep,
) -> MessageResponse:
    await service.update_booking_date(booking_id, update.date)
    return MessageResponse(message="Booking date updated successfully")
