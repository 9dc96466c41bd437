import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import HotelBookingError

logger = logging.getLogger(__name__)


async def hotel_booking_error_handler(request: Request, exc: HotelBookingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning(
            "%s %s rejected (status=%d): %s",
            request.method, request.url.path, exc.status_code, exc.message,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )
