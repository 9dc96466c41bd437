import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import ServerSettings, Settings
from app.database import BOOKINGS, ROOMS, create_client
from app.exceptions.custom import HotelBookingError
from app.exceptions.handlers import hotel_booking_error_handler
from app.routers.auth import router as auth_router
from app.routers.bookings import router as bookings_router
from app.routers.reviews import router as reviews_router
from app.routers.rooms import router as rooms_router
from app.schemas.responses import HealthResponse
from app.services.bookings import BookingService
from app.services.reviews import ReviewService
from app.services.rooms import RoomCatalogService
from app.services.tokens import TokenService

logger = logging.getLogger(__name__)


def init_services(app: FastAPI, settings: Settings, database) -> None:
    """Wire the services onto ``app.state`` around the given database handle."""
    rooms = database[ROOMS]
    bookings = database[BOOKINGS]

    app.state.settings = settings
    app.state.token_service = TokenService(
        settings.access_token_secret,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )
    app.state.room_service = RoomCatalogService(rooms)
    app.state.review_service = ReviewService(rooms)
    app.state.booking_service = BookingService(bookings, rooms)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    client = create_client(settings)
    try:
        init_services(app, settings, client[settings.db_name])
        logger.info("Using database %s", settings.db_name)
        yield
    finally:
        await client.close()


# Middleware is fixed before startup, so these are read at import.
server_settings = ServerSettings()

app = FastAPI(title="Hotel Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=server_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(HotelBookingError, hotel_booking_error_handler)

app.include_router(auth_router)
app.include_router(rooms_router)
app.include_router(reviews_router)
app.include_router(bookings_router)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=server_settings.port)
