from pymongo import AsyncMongoClient
from pymongo.server_api import ServerApi

from app.config import Settings

ROOMS = "rooms"
BOOKINGS = "bookings"


def create_client(settings: Settings) -> AsyncMongoClient:
    """Build the shared client. No connection is opened until the first operation."""
    return AsyncMongoClient(
        settings.database_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )
