import logging
from typing import Any

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.exceptions.custom import StorageError
from app.mappers.documents import parse_object_id, to_json

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


def build_price_filter(min_price: float | None, max_price: float | None) -> dict[str, Any]:
    """Inclusive price range; a missing bound leaves that side open."""
    price: dict[str, float] = {}
    if min_price is not None:
        price["$gte"] = min_price
    if max_price is not None:
        price["$lte"] = max_price
    return {"price": price} if price else {}


class RoomCatalogService:
    def __init__(self, rooms: AsyncCollection):
        self._rooms = rooms

    async def list_rooms(
        self, min_price: float | None = None, max_price: float | None = None,
    ) -> list[dict]:
        query = build_price_filter(min_price, max_price)
        try:
            rooms = await self._rooms.find(query).to_list(length=None)
        except PyMongoError as exc:
            logger.exception("Failed to list rooms (filter=%s)", query)
            raise StorageError("Error fetching rooms") from exc
        return to_json(rooms)

    async def get_room(self, room_id: str) -> dict | None:
        """Return the room or None when no room has this id."""
        oid = parse_object_id(room_id)
        try:
            room = await self._rooms.find_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to fetch room %s", room_id)
            raise StorageError("Error fetching room") from exc
        return to_json(room)

    async def featured_rooms(self, limit: int = FEATURED_LIMIT) -> list[dict]:
        try:
            cursor = self._rooms.find().sort("rating", -1).limit(limit)
            rooms = await cursor.to_list(length=limit)
        except PyMongoError as exc:
            logger.exception("Failed to fetch featured rooms")
            raise StorageError("Error fetching featured rooms") from exc
        return to_json(rooms)

    async def locations(self) -> list[dict]:
        try:
            cursor = self._rooms.find({}, {"location": 1, "_id": 0})
            locations = await cursor.to_list(length=None)
        except PyMongoError as exc:
            logger.exception("Failed to fetch hotel locations")
            raise StorageError("Error fetching hotel locations") from exc
        return to_json(locations)
