import logging
from datetime import datetime, timezone
from typing import Any, Callable

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.exceptions.custom import NotFoundError, StorageError
from app.mappers.dates import to_iso
from app.mappers.documents import parse_object_id, to_json

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10


class ReviewService:
    def __init__(
        self,
        rooms: AsyncCollection,
        clock: Callable[[], datetime] | None = None,
    ):
        self._rooms = rooms
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def add_review(self, room_id: str, review: dict[str, Any]) -> dict[str, Any]:
        """Append a review to the room, stamped with the server time. Returns the stored review."""
        oid = parse_object_id(room_id)
        stored = {**review, "timestamp": to_iso(self._clock())}
        try:
            result = await self._rooms.update_one({"_id": oid}, {"$push": {"reviews": stored}})
        except PyMongoError as exc:
            logger.exception("Failed to add review to room %s", room_id)
            raise StorageError("Error adding review") from exc

        if result.modified_count == 0:
            raise NotFoundError("Room not found")

        logger.info("Review added to room %s", room_id)
        return stored

    async def recent_reviews(self, limit: int = RECENT_LIMIT) -> list[dict]:
        """Newest reviews across all rooms, most recent first."""
        pipeline = [
            {"$unwind": "$reviews"},
            {"$match": {"reviews": {"$type": "object"}}},
            {"$project": {"_id": 0, "review": "$reviews"}},
            {"$sort": {"review.timestamp": -1}},
            {"$limit": limit},
        ]
        try:
            cursor = await self._rooms.aggregate(pipeline)
            rows = await cursor.to_list(length=None)
        except PyMongoError as exc:
            logger.exception("Failed to aggregate recent reviews")
            raise StorageError("Error fetching reviews") from exc

        reviews = [row["review"] for row in rows if isinstance(row.get("review"), dict)]
        for review in reviews:
            review.pop("_id", None)
        return to_json(reviews)
