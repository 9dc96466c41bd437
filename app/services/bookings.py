"""Booking lifecycle: create, cancel, reschedule and list bookings.

Each booking write is paired with a write to the referenced room's
``availability`` flag. The two writes are issued one after the other with no
transaction around them: a fault between them leaves the flag stale, and
concurrent requests on the same room may interleave. Nothing here prevents a
room from being booked twice.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.exceptions.custom import (
    BookingFailedError,
    CancellationWindowClosedError,
    NotFoundError,
    StorageError,
)
from app.mappers.dates import parse_datetime, to_iso
from app.mappers.documents import parse_object_id, to_json

logger = logging.getLogger(__name__)

CANCELLATION_NOTICE = timedelta(days=1)


def cancellation_cutoff(booking_date: datetime) -> datetime:
    return booking_date - CANCELLATION_NOTICE


def can_cancel(booking_date: datetime, now: datetime) -> bool:
    """True while ``now`` is strictly before the day-before instant."""
    return now < cancellation_cutoff(booking_date)


class BookingService:
    def __init__(
        self,
        bookings: AsyncCollection,
        rooms: AsyncCollection,
        clock: Callable[[], datetime] | None = None,
    ):
        self._bookings = bookings
        self._rooms = rooms
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def _set_availability(self, room_id: Any, available: bool) -> int:
        """Flip the room's availability flag. Returns the number of rooms matched."""
        if not (isinstance(room_id, ObjectId) or ObjectId.is_valid(room_id)):
            logger.warning("Booking references malformed room id %r; availability unchanged", room_id)
            return 0
        result = await self._rooms.update_one(
            {"_id": ObjectId(room_id)},
            {"$set": {"availability": available}},
        )
        if result.matched_count == 0:
            logger.warning("Room %s not found; availability unchanged", room_id)
        return result.matched_count

    async def create_booking(self, booking: dict[str, Any]) -> dict[str, Any]:
        document = dict(booking)
        if isinstance(document.get("date"), datetime):
            document["date"] = to_iso(document["date"])
        try:
            result = await self._bookings.insert_one(document)
        except PyMongoError as exc:
            logger.exception("Failed to insert booking for room %s", document.get("roomId"))
            raise BookingFailedError() from exc

        if not result.inserted_id:
            raise BookingFailedError()

        try:
            await self._set_availability(document.get("roomId"), False)
        except PyMongoError as exc:
            logger.exception(
                "Booking %s stored but room %s could not be marked unavailable",
                result.inserted_id, document.get("roomId"),
            )
            raise StorageError("Error updating room availability") from exc

        logger.info("Booking %s created for room %s", result.inserted_id, document.get("roomId"))
        return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}

    async def cancel_booking(self, booking_id: str) -> None:
        oid = parse_object_id(booking_id)
        try:
            booking = await self._bookings.find_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to load booking %s", booking_id)
            raise StorageError("Error cancelling booking") from exc

        if booking is None:
            raise NotFoundError("Booking not found")

        try:
            booking_date = parse_datetime(booking.get("date"))
        except ValueError as exc:
            logger.error("Booking %s has an unreadable date %r", booking_id, booking.get("date"))
            raise StorageError("Error cancelling booking") from exc

        if not can_cancel(booking_date, self._clock()):
            raise CancellationWindowClosedError()

        try:
            result = await self._bookings.delete_one({"_id": oid})
            if result.deleted_count == 0:
                raise NotFoundError("Booking not found")
            await self._set_availability(booking.get("roomId"), True)
        except PyMongoError as exc:
            logger.exception("Failed to cancel booking %s", booking_id)
            raise StorageError("Error cancelling booking") from exc

        logger.info("Booking %s cancelled, room %s released", booking_id, booking.get("roomId"))

    async def update_booking_date(self, booking_id: str, new_date: datetime) -> None:
        oid = parse_object_id(booking_id)
        try:
            result = await self._bookings.update_one(
                {"_id": oid}, {"$set": {"date": to_iso(new_date)}},
            )
        except PyMongoError as exc:
            logger.exception("Failed to update date of booking %s", booking_id)
            raise StorageError("Error updating booking") from exc

        if result.matched_count == 0:
            raise NotFoundError("Booking not found")

        logger.info("Booking %s moved to %s", booking_id, to_iso(new_date))

    async def list_bookings_for(self, email: str) -> list[dict]:
        try:
            bookings = await self._bookings.find({"userEmail": email}).to_list(length=None)
        except PyMongoError as exc:
            logger.exception("Failed to fetch bookings for %s", email)
            raise StorageError("Error fetching bookings.") from exc
        return to_json(bookings)
