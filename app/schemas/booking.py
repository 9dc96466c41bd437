from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BookingRequest(BaseModel):
    """Booking payload as sent by the client. Extra booking details are stored verbatim."""

    model_config = ConfigDict(extra="allow")

    roomId: str
    userEmail: str
    date: datetime


class BookingDateUpdate(BaseModel):
    date: datetime
