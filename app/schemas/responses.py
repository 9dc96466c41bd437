from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True


class InsertResponse(BaseModel):
    acknowledged: bool
    insertedId: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
