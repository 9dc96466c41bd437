from typing import Any

from bson import ObjectId

from app.exceptions.custom import InvalidIdError


def parse_object_id(value: str) -> ObjectId:
    """Convert a path/body identifier to an ObjectId or raise InvalidIdError."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdError()
    return ObjectId(value)


def to_json(value: Any) -> Any:
    """Recursively replace ObjectIds with their hex string so the result is JSON-safe."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value
