from fastapi import APIRouter, Query

from app.dependencies import RoomServiceDep

router = APIRouter()


@router.get("/rooms")
async def list_rooms(
    service: RoomServiceDep,
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
) -> list[dict]:
    return await service.list_rooms(min_price=min_price, max_price=max_price)


@router.get("/rooms/{room_id}")
async def get_room(room_id: str, service: RoomServiceDep) -> dict | None:
    # Unknown ids answer 200 with a null body; existing clients rely on it.
    return await service.get_room(room_id)


@router.get("/featured-rooms")
async def featured_rooms(service: RoomServiceDep) -> list[dict]:
    return await service.featured_rooms()


@router.get("/hotel-locations")
async def hotel_locations(service: RoomServiceDep) -> list[dict]:
    return await service.locations()
