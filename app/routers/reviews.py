from fastapi import APIRouter

from app.dependencies import ReviewServiceDep
from app.schemas.responses import MessageResponse
from app.schemas.review import ReviewRequest

router = APIRouter()


@router.post("/rooms/{room_id}/reviews", response_model=MessageResponse)
async def add_review(
    room_id: str, review: ReviewRequest, service: ReviewServiceDep,
) -> MessageResponse:
    await service.add_review(room_id, review.model_dump())
    return MessageResponse(message="Review added successfully")


@router.get("/reviews")
async def recent_reviews(service: ReviewServiceDep) -> list[dict]:
    return await service.recent_reviews()
