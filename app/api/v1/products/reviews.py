from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_review_service
from app.core.security import get_current_user
from app.db.models import User
from app.schemas.product import Message
from app.schemas.review import ReviewCreate, ReviewOut
from app.services.review_svc import ReviewService

router = APIRouter(tags=["reviews"], prefix="/products/{product_id}/reviews")


@router.post("", response_model=Message, status_code=status.HTTP_201_CREATED)
async def create_review(
    product_id: str,
    review: ReviewCreate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    return await service.add_review(
        product_id,
        user_id=current_user.id,
        user_name=current_user.full_name,
        rating=review.rating,
        comment=review.comment,
    )


@router.get("", response_model=List[ReviewOut])
async def list_reviews(product_id: str, service: ReviewService = Depends(get_review_service)):
    return await service.list_reviews(product_id)
