import logging
from typing import List

from app.core.config import Settings
from app.core.errors import NotFoundError, ValidationConflictError
from app.db.models import Product, Review
from app.repositories.product_repo import ProductRepo
from app.schemas.product import Message
from app.services.product_svc import PRODUCT_NOT_FOUND, save_with_retry

logger = logging.getLogger(__name__)


class ReviewService:
    """Embedded product reviews with the derived ``rating``/``num_reviews`` kept in step."""

    def __init__(self, repo: ProductRepo, settings: Settings):
        self.repo = repo
        self.settings = settings

    async def add_review(
        self,
        product_id: str,
        user_id: str,
        user_name: str,
        rating: float,
        comment: str,
    ) -> Message:
        def append(product: Product) -> None:
            # re-checked on every attempt, a concurrent save may carry this user's review
            if product.has_review_from(user_id):
                raise ValidationConflictError("Product already reviewed")
            product.add_review(
                Review(user=user_id, name=user_name, rating=float(rating), comment=comment)
            )

        await save_with_retry(self.repo, product_id, append, self.settings.WRITE_RETRIES)
        logger.info("Review added to product %s by %s", product_id, user_id)
        return Message(message="Review added")

    async def list_reviews(self, product_id: str) -> List[Review]:
        product = await self.repo.get(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product.reviews
