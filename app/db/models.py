from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    id: str = Field(alias="_id")
    email: EmailStr
    hashed_password: str
    full_name: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(populate_by_name=True)


class Review(BaseModel):
    user: str
    name: str
    rating: float
    comment: str = ""
    created_at: datetime = Field(default_factory=utcnow)


class Product(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    user: str
    name: str
    image: str
    brand: str
    category: str
    description: str
    price: float = Field(0, ge=0)
    count_in_stock: int = Field(0, ge=0)
    rating: float = 0
    num_reviews: int = 0
    reviews: List[Review] = []
    version: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(populate_by_name=True)

    def has_review_from(self, user_id: str) -> bool:
        return any(r.user == user_id for r in self.reviews)

    def add_review(self, review: Review) -> None:
        """Append a review and recompute the derived counters from scratch."""
        self.reviews.append(review)
        self.num_reviews = len(self.reviews)
        self.rating = sum(r.rating for r in self.reviews) / len(self.reviews)
