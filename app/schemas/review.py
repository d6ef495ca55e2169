from datetime import datetime

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    rating: float = Field(..., ge=1, le=5)
    comment: str = ""


class ReviewOut(BaseModel):
    user: str
    name: str
    rating: float
    comment: str
    created_at: datetime
