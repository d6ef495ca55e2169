from typing import List

from pydantic import BaseModel, Field

from app.db.models import Product


class ProductUpdate(BaseModel):
    """Full replacement of the editable product fields."""

    name: str
    price: float = Field(..., ge=0)
    description: str
    image: str
    brand: str
    category: str
    count_in_stock: int = Field(..., ge=0)


class ProductPage(BaseModel):
    items: List[Product]
    page: int
    pages: int


class Message(BaseModel):
    message: str
