from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings, get_settings
from app.db.database import get_db
from app.repositories.product_repo import ProductRepo
from app.repositories.user_repo import UserRepo
from app.services.product_svc import ProductService
from app.services.review_svc import ReviewService


def get_product_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> ProductRepo:
    return ProductRepo(db)


def get_user_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserRepo:
    return UserRepo(db)


def get_product_service(
    repo: ProductRepo = Depends(get_product_repo),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    return ProductService(repo, settings)


def get_review_service(
    repo: ProductRepo = Depends(get_product_repo),
    settings: Settings = Depends(get_settings),
) -> ReviewService:
    return ReviewService(repo, settings)
