from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.models import User


class UserRepo:
    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "users"):
        self.col = db[collection_name]

    async def get(self, user_id: str) -> Optional[User]:
        doc = await self.col.find_one({"_id": user_id})
        return User.model_validate(doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[User]:
        doc = await self.col.find_one({"email": email})
        return User.model_validate(doc) if doc else None

    async def insert(self, user: User) -> User:
        await self.col.insert_one(user.model_dump(by_alias=True))
        return user
