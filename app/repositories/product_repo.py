from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.models import Product, utcnow


class ProductRepo:
    """
    Product repository backed by the 'products' collection.

    Reviews are embedded in the product document, so every write goes through
    ``save``, which replaces the whole document only if its ``version`` still
    matches the one that was read.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    @staticmethod
    def _to_model(doc: dict) -> Product:
        doc["_id"] = str(doc["_id"])
        return Product.model_validate(doc)

    async def count(self, query: dict) -> int:
        return await self.col.count_documents(query)

    async def find_page(self, query: dict, skip: int, limit: int) -> List[Product]:
        cursor = self.col.find(query).skip(skip).limit(limit)
        return [self._to_model(doc) async for doc in cursor]

    async def find_top_rated(self, limit: int) -> List[Product]:
        cursor = self.col.find({}).sort("rating", -1).limit(limit)
        return [self._to_model(doc) async for doc in cursor]

    async def get(self, product_id: str) -> Optional[Product]:
        doc = await self.col.find_one({"_id": ObjectId(product_id)})
        return self._to_model(doc) if doc else None

    async def insert(self, product: Product) -> Product:
        doc = product.model_dump(exclude={"id"})
        result = await self.col.insert_one(doc)
        product.id = str(result.inserted_id)
        return product

    async def save(self, product: Product) -> bool:
        """
        Replace the stored document if nobody saved it since it was read.
        Returns False on a version mismatch; the caller decides whether to retry.
        """
        expected = product.version
        doc = product.model_dump(exclude={"id"})
        doc["version"] = expected + 1
        doc["updated_at"] = utcnow()

        query = {"_id": ObjectId(product.id), "version": expected}
        if expected == 0:
            # documents written before versioning carry no field at all
            query = {
                "_id": ObjectId(product.id),
                "$or": [{"version": 0}, {"version": {"$exists": False}}],
            }

        result = await self.col.replace_one(query, doc)
        if result.matched_count == 0:
            return False
        product.version = doc["version"]
        product.updated_at = doc["updated_at"]
        return True

    async def delete(self, product_id: str) -> bool:
        result = await self.col.delete_one({"_id": ObjectId(product_id)})
        return result.deleted_count == 1
