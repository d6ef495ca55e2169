import logging
import math
import re
from typing import Callable, List, Optional, Union

from app.core.config import Settings
from app.core.errors import NotFoundError, WriteConflictError
from app.db.models import Product
from app.repositories.product_repo import ProductRepo
from app.schemas.product import Message, ProductPage, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


def coerce_page(value: Union[str, int, float, None]) -> int:
    """Turn a raw ``pageNumber`` into a page >= 1; anything unusable means 1."""
    try:
        page = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return page if page >= 1 else 1


def keyword_filter(keyword: Optional[str]) -> dict:
    """Case-insensitive substring match on ``name``; the keyword is matched literally."""
    if not keyword:
        return {}
    return {"name": {"$regex": re.escape(keyword), "$options": "i"}}


async def save_with_retry(
    repo: ProductRepo,
    product_id: str,
    mutate: Callable[[Product], None],
    retries: int,
) -> Product:
    """
    Read the product, apply ``mutate`` and save it with a version check.
    A lost race re-reads and re-applies, up to ``retries`` attempts in total.
    ``mutate`` may raise to abort; nothing is written in that case.
    """
    for attempt in range(1, retries + 1):
        product = await repo.get(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        mutate(product)
        if await repo.save(product):
            return product
        logger.warning(
            "Version conflict saving product %s (attempt %d/%d)",
            product_id, attempt, retries,
        )
    raise WriteConflictError("Product was modified concurrently, please retry")


class ProductService:
    def __init__(self, repo: ProductRepo, settings: Settings):
        self.repo = repo
        self.settings = settings

    async def list_products(self, keyword: Optional[str] = None, page=1) -> ProductPage:
        page = coerce_page(page)
        page_size = self.settings.PAGE_SIZE
        query = keyword_filter(keyword)

        count = await self.repo.count(query)
        skip = page_size * (page - 1)
        # past the last match; also keeps absurd page numbers out of the query
        products = [] if skip >= count else await self.repo.find_page(query, skip=skip, limit=page_size)
        return ProductPage(items=products, page=page, pages=math.ceil(count / page_size))

    async def get_product_by_id(self, product_id: str) -> Product:
        product = await self.repo.get(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    async def get_top_products(self) -> List[Product]:
        return await self.repo.find_top_rated(self.settings.TOP_PRODUCTS_LIMIT)

    async def create_product(self, owner_id: str) -> Product:
        product = Product(
            name="Sample Name",
            price=0,
            user=owner_id,
            image="/images/sample.jpg",
            brand="Sample brand",
            category="Sample category",
            count_in_stock=0,
            num_reviews=0,
            description="Sample description",
        )
        product = await self.repo.insert(product)
        logger.info("Product %s created by %s", product.id, owner_id)
        return product

    async def update_product(self, product_id: str, fields: ProductUpdate) -> Product:
        def overwrite(product: Product) -> None:
            for name, value in fields.model_dump().items():
                setattr(product, name, value)

        product = await save_with_retry(
            self.repo, product_id, overwrite, self.settings.WRITE_RETRIES
        )
        logger.info("Product %s updated", product_id)
        return product

    async def delete_product(self, product_id: str) -> Message:
        await self.get_product_by_id(product_id)
        await self.repo.delete(product_id)
        logger.info("Product %s removed", product_id)
        return Message(message="Product removed")
