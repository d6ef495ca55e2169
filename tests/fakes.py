"""In-memory fake repositories for testing.

These expose the same async methods as the Motor repositories but keep
everything in a dict. Stored models are copied on the way in and out, so a
caller only changes the store through ``save``.
"""

import re
from typing import Awaitable, Callable, Dict, List, Optional

from app.core.security import get_password_hash
from app.db.models import Product, User, UserRole


def _matches(product: Product, query: dict) -> bool:
    for field, cond in query.items():
        value = getattr(product, field)
        if isinstance(cond, dict) and "$regex" in cond:
            flags = re.IGNORECASE if "i" in cond.get("$options", "") else 0
            if not re.search(cond["$regex"], value, flags):
                return False
        elif value != cond:
            return False
    return True


class FakeProductRepo:

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._store: Dict[str, Product] = {}
        self._next_id = 1
        # run (once each) just before a save checks the version, to stage a concurrent writer
        self.before_save: List[Callable[[], Awaitable[None]]] = []
        self.save_calls = 0
        for p in products or []:
            self._put_new(p)

    def _put_new(self, product: Product) -> Product:
        product.id = f"{self._next_id:024x}"
        self._next_id += 1
        self._store[product.id] = product.model_copy(deep=True)
        return product

    def stored(self, product_id: str) -> Product:
        return self._store[product_id]

    async def count(self, query: dict) -> int:
        return sum(1 for p in self._store.values() if _matches(p, query))

    async def find_page(self, query: dict, skip: int, limit: int) -> List[Product]:
        if skip > 2 ** 63 - 1:
            raise OverflowError("MongoDB can only handle up to 8-byte ints")
        hits = [p for p in self._store.values() if _matches(p, query)]
        return [p.model_copy(deep=True) for p in hits[skip:skip + limit]]

    async def find_top_rated(self, limit: int) -> List[Product]:
        ranked = sorted(self._store.values(), key=lambda p: p.rating, reverse=True)
        return [p.model_copy(deep=True) for p in ranked[:limit]]

    async def get(self, product_id: str) -> Optional[Product]:
        product = self._store.get(product_id)
        return product.model_copy(deep=True) if product else None

    async def insert(self, product: Product) -> Product:
        return self._put_new(product)

    async def save(self, product: Product) -> bool:
        self.save_calls += 1
        if self.before_save:
            await self.before_save.pop(0)()
        current = self._store.get(product.id)
        if current is None or current.version != product.version:
            return False
        product.version += 1
        self._store[product.id] = product.model_copy(deep=True)
        return True

    async def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeUserRepo:

    def __init__(self, users: Optional[List[User]] = None) -> None:
        self._store: Dict[str, User] = {}
        for u in users or []:
            self._store[u.id] = u

    async def get(self, user_id: str) -> Optional[User]:
        return self._store.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        for u in self._store.values():
            if u.email == email:
                return u
        return None

    async def insert(self, user: User) -> User:
        self._store[user.id] = user
        return user


def make_product(name: str = "Widget", rating: float = 0, **overrides) -> Product:
    fields = dict(
        user="owner-1",
        name=name,
        image="/images/sample.jpg",
        brand="Acme",
        category="Gadgets",
        description="A product",
        price=10,
        count_in_stock=5,
        rating=rating,
    )
    fields.update(overrides)
    return Product(**fields)


def make_user(user_id: str, role: UserRole = UserRole.USER, name: str = "Jane Doe") -> User:
    return User(
        _id=user_id,
        email=f"{user_id}@example.com",
        full_name=name,
        hashed_password=get_password_hash("secret123"),
        role=role,
    )
