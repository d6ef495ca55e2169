"""ProductRepo against an in-memory Motor lookalike, covering the real query shapes."""

import pytest
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient

from app.repositories.product_repo import ProductRepo
from app.services.product_svc import keyword_filter
from tests.fakes import make_product

pytestmark = pytest.mark.anyio


@pytest.fixture
def repo():
    return ProductRepo(AsyncMongoMockClient()["storefront_test"])


async def test_insert_assigns_object_id(repo):
    product = await repo.insert(make_product("Desk Lamp"))

    assert ObjectId.is_valid(product.id)
    loaded = await repo.get(product.id)
    assert loaded.name == "Desk Lamp"
    assert loaded.version == 0


async def test_get_missing_returns_none(repo):
    assert await repo.get(str(ObjectId())) is None


async def test_save_bumps_version_and_updated_at(repo):
    product = await repo.insert(make_product("Desk Lamp"))
    before = product.updated_at
    product.name = "Floor Lamp"

    assert await repo.save(product)

    assert product.version == 1
    assert product.updated_at >= before
    raw = await repo.col.find_one({"_id": ObjectId(product.id)})
    assert raw["version"] == 1
    assert raw["name"] == "Floor Lamp"
    assert "id" not in raw


async def test_stale_save_is_rejected(repo):
    product = await repo.insert(make_product("Desk Lamp"))
    first = await repo.get(product.id)
    second = await repo.get(product.id)
    first.name = "First"
    assert await repo.save(first)

    second.name = "Second"
    assert not await repo.save(second)

    assert (await repo.get(product.id)).name == "First"
    assert second.version == 0


async def test_document_without_version_field_can_be_saved(repo):
    doc = make_product("Legacy").model_dump(exclude={"id", "version"})
    result = await repo.col.insert_one(doc)
    product = await repo.get(str(result.inserted_id))
    assert product.version == 0

    product.price = 42
    assert await repo.save(product)

    raw = await repo.col.find_one({"_id": result.inserted_id})
    assert raw["version"] == 1
    assert raw["price"] == 42


async def test_find_page_and_count_with_keyword(repo):
    for name in ["Running Shoe", "Hat", "snowshoe", "SHOEHORN", "C++ Primer"]:
        await repo.insert(make_product(name))

    query = keyword_filter("shoe")
    assert await repo.count(query) == 3
    page = await repo.find_page(query, skip=1, limit=1)
    assert [p.name for p in page] == ["snowshoe"]

    assert [p.name for p in await repo.find_page(keyword_filter("C++"), 0, 10)] == ["C++ Primer"]


async def test_find_top_rated(repo):
    for rating in [2.0, 4.5, 1.0, 3.0]:
        await repo.insert(make_product(f"P{rating}", rating=rating))

    top = await repo.find_top_rated(3)

    assert [p.rating for p in top] == [4.5, 3.0, 2.0]


async def test_delete(repo):
    product = await repo.insert(make_product("Gone"))

    assert await repo.delete(product.id)
    assert not await repo.delete(product.id)
    assert await repo.get(product.id) is None
