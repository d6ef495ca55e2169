import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_product_repo, get_user_repo
from app.core.config import Settings
from app.db.models import User, UserRole
from app.main import app
from tests.fakes import FakeProductRepo, FakeUserRepo, make_user


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def product_repo() -> FakeProductRepo:
    return FakeProductRepo()


@pytest.fixture
def admin() -> User:
    return make_user("admin-1", role=UserRole.ADMIN, name="Admin User")


@pytest.fixture
def shopper() -> User:
    return make_user("user-1", name="Jane Doe")


@pytest.fixture
def user_repo(admin, shopper) -> FakeUserRepo:
    return FakeUserRepo([admin, shopper])


@pytest.fixture
def client(product_repo, user_repo):
    app.dependency_overrides[get_product_repo] = lambda: product_repo
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
