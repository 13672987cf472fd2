import pytest
from fastapi.testclient import TestClient

from streambox.database import create_db_engine
from streambox.main import create_app
from streambox.repositories import InMemoryCatalogRepository, SqlCatalogRepository
from streambox.services.catalog_service import CatalogStore

ADMIN = {"x-username": "admin"}
VIEWER = {"x-username": "viewer"}


def video_fields(category_id, **overrides):
    """Valid creation payload; override any field per test."""
    fields = {
        "title": "Ramen from scratch",
        "description": "Broth, noodles and toppings in one evening.",
        "thumbnail_url": "https://cdn.example.com/thumbs/ramen.jpg",
        "video_url": "https://cdn.example.com/videos/ramen.mp4",
        "duration": 1260,
        "category_id": category_id,
        "tags": ["Ramen", "noodles"],
    }
    fields.update(overrides)
    return fields


def _build_repository(backend):
    if backend == "sql":
        return SqlCatalogRepository(create_db_engine("sqlite://"))
    return InMemoryCatalogRepository()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Empty catalog store on each backend."""
    catalog = CatalogStore(_build_repository(request.param))
    yield catalog
    catalog.reset()


@pytest.fixture
def memory_store():
    catalog = CatalogStore(InMemoryCatalogRepository())
    yield catalog
    catalog.reset()


@pytest.fixture
def catalog(store):
    """Store with categories, an admin and a regular viewer."""
    store.create_category({"name": "Trending", "icon": "fire", "slug": "trending"})
    store.create_category({"name": "Cooking", "icon": "utensils", "slug": "cooking"})
    store.create_category({"name": "Gaming", "icon": "gamepad", "slug": "gaming"})
    store.create_user({"username": "admin", "password": "secret", "is_admin": True})
    store.create_user({"username": "viewer", "password": "hunter2"})
    return store


@pytest.fixture
def client(catalog):
    app = create_app(store=catalog)
    with TestClient(app) as test_client:
        yield test_client
