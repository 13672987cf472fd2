from concurrent.futures import ThreadPoolExecutor

import pytest

from streambox.database import create_db_engine
from streambox.config import Settings
from streambox.main import create_repository
from streambox.repositories import InMemoryCatalogRepository, SqlCatalogRepository

from conftest import video_fields


@pytest.fixture(params=["memory", "sql"])
def repository(request):
    if request.param == "sql":
        return SqlCatalogRepository(create_db_engine("sqlite://"))
    return InMemoryCatalogRepository()


def test_sequences_are_independent_and_monotonic(repository):
    assert [repository.next_id("videos") for _ in range(3)] == [1, 2, 3]
    assert repository.next_id("categories") == 1
    assert repository.next_id("videos") == 4


def test_reset_restarts_sequences(repository):
    repository.next_id("videos")
    repository.next_id("videos")

    repository.reset()

    assert repository.next_id("videos") == 1


def test_unlike_never_goes_below_zero(catalog):
    video = catalog.create_video(video_fields(2), uploaded_by="admin")
    viewer = catalog.find_user("viewer")

    assert catalog.repository.set_like(viewer.id, video.id, False) is False
    assert catalog.find_video(video.id).likes == 0


def test_liked_ids_are_tracked_per_user(catalog):
    first = catalog.create_video(video_fields(2), uploaded_by="admin")
    second = catalog.create_video(video_fields(2), uploaded_by="admin")

    catalog.set_liked("viewer", second.id, True)
    catalog.set_liked("viewer", first.id, True)

    assert sorted(catalog.liked_video_ids("viewer")) == [first.id, second.id]
    assert catalog.liked_video_ids("admin") == []


def test_concurrent_views_are_all_counted(memory_store):
    memory_store.create_category({"name": "Music", "icon": "music", "slug": "music"})
    video = memory_store.create_video(video_fields(1), uploaded_by="admin")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: memory_store.record_view(video.id), range(200)))

    assert memory_store.find_video(video.id).views == 200


def test_concurrent_duplicate_likes_count_once(memory_store):
    memory_store.create_category({"name": "Music", "icon": "music", "slug": "music"})
    memory_store.create_user({"username": "fan", "password": "pw"})
    video = memory_store.create_video(video_fields(1), uploaded_by="admin")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(lambda _: memory_store.set_liked("fan", video.id, True), range(50))
        )

    assert all(results)
    assert memory_store.find_video(video.id).likes == 1


def test_backend_selection():
    assert isinstance(
        create_repository(Settings(catalog_backend="memory")), InMemoryCatalogRepository
    )
    assert isinstance(
        create_repository(Settings(catalog_backend="sql", database_url="sqlite://")),
        SqlCatalogRepository,
    )
    with pytest.raises(ValueError):
        create_repository(Settings(catalog_backend="redis"))


def test_concurrent_registration_and_lookup(memory_store):
    def register(n):
        memory_store.create_user({"username": f"user{n}", "password": "pw"})
        memory_store.create_category(
            {"name": f"Channel {n}", "icon": "tv", "slug": f"channel-{n}"}
        )
        return (
            memory_store.find_user(f"user{n}") is not None
            and memory_store.find_category_by_slug(f"channel-{n}") is not None
        )

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(register, range(100)))

    assert all(results)
    assert len(memory_store.list_categories()) == 100
