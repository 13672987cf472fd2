from datetime import timedelta

import pytest

from streambox.exceptions import AuthorizationError, ValidationError
from streambox.schemas.video import VideoCreate

from conftest import video_fields


def cooking_id(store):
    return store.find_category_by_slug("cooking").id


def gaming_id(store):
    return store.find_category_by_slug("gaming").id


def test_create_video_assigns_defaults(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), uploaded_by="admin")

    assert video.id == 1
    assert video.views == 0
    assert video.likes == 0
    assert video.uploaded_at is not None
    assert video.uploaded_by == "admin"
    assert video.is_popular is False
    assert video.is_featured is False
    assert video.type == "movie"
    assert video.tags == ["Ramen", "noodles"]


def test_create_video_accepts_validated_schema(catalog):
    payload = VideoCreate(**video_fields(cooking_id(catalog), type="tutorial"))

    video = catalog.create_video(payload, uploaded_by="admin")

    assert video.type == "tutorial"
    assert catalog.find_video(video.id).title == "Ramen from scratch"


def test_upload_time_is_read_back_in_utc(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), uploaded_by="admin")

    stored = catalog.find_video(video.id)

    assert stored.uploaded_at.tzinfo is not None
    assert stored.uploaded_at.utcoffset() == timedelta(0)
    assert stored.uploaded_at == video.uploaded_at
    assert catalog.list_videos()[0].uploaded_at == video.uploaded_at
    assert catalog.record_view(video.id).uploaded_at == video.uploaded_at


def test_create_video_rejects_unknown_category(catalog):
    with pytest.raises(ValidationError) as exc_info:
        catalog.create_video(video_fields(999), uploaded_by="admin")

    assert exc_info.value.errors[0]["loc"] == ["category_id"]
    assert catalog.list_videos() == []


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"title": "   "}, "title"),
        ({"description": ""}, "description"),
        ({"video_url": "not-a-url"}, "video_url"),
        ({"thumbnail_url": "/relative/path.jpg"}, "thumbnail_url"),
        ({"duration": -1}, "duration"),
    ],
)
def test_create_video_rejects_schema_violations(catalog, overrides, field):
    with pytest.raises(ValidationError) as exc_info:
        catalog.create_video(video_fields(cooking_id(catalog), **overrides), "admin")

    assert [error["loc"] for error in exc_info.value.errors] == [[field]]


def test_create_video_rejects_missing_field(catalog):
    fields = video_fields(cooking_id(catalog))
    del fields["title"]

    with pytest.raises(ValidationError):
        catalog.create_video(fields, uploaded_by="admin")


def test_ids_are_not_reused_after_delete(catalog):
    first = catalog.create_video(video_fields(cooking_id(catalog)), "admin")
    second = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert catalog.delete_video(second.id) is True
    third = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_delete_twice_returns_true_then_false(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert catalog.delete_video(video.id) is True
    assert catalog.delete_video(video.id) is False
    assert catalog.find_video(video.id) is None


def test_lookups_for_unknown_ids_return_nothing(catalog):
    assert catalog.find_video(42) is None
    assert catalog.record_view(42) is None
    assert catalog.set_featured(42, True) is None
    assert catalog.find_category_by_id(42) is None
    assert catalog.find_category_by_slug("nope") is None
    assert catalog.list_videos_by_category(42) == []


def test_list_videos_keeps_insertion_order(catalog):
    titles = ["First", "Second", "Third"]
    for title in titles:
        catalog.create_video(video_fields(cooking_id(catalog), title=title), "admin")

    assert [video.title for video in catalog.list_videos()] == titles


def test_filter_by_category_and_type(catalog):
    cooking, gaming = cooking_id(catalog), gaming_id(catalog)
    catalog.create_video(video_fields(cooking, title="Soup"), "admin")
    catalog.create_video(video_fields(gaming, title="Speedrun", type="series"), "admin")
    catalog.create_video(video_fields(gaming, title="Let's play"), "admin")

    assert [v.title for v in catalog.list_videos_by_category(gaming)] == [
        "Speedrun",
        "Let's play",
    ]
    assert [v.title for v in catalog.list_videos_by_type("series")] == ["Speedrun"]
    assert [v.title for v in catalog.list_videos_by_type("movie")] == [
        "Soup",
        "Let's play",
    ]
    assert catalog.list_videos_by_type("Movie") == []


def test_trending_slug_lists_everything(catalog):
    catalog.create_video(video_fields(cooking_id(catalog)), "admin")
    catalog.create_video(video_fields(gaming_id(catalog)), "admin")

    assert len(catalog.list_videos_by_slug("trending")) == 2
    assert len(catalog.list_videos_by_slug("gaming")) == 1
    assert catalog.list_videos_by_slug("unknown") is None


def test_browse_groups_by_first_appearance(catalog):
    gaming, cooking = gaming_id(catalog), cooking_id(catalog)
    catalog.create_video(video_fields(gaming, title="G1"), "admin")
    catalog.create_video(video_fields(cooking, title="C1"), "admin")
    catalog.create_video(video_fields(gaming, title="G2"), "admin")

    rows = catalog.browse_by_category()

    assert [(c.slug, [v.title for v in videos]) for c, videos in rows] == [
        ("gaming", ["G1", "G2"]),
        ("cooking", ["C1"]),
    ]


def test_search_is_case_insensitive(catalog):
    catalog.create_video(
        video_fields(cooking_id(catalog), title="Noodle night", description="Soup"),
        "admin",
    )

    upper = catalog.search_videos("RAMEN")
    lower = catalog.search_videos("ramen")

    assert [v.id for v in upper] == [v.id for v in lower] == [1]


@pytest.mark.parametrize(
    "overrides, term",
    [
        ({"title": "Weeknight Curry"}, "curry"),
        ({"description": "A guide to sourdough starters"}, "SOURDOUGH"),
        ({"tags": ["Street Food", "Bangkok"]}, "bangk"),
    ],
)
def test_search_matches_each_field(catalog, overrides, term):
    base = {"title": "Untitled", "description": "Nothing here", "tags": []}
    base.update(overrides)
    catalog.create_video(video_fields(cooking_id(catalog), **base), "admin")
    other = {"title": "Other", "description": "Other", "tags": ["other"]}
    catalog.create_video(video_fields(cooking_id(catalog), **other), "admin")

    assert [v.id for v in catalog.search_videos(term)] == [1]


@pytest.mark.parametrize("term", ["", "   ", None])
def test_search_rejects_blank_terms(catalog, term):
    with pytest.raises(ValidationError):
        catalog.search_videos(term)


def test_record_view_counts_every_call(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    for _ in range(3):
        updated = catalog.record_view(video.id)

    assert updated.views == 3
    assert catalog.find_video(video.id).views == 3


def test_like_is_idempotent_and_unlike_restores(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert catalog.set_liked("viewer", video.id, True) is True
    assert catalog.set_liked("viewer", video.id, True) is True
    assert catalog.find_video(video.id).likes == 1
    assert catalog.liked_video_ids("viewer") == [video.id]

    assert catalog.set_liked("viewer", video.id, False) is True
    assert catalog.set_liked("viewer", video.id, False) is True
    assert catalog.find_video(video.id).likes == 0
    assert catalog.liked_video_ids("viewer") == []


def test_likes_from_different_users_accumulate(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    catalog.set_liked("viewer", video.id, True)
    catalog.set_liked("admin", video.id, True)
    catalog.set_liked("viewer", video.id, False)

    assert catalog.find_video(video.id).likes == 1
    assert catalog.liked_video_ids("admin") == [video.id]


def test_like_with_unknown_user_or_video(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert catalog.set_liked("ghost", video.id, True) is False
    assert catalog.set_liked("viewer", 999, True) is False
    assert catalog.find_video(video.id).likes == 0
    assert catalog.liked_video_ids("ghost") is None


def test_deleting_video_drops_its_likes(catalog):
    kept = catalog.create_video(video_fields(cooking_id(catalog)), "admin")
    gone = catalog.create_video(video_fields(cooking_id(catalog)), "admin")
    catalog.set_liked("viewer", kept.id, True)
    catalog.set_liked("viewer", gone.id, True)

    catalog.delete_video(gone.id)

    assert catalog.liked_video_ids("viewer") == [kept.id]


def test_set_featured(catalog):
    video = catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    assert catalog.set_featured(video.id, True).is_featured is True
    assert [v.id for v in catalog.list_featured_videos()] == [video.id]
    assert catalog.set_featured(video.id, False).is_featured is False
    assert catalog.list_featured_videos() == []


def test_category_slug_must_be_unique(catalog):
    with pytest.raises(ValidationError):
        catalog.create_category({"name": "Cooking 2", "icon": "pot", "slug": "cooking"})


def test_category_slug_must_be_url_safe(catalog):
    with pytest.raises(ValidationError):
        catalog.create_category({"name": "Bad", "icon": "x", "slug": "Not Safe!"})


def test_usernames_are_unique(catalog):
    with pytest.raises(ValidationError):
        catalog.create_user({"username": "viewer", "password": "other"})


def test_authenticate(catalog):
    assert catalog.authenticate("viewer", "hunter2").username == "viewer"
    assert catalog.authenticate("viewer", "wrong") is None
    assert catalog.authenticate("ghost", "hunter2") is None


def test_require_admin(catalog):
    assert catalog.require_admin("admin").is_admin is True

    with pytest.raises(AuthorizationError) as missing:
        catalog.require_admin(None)
    with pytest.raises(AuthorizationError) as regular:
        catalog.require_admin("viewer")
    with pytest.raises(AuthorizationError) as unknown:
        catalog.require_admin("ghost")

    assert missing.value.status_code == 401
    assert regular.value.status_code == 403
    assert unknown.value.status_code == 403


def test_reset_clears_catalog_and_counters(catalog):
    catalog.create_video(video_fields(cooking_id(catalog)), "admin")

    catalog.reset()

    assert catalog.list_videos() == []
    assert catalog.list_categories() == []
    category = catalog.create_category({"name": "Music", "icon": "music", "slug": "music"})
    assert category.id == 1
