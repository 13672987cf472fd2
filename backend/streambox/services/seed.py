"""Default catalog loaded when the application starts."""

from streambox.config import Settings
from streambox.logger import catalog_logger
from streambox.services.catalog_service import CatalogStore

DEFAULT_CATEGORIES = [
    {"name": "Trending", "icon": "fire", "slug": "trending"},
    {"name": "Movies", "icon": "film", "slug": "movies"},
    {"name": "Music", "icon": "music", "slug": "music"},
    {"name": "Gaming", "icon": "gamepad", "slug": "gaming"},
    {"name": "Education", "icon": "graduation-cap", "slug": "education"},
    {"name": "Cooking", "icon": "utensils", "slug": "cooking"},
    {"name": "Fitness", "icon": "dumbbell", "slug": "fitness"},
    {"name": "Programming", "icon": "code", "slug": "programming"},
]

SAMPLE_VIDEOS = [
    {
        "title": "A Minecraft Movie",
        "description": (
            "A mysterious portal pulls four misfits into the Overworld, a bizarre, "
            "cubic wonderland that thrives on imagination. To get back home, they'll "
            "have to master the terrain while embarking on a magical quest with an "
            "unexpected crafter named Steve."
        ),
        "duration": 5644,
        "thumbnail_url": "https://img.megaplextheatres.com/FilmBackdrop/HO00003457",
        "video_url": (
            "https://ia601602.us.archive.org/8/items/a-minecraft-movie-nova-show-01/"
            "A%20Minecraft%20Movie%20-%20NovaShow-01.mp4"
        ),
        "tags": ["minecraft", "gaming", "mojang"],
        "is_popular": True,
    },
    {
        "title": "Sonic The Hedgehog 3",
        "description": (
            "Sonic, Knuckles and Tails reunite to battle Shadow, a mysterious new "
            "enemy with powers unlike anything they've faced before. With their "
            "abilities outmatched in every way, they seek out an unlikely alliance "
            "to stop Shadow and protect the planet."
        ),
        "duration": 6617,
        "thumbnail_url": "https://i.ytimg.com/vi/qYAn4js_TsQ/hq720.jpg",
        "video_url": (
            "https://ia601907.us.archive.org/19/items/sonic3_202504/1630858463-01.mp4"
        ),
        "tags": ["sonic", "gaming", "sega"],
        "is_popular": True,
    },
    {
        "title": "Kung fu Panda 4",
        "description": (
            "Po must train a new warrior when he's chosen to become the spiritual "
            "leader of the Valley of Peace. When a powerful shape-shifting sorceress "
            "sets her eyes on his Staff of Wisdom, he realizes he's going to need "
            "some help."
        ),
        "duration": 5713,
        "thumbnail_url": (
            "https://4kwallpapers.com/images/wallpapers/kung-fu-panda-4-1920x1080-15545.jpg"
        ),
        "video_url": (
            "https://ia801504.us.archive.org/9/items/kungfupanda4_202504/"
            "Watch%20Kung%20Fu%20Panda%204%202024%20Full%20HD%20Movie%20YesMovies%20to-01.mp4"
        ),
        "tags": ["dreamworks", "animated", "panda"],
    },
    {
        "title": "The Wild Robot",
        "description": (
            "After a shipwreck, an intelligent robot is stranded on an uninhabited "
            "island. To survive the harsh surroundings, she bonds with the native "
            "animals and cares for an orphaned baby goose."
        ),
        "duration": 6106,
        "thumbnail_url": "https://images3.alphacoders.com/136/1367325.jpeg",
        "video_url": "https://ia800709.us.archive.org/15/items/wild-robot/1630858186-01.mp4",
        "tags": ["universal", "animated", "robot"],
    },
    {
        "title": "Moana 2",
        "description": (
            "After receiving an unexpected call from her wayfinding ancestors, a "
            "strong-willed girl journeys with her crew to the far seas of Oceania "
            "and into dangerous, long-lost waters."
        ),
        "duration": 5494,
        "thumbnail_url": (
            "https://images.squarespace-cdn.com/content/v1/5fbc4a62c2150e62cfcb09aa/"
            "1733125328711-J0YEMFJCDGLKYNC2S030/Moana%2B2%2BCollision.png"
        ),
        "video_url": (
            "https://ia601404.us.archive.org/14/items/moana-2_202504/"
            "Watch%20Moana%202%202024%20Full%20HD%20Movie%20YesMovies%20to.mp4"
        ),
        "tags": ["disney", "animated", "ocean"],
    },
]


def seed_catalog(store: CatalogStore, config: Settings) -> None:
    """
    Load default categories, the administrator account and sample movies.

    Args:
        store: Empty catalog store to populate
        config: Settings providing the administrator credentials
    """
    for category in DEFAULT_CATEGORIES:
        store.create_category(category)

    admin = store.create_user(
        {
            "username": config.admin_username,
            "password": config.admin_password,
            "is_admin": True,
        }
    )

    movies = store.find_category_by_slug("movies")
    for video in SAMPLE_VIDEOS:
        store.create_video(
            {**video, "category_id": movies.id, "type": "movie"},
            uploaded_by=admin.username,
        )

    catalog_logger.info(
        f"Seeded {len(DEFAULT_CATEGORIES)} categories and {len(SAMPLE_VIDEOS)} videos"
    )
