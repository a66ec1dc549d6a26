"""Root category ids and nodes."""

from __future__ import annotations

from glowkit.core.library.models import LibraryNode, NodeType

CAT_SPORTS = "cat_sports"
CAT_HOLIDAY = "cat_holiday"
CAT_SEASON = "cat_season"
CAT_PARTY = "cat_party"
CAT_MOVIES = "cat_movies"
CAT_ARCH = "cat_arch"
CAT_SECURITY = "cat_security"
CAT_NATURE = "cat_nature"

# Folder under Game Day Fan Zone, present even when no team is followed
MY_TEAMS_FOLDER_ID = "sports_my_teams"
LIVE_EVENTS_FOLDER_ID = "big_events"

_ROOTS: tuple[tuple[str, str, str], ...] = (
    (CAT_SPORTS, "Game Day Fan Zone", "https://images.unsplash.com/photo-1518600506278-4e8ef466b810"),
    (CAT_HOLIDAY, "Holidays", "https://images.unsplash.com/photo-1482517967863-00e15c9b44be"),
    (CAT_SEASON, "Seasonal Vibes", "https://images.unsplash.com/photo-1477587458883-47145ed94245"),
    (CAT_PARTY, "Parties & Events", "https://images.unsplash.com/photo-1544491843-0ce2884635f3"),
    (CAT_MOVIES, "Movies & Superheroes", "https://images.unsplash.com/photo-1536440136628-849c177e76a1"),
    (CAT_ARCH, "Architectural Downlighting (White)", "https://images.unsplash.com/photo-1600585154154-8c857b74f2ab"),
    (CAT_SECURITY, "Security & Alerts", "https://images.unsplash.com/photo-1579403124614-197f69d8187b"),
    (CAT_NATURE, "Nature & Outdoors", "https://images.unsplash.com/photo-1419242902214-272b3f66ee7a"),
)


def root_categories(exclude: frozenset[str] = frozenset()) -> list[LibraryNode]:
    """Root category nodes in display order, minus any excluded ids."""
    return [
        LibraryNode(
            id=cat_id,
            name=name,
            node_type=NodeType.CATEGORY,
            image_url=image_url,
            sort_order=i,
        )
        for i, (cat_id, name, image_url) in enumerate(_ROOTS)
        if cat_id not in exclude
    ]


def my_teams_folder() -> LibraryNode:
    return LibraryNode(
        id=MY_TEAMS_FOLDER_ID,
        name="My Teams",
        description="Palettes for the teams you follow",
        node_type=NodeType.FOLDER,
        parent_id=CAT_SPORTS,
        sort_order=-1,
    )
