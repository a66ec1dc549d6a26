"""Library domain - catalog nodes, content sources and the catalog tree.

Usage:
    from glowkit.core.library import CatalogTree

    tree = CatalogTree()
    tree.get_children(None)          # root categories
    tree.get_ancestors("team_nfl_chiefs")

Note: Importing this module auto-registers all builtin content sources.
"""

# Auto-register builtins on import
from glowkit.core.library import builtins as _builtins  # noqa: F401
from glowkit.core.library.architectural import (
    DIM_LEVELS,
    WHITE_STYLES,
    DimLevel,
    WhiteStyle,
    galaxy_cells,
    spacing_cells,
)
from glowkit.core.library.categories import (
    CAT_ARCH,
    CAT_HOLIDAY,
    CAT_MOVIES,
    CAT_NATURE,
    CAT_PARTY,
    CAT_SEASON,
    CAT_SECURITY,
    CAT_SPORTS,
    LIVE_EVENTS_FOLDER_ID,
    MY_TEAMS_FOLDER_ID,
    root_categories,
)
from glowkit.core.library.dynamic import (
    build_followed_team_nodes,
    build_live_event_nodes,
    dual_team_colors,
    resolve_followed_teams,
    select_upcoming,
)
from glowkit.core.library.models import (
    DEFAULT_SUGGESTED_EFFECTS,
    LibraryNode,
    LiveEvent,
    LiveEventType,
    NamedPalette,
    NodeType,
    SportsTeam,
)
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY, NodeSourceInfo, NodeSourceRegistry
from glowkit.core.library.teams import SPORTS_TEAMS, find_team, search_teams
from glowkit.core.library.tree import CatalogTree

__all__ = [
    # Models
    "DEFAULT_SUGGESTED_EFFECTS",
    "LibraryNode",
    "LiveEvent",
    "LiveEventType",
    "NamedPalette",
    "NodeType",
    "SportsTeam",
    # Tree
    "CatalogTree",
    "NODE_SOURCE_REGISTRY",
    "NodeSourceInfo",
    "NodeSourceRegistry",
    # Categories
    "CAT_ARCH",
    "CAT_HOLIDAY",
    "CAT_MOVIES",
    "CAT_NATURE",
    "CAT_PARTY",
    "CAT_SEASON",
    "CAT_SECURITY",
    "CAT_SPORTS",
    "LIVE_EVENTS_FOLDER_ID",
    "MY_TEAMS_FOLDER_ID",
    "root_categories",
    # Runtime content
    "build_followed_team_nodes",
    "build_live_event_nodes",
    "dual_team_colors",
    "resolve_followed_teams",
    "select_upcoming",
    # Teams
    "SPORTS_TEAMS",
    "find_team",
    "search_teams",
    # Architectural
    "DIM_LEVELS",
    "WHITE_STYLES",
    "DimLevel",
    "WhiteStyle",
    "galaxy_cells",
    "spacing_cells",
]
