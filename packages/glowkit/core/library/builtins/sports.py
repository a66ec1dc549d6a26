"""Builtin sports hierarchy: league folders and team palettes."""

from glowkit.core.library.builtins._helpers import folder
from glowkit.core.library.categories import CAT_SPORTS
from glowkit.core.library.models import LibraryNode, NodeType, SportsTeam
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY
from glowkit.core.library.teams import LEAGUES, SPORTS_TEAMS, league_folder_id, team_node_id

# Theater Chase, Running, Solid
TEAM_SUGGESTED_EFFECTS: tuple[int, ...] = (12, 41, 0)


def team_palette_node(team: SportsTeam, parent_id: str, sort_order: int, id_prefix: str = "team") -> LibraryNode:
    return LibraryNode(
        id=team_node_id(team, id_prefix),
        name=team.display_name,
        description=f"{team.city} {team.name}",
        node_type=NodeType.PALETTE,
        parent_id=parent_id,
        theme_colors=team.colors,
        sort_order=sort_order,
        metadata={
            "league": team.league,
            "city": team.city,
            "teamName": team.name,
            "nickname": team.nickname,
            "suggestedEffects": list(TEAM_SUGGESTED_EFFECTS),
            "defaultSpeed": 85,
            "defaultIntensity": 180,
        },
    )


def build_sports_nodes() -> list[LibraryNode]:
    nodes = [
        folder(league_folder_id(code), title, CAT_SPORTS, order, metadata={"league": code})
        for code, (title, order) in LEAGUES.items()
    ]
    position: dict[str, int] = {}
    for team in SPORTS_TEAMS:
        if team.league not in LEAGUES:
            continue
        index = position.get(team.league, 0)
        position[team.league] = index + 1
        nodes.append(team_palette_node(team, league_folder_id(team.league), index))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("sports", CAT_SPORTS, build_sports_nodes, "League folders and team palettes")
