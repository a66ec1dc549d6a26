"""Builders for runtime-supplied catalog content.

Live events and followed teams are injected after startup. Each builder
turns its inputs into a flat node list that the tree splices in next to
the static content.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from glowkit.core.library.builtins.sports import team_palette_node
from glowkit.core.library.categories import CAT_SPORTS, LIVE_EVENTS_FOLDER_ID, MY_TEAMS_FOLDER_ID
from glowkit.core.library.models import LibraryNode, LiveEvent, NodeType, SportsTeam
from glowkit.core.library.teams import SPORTS_TEAMS
from glowkit.core.utils.colors import RGB, dedupe_colors, hex_to_rgb, lighten

logger = logging.getLogger(__name__)

MAX_LIVE_EVENTS = 2

# (suffix, name template, description, effects, speed, intensity)
_TEAM_VARIANTS: tuple[tuple[str, str, str, tuple[int, ...], int, int], ...] = (
    ("solid", "Solid {team}", "Static team colors", (0,), 0, 128),
    ("chase", "{team} Chase", "Team colors in motion", (28, 12), 100, 180),
    ("breathe", "{team} Breathe", "Pulsing team pride", (2,), 80, 128),
    ("running", "{team} Running", "Running team lights", (41, 42), 120, 200),
    ("twinkle", "{team} Twinkle", "Sparkling team spirit", (17, 49), 80, 150),
)


def live_event_folder_id(event_id: str) -> str:
    return f"big_event_{event_id}"


def live_team_folder_id(event_id: str, position: int) -> str:
    """Folder id for team 1 or team 2 of an event."""
    return f"big_event_{event_id}_team{position}"


def live_merged_folder_id(event_id: str) -> str:
    return f"big_event_{event_id}_merged"


def select_upcoming(
    events: Iterable[LiveEvent],
    now: datetime,
    max_events: int = MAX_LIVE_EVENTS,
) -> list[LiveEvent]:
    """Events starting within a week, largest audience first, capped."""
    upcoming = [e for e in events if e.is_upcoming(now)]
    upcoming.sort(key=lambda e: e.estimated_audience, reverse=True)
    return upcoming[:max_events]


def build_live_event_nodes(events: Sequence[LiveEvent]) -> list[LibraryNode]:
    """Build the live-event hierarchy under Game Day Fan Zone.

    The first event is the primary one: its team and merged folders sit
    directly under the root folder, which takes its folder name. Later
    events get their own subfolder. Returns [] when there are no events.
    """
    if not events:
        return []

    primary = events[0]
    nodes = [
        LibraryNode(
            id=LIVE_EVENTS_FOLDER_ID,
            name=primary.folder_name,
            description=primary.description,
            node_type=NodeType.FOLDER,
            parent_id=CAT_SPORTS,
            sort_order=-1,
            metadata={
                "eventType": primary.event_type.value,
                "eventCount": len(events),
                "primaryEventId": primary.id,
            },
        )
    ]
    for index, event in enumerate(events):
        nodes.extend(_event_nodes(event, index))
    return nodes


def _event_nodes(event: LiveEvent, index: int) -> list[LibraryNode]:
    nodes: list[LibraryNode] = []
    parent_id = LIVE_EVENTS_FOLDER_ID
    if index > 0:
        parent_id = live_event_folder_id(event.id)
        nodes.append(
            LibraryNode(
                id=parent_id,
                name=event.name,
                description=event.description,
                node_type=NodeType.FOLDER,
                parent_id=LIVE_EVENTS_FOLDER_ID,
                sort_order=index,
                metadata={"eventId": event.id, "league": event.league},
            )
        )

    for position, team in enumerate((event.team1, event.team2), start=1):
        nodes.extend(_team_nodes(event.id, team, parent_id, position))
    nodes.extend(_merged_nodes(event, parent_id))
    return nodes


def _team_nodes(event_id: str, team: SportsTeam, parent_id: str, position: int) -> list[LibraryNode]:
    folder_id = live_team_folder_id(event_id, position)
    nodes = [
        LibraryNode(
            id=folder_id,
            name=team.display_name,
            description=f"{team.city} {team.name} colors",
            node_type=NodeType.FOLDER,
            parent_id=parent_id,
            theme_colors=team.colors,
            sort_order=position - 1,
            metadata={"teamName": team.name, "city": team.city, "league": team.league},
        )
    ]
    for i, (suffix, template, description, effects, speed, intensity) in enumerate(_TEAM_VARIANTS):
        nodes.append(
            LibraryNode(
                id=f"{folder_id}_{suffix}",
                name=template.format(team=team.name),
                description=description,
                node_type=NodeType.PALETTE,
                parent_id=folder_id,
                theme_colors=team.colors,
                sort_order=i,
                metadata={
                    "suggestedEffects": list(effects),
                    "defaultSpeed": speed,
                    "defaultIntensity": intensity,
                },
            )
        )
    return nodes


def dual_team_colors(team1: SportsTeam, team2: SportsTeam) -> dict[str, list[RGB]]:
    """Color sets for merged designs.

    When both teams share a primary color the sets lead with the
    secondaries so each team stays recognizable within three colors.
    A team without a secondary gets its primary lightened.

    Returns:
        Mapping with 'pair', 'trio' and 'all' color lists.
    """
    p1, p2 = hex_to_rgb(team1.colors[0]), hex_to_rgb(team2.colors[0])
    s1 = hex_to_rgb(team1.colors[1]) if len(team1.colors) > 1 else lighten(p1)
    s2 = hex_to_rgb(team2.colors[1]) if len(team2.colors) > 1 else lighten(p2)

    if p1 == p2:
        pair, trio = [s1, s2], [p1, s1, s2]
    else:
        pair, trio = [p1, p2], [p1, p2, s1]
    return {"pair": pair, "trio": trio, "all": dedupe_colors([p1, s1, p2, s2])}


def _merged_nodes(event: LiveEvent, parent_id: str) -> list[LibraryNode]:
    t1, t2 = event.team1, event.team2
    folder_id = live_merged_folder_id(event.id)
    sets = dual_team_colors(t1, t2)

    folder_colors = [hex_to_rgb(t1.colors[0]), hex_to_rgb(t2.colors[0])]
    folder_colors += [hex_to_rgb(c) for c in (t1.colors[1:2] + t2.colors[1:2])]

    # (suffix, name, description, color set, effects, speed, intensity, pattern type)
    designs: list[tuple[str, str, str, str, list[int], int, int, str]] = [
        ("house_split", "House Divided", f"Half {t1.name}, half {t2.name}", "trio", [0], 0, 128, "house_split"),
        ("alternating", "Team Stripes", f"Alternating {t1.name} and {t2.name}", "all", [12, 6, 51, 0], 80, 128,
         "alternating_stripe"),
        ("team_wave", "Rivalry Wave", f"{t1.name} flows to {t2.name} and back", "trio", [51, 12, 6, 18], 60, 200,
         "team_wave"),
        ("rivalry_chase", "Rivalry Chase", "Team colors chase each other", "all", [12, 28, 6, 46], 100, 200,
         "rivalry_chase"),
        ("color_rotation", "Matchup Colors", "Both teams' colors in rotation", "all", [12, 6, 51, 46], 80, 180,
         "color_rotation"),
        ("team_breathe", "Dueling Pulse", "Breathe between both teams", "pair", [2], 40, 128, "team_breathe"),
        ("harmony", "Game Day Harmony", "Smooth blend of both teams", "trio", [51, 12, 46, 6], 50, 200, "harmony_blend"),
        ("fireworks", "Victory Fireworks", "Celebratory fireworks in both colors", "all", [66, 89], 128, 200,
         "victory_fireworks"),
        ("comet", "Rivalry Comet", "Comet trails in team colors", "pair", [65], 140, 180, "rivalry_comet"),
    ]  # fmt: skip
    extra_metadata: dict[str, dict] = {
        "house_split": {"segmentSplit": True, "team1Colors": list(t1.colors), "team2Colors": list(t2.colors)},
        "alternating": {"grouping": 5, "spacing": 5},
    }

    nodes = [
        LibraryNode(
            id=folder_id,
            name="Both Teams",
            description="Celebrate both teams at once",
            node_type=NodeType.FOLDER,
            parent_id=parent_id,
            theme_colors=dedupe_colors(folder_colors),
            sort_order=2,
            metadata={"team1": t1.name, "team2": t2.name, "isMergedFolder": True},
        )
    ]
    for i, (suffix, name, description, color_set, effects, speed, intensity, pattern_type) in enumerate(designs):
        nodes.append(
            LibraryNode(
                id=f"{folder_id}_{suffix}",
                name=name,
                description=description,
                node_type=NodeType.PALETTE,
                parent_id=folder_id,
                theme_colors=sets[color_set],
                sort_order=i,
                metadata={
                    "suggestedEffects": effects,
                    "defaultSpeed": speed,
                    "defaultIntensity": intensity,
                    "patternType": pattern_type,
                    **extra_metadata.get(suffix, {}),
                },
            )
        )
    return nodes


def resolve_followed_teams(names: Iterable[str], teams: Sequence[SportsTeam] = SPORTS_TEAMS) -> list[SportsTeam]:
    """Match user team names against the team table.

    Unknown names are skipped; each team appears once, in the order of
    the first name that matched it.
    """
    resolved: list[SportsTeam] = []
    for name in names:
        team = next((t for t in teams if t.matches(name)), None)
        if team is None:
            logger.debug(f"No team matches followed name {name!r}")
            continue
        if team not in resolved:
            resolved.append(team)
    return resolved


def build_followed_team_nodes(names: Iterable[str], teams: Sequence[SportsTeam] = SPORTS_TEAMS) -> list[LibraryNode]:
    """Team palettes for the My Teams folder (the folder itself is always present)."""
    return [
        team_palette_node(team, MY_TEAMS_FOLDER_ID, i, id_prefix="my_team")
        for i, team in enumerate(resolve_followed_teams(names, teams))
    ]
