"""Library models - catalog nodes, named palettes and sports teams."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from glowkit.core.utils.colors import hex_to_rgb

Channel = Annotated[int, Field(ge=0, le=255)]
RGBTriple = tuple[Channel, Channel, Channel]

# Theater Chase, Running, Breathe, Solid
DEFAULT_SUGGESTED_EFFECTS: tuple[int, ...] = (12, 41, 2, 0)


class NodeType(str, Enum):
    """Kinds of catalog nodes.

    Attributes:
        CATEGORY: Top-level category (Holidays, Game Day Fan Zone).
        FOLDER: Intermediate navigation level (NFL, Christmas, Birthdays).
        PALETTE: Selectable color palette that patterns are generated from.
    """

    CATEGORY = "category"
    FOLDER = "folder"
    PALETTE = "palette"


class LibraryNode(BaseModel):
    """A node in the catalog tree.

    Attributes:
        id: Unique node id.
        name: Display name.
        node_type: Category, folder or palette.
        parent_id: Parent node id (None only for root categories).
        description: Optional description.
        image_url: Optional cover image.
        theme_colors: Ordered RGB triples.
        metadata: Generation hints (suggestedEffects, defaultSpeed,
            defaultIntensity, grouping, spacing, isGalaxyPattern,
            isTwinklePattern, dimLevel, brightCount, dimCount) plus
            free-form descriptive keys.
        sort_order: Ordering among siblings (lower first).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    node_type: NodeType
    parent_id: str | None = None
    description: str | None = None
    image_url: str | None = None
    theme_colors: tuple[RGBTriple, ...] = ()
    metadata: dict[str, Any] = Field(default_factory=dict)
    sort_order: int = 0

    @field_validator("theme_colors", mode="before")
    @classmethod
    def _parse_hex_colors(cls, v: Any) -> Any:
        """Accept '#RRGGBB' strings alongside RGB triples."""
        if isinstance(v, list | tuple):
            return tuple(hex_to_rgb(c) if isinstance(c, str) else c for c in v)
        return v

    @property
    def is_palette(self) -> bool:
        """Palette node with at least one color (generable)."""
        return self.node_type == NodeType.PALETTE and len(self.theme_colors) > 0

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_folder(self) -> bool:
        return self.node_type == NodeType.FOLDER

    @property
    def is_category(self) -> bool:
        return self.node_type == NodeType.CATEGORY

    @property
    def suggested_effects(self) -> list[int]:
        effects = self.metadata.get("suggestedEffects")
        if isinstance(effects, list | tuple):
            return [int(e) for e in effects]
        return list(DEFAULT_SUGGESTED_EFFECTS)

    @property
    def default_speed(self) -> int:
        return self.int_hint("defaultSpeed", 128)

    @property
    def default_intensity(self) -> int:
        return self.int_hint("defaultIntensity", 128)

    @property
    def grouping(self) -> int | None:
        return self.int_hint("grouping")

    @property
    def spacing(self) -> int | None:
        return self.int_hint("spacing")

    @property
    def has_spacing(self) -> bool:
        return self.grouping is not None and self.spacing is not None

    @property
    def is_galaxy_pattern(self) -> bool:
        return self.metadata.get("isGalaxyPattern") is True

    @property
    def is_twinkle_pattern(self) -> bool:
        return self.metadata.get("isTwinklePattern") is True

    @property
    def dim_level(self) -> int:
        """Dim accent brightness in percent (50 when unset)."""
        return self.int_hint("dimLevel", 50)

    @property
    def bright_count(self) -> int:
        return self.int_hint("brightCount", 1)

    @property
    def dim_count(self) -> int:
        return self.int_hint("dimCount", 1)

    def int_hint(self, key: str, default: int | None = None) -> Any:
        """Integer metadata value, or ``default`` when missing or not an int."""
        value = self.metadata.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value


class NamedPalette(BaseModel):
    """Static palette definition converted into a palette node.

    Attributes:
        id: Node id.
        name: Display name.
        description: Optional description.
        colors: Hex colors in display order.
        suggested_effects: Effect ids to offer first.
        default_speed: Speed hint (device default when None).
        default_intensity: Intensity hint (device default when None).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str | None = None
    colors: tuple[str, ...]
    suggested_effects: tuple[int, ...] | None = None
    default_speed: int | None = None
    default_intensity: int | None = None

    def to_node(self, parent_id: str, sort_order: int = 0) -> LibraryNode:
        metadata: dict[str, Any] = {}
        if self.suggested_effects is not None:
            metadata["suggestedEffects"] = list(self.suggested_effects)
        if self.default_speed is not None:
            metadata["defaultSpeed"] = self.default_speed
        if self.default_intensity is not None:
            metadata["defaultIntensity"] = self.default_intensity
        return LibraryNode(
            id=self.id,
            name=self.name,
            description=self.description,
            node_type=NodeType.PALETTE,
            parent_id=parent_id,
            theme_colors=self.colors,
            sort_order=sort_order,
            metadata=metadata,
        )


@dataclass(frozen=True)
class SportsTeam:
    """A sports team with its official colors (hex, primary first)."""

    name: str
    league: str
    city: str
    colors: tuple[str, ...]
    nickname: str | None = None

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError(f"Team {self.name} has no colors")

    @property
    def display_name(self) -> str:
        return f"{self.city} {self.name}"

    @property
    def search_key(self) -> str:
        return f"{self.city} {self.name} {self.nickname or ''} {self.league}".lower()

    def matches(self, query: str) -> bool:
        """Case-insensitive match on full name, short name or nickname."""
        q = query.strip().lower()
        if not q:
            return False
        candidates = [self.display_name.lower(), self.name.lower()]
        if self.nickname:
            candidates.append(f"{self.nickname} {self.name}".lower())
        return q in candidates


class LiveEventType(str, Enum):
    """Kinds of headline sporting events."""

    SUPER_BOWL = "super_bowl"
    WORLD_SERIES = "world_series"
    NBA_FINALS = "nba_finals"
    STANLEY_CUP = "stanley_cup"
    MLS_CUP = "mls_cup"
    CFP_CHAMPIONSHIP = "cfp_championship"
    MARCH_MADNESS_FINAL = "march_madness_final"
    ALL_STAR_GAME = "all_star_game"
    CHAMPIONSHIP = "championship"


class LiveEvent(BaseModel):
    """A headline sporting event between two teams.

    Attributes:
        id: Event id (used in generated node ids).
        name: Display name (e.g. 'Super Bowl LIX').
        folder_name: Short folder title when this is the primary event.
        team1: Home or first-listed team.
        team2: Away or second-listed team.
        league: League code.
        event_time: Scheduled start, if known.
        estimated_audience: Audience in millions, used for prioritization.
        event_type: Kind of event.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    folder_name: str = "Big Game Designs"
    team1: SportsTeam
    team2: SportsTeam
    league: str
    event_time: datetime | None = None
    estimated_audience: float = Field(default=0.0, ge=0.0)
    event_type: LiveEventType = LiveEventType.CHAMPIONSHIP

    @property
    def description(self) -> str:
        return f"{self.team1.display_name} vs {self.team2.display_name}"

    def is_upcoming(self, now: datetime, window: timedelta = timedelta(days=7)) -> bool:
        """True when the event starts within ``window`` from ``now``."""
        if self.event_time is None:
            return False
        delta = self.event_time - now
        return timedelta(0) <= delta <= window
