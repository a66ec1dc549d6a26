"""Pattern models - generated pattern items and their device payloads."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

Channel = Annotated[int, Field(ge=0, le=255)]
RGBW = tuple[Channel, Channel, Channel, Channel]

# Device palette id that restricts effects to the segment colors
PALETTE_COLORS_ONLY = 5
PALETTE_DEFAULT = 0


class SegmentPayload(BaseModel):
    """One LED segment of a device payload.

    Attributes:
        fx: Effect id (ids >= 1000 are custom effects run externally).
        col: Up to three RGBW color slots.
        sx: Effect speed.
        ix: Effect intensity.
        pal: Device palette id.
        grp: Consecutive lit pixels per repeat (grouping).
        spc: Dark pixels between groups (spacing).
        id: Segment index for multi-segment payloads.
        start: First pixel of the segment.
        stop: Pixel after the last one in the segment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fx: int = Field(..., ge=0)
    col: tuple[RGBW, ...] = Field(default=(), max_length=3)
    sx: Channel | None = None
    ix: Channel | None = None
    pal: int | None = Field(default=None, ge=0)
    grp: int | None = Field(default=None, ge=0)
    spc: int | None = Field(default=None, ge=0)
    id: int | None = Field(default=None, ge=0)
    start: int | None = Field(default=None, ge=0)
    stop: int | None = Field(default=None, ge=0)

    def to_dict(self) -> dict[str, Any]:
        """Wire dict; unset optional fields are omitted."""
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        if self.start is not None:
            data["start"] = self.start
        if self.stop is not None:
            data["stop"] = self.stop
        data["fx"] = self.fx
        data["col"] = [list(c) for c in self.col]
        for key in ("sx", "ix", "pal", "grp", "spc"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


class DevicePayload(BaseModel):
    """Full device state for a pattern."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    on: bool = True
    bri: Channel = 200
    seg: tuple[SegmentPayload, ...] = Field(..., min_length=1)

    @property
    def effect_id(self) -> int:
        return self.seg[0].fx

    def to_dict(self) -> dict[str, Any]:
        return {"on": self.on, "bri": self.bri, "seg": [s.to_dict() for s in self.seg]}


class PatternItem(BaseModel):
    """A named, ready-to-send pattern.

    Attributes:
        id: Stable id derived from the source node and effect.
        name: Display name.
        category_id: Root category of the source node.
        payload: Device payload.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    category_id: str
    payload: DevicePayload

    @property
    def effect_id(self) -> int:
        return self.payload.effect_id


def effect_id_from_payload(payload: Any) -> int | None:
    """Read ``seg[0].fx`` from a raw payload dict, or None when absent."""
    if not isinstance(payload, dict):
        return None
    seg = payload.get("seg")
    if isinstance(seg, dict):
        segments = [seg]
    elif isinstance(seg, list):
        segments = seg
    else:
        return None
    if not segments or not isinstance(segments[0], dict):
        return None
    fx = segments[0].get("fx")
    if isinstance(fx, bool) or not isinstance(fx, int):
        return None
    return fx
