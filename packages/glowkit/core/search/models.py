"""Search result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from glowkit.core.generation.models import PatternItem
from glowkit.core.library.models import LibraryNode


class LibrarySearchResults(BaseModel):
    """Partitioned search hits, each list already sorted and capped."""

    model_config = ConfigDict(frozen=True)

    palettes: tuple[LibraryNode, ...] = ()
    folders: tuple[LibraryNode, ...] = ()
    patterns: tuple[PatternItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.palettes or self.folders or self.patterns)

    @property
    def total_count(self) -> int:
        return len(self.palettes) + len(self.folders) + len(self.patterns)
