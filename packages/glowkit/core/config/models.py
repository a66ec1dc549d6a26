"""Configuration models for glowkit.

All sections have working defaults, so an empty config file (or no
file at all) yields a fully usable configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogConfig(BaseModel):
    """Catalog tree build options."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(
        default=16,
        ge=1,
        le=256,
        description="Maximum parent-chain length before a node is rejected as malformed",
    )
    include_security: bool = Field(
        default=True, description="Include the Security & Alerts category"
    )


class SearchConfig(BaseModel):
    """Library search result caps."""

    model_config = ConfigDict(extra="forbid")

    palette_limit: int = Field(default=10, ge=0, description="Max palette nodes returned")
    folder_limit: int = Field(default=5, ge=0, description="Max folder/category nodes returned")
    pattern_limit: int = Field(default=10, ge=0, description="Max pattern items returned")


class GenerationConfig(BaseModel):
    """Pattern generation defaults."""

    model_config = ConfigDict(extra="forbid")

    brightness: int = Field(
        default=200, ge=0, le=255, description="Master brightness for colorway patterns"
    )
    default_speed: int = Field(
        default=128, ge=0, le=255, description="Speed used when a node has no defaultSpeed"
    )
    default_intensity: int = Field(
        default=128, ge=0, le=255, description="Intensity used when a node has no defaultIntensity"
    )


class CacheConfig(BaseModel):
    """Query cache options."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True, description="Memoize match results by query hash")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout when unset)")


class GlowkitConfig(BaseModel):
    """Top-level glowkit configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
