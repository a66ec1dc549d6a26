"""Configuration management for glowkit."""

from glowkit.core.config.loader import (
    configure_logging,
    detect_format,
    load_config,
    load_glowkit_config,
    reset_config_cache,
)
from glowkit.core.config.models import (
    CacheConfig,
    CatalogConfig,
    GenerationConfig,
    GlowkitConfig,
    LoggingConfig,
    SearchConfig,
)

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_config",
    "load_glowkit_config",
    "reset_config_cache",
    # Models
    "CacheConfig",
    "CatalogConfig",
    "GenerationConfig",
    "GlowkitConfig",
    "LoggingConfig",
    "SearchConfig",
]
