"""Tests for configuration models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from glowkit.core.config import CatalogConfig, GenerationConfig, GlowkitConfig, LoggingConfig, SearchConfig


class TestDefaults:
    """Tests for default values."""

    def test_sections_default(self) -> None:
        """Test every section has working defaults."""
        config = GlowkitConfig()
        assert config.catalog.max_depth == 16
        assert config.catalog.include_security is True
        assert (config.search.palette_limit, config.search.folder_limit, config.search.pattern_limit) == (10, 5, 10)
        assert config.generation.brightness == 200
        assert config.generation.default_speed == 128
        assert config.cache.enabled is True
        assert config.logging.level == "INFO"


class TestValidation:
    """Tests for field constraints."""

    def test_brightness_range(self) -> None:
        """Test brightness must fit a byte."""
        with pytest.raises(ValidationError):
            GenerationConfig(brightness=300)

    def test_depth_positive(self) -> None:
        """Test max_depth must be at least 1."""
        with pytest.raises(ValidationError):
            CatalogConfig(max_depth=0)

    def test_section_extra_forbidden(self) -> None:
        """Test unknown keys inside a section are rejected."""
        with pytest.raises(ValidationError):
            SearchConfig(result_limit=4)

    def test_log_level_pattern(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_top_level_extra_ignored(self) -> None:
        """Test unknown top-level sections are ignored."""
        config = GlowkitConfig.model_validate({"telemetry": {"enabled": True}})
        assert not hasattr(config, "telemetry")
