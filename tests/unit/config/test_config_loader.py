"""Tests for the config loader with JSON and YAML support."""

import json
from pathlib import Path

import pytest
import yaml

import glowkit.core.config.loader as config_loader
from glowkit.core.config import GlowkitConfig


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "catalog": {"max_depth": 8, "include_security": False},
        "search": {"palette_limit": 3},
        "logging": {"level": "DEBUG", "format": "%(message)s"},
        "future_section": {"ignored": True},
    }


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch):
    """Isolate the default-config cache and log level override."""
    monkeypatch.delenv("GLOWKIT_LOG_LEVEL", raising=False)
    config_loader.reset_config_cache()
    yield
    config_loader.reset_config_cache()


def test_detect_format():
    """Test format detection for supported extensions."""
    assert config_loader.detect_format("glowkit.json") == "json"
    assert config_loader.detect_format(Path("glowkit.yaml")) == "yaml"
    assert config_loader.detect_format("glowkit.YML") == "yaml"


def test_detect_format_invalid():
    """Test format detection for invalid extensions."""
    with pytest.raises(ValueError) as exc_info:
        config_loader.detect_format("glowkit.toml")

    assert "Unsupported config format" in str(exc_info.value)


def test_load_config_json(tmp_path, sample_config_data):
    """Test loading JSON config."""
    config_file = tmp_path / "glowkit.json"
    config_file.write_text(json.dumps(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["catalog"]["max_depth"] == 8
    assert config["logging"]["level"] == "DEBUG"


def test_load_config_yaml(tmp_path, sample_config_data):
    """Test loading YAML config."""
    config_file = tmp_path / "glowkit.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["search"]["palette_limit"] == 3


def test_load_config_empty_yaml(tmp_path):
    """Test an empty YAML file loads as an empty mapping."""
    config_file = tmp_path / "glowkit.yaml"
    config_file.write_text("")

    assert config_loader.load_config(config_file) == {}


def test_load_config_invalid_json(tmp_path):
    """Test malformed JSON raises ValueError."""
    config_file = tmp_path / "glowkit.json"
    config_file.write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(config_file)


def test_load_config_invalid_yaml(tmp_path):
    """Test malformed YAML raises ValueError."""
    config_file = tmp_path / "glowkit.yaml"
    config_file.write_text("catalog: [unclosed")

    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(config_file)


def test_load_config_non_mapping(tmp_path):
    """Test a list at the root is rejected."""
    config_file = tmp_path / "glowkit.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        config_loader.load_config(config_file)


def test_load_config_missing_file(tmp_path):
    """Test a missing explicit file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        config_loader.load_config(tmp_path / "missing.yaml")


def test_load_glowkit_config(tmp_path, sample_config_data):
    """Test validation into GlowkitConfig with unknown sections ignored."""
    config_file = tmp_path / "glowkit.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_glowkit_config(config_file)

    assert isinstance(config, GlowkitConfig)
    assert config.catalog.max_depth == 8
    assert config.catalog.include_security is False
    assert config.search.palette_limit == 3
    assert config.search.folder_limit == 5
    assert config.generation.brightness == 200


def test_load_glowkit_config_defaults_without_file(tmp_path, monkeypatch):
    """Test defaults are used when the default file is absent."""
    monkeypatch.chdir(tmp_path)

    config = config_loader.load_glowkit_config()

    assert config == GlowkitConfig()
    assert config_loader.load_glowkit_config() is config


def test_env_log_level_override(tmp_path, monkeypatch):
    """Test GLOWKIT_LOG_LEVEL overrides the configured level."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GLOWKIT_LOG_LEVEL", "warning")

    assert config_loader.load_glowkit_config().logging.level == "WARNING"
