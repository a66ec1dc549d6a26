"""Config file loading (JSON or YAML, chosen by extension)."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

import yaml

from glowkit.core.config.models import GlowkitConfig
from glowkit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

# Used by load_glowkit_config() when no path is given
_DEFAULT_CONFIG_PATH = Path("glowkit.yaml")
_config_cache: GlowkitConfig | None = None

_FORMATS: dict[str, str] = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}

_PARSERS: dict[str, tuple[Callable[[IO[str]], Any], type[Exception]]] = {
    "json": (json.load, json.JSONDecodeError),
    "yaml": (yaml.safe_load, yaml.YAMLError),
}


def detect_format(file_path: Path | str) -> str:
    """Config format for a file extension.

    Raises:
        ValueError: For anything but .json, .yaml or .yml.

    Example:
        >>> detect_format("glowkit.json")
        'json'
        >>> detect_format("glowkit.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix or '(none)'}") from None


def load_config(path: str | Path) -> dict[str, Any]:
    """Raw config mapping from a JSON or YAML file.

    An empty YAML file yields ``{}``.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: On an unsupported extension, a parse error, or a
            root that is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    parse, parse_error = _PARSERS[fmt]
    with path.open(encoding="utf-8") as f:
        try:
            content = parse(f)
        except parse_error as e:
            raise ValueError(f"Invalid {fmt.upper()} in {path}: {e}") from e

    if content is None and fmt == "yaml":
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")
    logger.debug(f"Loaded {fmt} config from {path}")
    return content


def load_glowkit_config(path: str | Path | None = None) -> GlowkitConfig:
    """Load and validate glowkit configuration.

    When no path is given, the default path is used if it exists and
    built-in defaults otherwise. The default-path result is cached for
    the process lifetime. GLOWKIT_LOG_LEVEL overrides logging.level.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated GlowkitConfig instance with defaults for missing values

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    global _config_cache

    use_default = path is None
    if use_default and _config_cache is not None:
        return _config_cache

    resolved = _DEFAULT_CONFIG_PATH if path is None else Path(path)

    if use_default and not resolved.exists():
        raw: dict[str, Any] = {}
    else:
        raw = load_config(resolved)

    env_level = os.getenv("GLOWKIT_LOG_LEVEL")
    if env_level:
        logger.debug("Loaded GLOWKIT_LOG_LEVEL from environment")
        raw = {**raw, "logging": {**raw.get("logging", {}), "level": env_level.upper()}}

    config = GlowkitConfig.model_validate(raw)

    if use_default:
        _config_cache = config

    return config


def reset_config_cache() -> None:
    """Drop the cached default configuration."""
    global _config_cache
    _config_cache = None


def configure_logging(config: GlowkitConfig | None = None) -> None:
    """Configure Python logging from glowkit config.

    Args:
        config: GlowkitConfig instance (loads default if None)
    """
    if config is None:
        config = load_glowkit_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
