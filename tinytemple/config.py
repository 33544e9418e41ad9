"""Site configuration loading for TinyTemple.

The configuration file is a flat key/value document whose top-level entries
become the base render context for every template. TOML is the default
format; files ending in ``.yaml`` or ``.yml`` are parsed as YAML.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigParseError, ConfigReadError

DEFAULT_CONFIG_PATH = Path("./tinytemple.toml")

YAML_SUFFIXES = {".yaml", ".yml"}


def load_config(config_path: Path) -> dict[str, Any]:
    """Load the site configuration into a context mapping.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary of the file's top-level entries, exactly as parsed.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the contents are not a key/value document.
    """
    try:
        raw = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(
            config_path, "Unable to read config file.", exc
        ) from exc

    if config_path.suffix.lower() in YAML_SUFFIXES:
        return _parse_yaml(config_path, raw)
    return _parse_toml(config_path, raw)


def _parse_toml(config_path: Path, raw: str) -> dict[str, Any]:
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(
            config_path, "Unable to parse config file.", exc
        ) from exc


def _parse_yaml(config_path: Path, raw: str) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            config_path, "Unable to parse config file.", exc
        ) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigParseError(
            config_path,
            "Unable to parse config file.",
            TypeError(f"expected a mapping, got {type(loaded).__name__}"),
        )
    return loaded
