"""Shared configuration loader for the rare-sat selector."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .rarity.classifier import InvalidInputError
from .rarity.query import RarityTier

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration is invalid."""


DEFAULT_CONFIG_PATH = Path.home() / ".ordinarinos.yaml"
_CONFIG_PATH_OVERRIDE: Path | None = None


@dataclass
class SelectorConfig:
    """Default filters applied when browsing the rare-sat catalog."""

    search: str | None = None
    tier: RarityTier | None = None
    available_only: bool = False
    held_file: Path | None = None


def set_default_config_path(path: str | Path | None) -> None:
    """Remember a user-supplied config path for future loads."""

    global _CONFIG_PATH_OVERRIDE
    _CONFIG_PATH_OVERRIDE = Path(path).expanduser() if path else None


def _load_config_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigurationError(f"Config file not found: {path}")
        return {}

    try:
        loaded = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:  # pragma: no cover - delegated to PyYAML
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Expected {path} to contain a YAML object with a 'selector' section")
    return loaded


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "y", "on"}:
            return True
        if normalized in {"0", "false", "no", "n", "off"}:
            return False
    return None


def _coerce_tier(raw: Any, *, source: str) -> RarityTier | None:
    if raw is None or raw == "":
        return None
    try:
        return RarityTier.parse(raw)
    except InvalidInputError as exc:
        raise ConfigurationError(f"Invalid tier in {source}: {raw}") from exc


def _coerce_path(raw: Any) -> Path | None:
    if not raw:
        return None
    return Path(str(raw)).expanduser()


def _first_value(*values: Any, default: Any = None) -> Any:
    for value in values:
        if value is not None:
            return value
    return default


def load_selector_config(
    *,
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SelectorConfig:
    """Load selector defaults from overrides, environment variables and optional YAML."""

    env_map = os.environ if env is None else env
    explicit_path = config_path is not None or _CONFIG_PATH_OVERRIDE is not None
    path = (
        Path(config_path).expanduser()
        if config_path is not None
        else _CONFIG_PATH_OVERRIDE or DEFAULT_CONFIG_PATH
    )

    file_config = _load_config_file(path, required=explicit_path)
    section = file_config.get("selector", {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Expected 'selector' to be a mapping in {path}")

    override_map = dict(overrides or {})

    resolved_search = _first_value(
        override_map.get("search"), env_map.get("ORDINARINOS_SEARCH") or None, section.get("search")
    )
    resolved_tier = _first_value(
        _coerce_tier(override_map.get("tier"), source="overrides"),
        _coerce_tier(env_map.get("ORDINARINOS_TIER"), source="environment"),
        _coerce_tier(section.get("tier"), source=f"{path} selector.tier"),
    )
    resolved_available_only = _first_value(
        _coerce_bool(override_map.get("available_only")),
        _coerce_bool(env_map.get("ORDINARINOS_AVAILABLE_ONLY")),
        _coerce_bool(section.get("available_only")),
        False,
    )
    resolved_held_file = _first_value(
        _coerce_path(override_map.get("held_file")),
        _coerce_path(env_map.get("ORDINARINOS_HELD_FILE")),
        _coerce_path(section.get("held_file")),
    )

    config = SelectorConfig(
        search=str(resolved_search) if resolved_search is not None else None,
        tier=resolved_tier,
        available_only=bool(resolved_available_only),
        held_file=resolved_held_file,
    )
    logger.debug("Loaded selector config from %s: %s", path, config)
    return config
