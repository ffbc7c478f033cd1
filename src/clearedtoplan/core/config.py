"""YAML settings for the planner.

Settings come in layers: the defaults shipped in config/settings.yaml, then an
optional per-user file that records choices such as the planning mode picked
during onboarding. Later layers override earlier ones key by key.

Typical usage example:
    from clearedtoplan.core.config import ConfigLoader, PlanningSettings

    config = ConfigLoader.load_layered("config/settings.yaml", user_settings_path)
    settings = PlanningSettings.from_config(config)
"""

import copy
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from clearedtoplan.core.logging_system import get_logger
from clearedtoplan.workflow.session import GatingPolicy, PlanningMode

logger = get_logger(__name__)

_MISSING = object()


class ConfigError(Exception):
    """Raised when settings cannot be read, written or interpreted."""


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Nested settings addressed with dotted keys.

    Examples:
        >>> config = ConfigLoader({"planning": {"mode": "guided"}})
        >>> config.get("planning.mode")
        'guided'
        >>> config.get("history.recent_limit", default=10)
        10
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Read one YAML file. An empty file yields empty settings.

        Raises:
            ConfigError: If the file is missing, unreadable, not valid YAML,
                or its top level is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        data = {} if data is None else data
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    @classmethod
    def load_layered(cls, defaults: str | Path, *overrides: str | Path) -> "ConfigLoader":
        """Load a defaults file, then merge each override file that exists.

        Raises:
            ConfigError: If the defaults file cannot be loaded or an existing
                override file is invalid.
        """
        config = cls.load(defaults)
        for override in overrides:
            if not Path(override).exists():
                logger.debug("No settings override at %s", override)
                continue
            config.merge(cls.load(override))
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key, or default when any part of the path is absent."""
        node: Any = self._data
        for part in key.split("."):
            node = node.get(part, _MISSING) if isinstance(node, dict) else _MISSING
            if node is _MISSING:
                return default
        return node

    def set(self, key: str, value: Any) -> None:
        """Store a value at a dotted key, creating intermediate sections.

        Raises:
            ConfigError: If part of the path already holds a non-section value.
        """
        *parents, leaf = key.split(".")
        node = self._data
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise ConfigError(f"Cannot set {key}: {part} is not a section")
        node[leaf] = value

    def get_section(self, key: str) -> dict[str, Any]:
        """Mapping stored at a dotted key.

        Raises:
            ConfigError: If the key is absent or holds a plain value.
        """
        section = self.get(key, _MISSING)
        if section is _MISSING or section is None:
            raise ConfigError(f"Configuration section not found: {key}")
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")
        return section

    def save(self, path: str | Path) -> None:
        """Write the settings as YAML, creating parent directories.

        Raises:
            ConfigError: If the file cannot be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                yaml.safe_dump(self._data, default_flow_style=False, sort_keys=False),
                encoding="utf-8",
            )
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to save configuration {path}: {e}") from e

        logger.info("Saved configuration to: %s", path)

    def merge(self, other: "ConfigLoader") -> None:
        """Overlay another configuration; its values win, sections merge."""
        self._data = _deep_merge(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)


def _parse_enum(config: ConfigLoader, key: str, default: Enum, label: str) -> Any:
    enum_type = type(default)
    raw = str(config.get(key, default.value)).strip().lower()
    try:
        return enum_type(raw)
    except ValueError as e:
        raise ConfigError(f"Unknown {label}: {raw}") from e


@dataclass
class PlanningSettings:
    """Typed application settings for the planning workflow.

    Attributes:
        mode: Operating mode applied to new sessions.
        gating_policy: How guided mode gates step access.
        has_completed_onboarding: Whether the user has picked a mode yet.
        default_fuel_density: Fuel density (lb/gal) for profiles that omit it.
        recent_flights_limit: Number of flights returned by history.recent().
    """

    mode: PlanningMode = PlanningMode.GUIDED
    gating_policy: GatingPolicy = GatingPolicy.AGGREGATE
    has_completed_onboarding: bool = False
    default_fuel_density: float = 6.0
    recent_flights_limit: int = 10

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "PlanningSettings":
        """Build settings from a loaded configuration.

        Raises:
            ConfigError: If an enumerated value is not recognised.
        """
        settings = cls(
            mode=_parse_enum(config, "planning.mode", PlanningMode.GUIDED, "planning mode"),
            gating_policy=_parse_enum(
                config, "planning.gating_policy", GatingPolicy.AGGREGATE, "gating policy"
            ),
            has_completed_onboarding=bool(config.get("planning.has_completed_onboarding", False)),
            default_fuel_density=float(config.get("weight_balance.default_fuel_density", 6.0)),
            recent_flights_limit=int(config.get("history.recent_limit", 10)),
        )

        logger.debug(
            "Planning settings: mode=%s, gating=%s", settings.mode.value, settings.gating_policy.value
        )
        return settings

    def apply_to(self, config: ConfigLoader) -> None:
        """Write these settings back into a configuration."""
        config.set("planning.mode", self.mode.value)
        config.set("planning.gating_policy", self.gating_policy.value)
        config.set("planning.has_completed_onboarding", self.has_completed_onboarding)
        config.set("weight_balance.default_fuel_density", self.default_fuel_density)
        config.set("history.recent_limit", self.recent_flights_limit)
