"""Dict-based configuration for molattr.

This module provides a simple JSON/YAML-backed configuration represented as a
nested Python dict while still exposing a Config class API. Unknown keys are
preserved, and only a small set of known keys have defaults so users can add
new keys without changing the code.
"""

from __future__ import annotations

import copy
import functools
import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOGGING_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# This is the single source of truth for required/known configuration keys.
DEFAULT_CONFIG: dict[str, Any] = {
    "perception": {
        # Hydrogens bond to a single atom and are never angle vertices
        "skip_hydrogen_vertices": True,
        # Keep torsions whose distal atoms are all hydrogens
        "include_proton_rotors": True,
        # Measure angles/dihedrals from coordinates during perception
        "measure_geometry": True,
    },
    "crystal": {
        # Fractional components this close to 1.0 wrap to 0.0
        "wrap_tolerance": 1e-8,
    },
    "logging": {
        # One of "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"
        "level": "INFO",
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dicts, with values from override taking precedence.

    Leaves inputs unmodified and returns a new merged dict.
    """
    result = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


class _Section:
    """Lightweight wrapper to provide attribute access to a nested dict section."""

    def __init__(self, root: dict[str, Any], path: list[str]):
        """Initialize the section wrapper.

        Parameters
        ----------
        root:
            The root dictionary of the configuration.
        path:
            List of keys to traverse to reach this section.

        """
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_path", path)

    def _node(self) -> dict[str, Any]:
        """Resolve the path to the current node in the dictionary."""
        node = self._root
        for key in self._path:
            node = node.setdefault(key, {})
        return node

    def __getattr__(self, name: str):
        """Get a value or a subsection by attribute name."""
        node = self._node()
        if name in node:
            val = node[name]
            if isinstance(val, dict):
                return _Section(self._root, self._path + [name])
            return val
        raise AttributeError(
            f"{name} not found in section {'.'.join(self._path) if self._path else 'root'}"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        """Set a value in the configuration by attribute name."""
        node = self._node()
        node[name] = value

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the section as a dictionary."""
        return copy.deepcopy(self._node())

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by key, similar to dict.get."""
        return self._node().get(key, default)


class Config:
    """Dict-backed configuration with attribute access for sections.

    Example:
    -------
    >>> cfg = load_config_from_file()
    >>> print(cfg.perception.measure_geometry)
    >>> cfg.crystal.wrap_tolerance = 1e-6
    >>> save_config_to_file(cfg, "config.json")

    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize configuration with optional overrides.

        Parameters
        ----------
        data:
            Optional dictionary of configuration overrides.

        """
        merged = _deep_merge(DEFAULT_CONFIG, data or {})
        self._data: dict[str, Any] = merged
        # basic validation to catch obvious mistakes early
        validate_config(self)

    @property
    def perception(self) -> _Section:
        """Return the angle/torsion perception section of the configuration."""
        return _Section(self._data, ["perception"])

    @property
    def crystal(self) -> _Section:
        """Return the unit cell section of the configuration."""
        return _Section(self._data, ["crystal"])

    @property
    def logging(self) -> _Section:
        """Return the logging section of the configuration."""
        return _Section(self._data, ["logging"])

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying configuration dictionary."""
        return copy.deepcopy(self._data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create a :class:`Config` instance from a plain dictionary."""
        return cls(data)


@functools.lru_cache(maxsize=1)
def _read_config_file(filepath: str) -> dict[str, Any]:
    """Read and parse configuration file with caching.

    Returns an empty dict if the file does not exist.
    """
    if not os.path.exists(filepath):
        return {}

    with open(filepath, encoding="utf-8") as f:
        if filepath.endswith(".json"):
            return json.load(f)
        elif filepath.endswith(".yaml") or filepath.endswith(".yml"):
            import yaml

            return yaml.safe_load(f)
        else:
            raise ValueError("Config file must be JSON or YAML format")


def load_config_from_file(filepath: str = "config.json") -> Config:
    """Load configuration from a JSON/YAML file and deep-merge with defaults.

    This function caches the raw dictionary loaded from the file to avoid
    repeated I/O and parsing. The returned Config object is always a new
    instance, safe to modify.

    Args:
        filepath: Path to the config file. If it doesn't exist, defaults are used.

    Returns:
        A :class:`Config` instance with data merged with :data:`DEFAULT_CONFIG`.
        Unknown keys are preserved.

    """
    user_cfg = _read_config_file(filepath)

    if user_cfg is not None and not isinstance(user_cfg, dict):
        raise ValueError("Configuration file must contain a JSON/YAML object at the root")

    cfg = Config.from_dict(copy.deepcopy(user_cfg))
    validate_config(cfg)
    return cfg


def save_config_to_file(config: Any, filepath: str) -> None:
    """Save configuration to JSON/YAML file.

    Accepts either a :class:`Config` instance or a plain dictionary.
    """
    cfg_dict = config.to_dict() if isinstance(config, Config) else dict(config)

    with open(filepath, "w", encoding="utf-8") as f:
        if filepath.endswith(".json"):
            json.dump(cfg_dict, f, indent=2)
        elif filepath.endswith(".yaml") or filepath.endswith(".yml"):
            import yaml

            yaml.safe_dump(cfg_dict, f, default_flow_style=False, sort_keys=False)
        else:
            raise ValueError("Config file must be JSON or YAML format")

    # Invalidate cache since the file on disk has changed
    _read_config_file.cache_clear()


def validate_config(config: Config) -> None:
    """Validate perception, crystal and logging settings in a Config instance.

    Checks basic types and value ranges for the known options.
    Raises ValueError if an invalid value is found.
    """
    perception = config.perception
    for key in ("skip_hydrogen_vertices", "include_proton_rotors", "measure_geometry"):
        value = perception.get(key)
        if not isinstance(value, bool):
            raise ValueError(f"perception.{key} must be a boolean, got {value!r}")

    tolerance = config.crystal.get("wrap_tolerance")
    try:
        val = float(tolerance)
        if val <= 0:
            raise ValueError
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"crystal.wrap_tolerance must be a positive float, got {tolerance!r}"
        ) from exc

    level = str(config.logging.get("level") or "").strip().upper()
    if level not in LOGGING_LEVELS:
        raise ValueError(
            f"logging.level must be one of {', '.join(LOGGING_LEVELS)}, got {level!r}"
        )


# Default configuration instance for convenience
default_config = Config()
