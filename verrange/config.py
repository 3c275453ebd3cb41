"""Configuration file loader for verrange.

Supports two formats:

- ``verrange.toml`` — settings under a ``[verrange]`` table
- ``pyproject.toml`` — settings under a ``[tool.verrange]`` table

Discovery order:

1. Explicit path from ``--config`` or ``VERRANGE_CONFIG``
2. ``verrange.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.verrange]`` section

Precedence: defaults < config file < CLI options.

Example (``verrange.toml``)::

    [verrange]
    version_scheme = "pep440"
    ivy_brackets = false
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from verrange.exceptions import ConfigError
from verrange.utils.logger import get_logger
from verrange.constants import (
    DEFAULT_IVY_BRACKETS,
    DEFAULT_VERSION_SCHEME,
    VERSION_SCHEMES,
)

logger = get_logger("config")

_KNOWN_OPTIONS = frozenset({"version_scheme", "ivy_brackets"})


@dataclass
class VerRangeConfig:
    """Parsed and validated verrange configuration.

    Attributes:
        version_scheme: Version ordering used for intersections
            (``"gradle"`` or ``"pep440"``).
        ivy_brackets: Accept ``]1.0,2.0[`` style exclusive brackets.
        source_path: File the settings came from, or ``None`` for defaults.
    """

    version_scheme: str = DEFAULT_VERSION_SCHEME
    ivy_brackets: bool = DEFAULT_IVY_BRACKETS

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options as a dictionary for debug logging."""
        return {
            "version_scheme": self.version_scheme,
            "ivy_brackets": self.ivy_brackets,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Path to the config file, or ``None`` if none was found.

    Raises:
        ConfigError: ``explicit_path`` does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    verrange_toml = cwd / "verrange.toml"
    if verrange_toml.is_file():
        logger.debug("Found verrange.toml: %s", verrange_toml)
        return verrange_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_section(pyproject_toml):
        logger.debug("Found [tool.verrange] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check whether ``pyproject.toml`` has a ``[tool.verrange]`` table.

    An unreadable or invalid ``pyproject.toml`` counts as not having one;
    it belongs to the surrounding project, not to verrange.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable pyproject.toml: %s", exc)
        return False
    return "verrange" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> VerRangeConfig:
    """Load and validate verrange configuration.

    Args:
        config_path: Explicit config file. ``None`` triggers discovery
            (see :func:`discover_config_file`).

    Returns:
        Validated :class:`VerRangeConfig`, with defaults when no file exists.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys or bad values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return VerRangeConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("verrange", {})
    else:
        section = raw.get("verrange", {})

    if not section:
        logger.debug("Config file has no verrange section, using defaults")
        return VerRangeConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(section: Dict[str, Any], *, config_path: str) -> VerRangeConfig:
    """Validate a ``[verrange]`` table and build the config from it.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    config = VerRangeConfig()

    unknown = set(section) - _KNOWN_OPTIONS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "version_scheme" in section:
        val = section["version_scheme"]
        if not isinstance(val, str):
            raise ConfigError(
                f"version_scheme must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="version_scheme",
            )
        if val not in VERSION_SCHEMES:
            raise ConfigError(
                f"version_scheme must be one of {', '.join(VERSION_SCHEMES)}, "
                f"got {val!r}",
                config_path=config_path,
                option="version_scheme",
            )
        config.version_scheme = val

    if "ivy_brackets" in section:
        val = section["ivy_brackets"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"ivy_brackets must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="ivy_brackets",
            )
        config.ivy_brackets = val

    return config
