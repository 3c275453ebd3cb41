"""
Custom exception hierarchy for verrange.

All exceptions inherit from :class:`VerRangeError` and carry optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

An empty intersection is not an error and is never signalled through
this hierarchy; see :meth:`verrange.core.intersector.RangeIntersector.intersect`.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class VerRangeError(Exception):
    """Base exception for all verrange errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ParseError(VerRangeError):
    """Raised when a version range string cannot be parsed.

    Args:
        message: Error description.
        range_text: The offending range string.
        position: Which side of the range was invalid, if known.
    """

    __slots__ = ("range_text", "position")

    def __init__(
        self,
        message: str,
        *,
        range_text: Optional[str] = None,
        position: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "range", _truncate(range_text) if range_text else range_text)
        _add_if(details, "position", position)

        super().__init__(message, details)

        self.range_text = range_text
        self.position = position


class VersionError(VerRangeError):
    """Raised when a version cannot be ordered under the selected scheme.

    Args:
        message: Error description.
        version: The version string that failed.
        scheme: Name of the ordering scheme in use.
    """

    __slots__ = ("version", "scheme")

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        scheme: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version)
        _add_if(details, "scheme", scheme)

        super().__init__(message, details)

        self.version = version
        self.scheme = scheme


class ConfigError(VerRangeError):
    """Raised when configuration is invalid or cannot be loaded.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
