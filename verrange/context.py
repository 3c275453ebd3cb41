"""
Shared context object for verrange CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from verrange.config import VerRangeConfig
from verrange.core import RangeIntersector, RangeParser, VersionComparator


class VerRangeContext:
    """Per-invocation state shared by CLI subcommands.

    Attributes:
        config_path: Configuration file in use, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; defaults until the group callback runs.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: VerRangeConfig = VerRangeConfig()

    def comparator(self, scheme: Optional[str] = None) -> VersionComparator:
        """Return the version ordering, preferring ``scheme`` over config."""
        return VersionComparator(scheme or self.config.version_scheme)

    def parser(self) -> RangeParser:
        return RangeParser(ivy_brackets=self.config.ivy_brackets)

    def intersector(self, scheme: Optional[str] = None) -> RangeIntersector:
        return RangeIntersector(self.comparator(scheme))


#: Click decorator injecting :class:`VerRangeContext` into commands.
pass_context = click.make_pass_decorator(VerRangeContext, ensure=True)
