"""Version comparison commands for verrange.

``compare`` orders two versions; ``contains`` tests versions against a range.

Typical usage::

    $ verrange compare 1.0-rc1 1.0
    1.0-rc1 < 1.0

    $ verrange contains "[2.0,3.0)" 2.5 3.0
    [OK] 2.5 is in [2.0,3.0)
    [WARNING] 3.0 is not in [2.0,3.0)
"""

from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from verrange.constants import VERSION_SCHEMES
from verrange.exceptions import VerRangeError
from verrange.context import pass_context, VerRangeContext
from verrange.utils import (
    get_logger,
    print_error,
    print_plain,
    print_success,
    print_warning,
)

logger = get_logger("commands.compare")

_SCHEME_OPTION = click.option(
    "--scheme",
    type=click.Choice(list(VERSION_SCHEMES), case_sensitive=False),
    default=None,
    help="Version ordering (overrides the configured version_scheme).",
)


@click.command()
@click.argument("version1")
@click.argument("version2")
@_SCHEME_OPTION
@pass_context
def compare(
    ctx: VerRangeContext,
    version1: str,
    version2: str,
    scheme: Optional[str],
) -> None:
    """Print how VERSION1 orders against VERSION2."""
    try:
        result = ctx.comparator(scheme).compare(version1, version2)
    except VerRangeError as exc:
        print_error(str(exc))
        sys.exit(1)

    symbol = "<" if result < 0 else ">" if result > 0 else "="
    print_plain(f"{version1} {symbol} {version2}")


@click.command()
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@_SCHEME_OPTION
@pass_context
def contains(
    ctx: VerRangeContext,
    range_text: str,
    versions: Tuple[str, ...],
    scheme: Optional[str],
) -> None:
    """Check whether each of VERSIONS falls inside RANGE.

    Exits 1 if any version lies outside the range.
    """
    try:
        rng = ctx.parser().parse(range_text)
        cmp = ctx.comparator(scheme)
        results = [(version, rng.contains(version, cmp)) for version in versions]
    except VerRangeError as exc:
        print_error(str(exc))
        sys.exit(1)

    outside = 0
    for version, inside in results:
        if inside:
            print_success(f"{version} is in {rng}")
        else:
            outside += 1
            print_warning(f"{version} is not in {rng}")

    logger.info("%d of %d version(s) outside %s", outside, len(results), rng)
    if outside:
        sys.exit(1)
