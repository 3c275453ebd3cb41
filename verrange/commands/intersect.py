"""Intersect command implementation for verrange.

Intersects two or more version ranges and prints the range satisfying all
of them.

Typical usage::

    $ verrange intersect "[1.0,10.0]" "[3.0,5.0)"
    [3.0,5.0)

    $ verrange intersect "(,5.0)" "[2.0,)" "[3.0,4.0]" --format json

    $ verrange intersect "[1.0,2.0)" "[2.0,3.0)"
    [WARNING] Ranges do not overlap
"""

from __future__ import annotations

import sys
import json
from typing import List, Optional, Tuple

import click

from verrange.constants import VERSION_SCHEMES
from verrange.exceptions import VerRangeError
from verrange.models import VersionRange
from verrange.context import pass_context, VerRangeContext
from verrange.utils import get_logger, print_error, print_plain, print_warning

logger = get_logger("commands.intersect")


@click.command()
@click.argument("ranges", nargs=-1, required=True)
@click.option(
    "--scheme",
    type=click.Choice(list(VERSION_SCHEMES), case_sensitive=False),
    default=None,
    help="Version ordering (overrides the configured version_scheme).",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["simple", "json"], case_sensitive=False),
    default="simple",
    help="Output format.",
)
@pass_context
def intersect(
    ctx: VerRangeContext,
    ranges: Tuple[str, ...],
    scheme: Optional[str],
    format: str,
) -> None:
    """Print the intersection of all RANGES.

    Exits 1 when the ranges do not overlap or a range is malformed.
    """
    if len(ranges) < 2:
        raise click.UsageError("intersect needs at least two ranges")

    scheme = scheme.lower() if scheme else None
    parser = ctx.parser()

    try:
        parsed: List[VersionRange] = [parser.parse(text) for text in ranges]
        result = ctx.intersector(scheme).intersect_all(parsed)
    except VerRangeError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.info(
        "Intersected %d range(s) using the %s ordering",
        len(parsed),
        scheme or ctx.config.version_scheme,
    )

    if format.lower() == "json":
        click.echo(
            json.dumps(
                {
                    "ranges": [rng.to_string() for rng in parsed],
                    "intersection": result.to_string() if result else None,
                    "empty": result is None,
                },
                indent=2,
            )
        )
    elif result is not None:
        print_plain(result.to_string())
    else:
        print_warning("Ranges do not overlap")

    if result is None:
        sys.exit(1)
