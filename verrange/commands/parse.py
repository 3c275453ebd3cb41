"""Parse command implementation for verrange.

Parses one or more range strings and shows their bounds together with the
canonical spelling of each range.

Typical usage::

    $ verrange parse "[1.0,2.0)" "(,5.0]"
    $ verrange parse "]1.0,2.0[" --format json
    $ verrange parse "[2.0,1.0]" --scheme gradle    # rejected, bounds reversed
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List, Optional, Tuple

import click

from verrange.constants import VERSION_SCHEMES
from verrange.core import RangeParser
from verrange.exceptions import VerRangeError
from verrange.models import VersionRange
from verrange.context import pass_context, VerRangeContext
from verrange.utils import get_logger, print_error, print_plain, print_table

logger = get_logger("commands.parse")


@click.command()
@click.argument("ranges", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "simple", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--scheme",
    type=click.Choice(list(VERSION_SCHEMES), case_sensitive=False),
    default=None,
    help="Reject ranges whose bounds are out of order under this ordering.",
)
@pass_context
def parse(
    ctx: VerRangeContext,
    ranges: Tuple[str, ...],
    format: str,
    scheme: Optional[str],
) -> None:
    """Parse version ranges and show their bounds.

    Exits 1 if any range is malformed.
    """
    parser = RangeParser(
        ivy_brackets=ctx.config.ivy_brackets,
        cmp=ctx.comparator(scheme) if scheme else None,
    )

    parsed: List[Tuple[str, VersionRange]] = []
    failed = 0
    for text in ranges:
        try:
            parsed.append((text, parser.parse(text)))
        except VerRangeError as exc:
            failed += 1
            print_error(f"{text}: {exc}")

    logger.info("Parsed %d of %d range(s)", len(parsed), len(ranges))

    format = format.lower()
    if format == "json":
        _display_json(parsed)
    elif format == "simple":
        for _, rng in parsed:
            print_plain(rng.to_string())
    else:
        _display_table(parsed)

    if failed:
        sys.exit(1)


def _display_table(parsed: List[Tuple[str, VersionRange]]) -> None:
    rows: List[Dict[str, Any]] = [
        {
            "Input": text,
            "Lower": str(rng.lower),
            "Upper": str(rng.upper),
            "Canonical": rng.to_string(),
        }
        for text, rng in parsed
    ]
    print_table(
        rows,
        title="Version ranges",
        column_styles={"Canonical": {"style": "bound", "no_wrap": True}},
    )


def _display_json(parsed: List[Tuple[str, VersionRange]]) -> None:
    data = [dict(input=text, **rng.to_dict()) for text, rng in parsed]
    click.echo(json.dumps(data, indent=2))
