"""
Command-line interface for verrange.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from verrange.config import load_config
from verrange.__version__ import __version__
from verrange.context import VerRangeContext
from verrange.exceptions import ConfigError, VerRangeError
from verrange.utils.console import print_error, print_warning, reconfigure_console
from verrange.utils.logger import get_logger, level_for_verbosity, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="VERRANGE_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="VERRANGE_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="verrange",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """verrange — parse and intersect version ranges.

    \b
    Available commands:
      verrange parse RANGE...            Show the bounds of ranges
      verrange intersect A B [RANGE...]  Intersect ranges
      verrange compare V1 V2             Order two versions
      verrange contains RANGE V...       Test versions against a range

    \b
    Examples:
      verrange intersect "[1.0,10.0]" "[3.0,5.0)"
      verrange parse "(,5.0]" --format json
      verrange -v compare 1.0-rc1 1.0
    """
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    verrange_ctx = VerRangeContext()
    verrange_ctx.config_path = config or loaded_config.source_path
    verrange_ctx.color = color
    verrange_ctx.verbose = verbose
    verrange_ctx.config = loaded_config
    ctx.obj = verrange_ctx

    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("verrange v%s", __version__)
    logger.debug("Config path: %s", verrange_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())


from verrange.commands.parse import parse  # noqa: E402
from verrange.commands.intersect import intersect  # noqa: E402
from verrange.commands.compare import compare, contains  # noqa: E402

cli.add_command(parse)
cli.add_command(intersect)
cli.add_command(compare)
cli.add_command(contains)


def main() -> int:
    """Main entry point for the verrange CLI.

    Returns:
        Exit code:
            0   Success
            1   Application error, empty intersection or failed check
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except VerRangeError as exc:
        print_error(str(exc))
        logger.debug("VerRangeError details: %s", exc.details or "<none>", exc_info=True)
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else (0 if exc.code is None else 1)

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
