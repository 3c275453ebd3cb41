"""
Centralized constants for verrange.

This module defines immutable values used across verrange, including the
range bracket alphabet, version ordering schemes, configuration defaults,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Mapping, Sequence

# ---------------------------------------------------------------------------
# Range grammar
# ---------------------------------------------------------------------------

#: Inclusive lower bracket.
OPEN_INC: Final[str] = "["

#: Exclusive lower bracket (Maven style).
OPEN_EXC: Final[str] = "("

#: Exclusive lower bracket (Ivy style), accepted on input only.
OPEN_EXC_IVY: Final[str] = "]"

#: Inclusive upper bracket.
CLOSE_INC: Final[str] = "]"

#: Exclusive upper bracket (Maven style).
CLOSE_EXC: Final[str] = ")"

#: Exclusive upper bracket (Ivy style), accepted on input only.
CLOSE_EXC_IVY: Final[str] = "["

#: Opening marker of an unbounded lower side.
LOWER_INFINITE: Final[str] = "("

#: Closing marker of an unbounded upper side.
UPPER_INFINITE: Final[str] = ")"

#: Separator between the two bounds.
SEPARATOR: Final[str] = ","

# ---------------------------------------------------------------------------
# Version ordering
# ---------------------------------------------------------------------------

#: Host build tool ordering (dotted parts, special qualifiers).
SCHEME_GRADLE: Final[str] = "gradle"

#: PEP 440 ordering via ``packaging``.
SCHEME_PEP440: Final[str] = "pep440"

#: All supported version ordering schemes.
VERSION_SCHEMES: Final[Sequence[str]] = (SCHEME_GRADLE, SCHEME_PEP440)

#: Characters splitting a version into parts under the gradle scheme.
VERSION_PART_SEPARATORS: Final[str] = ".-_+"

#: Qualifiers ranked above any other non-numeric part, lowest first.
SPECIAL_QUALIFIERS: Final[Mapping[str, int]] = {
    "rc": 1,
    "snapshot": 2,
    "final": 3,
    "ga": 4,
    "release": 5,
    "sp": 6,
}

#: Qualifier ranked below any other non-numeric part.
DEV_QUALIFIER: Final[str] = "dev"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Default version ordering scheme.
DEFAULT_VERSION_SCHEME: Final[str] = SCHEME_GRADLE

#: Accept Ivy-style exclusive brackets (``]1.0,2.0[``) when parsing.
DEFAULT_IVY_BRACKETS: Final[bool] = True

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
