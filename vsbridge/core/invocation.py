"""Parsing of the calling tool's positional arguments.

The calling tool substitutes its own placeholders into the command line, so
anything that does not parse is treated as absent rather than as an error.
"""

import re

from vsbridge.domain.variants import VARIANT_PROFILES

# Optional sign and ASCII digits; no underscores or other Unicode digits
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    text = raw.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_line_number(raw: str | None) -> int | None:
    """Parse the line argument.

    Args:
        raw: Argument text, or None if absent.

    Returns:
        Line number >= 1, or None when navigation should be skipped
        (absent, non-numeric, zero or negative).
    """
    line = _parse_int(raw)
    if line is None or line < 1:
        return None
    return line


def parse_variant(raw: str | None, default: int) -> int:
    """Parse the variant argument.

    Args:
        raw: Argument text, or None if absent.
        default: Variant used when raw is absent, unparsable or unknown.

    Returns:
        A known variant year.
    """
    year = _parse_int(raw)
    if year is None or year not in VARIANT_PROFILES:
        return default
    return year
