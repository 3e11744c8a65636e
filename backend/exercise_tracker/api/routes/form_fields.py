"""Form Field Helpers — trimming and lenient integer parsing for raw request fields.

Invariants:
    - parse_int never raises: unparseable input yields float("nan")
    - Parsing reads optional whitespace, an optional sign and the leading digits
      ("30min" -> 30, "3.7" -> 3, " -5" -> -5, "abc" -> nan)
"""

import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(raw: str | None) -> float:
    if raw is None:
        return math.nan
    match = _LEADING_INT.match(raw)
    if not match:
        return math.nan
    return int(match.group(1))


def trimmed(raw: str | None) -> str:
    """Strip surrounding whitespace; a missing field reads as an empty string."""
    return (raw or "").strip()


def trimmed_or_none(raw: str | None) -> str | None:
    """Strip surrounding whitespace; missing or blank fields read as None."""
    value = trimmed(raw)
    return value or None
