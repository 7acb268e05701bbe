"""Duration string parsing.

Accepts the compact form used by node agent flags: an optional sign
followed by one or more ``<number><unit>`` groups, e.g. "300ms", "7s",
"1h30m" or "-1.5h". Valid units are ns, us (or µs), ms, s, m and h.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_NUMBER = r"(?:\d+\.?\d*|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|h|m|s)"
_DURATION_RE = re.compile(rf"([+-]?)((?:{_NUMBER}{_UNIT})+)")
_GROUP_RE = re.compile(rf"({_NUMBER})({_UNIT})")
_ZERO_RE = re.compile(r"[+-]?0")

# Largest magnitude representable as a signed 64-bit nanosecond count
_MAX_NS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Args:
        text: Duration such as "7s", "2h45m" or "0"

    Returns:
        The parsed duration. Precision below one microsecond is truncated.

    Raises:
        ValueError: If text is empty or not a valid duration, or
            if its magnitude exceeds about 2562047h.

    Example:
        >>> parse_duration("1m30s")
        datetime.timedelta(seconds=90)
    """
    if _ZERO_RE.fullmatch(text):
        return timedelta(0)
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid duration {text!r}")

    sign, body = match.groups()
    total_ns = Decimal(0)
    for number, unit in _GROUP_RE.findall(body):
        total_ns += Decimal(number) * _UNIT_NS[unit]
        if total_ns > _MAX_NS:
            raise ValueError(f"duration {text!r} out of range")

    micros = int(total_ns / 1000)
    if sign == "-":
        micros = -micros
    return timedelta(microseconds=micros)


__all__ = ["parse_duration"]
