"""Log-scan start time calculation.

A log watcher that starts on a node needs to decide how far back to read.
By default that is "now": nothing before the agent started is replayed.
Two optional knobs change this:

- lookback: replay up to this much history, but never from before boot.
- delay: skip everything logged during the first ``delay`` after boot,
  giving the node time to settle.

The returned time is the later of the two resulting bounds. When delay is
larger than the current uptime the start time lands in the future, and
the watcher simply waits for it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from .duration import parse_duration
from .errors import InvalidDurationFormat

logger = logging.getLogger(__name__)


def _parse_optional(field: str, value: str) -> timedelta | None:
    """Parse an optional duration; empty means unset."""
    if not value:
        return None
    try:
        return parse_duration(value)
    except ValueError as e:
        raise InvalidDurationFormat(field, value) from e


def get_start_time(
    now: datetime, uptime: timedelta, lookback: str = "", delay: str = ""
) -> datetime:
    """Compute the time from which node logs should be scanned.

    Args:
        now: Current time; its timezone (if any) is carried through
        uptime: Time elapsed since the node booted
        lookback: Optional duration string, "" when unset
        delay: Optional duration string, "" when unset

    Returns:
        max(boot time + delay, now - lookback), where an unset delay counts
        as zero and an unset lookback means "now".

    Raises:
        InvalidDurationFormat: If lookback or delay is set but unparseable,
            or moves the result outside the representable datetime range.

    Example:
        >>> now = datetime(2024, 1, 1, 12, 0, 0)
        >>> get_start_time(now, timedelta(seconds=10), "6s", "7s")
        datetime.datetime(2024, 1, 1, 11, 59, 57)
    """
    delay_d = _parse_optional("delay", delay)
    lookback_d = _parse_optional("lookback", lookback)

    start = now - uptime
    if delay_d is not None:
        # May end up after now when delay > uptime; that is intended.
        try:
            start += delay_d
        except OverflowError as e:
            raise InvalidDurationFormat("delay", delay) from e

    lookback_start = now
    if lookback_d is not None:
        try:
            lookback_start = now - lookback_d
        except OverflowError as e:
            raise InvalidDurationFormat("lookback", lookback) from e
    if start < lookback_start:
        start = lookback_start

    logger.debug(
        "start time %s (uptime=%s lookback=%r delay=%r)",
        start.isoformat(),
        uptime,
        lookback,
        delay,
    )
    return start


__all__ = ["get_start_time"]
