"""Uptime probe and the log start time derived from it."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta

import psutil

from . import config
from .starttime import get_start_time

logger = logging.getLogger(__name__)


def get_uptime() -> timedelta:
    """Return the time elapsed since the host booted (never negative)."""
    boot = psutil.boot_time()
    secs = max(0.0, time.time() - boot)
    return timedelta(seconds=secs)


def get_log_start_time(
    lookback: str | None = None,
    delay: str | None = None,
    now: datetime | None = None,
) -> datetime:
    """Compute the log-scan start time for this host.

    Args:
        lookback: Duration string; defaults to the LOG_LOOKBACK setting
        delay: Duration string; defaults to the LOG_DELAY setting
        now: Reference time; defaults to the current local time

    Raises:
        InvalidDurationFormat: If lookback or delay cannot be parsed.
    """
    if lookback is None:
        lookback = config.settings.LOOKBACK
    if delay is None:
        delay = config.settings.DELAY
    if now is None:
        now = datetime.now().astimezone()
    uptime = get_uptime()
    logger.debug("uptime %s", uptime)
    return get_start_time(now, uptime, lookback, delay)


__all__ = ["get_uptime", "get_log_start_time"]
