"""Central configuration for node_diag."""

from __future__ import annotations

import logging
import os

from .duration import parse_duration
from .models.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_OS_RELEASE_PATH = "/etc/os-release"


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Returns:
        Settings object with all configuration values.

    Note:
        LOG_LOOKBACK and LOG_DELAY are kept as raw strings; an empty value
        means "unset" and is distinct from "0s".
    """
    os_release_path = os.environ.get("OS_RELEASE_PATH") or DEFAULT_OS_RELEASE_PATH
    lookback = (os.environ.get("LOG_LOOKBACK") or "").strip()
    delay = (os.environ.get("LOG_DELAY") or "").strip()

    return Settings(
        OS_RELEASE_PATH=os_release_path,
        LOOKBACK=lookback,
        DELAY=delay,
    )


settings = _read_settings()


def validate_settings(current: Settings | None = None) -> list[str]:
    """Validate configuration and log a warning for each issue.

    Returns:
        The list of problems found (empty when everything looks fine).
    """
    current = current or settings
    problems: list[str] = []
    durations = (("LOG_LOOKBACK", current.LOOKBACK), ("LOG_DELAY", current.DELAY))
    for name, value in durations:
        if not value:
            continue
        try:
            parse_duration(value)
        except ValueError:
            problems.append(f"{name}={value!r} is not a valid duration")
    if not os.path.exists(current.OS_RELEASE_PATH):
        problems.append(f"OS_RELEASE_PATH {current.OS_RELEASE_PATH} does not exist")

    for problem in problems:
        logger.warning(problem)
    return problems


__all__ = ["DEFAULT_OS_RELEASE_PATH", "settings", "validate_settings"]
