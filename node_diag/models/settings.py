"""Configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for node_diag."""

    OS_RELEASE_PATH: str
    LOOKBACK: str
    DELAY: str
