"""Output locations for generated datasets."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

DEFAULT_BASE_DIR = Path("data/mock")
RUN_DIR_PREFIX = "mock_data"
RUN_TIMEZONE = ZoneInfo("Europe/Stockholm")


def run_dir_name(now: Optional[datetime] = None) -> str:
    """Name like ``mock_data_jun_07_14_05`` for the given moment."""

    now = now or datetime.now(RUN_TIMEZONE)
    return f"{RUN_DIR_PREFIX}_{now.strftime('%b').lower()}_{now:%d_%H_%M}"


def default_output_dir(base: Path = DEFAULT_BASE_DIR, now: Optional[datetime] = None) -> Path:
    return base / run_dir_name(now)
