"""Paths and settings the notebooks share.

Instructors change these before class (or export the environment variables)
so every cell reads from the same place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import pandas as pd

DATA_DIR_ENV = "EDA_LESSONS_DATA_DIR"
LOG_DIR_ENV = "EDA_LESSONS_LOG_DIR"
FIGURE_DIR_ENV = "EDA_LESSONS_FIGURE_DIR"


@dataclass(frozen=True)
class LessonConfig:
    data_dir: Path = Path("data")
    tornado_file: str = "texas_tornadoes.csv"
    baseball_db: str = "lahman.sqlite"
    inflation_file: str = "inflation.csv"
    log_dir: Path | None = None
    figure_dir: Path = Path("figures")
    figure_size: tuple[float, float] = (8.0, 5.0)
    # Share of events after this moment is one of the tornado checkpoints
    cutoff: pd.Timestamp = field(default_factory=lambda: pd.Timestamp("2010-01-01"))

    @property
    def tornado_path(self) -> Path:
        return self.data_dir / self.tornado_file

    @property
    def baseball_path(self) -> Path:
        return self.data_dir / self.baseball_db

    @property
    def inflation_path(self) -> Path:
        return self.data_dir / self.inflation_file


def load_config(**overrides) -> LessonConfig:
    """Build the config from defaults, then environment, then keyword overrides."""
    config = LessonConfig()
    env_values = {}
    if os.environ.get(DATA_DIR_ENV):
        env_values["data_dir"] = Path(os.environ[DATA_DIR_ENV])
    if os.environ.get(LOG_DIR_ENV):
        env_values["log_dir"] = Path(os.environ[LOG_DIR_ENV])
    if os.environ.get(FIGURE_DIR_ENV):
        env_values["figure_dir"] = Path(os.environ[FIGURE_DIR_ENV])
    config = replace(config, **env_values)

    cleaned = {key: value for key, value in overrides.items() if value is not None}
    for key in ("data_dir", "log_dir", "figure_dir"):
        if key in cleaned:
            cleaned[key] = Path(cleaned[key])
    if "cutoff" in cleaned:
        cleaned["cutoff"] = pd.Timestamp(cleaned["cutoff"])
    return replace(config, **cleaned)
