"""Unit tests for config overrides and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from eda_lessons.config import DATA_DIR_ENV, FIGURE_DIR_ENV, LOG_DIR_ENV, LessonConfig, load_config
from eda_lessons.logging_setup import configure_logging


def test_defaults(monkeypatch) -> None:
    for name in (DATA_DIR_ENV, LOG_DIR_ENV, FIGURE_DIR_ENV):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config == LessonConfig()
    assert config.tornado_path == Path("data") / "texas_tornadoes.csv"
    assert config.baseball_path == Path("data") / "lahman.sqlite"
    assert config.log_dir is None
    assert config.cutoff == pd.Timestamp("2010-01-01")


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "d"))
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "l"))
    monkeypatch.setenv(FIGURE_DIR_ENV, str(tmp_path / "f"))

    config = load_config()

    assert config.data_dir == tmp_path / "d"
    assert config.log_dir == tmp_path / "l"
    assert config.figure_dir == tmp_path / "f"
    assert config.inflation_path == tmp_path / "d" / "inflation.csv"


def test_keyword_overrides_beat_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))

    config = load_config(data_dir=str(tmp_path / "kw"), figure_dir=None, cutoff="2015-06-01")

    assert config.data_dir == tmp_path / "kw"
    assert config.figure_dir == Path("figures")
    assert config.cutoff == pd.Timestamp("2015-06-01")


def test_configure_logging_console_only() -> None:
    assert configure_logging() is None

    root = logging.getLogger()
    stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1


def test_configure_logging_rerun_does_not_duplicate(tmp_path) -> None:
    first = configure_logging(tmp_path / "logs")
    second = configure_logging(tmp_path / "logs")

    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert first.parent == second.parent == tmp_path / "logs"

    logging.getLogger("eda_lessons.test").warning("hello from the test")
    file_handlers[0].flush()
    text = second.read_text()
    assert "| WARNING | hello from the test" in text
