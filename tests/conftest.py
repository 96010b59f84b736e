"""Pytest configuration for repository test runs."""

from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from eda_lessons import sample_data  # noqa: E402
from eda_lessons.config import LessonConfig  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers a test attached through configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def raw_tornadoes():
    return sample_data.sample_tornadoes()


@pytest.fixture
def salaries():
    return sample_data.sample_salaries()


@pytest.fixture
def teams():
    return sample_data.sample_teams()


@pytest.fixture
def series_post():
    return sample_data.sample_series_post()


@pytest.fixture
def inflation():
    return sample_data.sample_inflation()


@pytest.fixture
def sample_dir(tmp_path):
    """Directory holding the mock CSV files and SQLite database."""
    data_dir = tmp_path / "data"
    sample_data.write_sample_files(data_dir)
    return data_dir


@pytest.fixture
def lesson_config(sample_dir, tmp_path):
    return LessonConfig(data_dir=sample_dir, figure_dir=tmp_path / "figures")
