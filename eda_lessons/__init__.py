"""Helpers shared by the CSAI exploratory data analysis notebooks.

The notebooks under ``notebooks/`` import from here so every cleaning, join
and plotting step can also be run headless and tested.
"""

from eda_lessons.config import LessonConfig, load_config
from eda_lessons.errors import LessonDataError
from eda_lessons.logging_setup import configure_logging

__version__ = "0.1.0"
__all__ = ["LessonConfig", "LessonDataError", "configure_logging", "load_config"]
