from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def configure_logging(log_dir: str | Path | None = None, level: int = logging.INFO) -> Path | None:
    """Send log lines to the console and, optionally, to a timestamped file.

    Safe to call again when a notebook cell is re-run: existing handlers on
    the root logger are removed first so lines are not duplicated.

    Returns the log file path, or None when only the console is used.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicate logs in notebook reruns
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is None:
        return None

    os.makedirs(log_dir, exist_ok=True)
    run_timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    log_path = Path(log_dir) / f"run_{run_timestamp}.log"

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logging.info("Logs saved to %s", log_path)
    return log_path
