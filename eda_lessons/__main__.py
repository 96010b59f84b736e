"""Render a lesson's figures outside a notebook.

    python -m eda_lessons samples --data-dir data
    python -m eda_lessons tornadoes --data-dir data --out figures
    python -m eda_lessons baseball --data-dir data --out figures
"""

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib

from eda_lessons.config import load_config
from eda_lessons.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eda_lessons", description=__doc__.splitlines()[0])
    parser.add_argument("lesson", choices=["tornadoes", "baseball", "samples"])
    parser.add_argument("--data-dir", help="folder with the CSV files and SQLite database")
    parser.add_argument("--out", dest="figure_dir", help="folder for PNG figures")
    parser.add_argument("--log-dir", help="also write a run_YYYYMMDD_HHMM.log file here")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(data_dir=args.data_dir, figure_dir=args.figure_dir, log_dir=args.log_dir)
    configure_logging(config.log_dir)

    # Headless: no window to draw into
    matplotlib.use("Agg")
    from eda_lessons.lessons import run_baseball_lesson, run_tornado_lesson
    from eda_lessons.sample_data import write_sample_files

    if args.lesson == "samples":
        write_sample_files(config.data_dir, config)
        return 0

    try:
        if args.lesson == "tornadoes":
            result = run_tornado_lesson(config)
        else:
            result = run_baseball_lesson(config)
    except FileNotFoundError as e:
        logging.error("%s (run `python -m eda_lessons samples` for mock data)", e)
        return 1

    for name, path in result["figures"].items():
        print(f"{name}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
