"""Tiny mock versions of the lesson tables.

Used for live demos when the real files are not on the cluster yet, and by
the tests. The baseball rows are made up; only the shape matches Lahman.
"""

from __future__ import annotations

import csv
import logging
import sqlite3
from pathlib import Path

import numpy as np
import pandas as pd

from eda_lessons.config import LessonConfig

logger = logging.getLogger(__name__)


def sample_tornadoes() -> pd.DataFrame:
    rows = [
        ("2008-04-10", "0005", 32.78, -96.80, 32.85, -96.70, "EF1", "Trained Spotter"),
        ("2009-05-03", "0745", 33.58, -101.85, 33.60, -101.80, "EF0", "Law Enforcement"),
        ("2010-05-14", "1330", 31.55, -97.15, 31.60, -97.05, "EF2", "Trained Spotter"),
        ("2011-05-24", "1759", 30.27, -97.74, 30.30, -97.70, "EF3", "Storm Chaser"),
        ("2012-05-30", "1800", 35.22, -101.83, np.nan, np.nan, "EFU", "Public"),
        ("2013-06-01", "2115", 29.76, -95.37, 29.80, -95.30, "F2", "Emergency Manager"),
        ("2013-03-18", "0600", 27.80, -97.40, 27.82, -97.38, "EF0", "Trained Spotter"),
        ("2014-04-27", "1545", 32.45, -99.73, 32.50, -99.65, "EF1", "Broadcast Media"),
        ("2015-12-26", "1846", 32.93, -96.64, 33.00, -96.55, "EF4", "NWS Storm Survey"),
        ("2015-10-31", "0530", 29.42, -98.49, 0.0, 0.0, "EF1", "Public"),
        ("2016-05-08", "2359", 33.21, -97.13, 33.25, -97.10, "EF0", "Trained Spotter"),
        ("2016-08-15", "2400", 31.76, -106.49, np.nan, np.nan, "EF0", "Law Enforcement"),
    ]
    columns = ["date", "time", "begin_lat", "begin_lon", "end_lat", "end_lon", "f_scale", "source"]
    return pd.DataFrame(rows, columns=columns)


def sample_salaries() -> pd.DataFrame:
    # Two players per team-season keeps the sums easy to check by hand
    payrolls = {
        (2014, "NYA", "AL"): [20_000_000, 10_000_000],
        (2014, "BOS", "AL"): [15_000_000, 5_000_000],
        (2014, "LAN", "NL"): [25_000_000, 15_000_000],
        (2014, "SFN", "NL"): [8_000_000, 4_000_000],
        (2015, "NYA", "AL"): [22_000_000, 12_000_000],
        (2015, "BOS", "AL"): [18_000_000, 6_000_000],
        (2015, "LAN", "NL"): [30_000_000, 10_000_000],
        (2015, "SFN", "NL"): [9_000_000, 5_000_000],
    }
    rows = []
    for (year, team, league), salaries in payrolls.items():
        for number, salary in enumerate(salaries, start=1):
            rows.append(
                {
                    "yearID": year,
                    "teamID": team,
                    "lgID": league,
                    "playerID": f"{team.lower()}{number:02d}",
                    "salary": salary,
                }
            )
    return pd.DataFrame(rows)


def sample_teams() -> pd.DataFrame:
    rows = [
        (2014, "AL", "NYA", "New York Yankees", 84, 78, "N", "N", "N", "N"),
        (2014, "AL", "BOS", "Boston Red Sox", 71, 91, "N", "N", "N", "N"),
        (2014, "NL", "LAN", "Los Angeles Dodgers", 94, 68, "Y", "N", "N", "N"),
        (2014, "NL", "SFN", "San Francisco Giants", 88, 74, "N", "Y", "Y", "Y"),
        (2015, "AL", "NYA", "New York Yankees", 87, 75, "N", "Y", "N", "N"),
        (2015, "AL", "BOS", "Boston Red Sox", 78, 84, "N", "N", "Y", "Y"),
        (2015, "NL", "LAN", "Los Angeles Dodgers", 92, 70, "Y", "N", "N", "N"),
        (2015, "NL", "SFN", "San Francisco Giants", 84, 78, "N", "N", "N", "N"),
        (2015, "NL", "MIA", "Miami Marlins", 71, 91, "N", "N", "N", "N"),
    ]
    columns = ["yearID", "lgID", "teamID", "name", "W", "L", "DivWin", "WCWin", "LgWin", "WSWin"]
    teams = pd.DataFrame(rows, columns=columns)
    teams.insert(4, "G", teams["W"] + teams["L"])
    return teams


def sample_series_post() -> pd.DataFrame:
    rows = [
        (2014, "NLCS", "SFN", "NL", "LAN", "NL", 4, 1, 0),
        (2014, "WS", "SFN", "NL", "NYA", "AL", 4, 3, 0),
        (2015, "ALDS", "BOS", "AL", "NYA", "AL", 3, 1, 0),
        (2015, "WS", "BOS", "AL", "LAN", "NL", 4, 2, 0),
    ]
    columns = ["yearID", "round", "teamIDwinner", "lgIDwinner", "teamIDloser", "lgIDloser", "wins", "losses", "ties"]
    return pd.DataFrame(rows, columns=columns)


def sample_inflation() -> pd.DataFrame:
    return pd.DataFrame({"year": [2013, 2014, 2015], "multiplier": [1.12, 1.10, 1.08]})


def write_sample_files(directory: str | Path, config: LessonConfig | None = None) -> dict[str, Path]:
    """Write the mock CSV files and SQLite database the notebooks expect."""
    config = config or LessonConfig()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    tornado_path = directory / config.tornado_file
    # Quote text fields so "0745" stays text for anyone opening the file
    sample_tornadoes().to_csv(tornado_path, index=False, quoting=csv.QUOTE_NONNUMERIC)

    inflation_path = directory / config.inflation_file
    sample_inflation().to_csv(inflation_path, index=False)

    db_path = directory / config.baseball_db
    with sqlite3.connect(db_path) as connection:
        sample_salaries().to_sql("Salaries", connection, if_exists="replace", index=False)
        sample_teams().to_sql("Teams", connection, if_exists="replace", index=False)
        sample_series_post().to_sql("SeriesPost", connection, if_exists="replace", index=False)
    connection.close()

    logger.info("Wrote sample files to %s", directory)
    return {"tornadoes": tornado_path, "inflation": inflation_path, "baseball": db_path}
