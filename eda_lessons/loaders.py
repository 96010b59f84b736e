"""Read the lesson inputs into pandas DataFrames."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from eda_lessons.errors import LessonDataError

logger = logging.getLogger(__name__)

TORNADO_COLUMNS = [
    "date",
    "time",
    "begin_lat",
    "begin_lon",
    "end_lat",
    "end_lon",
    "f_scale",
    "source",
]
INFLATION_COLUMNS = ["year", "multiplier"]


def require_columns(df: pd.DataFrame, columns: Iterable[str], name: str = "table") -> None:
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise LessonDataError(f"{name} is missing columns: {', '.join(missing)}")


def load_csv(path: str | Path, text_columns: Sequence[str] = (), **read_csv_kwargs) -> pd.DataFrame:
    """Read a delimited file, keeping ``text_columns`` as strings.

    Without an explicit dtype pandas infers ``"0745"`` as the integer 745 and
    the leading zero is gone for good.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path} not found")

    dtype = dict(read_csv_kwargs.pop("dtype", None) or {})
    for column in text_columns:
        dtype[column] = str
    df = pd.read_csv(path, dtype=dtype or None, **read_csv_kwargs)
    logger.info("Loaded %s with shape %s", path.name, df.shape)
    return df


def load_tornadoes(path: str | Path) -> pd.DataFrame:
    df = load_csv(path, text_columns=["time", "date", "f_scale", "source"])
    require_columns(df, TORNADO_COLUMNS, name=Path(path).name)
    return df


def load_inflation(path: str | Path) -> pd.DataFrame:
    df = load_csv(path)
    require_columns(df, INFLATION_COLUMNS, name=Path(path).name)
    if df["year"].isna().any():
        raise LessonDataError("inflation lookup has blank years")
    duplicated = df.loc[df["year"].duplicated(), "year"].tolist()
    if duplicated:
        raise LessonDataError(f"inflation lookup has repeated years: {duplicated}")
    return df[INFLATION_COLUMNS].astype({"year": int, "multiplier": float})


def connect_database(path: str | Path) -> sqlite3.Connection:
    # sqlite3.connect would quietly create an empty file for a typo'd path
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path} not found")
    logger.info("Connected to %s", path)
    return sqlite3.connect(path)


def list_tables(conn: sqlite3.Connection) -> list[str]:
    table_query = """
        SELECT name
        FROM sqlite_master
        WHERE type = 'table'
          AND name NOT LIKE 'sqlite_%'
        ORDER BY name;
    """
    return pd.read_sql_query(table_query, conn)["name"].tolist()


def table_columns(conn: sqlite3.Connection, table: str) -> list[str]:
    if table not in list_tables(conn):
        raise LessonDataError(f"no table named {table!r}")
    info = pd.read_sql_query(f'PRAGMA table_info("{table}")', conn)
    return info["name"].tolist()


def query_table(
    conn: sqlite3.Connection,
    table: str,
    columns: Sequence[str] | None = None,
    where: str | None = None,
    params: Sequence = (),
) -> pd.DataFrame:
    """Select columns, filter rows in the database, then collect into pandas.

    ``where`` is a SQL condition using ``?`` placeholders for the values in
    ``params``, e.g. ``where="yearID >= ?", params=(1990,)``. Table and column
    names are checked against the schema before they are quoted into the query.
    """
    known = table_columns(conn, table)
    if columns:
        unknown = [column for column in columns if column not in known]
        if unknown:
            raise LessonDataError(f"{table} has no columns: {', '.join(unknown)}")
        select_list = ", ".join(f'"{column}"' for column in columns)
    else:
        select_list = "*"

    query = f'SELECT {select_list} FROM "{table}"'
    if where:
        query += f" WHERE {where}"
    df = pd.read_sql_query(query, conn, params=list(params))
    logger.info("Collected %d rows from %s", len(df), table)
    return df
