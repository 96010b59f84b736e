"""Unit tests for CSV and SQLite loading."""

from __future__ import annotations

import sqlite3

import pandas as pd
import pytest

from eda_lessons.errors import LessonDataError
from eda_lessons.loaders import (
    connect_database,
    list_tables,
    load_csv,
    load_inflation,
    load_tornadoes,
    query_table,
    require_columns,
)


def test_load_csv_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "nope.csv")


def test_guessed_type_drops_leading_zeros(tmp_path) -> None:
    path = tmp_path / "times.csv"
    path.write_text('date,time\n2015-05-01,"0745"\n2015-05-02,"1330"\n')

    guessed = load_csv(path)
    forced = load_csv(path, text_columns=["time"])

    assert guessed["time"].tolist() == [745, 1330]
    assert forced["time"].tolist() == ["0745", "1330"]


def test_sample_file_loses_zeros_when_type_is_guessed(sample_dir) -> None:
    guessed = load_csv(sample_dir / "texas_tornadoes.csv")

    assert pd.api.types.is_integer_dtype(guessed["time"])
    assert guessed.loc[0, "time"] == 5
    assert guessed.loc[1, "time"] == 745


def test_load_tornadoes_keeps_time_as_text(sample_dir) -> None:
    df = load_tornadoes(sample_dir / "texas_tornadoes.csv")

    assert len(df) == 12
    assert df.loc[0, "time"] == "0005"
    assert df.loc[1, "time"] == "0745"
    assert pd.isna(df.loc[4, "end_lat"])


def test_load_tornadoes_requires_columns(tmp_path) -> None:
    path = tmp_path / "partial.csv"
    path.write_text("date,time\n2015-05-01,0745\n")

    with pytest.raises(LessonDataError, match="begin_lat"):
        load_tornadoes(path)


def test_load_inflation_rejects_repeated_years(tmp_path) -> None:
    path = tmp_path / "inflation.csv"
    path.write_text("year,multiplier\n2014,1.1\n2014,1.2\n")

    with pytest.raises(LessonDataError, match="2014"):
        load_inflation(path)


def test_load_inflation_rejects_blank_years(tmp_path) -> None:
    path = tmp_path / "inflation.csv"
    path.write_text("year,multiplier\n2014,1.1\n,1.2\n")

    with pytest.raises(LessonDataError, match="blank"):
        load_inflation(path)


def test_load_inflation_types(sample_dir) -> None:
    df = load_inflation(sample_dir / "inflation.csv")

    assert df["year"].tolist() == [2013, 2014, 2015]
    assert df["multiplier"].dtype == float


def test_connect_database_does_not_create_missing_file(tmp_path) -> None:
    path = tmp_path / "missing.sqlite"

    with pytest.raises(FileNotFoundError):
        connect_database(path)
    assert not path.exists()


def test_list_tables(sample_dir) -> None:
    conn = connect_database(sample_dir / "lahman.sqlite")
    try:
        assert list_tables(conn) == ["Salaries", "SeriesPost", "Teams"]
    finally:
        conn.close()


def test_query_table_selects_and_filters(sample_dir) -> None:
    conn = connect_database(sample_dir / "lahman.sqlite")
    try:
        df = query_table(conn, "Salaries", columns=["yearID", "teamID", "salary"], where="yearID = ?", params=(2015,))
    finally:
        conn.close()

    assert list(df.columns) == ["yearID", "teamID", "salary"]
    assert len(df) == 8
    assert set(df["yearID"]) == {2015}


def test_query_table_all_columns(sample_dir) -> None:
    conn = connect_database(sample_dir / "lahman.sqlite")
    try:
        df = query_table(conn, "SeriesPost")
    finally:
        conn.close()

    assert len(df) == 4
    assert "teamIDwinner" in df.columns


def test_query_table_rejects_unknown_names() -> None:
    conn = sqlite3.connect(":memory:")
    pd.DataFrame({"a": [1]}).to_sql("t", conn, index=False)
    try:
        with pytest.raises(LessonDataError, match="no table"):
            query_table(conn, "t; DROP TABLE t")
        with pytest.raises(LessonDataError, match="no columns"):
            query_table(conn, "t", columns=["b"])
    finally:
        conn.close()


def test_require_columns_lists_missing() -> None:
    with pytest.raises(LessonDataError, match="x, y"):
        require_columns(pd.DataFrame({"a": [1]}), ["a", "x", "y"], name="demo")
