"""Cleaning and summary steps for the Texas tornado lesson."""

from __future__ import annotations

import calendar
import logging

import numpy as np
import pandas as pd

from eda_lessons.errors import LessonDataError
from eda_lessons.loaders import require_columns

logger = logging.getLogger(__name__)

MONTH_LABELS = list(calendar.month_abbr)[1:]
TIME_OF_DAY_BINS = [0, 6, 12, 18, 24]
TIME_OF_DAY_LABELS = ["Night", "Morning", "Afternoon", "Evening"]
SEGMENT_COLUMNS = ["begin_lat", "begin_lon", "end_lat", "end_lon"]


def _as_text(values: pd.Series) -> pd.Series:
    return values.map(lambda value: np.nan if pd.isna(value) else str(value).strip()).astype(object)


def pad_time_text(times: pd.Series) -> pd.Series:
    """Turn ``745``, ``745.0`` or ``"745"`` back into ``"0745"``.

    Repairs a time column that was read as a number by mistake.
    """

    def _pad(value):
        if pd.isna(value):
            return np.nan
        text = str(value).strip()
        if text.endswith(".0"):
            text = text[:-2]
        return text.zfill(4)

    return times.map(_pad).astype(object)


def _event_dates(values: pd.Series) -> pd.Series:
    """Midnight of each event day, from ``YYYY-MM-DD`` text or an already parsed column."""
    if pd.api.types.is_datetime64_any_dtype(values):
        return values.dt.normalize()
    return pd.to_datetime(_as_text(values), format="%Y-%m-%d", errors="coerce")


def parse_event_time(df: pd.DataFrame) -> pd.DataFrame:
    """Add ``event_time`` built from ``date`` plus the HHMM ``time`` text."""
    require_columns(df, ["date", "time"], name="tornado table")
    df = df.copy()
    times = pad_time_text(df["time"])
    hours = pd.to_numeric(times.str.slice(0, 2), errors="coerce")
    minutes = pd.to_numeric(times.str.slice(2, 4), errors="coerce")
    valid = times.str.len().eq(4) & hours.between(0, 23) & minutes.between(0, 59)

    offsets = pd.to_timedelta(hours.where(valid), unit="h") + pd.to_timedelta(minutes.where(valid), unit="m")
    df["event_time"] = _event_dates(df["date"]) + offsets

    unparsed = int(df["event_time"].isna().sum())
    if unparsed:
        logger.warning("%d of %d rows have no usable date/time", unparsed, len(df))
    return df


def add_calendar_columns(df: pd.DataFrame) -> pd.DataFrame:
    require_columns(df, ["date"], name="tornado table")
    df = df.copy()
    dates = _event_dates(df["date"])
    df["year"] = dates.dt.year
    df["month_num"] = dates.dt.month
    df["month"] = pd.Categorical(
        dates.dt.month.map(lambda month: np.nan if pd.isna(month) else MONTH_LABELS[int(month) - 1]),
        categories=MONTH_LABELS,
        ordered=True,
    )
    if "event_time" in df.columns:
        df["hour"] = df["event_time"].dt.hour
    return df


def bucket_time_of_day(hours: pd.Series) -> pd.Series:
    # Left-closed bins: 6:00 is Morning, 5:59 is Night
    return pd.cut(hours, bins=TIME_OF_DAY_BINS, right=False, labels=TIME_OF_DAY_LABELS)


def fujita_to_number(scale: pd.Series) -> pd.Series:
    """Map EF0-EF5 (or legacy F0-F5) to 0-5. Unknown ratings such as EFU become NaN."""
    text = _as_text(scale).fillna("").str.upper()
    digits = text.str.extract(r"^E?F([0-5])$", expand=False)
    return pd.to_numeric(digits, errors="coerce").astype(float)


def prepare_tornadoes(df: pd.DataFrame) -> pd.DataFrame:
    require_columns(df, ["date", "time", "f_scale"], name="tornado table")
    prepared = parse_event_time(df)
    prepared = add_calendar_columns(prepared)
    prepared["time_of_day"] = bucket_time_of_day(prepared["hour"])
    prepared["f_number"] = fujita_to_number(prepared["f_scale"])

    unrated = int(prepared["f_number"].isna().sum())
    if unrated:
        logger.warning("%d tornadoes have no numeric rating", unrated)
    logger.info("Prepared %d tornado records", len(prepared))
    return prepared


def count_by(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """Count rows per value. Categorical columns keep their category order (zeros included)."""
    require_columns(df, [column])
    values = df[column]
    if isinstance(values.dtype, pd.CategoricalDtype):
        counts = values.value_counts(sort=False).sort_index()
    else:
        counts = values.value_counts().sort_values(ascending=False, kind="stable")
    return counts.rename_axis(column).reset_index(name="count")


def _month_number(month) -> int:
    if isinstance(month, (int, np.integer)):
        number = int(month)
    else:
        text = str(month).strip().lower()
        full_names = [name.lower() for name in calendar.month_name]
        short_names = [name.lower() for name in calendar.month_abbr]
        if text.isdigit():
            number = int(text)
        elif text in full_names:
            number = full_names.index(text)
        elif text in short_names:
            number = short_names.index(text)
        else:
            raise LessonDataError(f"not a month: {month!r}")
    if not 1 <= number <= 12:
        raise LessonDataError(f"not a month: {month!r}")
    return number


def count_in_month(df: pd.DataFrame, month) -> int:
    require_columns(df, ["month_num"])
    return int((df["month_num"] == _month_number(month)).sum())


def share_after(df: pd.DataFrame, cutoff) -> float:
    """Fraction of parsed timestamps strictly later than ``cutoff``."""
    require_columns(df, ["event_time"])
    stamps = df["event_time"].dropna()
    if stamps.empty:
        return 0.0
    return float((stamps > pd.Timestamp(cutoff)).mean())


def top_sources(df: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    require_columns(df, ["source"])
    sources = _as_text(df["source"]).fillna("Unknown")
    counts = sources.value_counts().sort_values(ascending=False, kind="stable")
    table = counts.head(n).rename_axis("source").reset_index(name="count")
    remainder = int(counts.iloc[n:].sum())
    if remainder:
        table = pd.concat(
            [table, pd.DataFrame({"source": ["Other"], "count": [remainder]})],
            ignore_index=True,
        )
    return table


def track_segments(df: pd.DataFrame) -> pd.DataFrame:
    require_columns(df, SEGMENT_COLUMNS)
    segments = df.dropna(subset=SEGMENT_COLUMNS)
    # Zero end coordinates are placeholders for "no end point recorded"
    segments = segments[(segments["end_lat"] != 0) & (segments["end_lon"] != 0)]
    return segments
