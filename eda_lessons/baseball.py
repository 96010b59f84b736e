"""Joins and summaries for the baseball relational-data lesson.

Table and column names follow the Lahman database: ``Salaries``, ``Teams``
and ``SeriesPost`` keyed by ``yearID`` and ``teamID``.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score

from eda_lessons.errors import LessonDataError
from eda_lessons.loaders import require_columns

logger = logging.getLogger(__name__)

TEAM_KEYS = ["yearID", "teamID"]
FLAG_COLUMNS = ["DivWin", "WCWin", "LgWin", "WSWin"]


def team_payroll(salaries: pd.DataFrame) -> pd.DataFrame:
    require_columns(salaries, TEAM_KEYS + ["salary"], name="Salaries")
    payroll = (
        salaries.groupby(TEAM_KEYS, as_index=False)["salary"]
        .sum()
        .rename(columns={"salary": "payroll"})
    )
    logger.info("Summed %d salaries into %d team payrolls", len(salaries), len(payroll))
    return payroll


def adjust_payroll(payroll: pd.DataFrame, inflation: pd.DataFrame) -> pd.DataFrame:
    """Scale each payroll into constant dollars with the year's multiplier."""
    require_columns(payroll, ["yearID", "payroll"], name="payroll table")
    require_columns(inflation, ["year", "multiplier"], name="inflation lookup")

    lookup = inflation[["year", "multiplier"]].rename(columns={"year": "yearID"})
    adjusted = payroll.merge(lookup, how="left", on="yearID", validate="many_to_one")
    adjusted["payroll_adj"] = adjusted["payroll"] * adjusted["multiplier"]

    missing_years = sorted(adjusted.loc[adjusted["multiplier"].isna(), "yearID"].unique().tolist())
    if missing_years:
        logger.warning("No inflation multiplier for years %s", missing_years)
    return adjusted


def postseason_long(series_post: pd.DataFrame) -> pd.DataFrame:
    """Reshape one-row-per-series into one row per (series, team)."""
    require_columns(
        series_post,
        ["yearID", "round", "teamIDwinner", "teamIDloser", "lgIDwinner", "lgIDloser"],
        name="SeriesPost",
    )
    frames = []
    for outcome in ("winner", "loser"):
        side = series_post[["yearID", "round", f"teamID{outcome}", f"lgID{outcome}"]].rename(
            columns={f"teamID{outcome}": "teamID", f"lgID{outcome}": "lgID"}
        )
        side.insert(2, "outcome", outcome)
        frames.append(side)
    long_df = pd.concat(frames, ignore_index=True)
    return long_df.sort_values(["yearID", "round", "outcome"], ignore_index=True)


def playoff_teams(series_post: pd.DataFrame) -> pd.DataFrame:
    require_columns(series_post, ["yearID", "round", "teamIDwinner", "teamIDloser"], name="SeriesPost")
    teams = (
        series_post.melt(
            id_vars=["yearID", "round"],
            value_vars=["teamIDwinner", "teamIDloser"],
            value_name="teamID",
        )[TEAM_KEYS]
        .drop_duplicates()
        .sort_values(TEAM_KEYS, ignore_index=True)
    )
    return teams


def flag_playoffs(teams: pd.DataFrame, series_post: pd.DataFrame) -> pd.DataFrame:
    require_columns(teams, TEAM_KEYS, name="Teams")
    in_playoffs = playoff_teams(series_post).assign(playoffs=True)
    flagged = teams.merge(in_playoffs, how="left", on=TEAM_KEYS, validate="one_to_one")
    flagged["playoffs"] = flagged["playoffs"].fillna(False).astype(bool)
    logger.info("%d of %d team-seasons reached the postseason", int(flagged["playoffs"].sum()), len(flagged))
    return flagged


def yes_no_to_int(flags: pd.Series) -> pd.Series:
    mapped = flags.map(lambda value: value.strip().upper() if isinstance(value, str) else value)
    return mapped.map({"Y": 1.0, "N": 0.0}).astype(float)


def season_summary(
    teams: pd.DataFrame,
    salaries: pd.DataFrame,
    series_post: pd.DataFrame,
    inflation: pd.DataFrame,
) -> pd.DataFrame:
    """One row per team-season: wins, payroll (nominal and adjusted), playoff flag."""
    require_columns(teams, TEAM_KEYS + ["lgID", "W", "L"], name="Teams")
    payroll = adjust_payroll(team_payroll(salaries), inflation)

    summary = teams.merge(payroll, how="inner", on=TEAM_KEYS, validate="one_to_one")
    dropped = len(teams) - len(summary)
    if dropped:
        logger.warning("%d team-seasons have no salary records and were left out", dropped)

    summary = flag_playoffs(summary, series_post)
    if "WSWin" in summary.columns:
        summary["ws_win"] = yes_no_to_int(summary["WSWin"]) == 1.0
    else:
        champions = series_post.loc[series_post["round"] == "WS", ["yearID", "teamIDwinner"]]
        champions = champions.rename(columns={"teamIDwinner": "teamID"}).assign(ws_win=True)
        summary = summary.merge(champions, how="left", on=TEAM_KEYS)
        summary["ws_win"] = summary["ws_win"].fillna(False).astype(bool)

    columns = TEAM_KEYS + ["lgID", "W", "L", "payroll", "multiplier", "payroll_adj", "playoffs", "ws_win"]
    return summary[columns].sort_values(TEAM_KEYS, ignore_index=True)


def payroll_rank(summary: pd.DataFrame) -> pd.DataFrame:
    require_columns(summary, ["yearID", "payroll_adj"], name="season summary")
    ranked = summary.copy()
    ranked["payroll_rank"] = (
        ranked.groupby("yearID")["payroll_adj"].rank(method="min", ascending=False).astype("Int64")
    )
    return ranked


def champion_payroll_ranks(summary: pd.DataFrame) -> pd.DataFrame:
    ranked = payroll_rank(summary)
    champions = ranked.loc[ranked["ws_win"], ["yearID", "teamID", "payroll_adj", "payroll_rank"]]
    return champions.sort_values("yearID", ignore_index=True)


def fit_wins_on_payroll(summary: pd.DataFrame, x: str = "payroll_adj", y: str = "W") -> dict:
    """Least-squares line of wins on payroll, payroll measured in millions."""
    require_columns(summary, [x, y], name="season summary")
    data = summary[[x, y]].dropna()
    if len(data) < 2:
        raise LessonDataError("need at least two team-seasons with payroll and wins to fit a line")

    X = (data[[x]].to_numpy(dtype=float)) / 1e6
    target = data[y].to_numpy(dtype=float)
    model = LinearRegression().fit(X, target)
    predicted = model.predict(X)
    return {
        "slope": float(model.coef_[0]),
        "intercept": float(model.intercept_),
        "r2": float(r2_score(target, predicted)) if np.ptp(target) > 0 else 0.0,
        "n": int(len(data)),
    }
