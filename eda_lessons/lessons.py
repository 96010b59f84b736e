"""Run each notebook's steps end to end without a notebook.

The order of steps matches the notebooks cell for cell; figures are saved as
PNG files instead of being shown.
"""

from __future__ import annotations

import logging
from contextlib import closing

import matplotlib.pyplot as plt

from eda_lessons import baseball, plots, tornadoes
from eda_lessons.config import LessonConfig
from eda_lessons.geography import texas_outline
from eda_lessons.loaders import connect_database, load_inflation, load_tornadoes, query_table

logger = logging.getLogger(__name__)


def run_tornado_lesson(config: LessonConfig) -> dict:
    raw = load_tornadoes(config.tornado_path)
    df = tornadoes.prepare_tornadoes(raw)

    by_month = tornadoes.count_by(df, "month")
    by_time_of_day = tornadoes.count_by(df, "time_of_day")
    sources = tornadoes.top_sources(df, n=8)
    share = tornadoes.share_after(df, config.cutoff)
    may_count = tornadoes.count_in_month(df, "May")
    logger.info("%d tornadoes in May; %.1f%% after %s", may_count, 100 * share, config.cutoff.date())

    plots.configure_style()
    figures = {}

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.bar_chart(by_month, "month", "count", title="Tornadoes by month", ylabel="Tornadoes", ax=ax)
    figures["by_month"] = plots.save_figure(fig, config.figure_dir, "tornadoes_by_month")

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.bar_chart(by_time_of_day, "time_of_day", "count", title="Tornadoes by time of day", ylabel="Tornadoes", ax=ax)
    figures["by_time_of_day"] = plots.save_figure(fig, config.figure_dir, "tornadoes_by_time_of_day")

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.bar_chart(sources, "source", "count", title="Who reported the tornado?", horizontal=True, ax=ax)
    figures["sources"] = plots.save_figure(fig, config.figure_dir, "tornado_sources")

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.box_plot(df, "time_of_day", "f_number", title="Rating by time of day", ylabel="EF rating", ax=ax)
    figures["rating_box"] = plots.save_figure(fig, config.figure_dir, "tornado_rating_by_time_of_day")

    fig, ax = plt.subplots(figsize=(7, 7))
    plots.geo_overlay(
        df,
        polygon=texas_outline(),
        segments=tornadoes.track_segments(df),
        title="Texas tornado touchdowns",
        ax=ax,
    )
    figures["map"] = plots.save_figure(fig, config.figure_dir, "tornado_map")

    return {
        "rows": len(df),
        "may_count": may_count,
        "share_after_cutoff": share,
        "by_month": by_month,
        "by_time_of_day": by_time_of_day,
        "figures": figures,
    }


def run_baseball_lesson(config: LessonConfig) -> dict:
    inflation = load_inflation(config.inflation_path)
    with closing(connect_database(config.baseball_path)) as conn:
        salaries = query_table(conn, "Salaries", columns=["yearID", "teamID", "lgID", "playerID", "salary"])
        teams = query_table(conn, "Teams", columns=["yearID", "lgID", "teamID", "name", "W", "L", "WSWin"])
        series_post = query_table(conn, "SeriesPost")

    summary = baseball.season_summary(teams, salaries, series_post, inflation)
    summary["payroll_adj_m"] = summary["payroll_adj"] / 1e6
    champions = baseball.champion_payroll_ranks(summary)
    fit = baseball.fit_wins_on_payroll(summary)
    logger.info(
        "Wins = %.2f + %.3f * payroll ($M), r2 = %.2f over %d team-seasons",
        fit["intercept"],
        fit["slope"],
        fit["r2"],
        fit["n"],
    )

    plots.configure_style()
    figures = {}

    latest_year = int(summary["yearID"].max())
    latest = summary[summary["yearID"] == latest_year].sort_values("payroll_adj_m", ascending=False)
    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.bar_chart(
        latest, "teamID", "payroll_adj_m", title=f"Adjusted payroll, {latest_year}", ylabel="Payroll ($M)", ax=ax
    )
    figures["payroll_bar"] = plots.save_figure(fig, config.figure_dir, "payroll_latest_year")

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.box_plot(
        summary, "playoffs", "payroll_adj_m", title="Payroll of playoff vs. other teams", ylabel="Payroll ($M)", ax=ax
    )
    figures["payroll_box"] = plots.save_figure(fig, config.figure_dir, "payroll_by_playoffs")

    fig, ax = plt.subplots(figsize=config.figure_size)
    plots.scatter_with_trend(
        summary, "payroll_adj_m", "W", hue="lgID", title="Wins vs. adjusted payroll", xlabel="Payroll ($M)", ax=ax
    )
    figures["wins_scatter"] = plots.save_figure(fig, config.figure_dir, "wins_vs_payroll")

    return {
        "summary": summary,
        "champions": champions,
        "fit": fit,
        "figures": figures,
    }
