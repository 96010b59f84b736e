"""Static charts used in both notebooks.

Each function draws onto ``ax`` (a new figure when omitted) and returns the
Axes, so a notebook cell can finish with ``plt.show()``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from eda_lessons.geography import bounding_box
from eda_lessons.loaders import require_columns

logger = logging.getLogger(__name__)

DEFAULT_FIGSIZE = (8, 5)


def configure_style() -> None:
    sns.set_theme(style="whitegrid", context="notebook")
    plt.rcParams.update({"axes.spines.right": False, "axes.spines.top": False})


def _axes(ax, figsize):
    if ax is None:
        _, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)
    return ax


def bar_chart(
    table: pd.DataFrame,
    x: str,
    y: str,
    title: str = "",
    xlabel: str | None = None,
    ylabel: str | None = None,
    color: str = "steelblue",
    horizontal: bool = False,
    ax=None,
    figsize=None,
):
    require_columns(table, [x, y])
    ax = _axes(ax, figsize)
    labels = table[x].astype(str).tolist()
    if horizontal:
        ax.barh(labels, table[y], color=color)
        ax.invert_yaxis()
    else:
        ax.bar(labels, table[y], color=color)
        if len(labels) > 6:
            ax.tick_params(axis="x", labelrotation=45)
    ax.set_title(title)
    ax.set_xlabel(xlabel if xlabel is not None else (y if horizontal else x))
    ax.set_ylabel(ylabel if ylabel is not None else (x if horizontal else y))
    return ax


def box_plot(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: str = "",
    xlabel: str | None = None,
    ylabel: str | None = None,
    order=None,
    ax=None,
    figsize=None,
):
    require_columns(df, [x, y])
    ax = _axes(ax, figsize)
    data = df.dropna(subset=[x, y])
    sns.boxplot(data=data, x=x, y=y, order=order, color="lightsteelblue", ax=ax)
    ax.set_title(title)
    ax.set_xlabel(xlabel if xlabel is not None else x)
    ax.set_ylabel(ylabel if ylabel is not None else y)
    return ax


def scatter_with_trend(
    df: pd.DataFrame,
    x: str,
    y: str,
    hue: str | None = None,
    title: str = "",
    xlabel: str | None = None,
    ylabel: str | None = None,
    ax=None,
    figsize=None,
):
    """Scatter ``y`` against ``x`` and overlay the least-squares line."""
    columns = [x, y] + ([hue] if hue else [])
    require_columns(df, columns)
    ax = _axes(ax, figsize)
    data = df.dropna(subset=[x, y])

    sns.scatterplot(data=data, x=x, y=y, hue=hue, ax=ax)
    if len(data) >= 2 and data[x].nunique() > 1:
        slope, intercept = np.polyfit(data[x].astype(float), data[y].astype(float), deg=1)
        line_x = np.linspace(data[x].min(), data[x].max(), 50)
        ax.plot(line_x, slope * line_x + intercept, color="black", linewidth=1.5, label="linear fit")
    else:
        logger.warning("Not enough distinct points to draw a trend line for %s vs %s", y, x)

    ax.set_title(title)
    ax.set_xlabel(xlabel if xlabel is not None else x)
    ax.set_ylabel(ylabel if ylabel is not None else y)
    return ax


def geo_overlay(
    df: pd.DataFrame,
    polygon: pd.DataFrame | None = None,
    color_by: str | None = "f_number",
    segments: pd.DataFrame | None = None,
    title: str = "",
    ax=None,
    figsize=None,
):
    """Plot begin points over a boundary polygon, optionally with begin->end tracks."""
    require_columns(df, ["begin_lat", "begin_lon"])
    ax = _axes(ax, figsize or (7, 7))

    if polygon is not None:
        require_columns(polygon, ["long", "lat", "group", "order"], name="polygon")
        for _, part in polygon.sort_values(["group", "order"]).groupby("group"):
            ax.fill(part["long"], part["lat"], facecolor="whitesmoke", edgecolor="gray", linewidth=1)

    if segments is not None and not segments.empty:
        for row in segments.itertuples(index=False):
            ax.plot([row.begin_lon, row.end_lon], [row.begin_lat, row.end_lat], color="dimgray", linewidth=0.8)

    points = df.dropna(subset=["begin_lat", "begin_lon"])
    if color_by and color_by in points.columns:
        scatter = ax.scatter(
            points["begin_lon"], points["begin_lat"], c=points[color_by], cmap="YlOrRd", s=18, edgecolors="black", linewidths=0.3
        )
        plt.colorbar(scatter, ax=ax, label=color_by)
    else:
        ax.scatter(points["begin_lon"], points["begin_lat"], color="firebrick", s=18)

    if polygon is not None:
        west, east, south, north = bounding_box(polygon)
        ax.set_xlim(west, east)
        ax.set_ylim(south, north)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(title)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    return ax


def save_figure(fig, directory: str | Path, name: str) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.png"
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    logger.info("Saved figure %s", path)
    return path
