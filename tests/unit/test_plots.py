"""Unit tests for the chart helpers."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from eda_lessons import plots, tornadoes
from eda_lessons.errors import LessonDataError
from eda_lessons.geography import bounding_box, texas_outline


@pytest.fixture
def prepared(raw_tornadoes):
    return tornadoes.prepare_tornadoes(raw_tornadoes)


def test_bar_chart_draws_one_bar_per_row() -> None:
    table = pd.DataFrame({"month": ["Apr", "May"], "count": [3, 5]})

    ax = plots.bar_chart(table, "month", "count", title="By month")

    assert len(ax.patches) == 2
    assert [patch.get_height() for patch in ax.patches] == [3, 5]
    assert ax.get_title() == "By month"
    assert ax.get_xlabel() == "month"


def test_bar_chart_horizontal_swaps_labels() -> None:
    table = pd.DataFrame({"source": ["Public", "Spotter"], "count": [2, 4]})

    ax = plots.bar_chart(table, "source", "count", horizontal=True)

    assert [patch.get_width() for patch in ax.patches] == [2, 4]
    assert ax.get_xlabel() == "count"
    assert ax.get_ylabel() == "source"


def test_bar_chart_uses_given_axes() -> None:
    fig, ax = plt.subplots()
    table = pd.DataFrame({"x": ["a"], "y": [1]})

    assert plots.bar_chart(table, "x", "y", ax=ax) is ax


def test_bar_chart_missing_column() -> None:
    with pytest.raises(LessonDataError):
        plots.bar_chart(pd.DataFrame({"x": ["a"]}), "x", "y")


def test_box_plot_one_box_per_bucket(prepared) -> None:
    ax = plots.box_plot(prepared, "time_of_day", "f_number", ylabel="EF rating")
    ax.figure.canvas.draw()

    labels = [tick.get_text() for tick in ax.get_xticklabels()]
    assert labels == ["Night", "Morning", "Afternoon", "Evening"]
    assert ax.get_ylabel() == "EF rating"


def test_scatter_with_trend_adds_line() -> None:
    df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "y": [2.0, 4.0, 6.0, 8.0], "g": ["a", "a", "b", "b"]})

    ax = plots.scatter_with_trend(df, "x", "y", hue="g")

    fit_lines = [line for line in ax.get_lines() if line.get_label() == "linear fit"]
    assert len(fit_lines) == 1
    line_x, line_y = fit_lines[0].get_data()
    assert line_y[0] == pytest.approx(2.0 * line_x[0])
    assert line_y[-1] == pytest.approx(8.0)


def test_scatter_with_trend_skips_line_for_single_point(caplog) -> None:
    df = pd.DataFrame({"x": [1.0], "y": [2.0]})

    with caplog.at_level("WARNING"):
        ax = plots.scatter_with_trend(df, "x", "y")

    assert not [line for line in ax.get_lines() if line.get_label() == "linear fit"]
    assert "Not enough distinct points" in caplog.text


def test_texas_outline_is_closed_polygon() -> None:
    outline = texas_outline()

    assert list(outline.columns) == ["long", "lat", "group", "order"]
    assert outline.iloc[0][["long", "lat"]].tolist() == outline.iloc[-1][["long", "lat"]].tolist()
    assert outline["order"].is_monotonic_increasing


def test_bounding_box_contains_outline() -> None:
    west, east, south, north = bounding_box(texas_outline(), pad=0.0)

    assert west == pytest.approx(-106.63)
    assert north == pytest.approx(36.50)
    assert south < 26.0 < north
    assert west < east


def test_geo_overlay_draws_polygon_points_and_segments(prepared) -> None:
    segments = tornadoes.track_segments(prepared)

    ax = plots.geo_overlay(prepared, polygon=texas_outline(), segments=segments, title="Map")

    assert len(ax.patches) == 1
    assert len(ax.collections) == 1
    assert len(ax.collections[0].get_offsets()) == len(prepared)
    assert len(ax.get_lines()) == len(segments)
    assert ax.get_xlabel() == "Longitude"


def test_geo_overlay_frames_the_polygon(prepared) -> None:
    outline = texas_outline()
    west, east, south, north = bounding_box(outline)

    ax = plots.geo_overlay(prepared, polygon=outline)

    assert ax.get_xlim() == pytest.approx((west, east))
    assert ax.get_ylim() == pytest.approx((south, north))


def test_geo_overlay_without_color_column(prepared) -> None:
    ax = plots.geo_overlay(prepared.drop(columns=["f_number"]))

    assert len(ax.collections) == 1
    assert not ax.patches


def test_save_figure_writes_png(tmp_path) -> None:
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])

    path = plots.save_figure(fig, tmp_path / "figs", "line")

    assert path == tmp_path / "figs" / "line.png"
    assert path.stat().st_size > 0
