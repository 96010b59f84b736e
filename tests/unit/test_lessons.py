"""End-to-end runs of both lessons on the mock data."""

from __future__ import annotations

import pytest

from eda_lessons.__main__ import main
from eda_lessons.lessons import run_baseball_lesson, run_tornado_lesson
from eda_lessons.sample_data import write_sample_files


def test_write_sample_files(tmp_path) -> None:
    paths = write_sample_files(tmp_path / "data")

    assert set(paths) == {"tornadoes", "inflation", "baseball"}
    assert all(path.exists() for path in paths.values())
    assert '"0745"' in paths["tornadoes"].read_text()


def test_run_tornado_lesson(lesson_config) -> None:
    result = run_tornado_lesson(lesson_config)

    assert result["rows"] == 12
    assert result["may_count"] == 5
    assert result["share_after_cutoff"] == pytest.approx(9 / 11)
    assert set(result["figures"]) == {"by_month", "by_time_of_day", "sources", "rating_box", "map"}
    assert all(path.exists() for path in result["figures"].values())


def test_run_baseball_lesson(lesson_config) -> None:
    result = run_baseball_lesson(lesson_config)

    assert len(result["summary"]) == 8
    assert result["champions"]["teamID"].tolist() == ["SFN", "BOS"]
    assert result["fit"]["n"] == 8
    assert all(path.exists() for path in result["figures"].values())


def test_cli_samples_then_baseball(tmp_path, capsys) -> None:
    data_dir = tmp_path / "data"
    figure_dir = tmp_path / "figs"

    assert main(["samples", "--data-dir", str(data_dir)]) == 0
    assert main(["baseball", "--data-dir", str(data_dir), "--out", str(figure_dir)]) == 0

    printed = capsys.readouterr().out
    assert "wins_scatter:" in printed
    assert (figure_dir / "wins_vs_payroll.png").exists()


def test_cli_missing_data_returns_error(tmp_path) -> None:
    assert main(["tornadoes", "--data-dir", str(tmp_path / "empty")]) == 1


def test_cli_rejects_unknown_lesson() -> None:
    with pytest.raises(SystemExit):
        main(["hockey"])
