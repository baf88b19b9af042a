"""Tests for the command line interface."""

import argparse
import logging

import pytest

from src.presentation.cli.main import main, viewport_width


def test_render_writes_page_and_svgs(weather_csv, tmp_path):
    """render writes index.html and one SVG per chart."""
    output_dir = tmp_path / "out"

    status = main(
        ["--data", str(weather_csv), "render", "--output-dir", str(output_dir), "--viewport-width", "900"]
    )

    assert status == 0
    html = (output_dir / "index.html").read_text(encoding="utf-8")
    for container_id in ["barChart", "scatterplot", "lineGraph"]:
        assert f'id="{container_id}"' in html
    assert html.count("<svg") == 3
    for filename in ["bar_chart.svg", "scatterplot.svg", "line_graph.svg"]:
        assert (output_dir / filename).read_text(encoding="utf-8").startswith("<svg")


def test_render_missing_file(tmp_path):
    """A missing data file gives an empty page and a non-zero exit status."""
    output_dir = tmp_path / "out"

    status = main(
        ["--data", str(tmp_path / "missing.csv"), "render", "--output-dir", str(output_dir)]
    )

    assert status == 1
    html = (output_dir / "index.html").read_text(encoding="utf-8")
    assert "<svg" not in html
    assert not (output_dir / "bar_chart.svg").exists()


def test_summarize(weather_csv, capsys):
    """summarize prints one line per month."""
    status = main(["--data", str(weather_csv), "summarize"])

    assert status == 0
    out = capsys.readouterr().out
    assert "January" in out and "2.00" in out
    assert "February" in out and "3.20" in out


def test_summarize_missing_file(tmp_path):
    """summarize fails cleanly without data."""
    assert main(["--data", str(tmp_path / "missing.csv"), "summarize"]) == 1


def test_render_missing_file_logs_once(tmp_path, caplog):
    """A load failure produces a single log record of any level."""
    caplog.set_level(logging.DEBUG)

    status = main(
        ["--data", str(tmp_path / "missing.csv"), "render", "--output-dir", str(tmp_path / "out")]
    )

    assert status == 1
    assert [(r.levelname, r.getMessage().split(":")[0]) for r in caplog.records] == [
        ("ERROR", "Error loading data")
    ]


@pytest.mark.parametrize("width", ["100", "-5", "160", "10001", "wide"])
def test_render_rejects_bad_viewport_width(weather_csv, tmp_path, width, capsys):
    """Widths outside the accepted range are usage errors, not tracebacks."""
    with pytest.raises(SystemExit) as exc_info:
        main(
            [
                "--data", str(weather_csv),
                "render", "--output-dir", str(tmp_path / "out"),
                "--viewport-width", width,
            ]
        )

    assert exc_info.value.code == 2
    assert "--viewport-width" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_viewport_width_bounds():
    """The smallest and largest accepted widths pass through unchanged."""
    assert viewport_width("200") == 200
    assert viewport_width("10000") == 10000
    with pytest.raises(argparse.ArgumentTypeError):
        viewport_width("199")
