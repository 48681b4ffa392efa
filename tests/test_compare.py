"""Tests for the command-line entry point and chart rendering."""

import pytest

from simulations import compare
from simulations.chart import chart_title, render_chart
from simulations.run import run


PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


class TestChart:
    """Bar chart output."""

    def test_writes_png(self, tmp_path, reliabilities):
        path = tmp_path / "chart.png"
        render_chart(str(path), 100, 7, reliabilities, 60, 80)

        assert path.read_bytes()[:8] == PNG_MAGIC

    def test_zero_trials_does_not_divide_by_zero(self, tmp_path, reliabilities):
        path = tmp_path / "empty.png"
        render_chart(str(path), 0, 7, reliabilities, 0, 0)
        assert path.exists()

    def test_title_embeds_parameters(self, reliabilities):
        title = chart_title(1000, 7, reliabilities)
        assert "R = (0.9, 0.5, 0.2)" in title
        assert "true = 27" in title
        assert "N = 1000" in title
        assert "seed = 7" in title

    def test_missing_directory_raises(self, tmp_path, reliabilities):
        with pytest.raises(OSError):
            render_chart(str(tmp_path / "nope" / "c.png"), 10, 7, reliabilities, 1, 2)


class TestMain:
    """CLI argument handling and output."""

    def test_prints_report_and_writes_chart(self, tmp_path, capsys, reliabilities):
        out_path = tmp_path / "out.png"
        rc = compare.main(["200", "5", "--output", str(out_path)])

        classic_ok, map_ok = run(200, 5, reliabilities)
        lines = capsys.readouterr().out.splitlines()

        assert rc == 0
        assert lines[0] == "N=200 seed=5"
        assert lines[1] == f"classic_ok={classic_ok} classic_rate={classic_ok / 200}"
        assert lines[2] == f"map_ok={map_ok} map_rate={map_ok / 200}"
        assert out_path.exists()

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["abc"],
            ["abc", "xyz"],
            ["1.5", "seed"],
            ["-3"],
        ],
    )
    def test_bad_arguments_fall_back_to_defaults(self, tmp_path, capsys, argv):
        rc = compare.main(argv + ["--output", str(tmp_path / "c.png")])

        first = capsys.readouterr().out.splitlines()[0]
        assert rc == 0
        assert first == f"N={compare.DEFAULT_TRIALS} seed={compare.DEFAULT_SEED}"

    def test_partial_arguments(self, tmp_path, capsys):
        compare.main(["50", "oops", "--output", str(tmp_path / "c.png")])
        assert capsys.readouterr().out.splitlines()[0] == f"N=50 seed={compare.DEFAULT_SEED}"

    def test_zero_trials(self, tmp_path, capsys):
        rc = compare.main(["0", "3", "--output", str(tmp_path / "c.png")])
        lines = capsys.readouterr().out.splitlines()

        assert rc == 0
        assert lines == [
            "N=0 seed=3",
            "classic_ok=0 classic_rate=0.0",
            "map_ok=0 map_rate=0.0",
        ]

    def test_chart_failure_exits_nonzero_after_report(self, tmp_path, capsys):
        bad = tmp_path / "missing" / "c.png"
        rc = compare.main(["20", "1", "--output", str(bad)])

        assert rc == 1
        assert capsys.readouterr().out.splitlines()[0] == "N=20 seed=1"
