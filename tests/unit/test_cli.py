"""
Tests for the command line entry point.
"""

import numpy as np
import pytest

from pointnorm import cli


class RecordingSink:
    """Stands in for the display window and keeps what it was given."""

    def __init__(self):
        self.calls = []

    def __call__(self, points, color=None, style=None):
        self.calls.append((np.array(points), color, style))


@pytest.fixture
def sink() -> RecordingSink:
    """Display replacement passed to cli.main."""
    return RecordingSink()


class TestShow:
    """Tests for the 'show' command."""

    def test_displays_normalized_points(self, outlier_file, sink):
        """Normalized points and the default color reach the sink."""
        assert cli.main(["show", str(outlier_file)], sink=sink) == cli.EXIT_OK
        assert len(sink.calls) == 1
        points, color, style = sink.calls[0]
        np.testing.assert_allclose(points[:, 0], np.array([-2.0, -1.0, 0.0, 1.0, 98.0]) / 3.0)
        assert color == (0.9, 0.9, 0.1)

    def test_color_options(self, outlier_file, sink):
        """--color and --no-color control painting."""
        cli.main(["show", str(outlier_file), "--color", "1", "0", "0"], sink=sink)
        cli.main(["show", str(outlier_file), "--no-color", "--point-size", "5"], sink=sink)
        assert sink.calls[0][1] == (1.0, 0.0, 0.0)
        assert sink.calls[1][1] is None
        assert sink.calls[1][2].point_size == 5.0

    def test_missing_file_exit_code(self, tmp_path, sink):
        """Unavailable input exits with its own code."""
        assert cli.main(["show", str(tmp_path / "missing.txt")], sink=sink) == cli.EXIT_SOURCE_UNAVAILABLE
        assert sink.calls == []

    def test_empty_file_exit_code(self, tmp_path, sink):
        """Empty input exits with a different code."""
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert cli.main(["show", str(path)], sink=sink) == cli.EXIT_EMPTY_INPUT
        assert sink.calls == []

    def test_undecodable_tail_still_shows(self, tmp_path, sink):
        """Bad bytes after valid points do not make the source unavailable."""
        path = tmp_path / "points.txt"
        path.write_bytes(b"0 0 0\n1 1 1\n2 2 2\n\xff garbage")
        assert cli.main(["show", str(path)], sink=sink) == cli.EXIT_OK
        assert len(sink.calls[0][0]) == 3


class TestStats:
    """Tests for the 'stats' command."""

    def test_prints_center_and_scale(self, outlier_file, capsys, sink):
        """Center and scale are printed, nothing is displayed."""
        assert cli.main(["stats", str(outlier_file)], sink=sink) == cli.EXIT_OK
        out = capsys.readouterr().out
        assert "points: 5" in out
        assert "center: 2 0 0" in out
        assert "scale: 0.333333333" in out
        assert sink.calls == []

    def test_custom_range(self, outlier_file, capsys):
        """--low/--high change the range used for scale."""
        cli.main(["stats", str(outlier_file), "--low", "0", "--high", "1"])
        assert "scale: 0.01" in capsys.readouterr().out

    def test_rejects_invalid_fraction(self, outlier_file):
        """Percentiles outside [0, 1] are refused by the parser."""
        with pytest.raises(SystemExit):
            cli.main(["stats", str(outlier_file), "--high", "1.5"])


class TestLogLevel:
    """Tests for the --log-level option."""

    def test_case_insensitive(self, outlier_file):
        """Lower-case level names are accepted."""
        assert cli.main(["--log-level", "debug", "stats", str(outlier_file)]) == cli.EXIT_OK

    def test_unknown_level_is_a_usage_error(self, outlier_file, capsys):
        """An unknown level is reported by the parser, not as a traceback."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["--log-level", "nonsense", "stats", str(outlier_file)])
        assert exc.value.code == 2
        assert "--log-level" in capsys.readouterr().err
