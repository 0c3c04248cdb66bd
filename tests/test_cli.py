"""Tests for the command-line entry point."""

import pytest

from pathsearch.__main__ import EXIT_INPUT_ERROR, EXIT_NO_ROUTE, EXIT_ROUTE, main


class TestGraphCommand:
    """python -m pathsearch graph ..."""

    def test_route_found(self, data_dir, capsys):
        """A found route prints the labels and exits 0."""
        code = main(["graph", str(data_dir / "detour.txt"), "S", "T", "--algo", "dijkstra"])
        out = capsys.readouterr().out
        assert code == EXIT_ROUTE
        assert "[S, A, T]" in out
        assert "Distance:  23.454" in out
        assert "Enqueued:  7" in out

    def test_default_algorithm_is_astar(self, data_dir, capsys):
        """Without --algo the A* insertion count is reported."""
        main(["graph", str(data_dir / "detour.txt"), "S", "T"])
        assert "Enqueued:  6" in capsys.readouterr().out

    def test_no_route(self, data_dir, capsys):
        """An unreachable target exits 1."""
        code = main(["graph", str(data_dir / "disconnected.txt"), "A", "Z"])
        assert code == EXIT_NO_ROUTE
        assert "Route:     none" in capsys.readouterr().out

    def test_unknown_label(self, data_dir, capsys):
        """An unknown label is an input error."""
        code = main(["graph", str(data_dir / "line.txt"), "A", "Q"])
        assert code == EXIT_INPUT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """An unreadable file is an input error."""
        code = main(["graph", str(tmp_path / "nope.txt"), "A", "B"])
        assert code == EXIT_INPUT_ERROR
        assert "cannot read" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path, capsys):
        """Malformed graph text is an input error."""
        graph_file = tmp_path / "bad.txt"
        graph_file.write_text("A : 0,0 > B\nthis is not a point\n")
        assert main(["graph", str(graph_file), "A", "B"]) == EXIT_INPUT_ERROR

    def test_astar_reports_shortest(self, data_dir, capsys):
        """A* on the same fixture finds the route through C."""
        main(["graph", str(data_dir / "detour.txt"), "S", "T", "--algo", "astar"])
        out = capsys.readouterr().out
        assert "[S, B, C, T]" in out
        assert "Distance:  9.000" in out

    def test_unknown_algorithm(self, data_dir):
        """argparse rejects algorithms it does not know."""
        with pytest.raises(SystemExit):
            main(["graph", str(data_dir / "line.txt"), "A", "C", "--algo", "bogus"])


class TestTerrainCommand:
    """python -m pathsearch terrain ..."""

    def test_route_with_show(self, data_dir, capsys):
        """--show draws the route over the terrain."""
        code = main([
            "terrain", str(data_dir / "walled.txt"),
            "--start", "0,0", "--target", "0,2",
            "--algo", "first_path", "--show",
        ])
        out = capsys.readouterr().out
        assert code == EXIT_ROUTE
        assert "S#T\n*#*\n.*." in out
        assert "Route:     5 cells" in out
        assert "Enqueued:  7" in out

    def test_no_route(self, data_dir, capsys):
        """The split terrain has no crossing."""
        code = main(["terrain", str(data_dir / "split.txt"), "--start", "0,0", "--target", "0,2"])
        assert code == EXIT_NO_ROUTE
        assert "Route:     no cells" in capsys.readouterr().out

    def test_blocked_endpoint(self, data_dir, capsys):
        """Blocked endpoints are input errors."""
        code = main(["terrain", str(data_dir / "walled.txt"), "--start", "0,0", "--target", "0,1"])
        assert code == EXIT_INPUT_ERROR
        assert "blocked" in capsys.readouterr().err

    def test_pixels(self, data_dir, capsys):
        """--pixels resolves x,y through the area size."""
        code = main([
            "terrain", str(data_dir / "walled.txt"),
            "--start", "1,1", "--target", "13,2", "--pixels", "--area-size", "6",
        ])
        assert code == EXIT_ROUTE
        assert "Distance:  4.828" in capsys.readouterr().out

    def test_octile_heuristic(self, data_dir, capsys):
        """--heuristic accepts every registered heuristic."""
        code = main([
            "terrain", str(data_dir / "walled.txt"),
            "--start", "0,0", "--target", "0,2", "--heuristic", "octile",
        ])
        assert code == EXIT_ROUTE
        assert "Distance:  4.828" in capsys.readouterr().out

    def test_overestimating_heuristic_rejected(self, data_dir):
        """Heuristics that could overestimate the route cost are not offered."""
        with pytest.raises(SystemExit):
            main([
                "terrain", str(data_dir / "walled.txt"),
                "--start", "0,0", "--target", "0,2", "--heuristic", "manhattan",
            ])

    def test_bad_cell(self, data_dir):
        """Cells must be two comma-separated integers."""
        with pytest.raises(SystemExit):
            main(["terrain", str(data_dir / "walled.txt"), "--start", "0", "--target", "0,2"])
