"""Tests for the command-line driver."""

from __future__ import annotations

import pytest

from dvconverge.cli import (
    EXIT_CONVERGENCE_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    main,
)

TRIANGLE = "A B C START A B 1 B C 1 A C 5 UPDATE B C -1 END\n"


@pytest.fixture
def script(tmp_path):
    """Write a topology script and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "topology.txt"
        path.write_text(text)
        return str(path)

    return _write


class TestMain:
    """End-to-end runs of main()."""

    def test_full_run(self, script, capsys):
        assert main([script(TRIANGLE)]) == EXIT_OK
        out = capsys.readouterr().out

        assert out.startswith("Distance Table of router A at t=0:\n     B    C\nB    1    INF\nC    INF  5\n")
        assert "Distance Table of router C at t=5:" in out
        assert "t=6" not in out
        assert out.count("Routing Table of router A:") == 2
        assert "Routing Table of router A:\nB,B,1\nC,B,2\n" in out
        assert out.endswith("Routing Table of router C:\nA,A,5\nB,A,6\n\n")

    def test_update_tables_follow_initial_routing(self, script, capsys):
        main([script(TRIANGLE)])
        out = capsys.readouterr().out
        first_routing = out.index("Routing Table of router A:")
        assert out.index("at t=2:") < first_routing < out.index("at t=3:")

    def test_cold_start_same_output(self, script, capsys):
        path = script(TRIANGLE)
        main([path])
        warm = capsys.readouterr().out
        main([path, "--cold-start"])
        cold = capsys.readouterr().out
        assert warm.split("Routing Table")[-3:] == cold.split("Routing Table")[-3:]

    def test_verify(self, script, capsys):
        assert main([script(TRIANGLE), "--verify"]) == EXIT_OK

    def test_no_update_batch(self, script, capsys):
        assert main([script("A B START A B 3 UPDATE END")]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.count("Routing Table of router A:") == 1
        assert "Routing Table of router B:\nA,A,3\n" in out

    def test_malformed_cost(self, script, capsys, caplog):
        assert main([script("A B START A B x UPDATE END")]) == EXIT_INPUT_ERROR
        assert capsys.readouterr().out == ""
        assert "Malformed cost" in caplog.text

    def test_unknown_node_in_update_produces_no_output(self, script, capsys, caplog):
        assert main([script("A B START A B 1 UPDATE A Z 2 END")]) == EXIT_INPUT_ERROR
        assert capsys.readouterr().out == ""
        assert "Unknown node in update batch: Z" in caplog.text

    def test_admit_new_nodes(self, script, capsys):
        assert main([script("A B START A B 1 UPDATE B Z 2 END"), "--admit-new-nodes", "--verify"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Routing Table of router Z:\nA,B,3\nB,B,2\n" in out

    def test_round_cap(self, script, capsys, caplog):
        assert main([script(TRIANGLE), "--max-rounds-factor", "1"]) == EXIT_CONVERGENCE_ERROR
        assert capsys.readouterr().out == ""
        assert "Convergence failure" in caplog.text

    def test_invalid_round_factor(self, script):
        assert main([script(TRIANGLE), "--max-rounds-factor", "0"]) == EXIT_INPUT_ERROR
