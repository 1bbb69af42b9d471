"""Tests for the topology script parser."""

from __future__ import annotations

import pytest

from dvconverge.textio import TopologyScript, parse_cost, parse_topology
from dvconverge.types import InputFormatError

TRIANGLE = """\
A
B
C
START
A B 1
B C 1
A C 5
UPDATE
B C -1
END
"""


class TestParseCost:
    """Tests for cost tokens."""

    @pytest.mark.parametrize("token, expected", [("0", 0), ("17", 17), ("-1", -1)])
    def test_valid(self, token, expected):
        assert parse_cost(token) == expected

    @pytest.mark.parametrize("token", ["x", "1.5", "", "+3", "1e3", "--1", "\u0663", "1\u0662"])
    def test_malformed(self, token):
        with pytest.raises(InputFormatError) as exc_info:
            parse_cost(token)
        assert exc_info.value.token == token


class TestParseTopology:
    """Tests for whole scripts."""

    def test_triangle(self):
        script = parse_topology(TRIANGLE)
        assert script == TopologyScript(
            nodes=["A", "B", "C"],
            edges=[("A", "B", 1), ("B", "C", 1), ("A", "C", 5)],
            updates=[("B", "C", -1)],
        )

    def test_whitespace_insensitive(self):
        script = parse_topology("X Y START X Y 2 UPDATE END")
        assert script.nodes == ["X", "Y"]
        assert script.edges == [("X", "Y", 2)]
        assert script.updates == []

    def test_empty_sections(self):
        script = parse_topology("A START UPDATE END")
        assert script == TopologyScript(nodes=["A"])

    def test_names_not_validated_here(self):
        script = parse_topology("A START A Z 1 UPDATE END")
        assert script.edges == [("A", "Z", 1)]

    def test_malformed_cost(self):
        with pytest.raises(InputFormatError, match="Malformed cost"):
            parse_topology("A B START A B one UPDATE END")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "A B",
            "A B START A B 1",
            "A B START A B",
            "A B START UPDATE A B",
            "A B START UPDATE A B 1",
        ],
    )
    def test_truncated(self, text):
        with pytest.raises(InputFormatError, match="Unexpected end of input"):
            parse_topology(text)
