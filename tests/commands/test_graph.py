"""Tests for the show, search, and path commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from graphedit.cli import cli


def _seed_graph(runner: CliRunner) -> None:
    """Add A-B (2), B-C (3), A-C (10) and an isolated D next to the seed nodes.

    IDs: A=3, B=4, C=5, D=6.
    """
    for label in ("A", "B", "C", "D"):
        result = runner.invoke(cli, ["node", "add", label])
        assert result.exit_code == 0, result.output
    for source, target, weight in (("3", "4", "2"), ("4", "5", "3"), ("3", "5", "10")):
        result = runner.invoke(cli, ["edge", "connect", source, target, "--weight", weight])
        assert result.exit_code == 0, result.output


@pytest.mark.usefixtures("_isolated_root")
class TestShow:
    def test_seed_graph(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["node_count"] == 2
        assert [n["label"] for n in data["nodes"]] == ["Node 1", "Node 2"]

    def test_human_tables(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["edge", "connect", "1", "2", "--weight", "7"])
        result = cli_runner.invoke(cli, ["show"])
        assert "Nodes" in result.output
        assert "Edges" in result.output
        assert "edge-1-2" in result.output
        assert "2 nodes, 1 edges" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show"])
        assert result.output.split() == ["1", "2"]


@pytest.mark.usefixtures("_isolated_root")
class TestSearch:
    def test_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "NODE 2"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["match"]["id"] == "2"

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["search", "node 1"])
        assert "Found 1 (Node 1)" in result.output

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "Nowhere"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_FOUND"
        assert data["error"]["message"] == "Node not found: Nowhere"

    def test_blank_clears(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["search", ""])
        assert result.exit_code == 0
        assert "Search cleared." in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestPath:
    def test_shortest(self, cli_runner: CliRunner) -> None:
        _seed_graph(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "path", "3", "5"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert [s["label"] for s in data["steps"]] == ["A", "B", "C"]
        assert data["distance"] == 5.0

    def test_human_chain(self, cli_runner: CliRunner) -> None:
        _seed_graph(cli_runner)
        result = cli_runner.invoke(cli, ["path", "3", "5"])
        assert "3 (A) → 4 (B) → 5 (C)" in result.output
        assert "Distance: 5" in result.output

    def test_quiet_ids(self, cli_runner: CliRunner) -> None:
        _seed_graph(cli_runner)
        result = cli_runner.invoke(cli, ["-q", "path", "5", "3"])
        assert result.output.strip() == "5 4 3"

    def test_unreachable(self, cli_runner: CliRunner) -> None:
        _seed_graph(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "path", "3", "6"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NO_PATH"

    def test_unknown_node(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "path", "1", "99"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"

    def test_verbose_includes_telemetry(self, cli_runner: CliRunner) -> None:
        _seed_graph(cli_runner)
        result = cli_runner.invoke(cli, ["-v", "path", "3", "5"])
        assert result.exit_code == 0, result.output
        assert "GraphService.path" in result.output
        assert "dijkstra" in result.output
