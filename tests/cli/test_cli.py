import logging
from pathlib import Path

import pytest

from graphsuite import cli

DIAMOND = "4\n0\t1\t1.0\n0\t2\t4.0\n1\t2\t2.0\n1\t3\t3.0\n2\t3\t1.0\n"
FLOW = "4\n0\t1\t3\n0\t2\t2\n1\t2\t1\n1\t3\t2\n2\t3\t3\n"
SPLIT = "5\n0\t1\n1\t2\n3\t4\n"
SPLIT_WEIGHTED = "5\n0\t1\t1\n1\t2\t1\n3\t4\t1\n"
SQUARE = "4\n0\t1\t1\n0\t2\t3\n0\t3\t1\n1\t2\t1\n1\t3\t3\n2\t3\t1\n"


@pytest.fixture
def write_graph_file(tmp_path: Path):
    def _write(text: str, name: str = "graph.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: graphsuite" in capsys.readouterr().out


def test_unknown_algorithm_is_argparse_error(write_graph_file) -> None:
    path = write_graph_file(DIAMOND)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["mst", "boruvka", path])
    assert exc_info.value.code == 2


def test_info(write_graph_file, capsys) -> None:
    cli.main(["info", write_graph_file(DIAMOND)])
    out = capsys.readouterr().out
    assert "vertices: 4" in out
    assert "edges: 5" in out
    assert "directed: no" in out
    assert "components: 1" in out
    assert "total weight: 11.0" in out


def test_info_unweighted_directed(write_graph_file, capsys) -> None:
    cli.main(["info", "--directed", write_graph_file(SPLIT)])
    out = capsys.readouterr().out
    assert "directed: yes" in out
    assert "components: 2" in out
    assert "total weight" not in out


def test_components(write_graph_file, capsys) -> None:
    cli.main(["components", write_graph_file(SPLIT)])
    out = capsys.readouterr().out
    assert "components: 2" in out
    assert "1: 0 1 2" in out
    assert "2: 3 4" in out


@pytest.mark.parametrize("algorithm", ["prim", "kruskal"])
@pytest.mark.parametrize("backend", ["list", "matrix"])
def test_mst(write_graph_file, capsys, algorithm, backend) -> None:
    cli.main(["mst", algorithm, write_graph_file(DIAMOND), "--backend", backend])
    out = capsys.readouterr().out
    assert "total weight: 4.0" in out
    assert "1\t3\t3.0" not in out


def test_sssp_dijkstra_single_target(write_graph_file, capsys) -> None:
    path = write_graph_file(DIAMOND)
    cli.main(["sssp", "dijkstra", path, "--start", "0", "--target", "2"])
    out = capsys.readouterr().out
    assert "2\t3.0\t0 -> 1 -> 2" in out
    assert "0 -> 2\n" not in out


def test_sssp_reports_unreachable(write_graph_file, capsys) -> None:
    cli.main(["sssp", "bellman-ford", write_graph_file(SPLIT_WEIGHTED)])
    out = capsys.readouterr().out
    assert "2\t2\t0 -> 1 -> 2" in out
    assert "4\tunreachable" in out


def test_sssp_unknown_target_exits(write_graph_file, caplog) -> None:
    path = write_graph_file(DIAMOND)
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["sssp", "dijkstra", path, "--target", "9"])
    assert exc_info.value.code == 1
    assert "VertexNotFoundError" in caplog.text


def test_sssp_negative_cycle_exits(write_graph_file, caplog) -> None:
    path = write_graph_file("3\n0\t1\t1\n1\t2\t-3\n2\t0\t1\n")
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["sssp", "bellman-ford", path, "--directed"])
    assert exc_info.value.code == 1
    assert "NegativeCycleError" in caplog.text


@pytest.mark.parametrize(
    "algorithm", ["brute-force", "branch-and-bound", "nearest-neighbor"]
)
def test_tsp(write_graph_file, capsys, algorithm) -> None:
    cli.main(["tsp", algorithm, write_graph_file(SQUARE), "--start", "0"])
    out = capsys.readouterr().out
    assert "tour: 0 -> 1 -> 2 -> 3 -> 0" in out
    assert "cost: 4" in out


def test_tsp_requires_complete_graph(write_graph_file, caplog) -> None:
    path = write_graph_file(DIAMOND)
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["tsp", "brute-force", path])
    assert exc_info.value.code == 1
    assert "InvalidGraphKindError" in caplog.text


def test_max_flow(write_graph_file, capsys) -> None:
    path = write_graph_file(FLOW)
    cli.main(["max-flow", path, "--directed", "--start", "0", "--target", "3"])
    out = capsys.readouterr().out
    assert "max flow: 5" in out
    assert "0 -> 1: 3" in out
    assert "min cut: " in out


def test_max_flow_requires_directed_graph(write_graph_file, caplog) -> None:
    path = write_graph_file(FLOW)
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["max-flow", path, "--target", "3"])
    assert exc_info.value.code == 1
    assert "InvalidGraphKindError" in caplog.text


def test_missing_file_exits(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["info", str(tmp_path / "absent.txt")])
    assert exc_info.value.code == 1
    assert "Graph file not found" in caplog.text


def test_undecodable_file_exits(tmp_path: Path, caplog) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2\n0\t1\t\xff\n")
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["info", str(path)])
    assert exc_info.value.code == 1
    assert "InvalidInputError" in caplog.text


def test_malformed_file_exits(write_graph_file, caplog) -> None:
    path = write_graph_file("3\n0\t7\n")
    with caplog.at_level(logging.ERROR, logger="graphsuite"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["info", path])
    assert exc_info.value.code == 1
    assert "line 2" in caplog.text


def test_verbose_enables_debug(write_graph_file, caplog) -> None:
    path = write_graph_file(DIAMOND)
    with caplog.at_level(logging.DEBUG, logger="graphsuite"):
        cli.main(["--verbose", "info", path])
    assert "Debug logging enabled" in caplog.text
    assert logging.getLogger("graphsuite").getEffectiveLevel() == logging.DEBUG
    cli.main(["info", path])
    assert logging.getLogger("graphsuite").getEffectiveLevel() == logging.INFO
