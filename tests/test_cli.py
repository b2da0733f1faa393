import pytest

from tinygraph import cli
from tinygraph.graph import Graph


def test_build_parser_has_commands():
    parser = cli.build_parser()
    args = parser.parse_args(["validate", "graph.txt"])
    assert args.command == "validate"
    assert args.fmt == "sets"
    args = parser.parse_args(["convert", "in.txt", "out.txt", "--format", "pairs"])
    assert (args.src, args.dst, args.fmt) == ("in.txt", "out.txt", "pairs")


def test_show_prints_set_notation(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("V = {1, 2}\nE = {[1, 2]}", encoding="utf-8")
    cli.main(["show", str(path)])
    out = capsys.readouterr().out
    assert "V = {1, 2}" in out
    assert "E = {[1, 2]}" in out


def test_convert_pairs_to_sets(tmp_path):
    src = tmp_path / "pairs.txt"
    dst = tmp_path / "graph.txt"
    src.write_text("1 2\n2 3\n", encoding="utf-8")
    cli.main(["convert", str(src), str(dst), "--format", "pairs"])
    graph = Graph.from_file(str(dst))
    assert [v.id for v in graph.vertices] == [1, 2, 3]
    assert [str(e) for e in graph.edges] == ["[1, 2]", "[2, 3]"]


def test_validate_ok(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("V = {1}\nE = {}", encoding="utf-8")
    cli.run_validate(str(path), "sets")


def test_validate_reports_bad_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("not a graph", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.run_validate(str(path), "sets")
    assert "is not a graph file" in str(excinfo.value)


def test_validate_reports_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["validate", str(tmp_path / "missing.txt")])
    assert "Cannot read" in str(excinfo.value)


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("TINYGRAPH_LOG_LEVEL", "DEBUG")
    args = cli.build_parser().parse_args(["validate", "graph.txt"])
    assert args.log_level == "DEBUG"
