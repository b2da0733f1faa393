"""Command line interface for tinygraph."""

from __future__ import annotations

import argparse
import os
from typing import Sequence

from .codec import GraphFileError, GraphFormat
from .graph import Graph
from .utils import console, logger, set_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinygraph", description="Inspect and convert graph text files")
    parser.add_argument(
        "--log-level",
        default=os.getenv("TINYGRAPH_LOG_LEVEL", "INFO"),
        help="Python logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    formats = [fmt.value for fmt in GraphFormat]

    show = sub.add_parser("show", help="Print a graph in set notation with a short summary")
    show.add_argument("path", help="Graph file to read")
    show.add_argument("--format", choices=formats, default=GraphFormat.SETS.value, dest="fmt")

    convert = sub.add_parser("convert", help="Read a graph and write it in set notation")
    convert.add_argument("src", help="Graph file to read")
    convert.add_argument("dst", help="Destination file")
    convert.add_argument("--format", choices=formats, default=GraphFormat.SETS.value, dest="fmt")

    validate = sub.add_parser("validate", help="Check that a file holds a graph")
    validate.add_argument("path", help="Graph file to validate")
    validate.add_argument("--format", choices=formats, default=GraphFormat.SETS.value, dest="fmt")

    return parser


def _load(path: str, fmt: str) -> Graph:
    try:
        return Graph.from_file(path, GraphFormat(fmt))
    except GraphFileError as exc:
        raise SystemExit(str(exc)) from exc
    except ValueError as exc:
        raise SystemExit(f'"{path}" could not be parsed as {fmt}: {exc}') from exc
    except OSError as exc:
        raise SystemExit(f'Cannot read "{path}": {exc.strerror or exc}') from exc


def run_show(path: str, fmt: str) -> Graph:
    graph = _load(path, fmt)
    console.print(str(graph), markup=False, highlight=False)
    console.log(
        f"Vertices: {graph.count_vertices()} Edges: {graph.count_edges()} Type: {graph.get_type().value}"
    )
    return graph


def run_convert(src: str, dst: str, fmt: str) -> Graph:
    graph = _load(src, fmt)
    try:
        graph.write_to_file(dst)
    except OSError as exc:
        raise SystemExit(f'Cannot write "{dst}": {exc.strerror or exc}') from exc
    console.log(f"Wrote {graph.count_vertices()} vertices and {graph.count_edges()} edges to {dst}")
    return graph


def run_validate(path: str, fmt: str) -> None:
    graph = _load(path, fmt)
    logger.debug("Validated %r", graph)
    console.log("Validation OK")


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)
    if args.command == "show":
        run_show(args.path, args.fmt)
    elif args.command == "convert":
        run_convert(args.src, args.dst, args.fmt)
    elif args.command == "validate":
        run_validate(args.path, args.fmt)
    else:  # pragma: no cover - argparse enforces the choices
        parser.print_help()


if __name__ == "__main__":  # pragma: no cover
    main()
