"""Command-line front end for the shortest-path and job-ordering solvers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from itertools import islice
from pathlib import Path

from algokit.bitmask import min_total_cost
from algokit.graph import dijkstra, shortest_path


def _tokens(text: str) -> Iterator[int]:
    for word in text.split():
        try:
            yield int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def _read_graph(tokens: Iterator[int]) -> tuple[int, list[tuple[int, int, int]]]:
    node_count, edge_count = _take(tokens, 2)
    if edge_count < 0:
        raise ValueError("edge count must be non-negative")
    edges = []
    for _ in range(edge_count):
        u, v, weight = _take(tokens, 3)
        edges.append((u, v, weight))
    return node_count, edges


def _run_distances(tokens: Iterator[int]) -> list[str]:
    node_count, edges = _read_graph(tokens)
    (source,) = _take(tokens, 1)
    distances = dijkstra(node_count, edges, source)
    return [f"{source} --> {node} = {dist}" for node, dist in distances.items()]


def _run_path(tokens: Iterator[int]) -> list[str]:
    node_count, edges = _read_graph(tokens)
    path = shortest_path(node_count, edges)
    if path is None:
        return ["-1"]
    return [" ".join(str(node) for node in path)]


def _run_jobs(tokens: Iterator[int]) -> list[str]:
    (case_count,) = _take(tokens, 1)
    lines = []
    for case in range(1, case_count + 1):
        (size,) = _take(tokens, 1)
        if size < 0:
            raise ValueError("matrix size must be non-negative")
        rows = [_take(tokens, size) for _ in range(size)]
        lines.append(f"Case {case}: {min_total_cost(rows)}")
    return lines


_COMMANDS: dict[str, tuple[Callable[[Iterator[int]], list[str]], str]] = {
    "dijkstra": (_run_distances, "distances from a source to every node"),
    "path": (_run_path, "a shortest path from node 1 to node n"),
    "jobs": (_run_jobs, "least total cost of ordering jobs, per case"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Solve graph and job-ordering problems."
    )
    parser.add_argument(
        "-i", "--input", type=Path, help="read input from this file instead of stdin"
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a solver on whitespace-separated integers; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        text = args.input.read_text() if args.input else sys.stdin.read()
    except OSError as exc:
        print(f"algokit: {exc}", file=sys.stderr)
        return 1
    run, _ = _COMMANDS[args.command]
    try:
        lines = run(_tokens(text))
    except ValueError as exc:
        print(f"algokit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())