"""A walk through the directed graph: iteration, edge and vertex removal, copying."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from workbench.graph.digraph import Graph, GraphError


def _show(label: str, values: Iterable[object]) -> None:
    print(label + "".join(f"{value} " for value in values))


def _run() -> None:
    graph = Graph()
    for vertex in (1, 2, 3, 4, 5):
        graph.add_vertex(vertex)
    for source, target in ((1, 2), (1, 3), (2, 4), (3, 5), (4, 5)):
        graph.add_edge(source, target)

    print(graph)

    _show("Vertices (direct): ", graph)
    _show("Vertices (reverse): ", reversed(graph))
    _show("Adjacent vertices of 1 (direct): ", graph.adjacent(1))
    _show("Adjacent vertices of 1 (reverse): ", graph.adjacent_reversed(1))

    print("Removing edge (1 -> 2)...")
    vertex = graph.find_vertex(1)
    first_neighbour = next(graph.adjacent(1))
    graph.remove_first_edge(vertex, first_neighbour)

    _show("Adjacent vertices of 1 after removing edge (direct): ", graph.adjacent(1))

    print("Removing vertex 3...")
    graph.remove_vertex(graph.find_vertex(3))

    _show("Vertices after removing vertex 3 (direct): ", graph)
    _show("Adjacent vertices of 1 after removing vertex 3 (direct): ", graph.adjacent(1))
    _show("Adjacent vertices of 4 (direct): ", graph.adjacent(4))
    _show("Vertices (reverse) after all changes: ", reversed(graph))

    print(graph)

    duplicate = graph.copy()
    print(duplicate)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; errors are reported on standard error."""
    try:
        _run()
    except GraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    except Exception as exc:  # noqa: BLE001
        print(f"Unexpected error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())