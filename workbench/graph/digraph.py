"""A directed graph keeping vertices and adjacency lists in insertion order."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any


class GraphError(RuntimeError):
    """Raised when a graph operation refers to a missing or duplicate element."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Graph Exception: {message}")


class Graph:
    """A directed graph; parallel edges are allowed, vertices are unique."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def is_empty(self) -> bool:
        """Return True when the graph has no vertices."""
        return not self._adjacency

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._adjacency.clear()

    def add_vertex(self, value: Hashable) -> None:
        """Add a vertex; raise GraphError if it already exists."""
        if value in self._adjacency:
            raise GraphError(f"Vertex already exists: {value}")
        self._adjacency[value] = []

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        """Add a directed edge from source to target."""
        if source not in self._adjacency or target not in self._adjacency:
            raise GraphError("One or both vertices not found")
        self._adjacency[source].append(target)

    def remove_vertex(self, value: Hashable) -> None:
        """Remove a vertex together with every edge that points to it."""
        if value not in self._adjacency:
            raise GraphError(f"Vertex not found: {value}")
        del self._adjacency[value]
        for vertex, neighbours in self._adjacency.items():
            self._adjacency[vertex] = [n for n in neighbours if n != value]

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove every edge from source to target."""
        if source not in self._adjacency:
            raise GraphError(f"Vertex not found: {source}")
        if target not in self._adjacency:
            raise GraphError(f"Vertex not found: {target}")
        self._adjacency[source] = [n for n in self._adjacency[source] if n != target]

    def remove_first_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove only the first edge from source to target."""
        if source not in self._adjacency:
            raise GraphError("Source vertex not found.")
        neighbours = self._adjacency[source]
        try:
            neighbours.remove(target)
        except ValueError:
            raise GraphError("Edge not found.") from None

    def has_vertex(self, value: Hashable) -> bool:
        """Return True if the vertex exists."""
        return value in self._adjacency

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        """Return True if there is an edge from source to target."""
        return target in self._adjacency.get(source, ())

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Return the number of edges, counting parallel edges separately."""
        return sum(len(neighbours) for neighbours in self._adjacency.values())

    def degree(self, value: Hashable) -> int:
        """Return the out-degree of a vertex."""
        if value not in self._adjacency:
            raise GraphError(f"Vertex not found: {value}")
        return len(self._adjacency[value])

    def find_vertex(self, value: Hashable) -> Hashable:
        """Return the stored vertex equal to value; raise GraphError if absent."""
        for vertex in self._adjacency:
            if vertex == value:
                return vertex
        raise GraphError("Vertex not found.")

    def adjacent(self, value: Hashable) -> Iterator[Hashable]:
        """Iterate over the targets of a vertex's edges in insertion order."""
        if value not in self._adjacency:
            raise GraphError(f"Vertex not found: {value}")
        return iter(tuple(self._adjacency[value]))

    def adjacent_reversed(self, value: Hashable) -> Iterator[Hashable]:
        """Iterate over the targets of a vertex's edges, newest first."""
        if value not in self._adjacency:
            raise GraphError("Vertex not found.")
        return reversed(tuple(self._adjacency[value]))

    def copy(self) -> Graph:
        """Return an independent graph with the same vertices and edges."""
        duplicate = Graph()
        for vertex in self._adjacency:
            duplicate.add_vertex(vertex)
        for vertex, neighbours in self._adjacency.items():
            for neighbour in neighbours:
                duplicate.add_edge(vertex, neighbour)
        return duplicate

    def __copy__(self) -> Graph:
        return self.copy()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(tuple(self._adjacency))

    def __reversed__(self) -> Iterator[Hashable]:
        return reversed(tuple(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, value: object) -> bool:
        return value in self._adjacency

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if len(self._adjacency) != len(other._adjacency):
            return False
        for (mine, my_edges), (theirs, their_edges) in zip(
            self._adjacency.items(), other._adjacency.items()
        ):
            if mine != theirs or len(my_edges) != len(their_edges):
                return False
            if sorted(my_edges) != sorted(their_edges):  # type: ignore[type-var]
                return False
        return True

    def _size(self) -> tuple[int, int]:
        return self.vertex_count(), self.edge_count()

    def __lt__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._size() < other._size()

    def __gt__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._size() > other._size()

    def __le__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._size() <= other._size()

    def __ge__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._size() >= other._size()

    def __str__(self) -> str:
        return "".join(
            f"{vertex}: " + "".join(f"{n} " for n in neighbours) + "\n"
            for vertex, neighbours in self._adjacency.items()
        )

    def __repr__(self) -> str:
        return f"Graph({self._adjacency!r})"