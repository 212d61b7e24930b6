"""
Package dependency graph.

This module defines the PackageGraph class, which uses networkx to hold a
directed multigraph of package names. Every import that survives filtering
becomes its own edge, so the number of parallel edges between two packages
is the number of import statements coupling them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import networkx as nx


class EdgeInsertResult(str, Enum):
    """Outcome of PackageGraph.add_edge.

    Attributes:
        ADDED: A new (possibly parallel) edge was inserted.
        REJECTED_SELF_LOOP: Source and target are the same package; nothing
            was inserted.
    """

    ADDED = "added"
    REJECTED_SELF_LOOP = "rejected_self_loop"


class PackageGraph:
    """Directed multigraph of package dependencies.

    Vertices are package names in insertion order. Edges are never
    deduplicated and self-loops are never stored.

    Attributes:
        graph: networkx MultiDiGraph holding the vertices and edges.

    Example:
        >>> graph = PackageGraph()
        >>> graph.add_edge("a", "b")
        <EdgeInsertResult.ADDED: 'added'>
        >>> graph.add_edge("a", "b")
        <EdgeInsertResult.ADDED: 'added'>
        >>> graph.edges_between("a", "b")
        2
        >>> graph.add_edge("a", "a")
        <EdgeInsertResult.REJECTED_SELF_LOOP: 'rejected_self_loop'>
    """

    def __init__(self) -> None:
        """Initialize an empty PackageGraph."""
        self.graph = nx.MultiDiGraph()

    def add_vertex(self, name: str) -> bool:
        """Add a package vertex.

        Args:
            name: Package name.

        Returns:
            True if the vertex was new, False if it was already present.
        """
        if name in self.graph:
            return False
        self.graph.add_node(name)
        return True

    def add_edge(self, source: str, target: str) -> EdgeInsertResult:
        """Add a directed edge from source to target.

        Missing endpoints are added together with the edge.

        Args:
            source: Importing package.
            target: Imported package.

        Returns:
            EdgeInsertResult.ADDED, or EdgeInsertResult.REJECTED_SELF_LOOP if
            source and target are equal.
        """
        if source == target:
            return EdgeInsertResult.REJECTED_SELF_LOOP
        self.add_vertex(source)
        self.add_vertex(target)
        self.graph.add_edge(source, target)
        return EdgeInsertResult.ADDED

    def has_vertex(self, name: str) -> bool:
        return name in self.graph

    def vertices(self) -> list[str]:
        """Return all package names in insertion order."""
        return list(self.graph.nodes)

    def edges_between(self, source: str, target: str) -> int:
        """Return the multiplicity of the ordered pair (source, target)."""
        return self.graph.number_of_edges(source, target)

    def all_edges(self) -> list[tuple[str, str]]:
        """Return every edge as a (source, target) pair, parallel edges included."""
        return [(source, target) for source, target in self.graph.edges()]

    def edge_multiplicities(self) -> dict[tuple[str, str], int]:
        """Return the multiplicity of each distinct ordered pair.

        Pairs appear in the order their first edge is iterated.

        Example:
            >>> graph = PackageGraph()
            >>> _ = graph.add_edge("a", "b"), graph.add_edge("a", "b"), graph.add_edge("b", "a")
            >>> graph.edge_multiplicities()
            {('a', 'b'): 2, ('b', 'a'): 1}
        """
        counts: dict[tuple[str, str], int] = {}
        for pair in self.all_edges():
            counts[pair] = counts.get(pair, 0) + 1
        return counts

    def number_of_vertices(self) -> int:
        return self.graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def is_empty(self) -> bool:
        return self.number_of_vertices() == 0

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Export graph to dictionary format.

        Returns:
            Dictionary with "vertices" and "edges"; each distinct ordered pair
            is listed once with its multiplicity.
        """
        return {
            "vertices": [{"id": name} for name in self.vertices()],
            "edges": [
                {"source": source, "target": target, "multiplicity": count}
                for (source, target), count in self.edge_multiplicities().items()
            ],
        }
