"""
DOT export.

This module defines the DOTExporter class, which renders a PackageGraph in
Graphviz DOT format. Vertex identifiers have their dots replaced with
underscores; the dotted package name is kept as the vertex label.
"""

import re

from coupling_visualizer.graph.package_graph import PackageGraph

_BARE_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_KEYWORDS = {"digraph", "edge", "graph", "node", "strict", "subgraph"}


def sanitize_vertex_id(name: str) -> str:
    """Return the DOT identifier of a package vertex.

    Example:
        >>> sanitize_vertex_id("com.example.util")
        'com_example_util'
        >>> sanitize_vertex_id("")
        '""'
    """
    vertex_id = name.replace(".", "_")
    if _BARE_ID.match(vertex_id) and vertex_id.lower() not in _KEYWORDS:
        return vertex_id
    return _quote(vertex_id)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DOTExporter:
    """Exports a PackageGraph as a DOT digraph.

    One statement is written per vertex and one per edge, so parallel edges
    appear as repeated edge statements.

    Example:
        >>> graph = PackageGraph()
        >>> _ = graph.add_edge("a", "com.b")
        >>> print(DOTExporter().export(graph))
        digraph G {
          a [ label="a" ];
          com_b [ label="com.b" ];
          a -> com_b;
        }
        <BLANKLINE>
    """

    def __init__(self, graph_id: str = "G", indent: str = "  ") -> None:
        self.graph_id = graph_id
        self.indent = indent

    def export(self, graph: PackageGraph) -> str:
        """Render graph as DOT text.

        Args:
            graph: Package graph to export.

        Returns:
            DOT source, terminated by a newline.
        """
        lines = [f"digraph {self.graph_id} {{"]
        for vertex in graph.vertices():
            lines.append(
                f"{self.indent}{sanitize_vertex_id(vertex)} [ label={_quote(vertex)} ];"
            )
        for source, target in graph.all_edges():
            lines.append(
                f"{self.indent}{sanitize_vertex_id(source)} -> {sanitize_vertex_id(target)};"
            )
        lines.append("}")
        return "\n".join(lines) + "\n"
