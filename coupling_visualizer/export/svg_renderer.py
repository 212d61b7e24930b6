"""
SVG export with a circular layout.

This module defines the SVGRenderer class, which draws a PackageGraph as a
self-contained SVG document: vertices evenly spaced on a circle, one arrow
per coupled package pair whose stroke width grows with the number of
imports, and an embedded script that highlights the incoming edges of a
clicked vertex.
"""

import math
import os
from html import escape
from pathlib import Path
from typing import Optional, Sequence

from coupling_visualizer.exceptions import ExportError
from coupling_visualizer.graph.package_graph import PackageGraph
from coupling_visualizer.models.config import VisualizerConfig
from coupling_visualizer.utils.filenames import build_output_filename
from coupling_visualizer.utils.warnings import WarningCollector

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

ARROW_MARKER = """<defs>
<marker id="triangle" viewBox="0 0 10 10" refX="0" refY="5" markerWidth="6" markerHeight="6" orient="auto">
<path d="M 0 0 L 10 5 L 0 10 z" fill="black" />
</marker>
</defs>"""

HIGHLIGHT_SCRIPT = """<script type="text/ecmascript">
<![CDATA[
function changeColor(evt) {
  var vertices = document.getElementsByTagName('circle');
  for (var i = 0; i < vertices.length; i++) {
    vertices[i].setAttribute('fill', 'transparent');
  }
  var vertex = evt.target;
  vertex.setAttribute('fill', 'red');
  var edges = document.getElementsByTagName('line');
  for (var i = 0; i < edges.length; i++) {
    if (edges[i].getAttribute('data-target') === vertex.id) {
      edges[i].setAttribute('stroke', 'red');
      edges[i].setAttribute('opacity', '1');
    } else {
      edges[i].setAttribute('stroke', 'black');
      edges[i].setAttribute('opacity', '%(opacity)s');
    }
  }
}
]]>
</script>"""


def compute_circular_layout(
    vertices: Sequence[str], center: tuple[int, int], radius: float
) -> dict[str, tuple[int, int]]:
    """Place vertices evenly on a circle, in the given order.

    Vertex i is placed at angle i * 2pi / n, starting at the positive x axis.
    Coordinates are truncated to integers.

    Example:
        >>> compute_circular_layout(["a", "b"], (500, 500), 400)
        {'a': (900, 500), 'b': (100, 500)}
        >>> compute_circular_layout([], (500, 500), 400)
        {}
    """
    if not vertices:
        return {}
    center_x, center_y = center
    angle_step = 2 * math.pi / len(vertices)
    positions: dict[str, tuple[int, int]] = {}
    for i, vertex in enumerate(vertices):
        angle = i * angle_step
        positions[vertex] = (
            int(center_x + radius * math.cos(angle)),
            int(center_y + radius * math.sin(angle)),
        )
    return positions


def edge_thickness(multiplicity: int, max_thickness: int = 6) -> int:
    """Stroke width of an edge drawn for multiplicity parallel imports.

    Example:
        >>> edge_thickness(3)
        3
        >>> edge_thickness(10)
        6
    """
    return min(multiplicity, max_thickness)


class SVGRenderer:
    """Renders a PackageGraph as an interactive SVG image.

    Attributes:
        config: VisualizerConfig with the canvas and stroke settings.
        warnings: Diagnostics recorded while exporting.

    Example:
        >>> graph = PackageGraph()
        >>> _ = graph.add_edge("a", "b")
        >>> svg = SVGRenderer().render(graph, title="Demo")
        >>> b'data-target="b"' in svg
        True
    """

    def __init__(self, config: Optional[VisualizerConfig] = None) -> None:
        self.config = config or VisualizerConfig()
        self.warnings = WarningCollector()

    def render(self, graph: PackageGraph, title: Optional[str] = None) -> bytes:
        """Render graph as an SVG document.

        Args:
            graph: Package graph to draw.
            title: Optional caption drawn centred at the top of the canvas.

        Returns:
            UTF-8 encoded SVG document.
        """
        size = self.config.canvas_size
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg width="{size}" height="{size}" xmlns="{SVG_NAMESPACE}">',
            ARROW_MARKER,
            HIGHLIGHT_SCRIPT % {"opacity": self.config.edge_opacity},
        ]

        if title:
            parts.append(
                f'<text x="{size // 2}" y="30" text-anchor="middle" '
                f'font-family="sans-serif" font-size="20">{escape(title)}</text>'
            )

        positions = compute_circular_layout(
            graph.vertices(), self.config.center, self.config.layout_radius
        )

        # Edges go first so the vertex circles stay on top and clickable.
        for (source, target), multiplicity in graph.edge_multiplicities().items():
            parts.append(
                self._render_edge(
                    source, target, positions[source], positions[target], multiplicity
                )
            )

        for vertex, (x, y) in positions.items():
            parts.append(self._render_vertex(vertex, x, y))

        parts.append("</svg>")
        return ("\n".join(parts) + "\n").encode("utf-8")

    def export(
        self,
        graph: PackageGraph,
        output_dir: str,
        title: Optional[str] = None,
        timestamp_ms: Optional[int] = None,
    ) -> Path:
        """Render graph and write it to a timestamped file in output_dir.

        Args:
            graph: Package graph to draw.
            output_dir: Directory to write to; created if missing.
            title: Optional caption, also used in the file name.
            timestamp_ms: Unix time in milliseconds. Defaults to now.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If the file cannot be written.
        """
        svg = self.render(graph, title)
        output_path = Path(output_dir) / build_output_filename(title, timestamp_ms)
        self.warnings.info(f"Writing svg export to: {output_path}")
        try:
            os.makedirs(output_dir, exist_ok=True)
            output_path.write_bytes(svg)
        except OSError as e:
            self.warnings.error(f"Cannot write svg export: {e}", context=str(output_path))
            raise ExportError(
                f"Cannot write svg export to {output_path}: {e}", str(output_path)
            ) from e
        return output_path

    def _render_edge(
        self,
        source: str,
        target: str,
        source_position: tuple[int, int],
        target_position: tuple[int, int],
        multiplicity: int,
    ) -> str:
        x1, y1 = source_position
        x2, y2 = target_position
        width = edge_thickness(multiplicity, self.config.max_edge_thickness)
        return (
            f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" marker-end="url(#triangle)" '
            f'stroke="black" stroke-width="{width}" opacity="{self.config.edge_opacity}" '
            f'data-target="{escape(target)}">\n'
            f"<title>{escape(source)} -&gt; {escape(target)} ({multiplicity})</title>\n"
            f"</line>"
        )

    def _render_vertex(self, vertex: str, x: int, y: int) -> str:
        return (
            f'<circle id="{escape(vertex)}" cx="{x}" cy="{y}" r="{self.config.vertex_radius}" '
            f'stroke="black" fill="transparent" opacity="0.5" onclick="changeColor(evt)">\n'
            f"<title>{escape(vertex)}</title>\n"
            f"</circle>"
        )
