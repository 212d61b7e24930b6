"""
Export module.

This package renders a PackageGraph as DOT text and as an SVG image.
"""

from coupling_visualizer.export.dot_exporter import DOTExporter, sanitize_vertex_id
from coupling_visualizer.export.svg_renderer import (
    SVGRenderer,
    compute_circular_layout,
    edge_thickness,
)

__all__ = [
    "DOTExporter",
    "SVGRenderer",
    "compute_circular_layout",
    "edge_thickness",
    "sanitize_vertex_id",
]
