"""
Dependency graph module.

This package contains the graph representation of package dependencies.
"""

from coupling_visualizer.graph.package_graph import EdgeInsertResult, PackageGraph

__all__ = [
    "EdgeInsertResult",
    "PackageGraph",
]
