"""
Analysis result model.

This module defines the AnalysisResult class, which bundles the package graph
built from a source tree with bookkeeping about the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from coupling_visualizer.utils.warnings import WarningCollector

if TYPE_CHECKING:
    from coupling_visualizer.graph.package_graph import PackageGraph


@dataclass
class AnalysisResult:
    """Result of analyzing a source tree.

    Attributes:
        graph: The populated package graph. Read-only by convention.
        root: Root directory that was analyzed.
        files_scanned: Number of source files visited.
        files_failed: Paths of files that could not be read or parsed.
        warnings: Diagnostics recorded during the run.
    """

    graph: PackageGraph
    root: str
    files_scanned: int = 0
    files_failed: list[str] = field(default_factory=list)
    warnings: WarningCollector = field(default_factory=WarningCollector)

    @property
    def files_analyzed(self) -> int:
        """Number of files that contributed to the graph."""
        return self.files_scanned - len(self.files_failed)
