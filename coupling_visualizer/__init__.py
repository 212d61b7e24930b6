"""
Package Coupling Visualizer v1.0

Builds a package-level dependency graph from the package and import
declarations of a Java source tree, and renders it as DOT text and as an
interactive SVG image with a circular layout.

Example:
    >>> from coupling_visualizer import CodebaseAnalyzer, SVGRenderer, VisualizerConfig
    >>> config = VisualizerConfig(exclusions=("java", "javax"))
    >>> result = CodebaseAnalyzer(config).analyze("src/main/java")
    >>> path = SVGRenderer(config).export(result.graph, "out", title="Core")
"""

from coupling_visualizer.version import __version__, __version_info__

__author__ = "Coupling Visualizer Contributors"

from coupling_visualizer.analyzer.codebase_analyzer import CodebaseAnalyzer, is_excluded
from coupling_visualizer.exceptions import (
    CouplingError,
    ExportError,
    SourceParseError,
)
from coupling_visualizer.export.dot_exporter import DOTExporter, sanitize_vertex_id
from coupling_visualizer.export.svg_renderer import (
    SVGRenderer,
    compute_circular_layout,
    edge_thickness,
)
from coupling_visualizer.graph.package_graph import EdgeInsertResult, PackageGraph
from coupling_visualizer.models.analysis_result import AnalysisResult
from coupling_visualizer.models.config import ErrorMode, VisualizerConfig
from coupling_visualizer.models.import_reference import ImportReference
from coupling_visualizer.models.source_facts import SourceFacts
from coupling_visualizer.parser.java_parser import JavaSourceParser
from coupling_visualizer.resolver.import_resolver import (
    DEFAULT_PACKAGE,
    resolve_target_package,
)
from coupling_visualizer.scanner.fs_scan import iter_source_files
from coupling_visualizer.utils.filenames import build_output_filename, sanitize_title
from coupling_visualizer.utils.warnings import AnalysisWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core analyzer
    "CodebaseAnalyzer",
    "is_excluded",
    # Configuration
    "VisualizerConfig",
    "ErrorMode",
    # Results
    "AnalysisResult",
    # Data models
    "ImportReference",
    "SourceFacts",
    # Graph
    "PackageGraph",
    "EdgeInsertResult",
    # Parsing and resolution
    "JavaSourceParser",
    "DEFAULT_PACKAGE",
    "resolve_target_package",
    "iter_source_files",
    # Export
    "DOTExporter",
    "SVGRenderer",
    "compute_circular_layout",
    "edge_thickness",
    "sanitize_vertex_id",
    "build_output_filename",
    "sanitize_title",
    # Diagnostics
    "AnalysisWarning",
    "WarningCollector",
    # Exceptions
    "CouplingError",
    "SourceParseError",
    "ExportError",
]
