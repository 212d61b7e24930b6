"""
Codebase analyzer for package coupling.

This module defines the CodebaseAnalyzer class, which walks a source tree,
parses every source file and builds the package dependency graph.
"""

import os
from typing import Iterable, Optional

from coupling_visualizer.exceptions import CouplingError, SourceParseError
from coupling_visualizer.graph.package_graph import EdgeInsertResult, PackageGraph
from coupling_visualizer.models.analysis_result import AnalysisResult
from coupling_visualizer.models.config import ErrorMode, VisualizerConfig
from coupling_visualizer.models.source_facts import SourceFacts
from coupling_visualizer.parser.java_parser import JavaSourceParser
from coupling_visualizer.resolver.import_resolver import (
    DEFAULT_PACKAGE,
    resolve_target_package,
)
from coupling_visualizer.scanner.fs_scan import iter_source_files
from coupling_visualizer.utils.warnings import WarningCollector


def is_excluded(package: str, exclusions: Iterable[str]) -> bool:
    """Return True if package starts with any of the exclusion prefixes.

    Example:
        >>> is_excluded("com.example.internal", ["com.example"])
        True
        >>> is_excluded("com.example.internal", ["com.other"])
        False
    """
    return any(package.startswith(prefix) for prefix in exclusions)


class CodebaseAnalyzer:
    """Source tree analyzer (main entry point).

    Responsibilities:
    1. Discover source files under a root directory
    2. Parse each file into package and import facts
    3. Resolve imports, filter exclusions and populate the package graph

    A file that cannot be read or parsed is skipped according to
    ``config.on_parse_error``; it never leaves a partial contribution in the
    graph.

    Usage:
        analyzer = CodebaseAnalyzer(config)
        result = analyzer.analyze("src/main/java")
        result.graph.vertices()
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        parser: Optional[JavaSourceParser] = None,
    ) -> None:
        """Initialize a CodebaseAnalyzer.

        Args:
            config: VisualizerConfig for analysis configuration.
            parser: Optional source parser; a JavaSourceParser by default.
        """
        self.config = config or VisualizerConfig()
        self.parser = parser or JavaSourceParser()
        self.graph = PackageGraph()
        self.warnings = WarningCollector()

    def analyze(self, root: str) -> AnalysisResult:
        """Analyze every source file below root.

        Args:
            root: Root directory of the source tree.

        Returns:
            AnalysisResult with the populated graph.

        Raises:
            CouplingError: If root is not a directory.
            SourceParseError: If a file fails and on_parse_error is FAIL.
        """
        if not os.path.isdir(root):
            raise CouplingError(f"Source root is not a directory: {root}")

        # Every run starts from an empty graph.
        self.graph = PackageGraph()
        self.warnings = WarningCollector()
        result = AnalysisResult(graph=self.graph, root=root, warnings=self.warnings)
        for path in iter_source_files(root, self.config.source_extension):
            result.files_scanned += 1
            try:
                facts = self.parser.parse_file(path)
            except SourceParseError as e:
                self._handle_parse_error(e)
                result.files_failed.append(path)
                continue
            self.process_source(facts)

        self.warnings.info(
            f"Analyzed {result.files_analyzed} of {result.files_scanned} files: "
            f"{self.graph.number_of_vertices()} packages, "
            f"{self.graph.number_of_edges()} imports",
            context=root,
        )
        return result

    def process_source(self, facts: SourceFacts) -> None:
        """Add the package and imports of one parsed file to the graph.

        Args:
            facts: Package and import facts of the file.
        """
        package = facts.package or DEFAULT_PACKAGE
        self.graph.add_vertex(package)

        for reference in facts.imports:
            imported_package = resolve_target_package(reference)
            if is_excluded(imported_package, self.config.exclusions):
                continue

            self.graph.add_vertex(imported_package)
            if self.graph.add_edge(package, imported_package) is EdgeInsertResult.ADDED:
                self.warnings.info(
                    f"Adding edge from {package} to {imported_package}",
                    context=facts.path,
                )
            else:
                self.warnings.info(
                    f"Skipping self-referential import '{reference}' in package {package}",
                    context=facts.path,
                )

    def _handle_parse_error(self, error: SourceParseError) -> None:
        mode = self.config.on_parse_error
        if mode == ErrorMode.FAIL:
            raise error
        if mode == ErrorMode.WARN:
            self.warnings.warning(f"Skipping file {error}")
