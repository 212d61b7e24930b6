"""
Analyzer module.

This package contains the CodebaseAnalyzer, which builds the package
dependency graph of a source tree.
"""

from coupling_visualizer.analyzer.codebase_analyzer import CodebaseAnalyzer, is_excluded

__all__ = [
    "CodebaseAnalyzer",
    "is_excluded",
]
