"""
Data models for coupling analysis.

This package contains the core data structures: configuration, import
references, per-file source facts and the analysis result.
"""

from coupling_visualizer.models.analysis_result import AnalysisResult
from coupling_visualizer.models.config import ErrorMode, VisualizerConfig
from coupling_visualizer.models.import_reference import ImportReference
from coupling_visualizer.models.source_facts import SourceFacts

__all__ = [
    "AnalysisResult",
    "ErrorMode",
    "ImportReference",
    "SourceFacts",
    "VisualizerConfig",
]
