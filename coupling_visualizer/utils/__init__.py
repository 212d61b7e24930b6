"""
Utility functions and helpers for coupling analysis.

This package contains diagnostic collection and output file naming helpers.
"""

from coupling_visualizer.utils.filenames import build_output_filename, sanitize_title
from coupling_visualizer.utils.warnings import AnalysisWarning, WarningCollector

__all__ = [
    "build_output_filename",
    "sanitize_title",
    "AnalysisWarning",
    "WarningCollector",
]
