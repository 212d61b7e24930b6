"""Filesystem traversal for source discovery."""

from coupling_visualizer.scanner.fs_scan import iter_source_files

__all__ = [
    "iter_source_files",
]
