"""
Source parser module.

This package contains source parsing functionality, including the
JavaSourceParser class that extracts package and import declarations.
"""

from coupling_visualizer.parser.java_parser import JavaSourceParser

__all__ = [
    "JavaSourceParser",
]
