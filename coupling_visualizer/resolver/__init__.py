"""
Import resolver module.

This package maps import declarations to the packages they depend on.
"""

from coupling_visualizer.resolver.import_resolver import (
    DEFAULT_PACKAGE,
    resolve_target_package,
)

__all__ = [
    "DEFAULT_PACKAGE",
    "resolve_target_package",
]
