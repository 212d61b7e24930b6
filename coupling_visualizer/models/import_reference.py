"""
Import reference model.

This module defines the ImportReference class, which represents a single
import declaration of a source file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportReference:
    """A single import declaration.

    Attributes:
        name: Fully qualified dotted name, without a trailing ".*".
        is_static: True for a static member import.
        is_wildcard: True for an on-demand import ("import a.b.*").

    Example:
        >>> ref = ImportReference("com.example.util.Helper.CONSTANT", is_static=True)
        >>> ref.segments
        ['com', 'example', 'util', 'Helper', 'CONSTANT']
    """

    name: str
    is_static: bool = False
    is_wildcard: bool = False

    def __post_init__(self) -> None:
        """Validate the import name."""
        if not self.name:
            raise ValueError("Import name cannot be empty")

    @property
    def segments(self) -> list[str]:
        """Dot-separated segments of the qualified name."""
        return self.name.split(".")

    def __str__(self) -> str:
        prefix = "static " if self.is_static else ""
        suffix = ".*" if self.is_wildcard else ""
        return f"import {prefix}{self.name}{suffix}"
