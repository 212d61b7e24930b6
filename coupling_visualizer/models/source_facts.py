"""
Source facts model.

This module defines the SourceFacts class, the two facts the analyzer needs
from a parsed source file: its declared package and its imports.
"""

from dataclasses import dataclass, field
from typing import Optional

from coupling_visualizer.models.import_reference import ImportReference


@dataclass
class SourceFacts:
    """Package and import facts of one source file.

    Attributes:
        path: Path of the source file (informational).
        package: Declared package name, or None when the file has no
            package declaration.
        imports: Import declarations in source order.
    """

    path: str
    package: Optional[str] = None
    imports: list[ImportReference] = field(default_factory=list)
