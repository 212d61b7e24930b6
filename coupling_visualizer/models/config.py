"""
Configuration model for coupling analysis.

This module defines the VisualizerConfig class and ErrorMode enum, which
control which files are analyzed, which imports are excluded, how per-file
failures are handled, and the geometry of the rendered image.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of error handling modes for per-file failures.

    Attributes:
        FAIL: Raise immediately when a source file cannot be read or parsed.
        WARN: Record a warning, skip the file and continue with the rest of
            the tree.
        IGNORE: Skip the file silently. The path is still listed as failed
            in the analysis result.

    Example:
        >>> ErrorMode.WARN.value
        'warn'
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values."""
        return [member.value for member in cls]


@dataclass
class VisualizerConfig:
    """Configuration settings for a coupling analysis run.

    Attributes:
        exclusions: Package-name prefixes. An import whose resolved package
            starts with any of them is not added to the graph.
        source_extension: File name suffix of the source files to analyze.
        on_parse_error: Error handling mode for unreadable or malformed
            source files. Defaults to ErrorMode.WARN.
        canvas_size: Width and height of the square SVG canvas.
        layout_radius: Radius of the circle the vertices are placed on.
        vertex_radius: Radius of each vertex circle.
        max_edge_thickness: Upper bound of the stroke width of an edge.
        edge_opacity: Opacity of edges that are not highlighted.

    Example:
        >>> config = VisualizerConfig.from_exclusion_argument("java,javax")
        >>> config.exclusions
        ('java', 'javax')
        >>> config.center
        (500, 500)
    """

    exclusions: tuple[str, ...] = field(default_factory=tuple)
    source_extension: str = ".java"
    on_parse_error: ErrorMode = ErrorMode.WARN

    # Layout
    canvas_size: int = 1000
    layout_radius: int = 400
    vertex_radius: int = 10
    max_edge_thickness: int = 6
    edge_opacity: float = 0.25

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if isinstance(self.exclusions, str):
            raise TypeError("exclusions must be a sequence of prefixes, not a string")
        # Empty prefixes would match every package.
        self.exclusions = tuple(prefix for prefix in self.exclusions if prefix)
        if not self.source_extension:
            raise ValueError("source_extension cannot be empty")
        if not isinstance(self.on_parse_error, ErrorMode):
            raise TypeError("on_parse_error must be an ErrorMode instance")
        if self.canvas_size <= 0:
            raise ValueError("canvas_size must be positive")
        if self.layout_radius < 0 or self.vertex_radius < 0:
            raise ValueError("layout_radius and vertex_radius cannot be negative")
        if self.max_edge_thickness < 1:
            raise ValueError("max_edge_thickness must be at least 1")
        if not 0.0 <= self.edge_opacity <= 1.0:
            raise ValueError("edge_opacity must be between 0 and 1")

    @property
    def center(self) -> tuple[int, int]:
        """Centre point of the canvas."""
        half = self.canvas_size // 2
        return half, half

    @classmethod
    def from_exclusion_argument(cls, argument: str, **kwargs) -> "VisualizerConfig":
        """Build a configuration from a comma-separated exclusion argument.

        Args:
            argument: Prefixes separated by ",". Entries are not trimmed.
            **kwargs: Any other VisualizerConfig field.

        Returns:
            A new VisualizerConfig.
        """
        return cls(exclusions=split_exclusions(argument), **kwargs)


def split_exclusions(argument: str) -> tuple[str, ...]:
    """Split a comma-separated exclusion argument, dropping empty entries."""
    return tuple(prefix for prefix in argument.split(",") if prefix)
