"""
Diagnostic collection for coupling analysis.

This module defines warning and error collection functionality, allowing
diagnostics to be collected during analysis and rendering and reported to
users by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class AnalysisWarning:
    """Diagnostic message produced during analysis.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Diagnostic message text.
        context: Optional context information (e.g., a file path).

    Example:
        >>> warning = AnalysisWarning(
        ...     level="WARNING",
        ...     message="Skipping unparsable file",
        ...     context="src/a/A.java"
        ... )
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(LEVELS)}"
            )

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


class WarningCollector:
    """Collects diagnostics during analysis and rendering.

    Attributes:
        warnings: List of AnalysisWarning objects in the order they were added.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("INFO", "Adding edge from a to b")
        >>> collector.has_errors()
        False
        >>> collector.add("ERROR", "Cannot write output")
        >>> collector.has_errors()
        True
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[AnalysisWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a diagnostic message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Message text.
            context: Optional context information (e.g., a file path).
        """
        self.warnings.append(
            AnalysisWarning(level=level, message=message, context=context)
        )

    def info(self, message: str, context: Optional[str] = None) -> None:
        self.add("INFO", message, context)

    def warning(self, message: str, context: Optional[str] = None) -> None:
        self.add("WARNING", message, context)

    def error(self, message: str, context: Optional[str] = None) -> None:
        self.add("ERROR", message, context)

    def has_errors(self) -> bool:
        """Check if any error-level diagnostics exist."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[AnalysisWarning]:
        """Get all collected diagnostics, in insertion order."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[AnalysisWarning]:
        """Get diagnostics with the given severity level.

        Args:
            level: Severity level to filter by ("INFO", "WARNING", "ERROR").

        Returns:
            List of AnalysisWarning objects with the specified level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.add("ERROR", "Error 1")
            >>> collector.add("WARNING", "Warning 2")
            >>> len(collector.get_by_level("WARNING"))
            2
        """
        return [
            warning for warning in self.warnings if warning.level == level
        ]
