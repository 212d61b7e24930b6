"""
Custom exception classes for coupling analysis.

This module defines the exceptions used throughout the coupling visualizer
package. Per-file failures are raised as SourceParseError so the analyzer can
skip the offending file; output failures are raised as ExportError.
"""

from typing import Optional


class CouplingError(Exception):
    """Base exception class for all coupling analysis errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a CouplingError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class SourceParseError(CouplingError):
    """Exception raised when a source file cannot be read or parsed.

    The analyzer treats this as a per-file failure: the file is skipped and
    traversal continues, unless the configuration asks to fail fast.

    Attributes:
        message: Error message describing the failure.
        path: Path of the offending source file, if known.
        line: 1-based line of the first syntax error, if known.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        """Initialize a SourceParseError.

        Args:
            message: Error message describing the failure.
            path: Optional path of the source file.
            line: Optional 1-based line number of the first error.
        """
        self.path = path
        self.line = line
        if path:
            location = f"{path}:{line}" if line is not None else path
            message = f"{location}: {message}"
        super().__init__(message)


class ExportError(CouplingError):
    """Exception raised when an output artifact cannot be written.

    Attributes:
        message: Error message describing the failure.
        path: Target path of the artifact.
    """

    def __init__(self, message: str, path: str) -> None:
        """Initialize an ExportError.

        Args:
            message: Error message describing the failure.
            path: Target path that could not be written.
        """
        super().__init__(message)
        self.path = path
