"""Errors raised while generating a dependency report.

Every failure is terminal for the invocation; the CLI turns any ReportError
into a one-line message on stderr and exit status 1.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for report generation failures."""

    def __init__(self, message: str, cause: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class RecipeError(ReportError):
    """The build recipe could not be loaded or written to a temporary file."""


class BuildError(ReportError):
    """The build tool could not be started or exited non-zero."""

    def __init__(self, message: str, cause: object = None, *, returncode: int | None = None) -> None:
        super().__init__(message, cause)
        self.returncode = returncode


class OutputPreparationError(ReportError):
    """The output directory could not be created."""


class RelocationError(ReportError):
    """The report could not be moved into the output directory."""
