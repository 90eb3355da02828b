"""
Error types for token loading and build configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenBuildError(Exception):
    """Base exception for all tokenbuild errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenSourceError(TokenBuildError):
    """
    Raised when a token source file cannot be used.

    Examples:
    - Unreadable file
    - Invalid JSON or YAML
    - Top level is not a mapping

    Callers building stylesheets catch this and skip the file.
    """

    pass


class ManifestError(TokenBuildError):
    """
    Raised when tokens.toml is invalid.

    Examples:
    - TOML syntax errors
    - Unknown output format
    - Unknown reference mode
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed), 0 when unknown
        column: Column number (1-indexed), 0 when unknown
    """

    file: Path
    line: int = 0
    column: int = 0

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens/base/light.json:10:5"
        """
        if self.line:
            return f"{self.file}:{self.line}:{self.column}"
        return str(self.file)


def make_source_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> TokenSourceError:
    """
    Helper to create a TokenSourceError with context.

    Args:
        message: Error description
        file: Source file path
        line: Optional line number
        column: Optional column number

    Returns:
        TokenSourceError with context attached
    """
    context = ErrorContext(file=file, line=line or 0, column=column or 0)
    return TokenSourceError(message, context)


def make_manifest_error(message: str, file: Path | None = None) -> ManifestError:
    """Helper to create a ManifestError, with file context when known."""
    if file:
        return ManifestError(message, ErrorContext(file=file))
    return ManifestError(message)
