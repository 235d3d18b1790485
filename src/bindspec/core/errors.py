"""
Error types for bindspec parsing and project configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional


class BindspecError(Exception):
    """Base exception for all bindspec errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseErrorKind(StrEnum):
    """What went wrong while parsing binding declarations."""

    UNKNOWN_PLATFORM = "unknown_platform"
    MALFORMED_ADDRESS = "malformed_address"
    EMPTY_BIND = "empty_bind"
    MISSING_SEPARATOR = "missing_separator"
    INVALID_IDENTIFIER = "invalid_identifier"
    UNTERMINATED_BODY = "unterminated_body"
    UNCLOSED_BODY = "unclosed_body"
    MISSING_BIND = "missing_bind"
    INVALID_SUPERCLASS_LIST = "invalid_superclass_list"
    INVALID_NAME = "invalid_name"
    UNEXPECTED_INPUT = "unexpected_input"


class ParseError(BindspecError):
    """
    Raised when binding declarations cannot be parsed.

    Every parse error carries the kind of failure and the 0-based character
    offset where the mismatch was detected.

    Examples:
    - Unknown platform keyword in a bind list
    - Two bind entries without a separating comma
    - Method body whose braces never balance
    - Class body missing its closing brace
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_INPUT,
        offset: int = 0,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        self.offset = offset
        super().__init__(message, context)


class ConfigError(BindspecError):
    """
    Raised when a bindspec.toml manifest cannot be loaded.

    Examples:
    - Manifest file missing
    - Invalid TOML syntax
    - Wrong value types for known keys
    """

    pass


class SourceError(BindspecError):
    """
    Raised when a binding file cannot be decoded.

    Examples:
    - File is not valid UTF-8
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet showing the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "file.bind:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet shows up to 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_parse_error(
    message: str,
    kind: ParseErrorKind,
    offset: int,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        kind: Failure category
        offset: 0-based character offset of the failure
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, kind, offset, context)


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """Helper to create a ConfigError, prefixing the manifest path when known."""
    if file is not None:
        return ConfigError(f"{file}: {message}")
    return ConfigError(message)


def make_source_error(message: str, file: Path) -> SourceError:
    """Helper to create a SourceError prefixed with the binding file path."""
    return SourceError(f"{file}: {message}")
