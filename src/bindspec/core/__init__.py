"""Core bindspec functionality: IR, lexical primitives, parser, file loading, manifest."""

from . import ir
from .errors import (
    BindspecError,
    ConfigError,
    ErrorContext,
    ParseError,
    ParseErrorKind,
    SourceError,
)
from .loader import ParseResult, discover_files, parse_file, parse_files, parse_text
from .manifest import ProjectManifest, load_manifest
from .parser_impl import Parser, parse_bindings

__all__ = [
    "ir",
    "BindspecError",
    "ConfigError",
    "ErrorContext",
    "ParseError",
    "ParseErrorKind",
    "SourceError",
    "Parser",
    "parse_bindings",
    "ParseResult",
    "parse_text",
    "parse_file",
    "parse_files",
    "discover_files",
    "ProjectManifest",
    "load_manifest",
]
