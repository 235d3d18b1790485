"""
bindspec - parser for native class binding declarations.

Turns `class Name : Base { ... }` declarations with per-platform method
addresses into an immutable declaration tree.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import BindspecError, ConfigError, ParseError, ParseErrorKind, SourceError
from .core.parser_impl import parse_bindings, parse_class

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "BindspecError",
    "ConfigError",
    "ParseError",
    "ParseErrorKind",
    "SourceError",
    "parse_bindings",
    "parse_class",
]
