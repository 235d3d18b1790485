"""
bindspec Parser Package.

The parser is built from mixins, one per construct, layered leaf-first:
platform keywords, bind lists, members and parameters, methods, classes.

The main exports are:
- Parser: The complete parser class
- parse_bindings: Parse a whole source buffer into a BindingModule
- parse_class / parse_method / parse_member / parse_bind / parse_platform:
  parse a string that holds exactly one construct

Usage:
    from bindspec.core.parser_impl import parse_bindings

    module = parse_bindings(text, Path("GeometryDash.bind"))
"""

import re
from pathlib import Path

from .. import ir
from ..errors import ParseError
from .base import BaseParser
from .bind import BindParserMixin
from .klass import ClassParserMixin
from .member import MemberParserMixin
from .method import MethodParserMixin
from .platform import PLATFORM_KEYWORDS, PlatformParserMixin

# Start of a class declaration at the beginning of a line (recovery points)
CLASS_LINE_RE = re.compile(r"^[ \t]*class\b", re.MULTILINE)


class Parser(
    BaseParser,
    PlatformParserMixin,
    BindParserMixin,
    MemberParserMixin,
    MethodParserMixin,
    ClassParserMixin,
):
    """
    Complete binding declaration parser.

    This class composes all parser mixins:

    - PlatformParserMixin: Platform keywords with longest-prefix-first order
    - BindParserMixin: Bind lists folded into a BindTable
    - MemberParserMixin: Data members and parameter lists
    - MethodParserMixin: Method signatures, bind lists and opaque bodies
    - ClassParserMixin: Class declarations and their bodies
    """

    def parse(self) -> list[ir.ClassSpec]:
        """
        Parse every class declaration in the text.

        Declarations may be separated by blank lines and `//` comments.

        Raises:
            ParseError: On the first declaration that fails to parse
        """
        classes: list[ir.ClassSpec] = []
        self.skip_trivia()
        while not self.at_end():
            classes.append(self.parse_class())
            self.skip_trivia()
        return classes

    def parse_recovering(self) -> tuple[list[ir.ClassSpec], list[ParseError]]:
        """
        Parse every class declaration, skipping the ones that fail.

        After a failure parsing resumes at the next line that begins with
        `class`, after the start of the failed declaration.

        Returns:
            Tuple of (classes, errors) in source order
        """
        classes: list[ir.ClassSpec] = []
        errors: list[ParseError] = []

        self.skip_trivia()
        while not self.at_end():
            start = self.pos
            try:
                classes.append(self.parse_class())
            except ParseError as e:
                errors.append(e)
                match = CLASS_LINE_RE.search(self.text, start + 1)
                self.pos = match.start() if match else len(self.text)
            self.skip_trivia()

        return classes, errors


def parse_bindings(text: str, file: Path, name: str | None = None) -> ir.BindingModule:
    """
    Parse a binding source buffer.

    Args:
        text: Source text with zero or more class declarations
        file: Source file path (for error reporting and the module name)
        name: Module name, defaults to the file stem

    Returns:
        BindingModule with all classes in source order
    """
    classes = Parser(text, file).parse()
    return ir.BindingModule(name=name or file.stem, file=file, classes=tuple(classes))


def parse_class(text: str, file: Path | None = None) -> ir.ClassSpec:
    """Parse text holding exactly one class declaration."""
    parser = Parser(text, file)
    parser.skip_trivia()
    cls = parser.parse_class()
    parser.expect_end()
    return cls


def parse_method(text: str, file: Path | None = None) -> ir.MethodSpec:
    """Parse text holding exactly one method declaration."""
    parser = Parser(text, file)
    parser.skip_whitespace()
    method = parser.parse_method()
    parser.expect_end()
    return method


def parse_member(text: str, file: Path | None = None) -> ir.MemberSpec:
    """Parse text holding exactly one member declaration."""
    parser = Parser(text, file)
    parser.skip_whitespace()
    member = parser.parse_member()
    parser.expect_end()
    return member


def parse_bind(text: str, file: Path | None = None) -> ir.BindTable:
    """Parse text holding exactly one bind list."""
    parser = Parser(text, file)
    bind = parser.parse_bind()
    parser.expect_end()
    return bind


def parse_platform(text: str, file: Path | None = None) -> ir.Platform:
    """Parse text holding exactly one platform keyword."""
    parser = Parser(text, file)
    platform = parser.parse_platform()
    parser.expect_end()
    return platform


__all__ = [
    "Parser",
    "PLATFORM_KEYWORDS",
    "parse_bindings",
    "parse_class",
    "parse_method",
    "parse_member",
    "parse_bind",
    "parse_platform",
]
