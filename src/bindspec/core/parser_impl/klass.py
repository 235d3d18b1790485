"""
Class parser mixin.

DSL Syntax:

    class PlayLayer : GJBaseGameLayer, CCCircleWaveDelegate {
        // comments are allowed before any entry
        static PlayLayer* create(GJGameLevel* level) = win 0x1fb6d0;
        bool init(GJGameLevel* level) = win 0x1fb780, mac 0x7f9f0;

        PlayerObject* m_player1;
        bool m_isPracticeMode;
    }
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseError, ParseErrorKind
from ..lexer import IDENTIFIER_CHARS

logger = logging.getLogger(__name__)

CLASS_KEYWORD = "class"
SCOPE_QUALIFIER = "::"


class ClassParserMixin:
    """Parser mixin for class declarations."""

    if TYPE_CHECKING:
        pos: int
        current_char: Any
        at_end: Any
        startswith: Any
        advance: Any
        accept: Any
        expect: Any
        skip_whitespace: Any
        skip_trivia: Any
        read_identifier: Any
        describe_current: Any
        location: Any
        location_of: Any
        error: Any
        parse_method: Any
        parse_member: Any

    def parse_class(self) -> ir.ClassSpec:
        """
        Parse a class declaration.

        Grammar:
            class := "class" WS+ name WS* (":" WS* name (WS* "," WS* name)*)? WS* "{" body "}"

        Raises:
            ParseError: INVALID_NAME, INVALID_SUPERCLASS_LIST, UNCLOSED_BODY,
                or any error from a member or method in the body
        """
        start = self.pos
        if not self.accept(CLASS_KEYWORD):
            raise self.error(f"Expected 'class', got {self.describe_current()}")
        if self.skip_whitespace() == 0 and self.current_char() in IDENTIFIER_CHARS:
            raise self.error("Expected whitespace after 'class'")

        name = self.parse_class_name()
        self.skip_whitespace()

        superclasses: list[str] = []
        if self.accept(":"):
            superclasses = self.parse_superclasses()
            self.skip_whitespace()

        open_pos = self.pos
        self.expect("{", f"'{{' to open body of class '{name}'")
        members, methods = self.parse_class_body(name, open_pos)

        logger.debug(
            "Parsed class %s (%d members, %d methods)", name, len(members), len(methods)
        )
        return ir.ClassSpec(
            name=name,
            superclasses=tuple(superclasses),
            members=tuple(members),
            methods=tuple(methods),
            loc=self.location_of(start),
        )

    def parse_class_name(self) -> str:
        """
        Parse the class name as one opaque token.

        Scope qualifiers (`cocos2d::CCNode`) are part of the name. A single
        colon glued to the end of the name (`class A: B`) belongs to the
        superclass list and is handed back. Any other single colon inside
        the name is INVALID_NAME.
        """
        name_pos = self.pos
        try:
            name = self.read_identifier()
        except ParseError:
            raise self.error(
                f"Expected class name after 'class', got {self.describe_current()}",
                ParseErrorKind.INVALID_NAME,
            ) from None

        if name.endswith(":") and not name.endswith(SCOPE_QUALIFIER):
            name = name[:-1]
            self.pos -= 1
        if not name:
            raise self.error(
                "Expected class name after 'class', got ':'",
                ParseErrorKind.INVALID_NAME,
                name_pos,
            )
        if _has_lone_colon(name):
            raise self.error(
                f"Invalid class name '{name}': a single ':' inside a name (use '::' for scopes)",
                ParseErrorKind.INVALID_NAME,
                name_pos,
            )
        return name

    def parse_superclasses(self) -> list[str]:
        """
        Parse the comma-separated superclass names following `:`.

        Raises:
            ParseError: INVALID_SUPERCLASS_LIST if a name is missing or holds a
                single colon
        """
        names: list[str] = []
        while True:
            self.skip_whitespace()
            name_pos = self.pos
            try:
                name = self.read_identifier()
            except ParseError:
                raise self.error(
                    f"Expected superclass name, got {self.describe_current()}",
                    ParseErrorKind.INVALID_SUPERCLASS_LIST,
                ) from None
            if _has_lone_colon(name):
                raise self.error(
                    f"Invalid superclass name '{name}': a single ':' inside a name",
                    ParseErrorKind.INVALID_SUPERCLASS_LIST,
                    name_pos,
                )
            names.append(name)

            after_name = self.pos
            self.skip_whitespace()
            if not self.accept(","):
                self.pos = after_name
                return names

    def parse_class_body(
        self, class_name: str, open_pos: int
    ) -> tuple[list[ir.MemberSpec], list[ir.MethodSpec]]:
        """
        Parse class body entries up to the closing brace.

        Returns:
            Tuple of (members, methods), each in source order
        """
        members: list[ir.MemberSpec] = []
        methods: list[ir.MethodSpec] = []

        while True:
            self.skip_trivia()
            if self.at_end():
                line, _ = self.location(open_pos)
                raise self.error(
                    f"Body of class '{class_name}' opened on line {line} is never closed",
                    ParseErrorKind.UNCLOSED_BODY,
                )
            if self.accept("}"):
                return members, methods

            entry = self.parse_class_entry()
            if isinstance(entry, ir.MethodSpec):
                methods.append(entry)
            else:
                members.append(entry)

    def parse_class_entry(self) -> ir.MethodSpec | ir.MemberSpec:
        """
        Parse one body entry, trying a method first and then a member.

        Both start with `type name`; only a method continues with `(`. When
        both alternatives fail, the error that got further into the input
        is reported.
        """
        start = self.pos
        try:
            return self.parse_method()
        except ParseError as method_error:
            self.pos = start
            try:
                return self.parse_member()
            except ParseError as member_error:
                if method_error.offset > member_error.offset:
                    raise method_error from None
                raise


def _has_lone_colon(name: str) -> bool:
    return ":" in name.replace(SCOPE_QUALIFIER, "")
