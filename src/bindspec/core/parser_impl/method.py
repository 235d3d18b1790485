"""
Method parser mixin.

DSL Syntax:

    virtual void update(float dt) = win 0x2bc50, mac 0x1a8f0;
    static PlayLayer* get() = win 0x1e0, ios inline {
        return GameManager::get()->m_playLayer;
    }

A method body is opaque: it is skipped by counting braces and never
interpreted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import WHITESPACE

# Modifier keywords, each must be followed by whitespace
METHOD_MODIFIERS: tuple[tuple[str, ir.MethodModifier], ...] = (
    ("virtual", ir.MethodModifier.VIRTUAL),
    ("static", ir.MethodModifier.STATIC),
)


class MethodParserMixin:
    """Parser mixin for method declarations."""

    if TYPE_CHECKING:
        pos: int
        text: str
        current_char: Any
        startswith: Any
        accept: Any
        skip_whitespace: Any
        read_identifier: Any
        describe_current: Any
        location: Any
        location_of: Any
        error: Any
        parse_params: Any
        parse_bind: Any

    def parse_method(self) -> ir.MethodSpec:
        """
        Parse a method declaration.

        Grammar:
            method := modifier? type WS+ IDENTIFIER params WS* "=" WS* bindlist WS* (";" | body)

        Raises:
            ParseError: MISSING_BIND if there is no `= bindlist`,
                UNTERMINATED_BODY if the body braces never balance
        """
        start = self.pos
        modifier = self.parse_method_modifier()

        return_type = self.read_identifier(allow_pointer=True)
        if self.skip_whitespace() == 0:
            raise self.error(
                f"Expected whitespace after return type '{return_type}', got {self.describe_current()}"
            )
        name = self.read_identifier()
        params = self.parse_params()

        self.skip_whitespace()
        if not self.accept("="):
            raise self.error(
                f"Method '{name}' needs a bind list ('= platform address, ...')",
                ParseErrorKind.MISSING_BIND,
            )
        self.skip_whitespace()
        bind = self.parse_bind()

        self.skip_whitespace()
        if self.accept(";"):
            has_body = False
        elif self.current_char() == "{":
            self.skip_body()
            has_body = True
        else:
            raise self.error(
                f"Expected ';' or a method body after bind list, got {self.describe_current()}"
            )

        return ir.MethodSpec(
            name=name,
            return_type=return_type,
            params=tuple(params),
            bind=bind,
            modifier=modifier,
            has_body=has_body,
            loc=self.location_of(start),
        )

    def parse_method_modifier(self) -> ir.MethodModifier:
        """
        Parse an optional leading `virtual` or `static`.

        A modifier word not followed by whitespace is left alone so that it
        can still be read as a type name.
        """
        for keyword, modifier in METHOD_MODIFIERS:
            if not self.startswith(keyword):
                continue
            after = self.pos + len(keyword)
            if after < len(self.text) and self.text[after] in WHITESPACE:
                self.pos = after
                self.skip_whitespace()
                return modifier
        return ir.MethodModifier.NONE

    def skip_body(self) -> None:
        """
        Skip a brace-delimited body, including any nested braces.

        Uses an explicit depth counter so arbitrarily deep nesting does not
        grow the call stack.

        Raises:
            ParseError: UNTERMINATED_BODY at end of input
        """
        open_pos = self.pos
        self.pos += 1  # opening brace
        depth = 1

        while depth:
            ch = self.current_char()
            if ch is None:
                line, _ = self.location(open_pos)
                raise self.error(
                    f"Method body opened on line {line} is never closed",
                    ParseErrorKind.UNTERMINATED_BODY,
                )
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            self.pos += 1
