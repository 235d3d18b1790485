"""
Bind list parser mixin.

A bind list maps platforms to addresses for one method:

    win 0x1a2b40, mac 0x3f00, android inline

Entries are separated by commas; a trailing comma is allowed only right
before the end of the list. The list ends at end of line, end of input, `;`
or `{` (the start of an inline method body).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import HEX_DIGITS, IDENTIFIER_CHARS

INLINE_KEYWORD = "inline"
HEX_PREFIX = "0x"
BIND_SEPARATOR = ","
BIND_TERMINATORS = frozenset(";{")


class BindParserMixin:
    """Parser mixin for method bind lists."""

    if TYPE_CHECKING:
        pos: int
        text: str
        current_char: Any
        at_line_end: Any
        startswith: Any
        advance: Any
        accept: Any
        skip_space: Any
        describe_current: Any
        error: Any
        parse_platform: Any

    def parse_bind(self) -> ir.BindTable:
        """
        Parse a bind list and fold it into one BindTable.

        Grammar:
            bindlist := entry (sep entry)*
            sep      := SPACE* "," SPACE*

        Entries are applied left to right; a later entry overwrites the
        slots it names, and a generic alias writes both of its slots.

        Raises:
            ParseError: EMPTY_BIND, MISSING_SEPARATOR, or any entry error
        """
        self.skip_space()
        if self._at_bind_end():
            raise self.error(
                "Expected at least one 'platform address' entry",
                ParseErrorKind.EMPTY_BIND,
            )

        bind = ir.BindTable()
        while True:
            platform, address = self.parse_bind_entry()
            bind = bind.with_address(platform, address)

            self.skip_space()
            if self.accept(BIND_SEPARATOR):
                self.skip_space()
                if self._at_bind_end():
                    break
                continue

            if self._at_bind_end():
                break

            if self.current_char() in IDENTIFIER_CHARS:
                raise self.error(
                    "Expected ',' between bind entries",
                    ParseErrorKind.MISSING_SEPARATOR,
                )
            raise self.error(f"Expected ',' or end of bind list, got {self.describe_current()}")

        return bind

    def parse_bind_entry(self) -> tuple[ir.Platform, int | None]:
        """
        Parse one `platform address` pair.

        Grammar:
            entry := platform SPACE+ address
        """
        platform = self.parse_platform()
        if self.skip_space() == 0:
            raise self.error(
                f"Expected whitespace and an address after '{platform.value}'",
                ParseErrorKind.MALFORMED_ADDRESS,
            )
        return platform, self.parse_address()

    def parse_address(self) -> int | None:
        """
        Parse an address.

        Grammar:
            address := "inline" | "0x" HEXDIGIT+

        Both `inline` and an explicit zero yield None.

        Raises:
            ParseError: MALFORMED_ADDRESS
        """
        start = self.pos

        if self.startswith(INLINE_KEYWORD):
            self.advance(len(INLINE_KEYWORD))
            if self.current_char() in IDENTIFIER_CHARS:
                raise self.error(
                    "Expected 'inline' or a 0x address",
                    ParseErrorKind.MALFORMED_ADDRESS,
                    start,
                )
            return None

        if not self.startswith(HEX_PREFIX):
            raise self.error(
                f"Expected 'inline' or a 0x address, got {self.describe_current()}",
                ParseErrorKind.MALFORMED_ADDRESS,
            )

        self.advance(len(HEX_PREFIX))
        digits_start = self.pos
        while self.current_char() in HEX_DIGITS:
            self.pos += 1

        digits = self.text[digits_start : self.pos]
        if not digits:
            raise self.error(
                "Expected hex digits after '0x'",
                ParseErrorKind.MALFORMED_ADDRESS,
            )
        if self.current_char() in IDENTIFIER_CHARS:
            raise self.error(
                f"Invalid hex digit {self.describe_current()} in address",
                ParseErrorKind.MALFORMED_ADDRESS,
            )

        value = int(digits, 16)
        if value > ir.MAX_ADDRESS:
            raise self.error(
                f"Address 0x{digits} does not fit in 64 bits",
                ParseErrorKind.MALFORMED_ADDRESS,
                start,
            )
        return ir.normalize_address(value)

    def _at_bind_end(self) -> bool:
        """True at a structural terminator of a bind list."""
        return self.at_line_end() or self.current_char() in BIND_TERMINATORS
