"""
Base parser class for binding declarations.

Provides the literal matching and location helpers shared by all parser
mixins. Character-level scanning lives in `Scanner`.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ..lexer import IDENTIFIER_CHARS, Scanner

if TYPE_CHECKING:
    from .. import ir


class BaseParser(Scanner):
    """
    Base parser class with literal matching utilities.

    This class provides the foundation for recursive descent parsing over
    raw text. Rules advance `pos` on success and raise ParseError on
    failure; rules that offer alternatives rewind `pos` themselves.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize parser.

        Args:
            text: Binding declaration source
            file: Source file path (for error reporting)
        """
        super().__init__(text, file if file is not None else Path("<string>"))

    def accept(self, literal: str) -> bool:
        """Consume `literal` if the input continues with it."""
        if self.startswith(literal):
            self.advance(len(literal))
            return True
        return False

    def expect(self, literal: str, what: str | None = None) -> None:
        """
        Expect `literal` at the cursor and consume it.

        Raises:
            ParseError: If the input does not continue with `literal`
        """
        if not self.accept(literal):
            expected = what or f"'{literal}'"
            raise self.error(f"Expected {expected}, got {self.describe_current()}")

    def expect_space(self, after: str) -> None:
        """Require at least one horizontal space character."""
        if self.skip_space() == 0:
            raise self.error(f"Expected whitespace after {after}, got {self.describe_current()}")

    def expect_end(self) -> None:
        """Require that only whitespace and comments remain."""
        self.skip_trivia()
        if not self.at_end():
            raise self.error(f"Unexpected trailing input starting at {self.describe_current()}")

    def word_at(self, offset: int) -> str:
        """The run of identifier characters starting at `offset` (for messages)."""
        end = offset
        while end < len(self.text) and self.text[end] in IDENTIFIER_CHARS:
            end += 1
        return self.text[offset:end]

    def location_of(self, offset: int) -> "ir.SourceLocation":
        """SourceLocation for an offset in this parser's text."""
        from .. import ir

        line, column = self.location(offset)
        return ir.SourceLocation(file=str(self.file), line=line, column=column, offset=offset)
