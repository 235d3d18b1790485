"""
Lexical primitives for binding declarations.

The binding language is scanned character by character rather than through a
token stream: whether a newline is legal depends on the rule being parsed
(a bind entry lives on one line, class and method boundaries do not), so the
parser rules pick the whitespace flavour themselves.
"""

import bisect
import string
from pathlib import Path

from .errors import ParseError, ParseErrorKind, make_parse_error

# Identifier grammar: letters, digits, scope colons and underscores
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + ":_")
HEX_DIGITS = frozenset(string.hexdigits)

HORIZONTAL_SPACE = frozenset(" \t")
LINE_END = frozenset("\r\n")
WHITESPACE = HORIZONTAL_SPACE | LINE_END

POINTER_MARKER = "*"
COMMENT_START = "//"


class Scanner:
    """
    Cursor over an immutable source text.

    Holds the text, the file it came from (for error reporting) and a
    0-based character offset. Every primitive either advances the cursor
    past what it consumed or leaves it where it was.
    """

    def __init__(self, text: str, file: Path):
        """
        Initialize scanner.

        Args:
            text: Source text to scan
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self._line_starts: list[int] | None = None

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def at_line_end(self) -> bool:
        """True at a newline or at end of input."""
        return self.at_end() or self.text[self.pos] in LINE_END

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def skip_space(self) -> int:
        """Skip horizontal space only. Returns the number of characters skipped."""
        start = self.pos
        while self.current_char() in HORIZONTAL_SPACE:
            self.pos += 1
        return self.pos - start

    def skip_whitespace(self) -> int:
        """Skip spaces, tabs and newlines. Returns the number of characters skipped."""
        start = self.pos
        while self.current_char() in WHITESPACE:
            self.pos += 1
        return self.pos - start

    def skip_comment(self) -> bool:
        """Skip a `//` comment up to (not including) the end of line."""
        if not self.startswith(COMMENT_START):
            return False
        while not self.at_line_end():
            self.pos += 1
        return True

    def skip_trivia(self) -> None:
        """Skip any run of whitespace and line comments."""
        while True:
            self.skip_whitespace()
            if not self.skip_comment():
                break

    def read_identifier(self, allow_pointer: bool = False) -> str:
        """
        Read the longest run of identifier characters.

        Args:
            allow_pointer: Also accept trailing `*` markers (type text)

        Raises:
            ParseError: If no identifier character is present
        """
        start = self.pos
        while self.current_char() in IDENTIFIER_CHARS:
            self.pos += 1

        if self.pos == start:
            found = self.describe_current()
            raise self.error(
                f"Expected identifier, got {found}",
                ParseErrorKind.INVALID_IDENTIFIER,
            )

        if allow_pointer:
            while self.current_char() == POINTER_MARKER:
                self.pos += 1

        return self.text[start : self.pos]

    def describe_current(self) -> str:
        """Human-readable description of the character at the cursor."""
        ch = self.current_char()
        if ch is None:
            return "end of input"
        if ch in LINE_END:
            return "end of line"
        return repr(ch)

    def line_starts(self) -> list[int]:
        """Offsets where each line begins, indexed once per text."""
        if self._line_starts is None:
            starts = [0]
            index = self.text.find("\n")
            while index != -1:
                starts.append(index + 1)
                index = self.text.find("\n", index + 1)
            self._line_starts = starts
        return self._line_starts

    def location(self, offset: int) -> tuple[int, int]:
        """Map a character offset to a 1-indexed (line, column) pair."""
        offset = min(offset, len(self.text))
        starts = self.line_starts()
        line = bisect.bisect_right(starts, offset)
        return line, offset - starts[line - 1] + 1

    def snippet(self, line: int) -> str:
        """Source lines from two lines before `line` up to `line`."""
        starts = self.line_starts()
        first = starts[max(1, line - 2) - 1]
        end = starts[line] - 1 if line < len(starts) else len(self.text)
        return self.text[first:end]

    def error(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_INPUT,
        offset: int | None = None,
    ) -> ParseError:
        """
        Build a ParseError anchored at `offset` (default: the cursor).

        The error is returned rather than raised so call sites read
        `raise self.error(...)`.
        """
        if offset is None:
            offset = self.pos
        line, column = self.location(offset)
        return make_parse_error(
            message,
            kind,
            offset,
            self.file,
            line,
            column,
            self.snippet(line),
        )
