"""
Platform keyword parser mixin.

Several keywords are prefixes of others (`android` of `android64`), so the
candidates are tried in a fixed order, longest first, and the first one that
matches commits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import IDENTIFIER_CHARS

# Order is significant: a keyword must come before any keyword it starts with.
PLATFORM_KEYWORDS: tuple[tuple[str, ir.Platform], ...] = (
    ("android64", ir.Platform.ANDROID64),
    ("android32", ir.Platform.ANDROID32),
    ("android", ir.Platform.ANDROID),
    ("ios", ir.Platform.IOS),
    ("imac", ir.Platform.INTEL_MAC),
    ("m1", ir.Platform.M1_MAC),
    ("mac", ir.Platform.MAC),
    ("win", ir.Platform.WINDOWS),
)


class PlatformParserMixin:
    """Parser mixin for platform keywords."""

    if TYPE_CHECKING:
        pos: int
        startswith: Any
        advance: Any
        current_char: Any
        describe_current: Any
        word_at: Any
        error: Any

    def parse_platform(self) -> ir.Platform:
        """
        Parse a platform keyword.

        Grammar:
            "android64" | "android32" | "android" | "ios" | "imac" | "m1" | "mac" | "win"

        The committed keyword must end at a word boundary; `winx` is an
        unknown platform, not `win` followed by junk.

        Raises:
            ParseError: UNKNOWN_PLATFORM
        """
        start = self.pos
        for keyword, platform in PLATFORM_KEYWORDS:
            if not self.startswith(keyword):
                continue
            self.advance(len(keyword))
            if self.current_char() in IDENTIFIER_CHARS:
                raise self.error(
                    f"Unknown platform '{self.word_at(start)}'",
                    ParseErrorKind.UNKNOWN_PLATFORM,
                    start,
                )
            return platform

        found = self.word_at(start)
        raise self.error(
            f"Unknown platform '{found}'" if found else f"Expected platform, got {self.describe_current()}",
            ParseErrorKind.UNKNOWN_PLATFORM,
            start,
        )
