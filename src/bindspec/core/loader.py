"""
Loading binding files from disk.

Reads source files, parses them into BindingModules, and optionally keeps
going past broken declarations so that one bad class does not hide errors
in the rest of a file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from . import ir
from .errors import ParseError, make_source_error
from .parser_impl import Parser

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing one source buffer."""

    module: ir.BindingModule
    errors: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_text(text: str, file: Path, *, recover: bool = False) -> ParseResult:
    """
    Parse a binding source buffer.

    Args:
        text: Source text
        file: Source file path (module name is its stem)
        recover: Record failing declarations and continue with the next one

    Returns:
        ParseResult with the classes that parsed and, in recovery mode,
        the errors of the ones that did not

    Raises:
        ParseError: On the first failure when not recovering
    """
    parser = Parser(text, file)
    if recover:
        classes, errors = parser.parse_recovering()
        for error in errors:
            logger.warning("Skipped declaration in %s: %s", file, error.message)
    else:
        classes, errors = parser.parse(), []

    module = ir.BindingModule(name=file.stem, file=file, classes=tuple(classes))
    return ParseResult(module=module, errors=errors)


def parse_file(file: Path, *, recover: bool = False) -> ParseResult:
    """
    Read a UTF-8 binding file and parse it.

    Raises:
        SourceError: If the file is not valid UTF-8
        ParseError: On the first failure when not recovering
    """
    try:
        text = file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise make_source_error(
            f"not valid UTF-8 ({e.reason} at byte {e.start})", file
        ) from e

    result = parse_text(text, file, recover=recover)
    logger.info("Parsed %s: %d classes", file, len(result.module.classes))
    return result


def parse_files(files: list[Path], *, recover: bool = False) -> list[ParseResult]:
    """
    Parse binding files.

    Args:
        files: Binding files, parsed in the given order
        recover: Skip failing declarations instead of raising

    Returns:
        One ParseResult per file; in recovery mode each carries the errors
        of the declarations it skipped

    Raises:
        ParseError: On the first failure when not recovering
        SourceError: If a file is not valid UTF-8
    """
    return [parse_file(f, recover=recover) for f in files]


def discover_files(root: Path, patterns: list[str]) -> list[Path]:
    """
    Expand glob patterns relative to `root`.

    Results are sorted per pattern and deduplicated, keeping the first
    occurrence.
    """
    found: list[Path] = []
    seen: set[Path] = set()
    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            if path.is_file() and path not in seen:
                seen.add(path)
                found.append(path)

    if not found:
        logger.warning("No binding files matched %s under %s", patterns, root)
    return found
