"""Source location tracking for IR nodes.

Records the file, line, column and character offset where a declaration
started. Members and methods live in separate sequences, so the offset is
what restores their original interleaving when a consumer needs it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceLocation(BaseModel):
    """Source position where a declaration was defined.

    Attributes:
        file: Path to the binding file (relative or absolute)
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-based character offset into the source text
    """

    file: str
    line: int
    column: int
    offset: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
