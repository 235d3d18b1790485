"""
Member and parameter types for bindspec IR.

Both are plain `type name` pairs. Type text is opaque: no attempt is made to
resolve or validate it beyond the identifier grammar.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .location import SourceLocation


class ParamSpec(BaseModel):
    """Positional method parameter."""

    type: str
    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


class MemberSpec(BaseModel):
    """
    Data member declared in a class body (`Foo* bar;`).

    Attributes:
        type: Type text, possibly ending in pointer markers
        name: Member name
        loc: Where the declaration starts
    """

    type: str
    name: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_pointer(self) -> bool:
        return self.type.endswith("*")
