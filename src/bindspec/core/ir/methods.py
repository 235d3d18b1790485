"""
Method types for bindspec IR.

A method is a signature plus a bind table. Methods written with an inline
body keep no trace of the body text, only that one was present.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .bind import BindTable
from .location import SourceLocation
from .members import ParamSpec


class MethodModifier(StrEnum):
    """Leading method modifier. At most one may be written."""

    NONE = "none"
    VIRTUAL = "virtual"
    STATIC = "static"


class MethodSpec(BaseModel):
    """
    Method declaration.

    Examples:
        - int f() = ios 0x17;
        - virtual void update(float dt) = win 0x1a0, mac inline;
        - static Foo* create() = win 0x40 { return nullptr; }

    Attributes:
        name: Method name
        return_type: Return type text
        params: Ordered parameter list
        bind: Per-platform addresses
        modifier: virtual/static marker, NONE when absent
        has_body: Whether an inline body followed the bind list
        loc: Where the declaration starts
    """

    name: str
    return_type: str
    params: tuple[ParamSpec, ...] = ()
    bind: BindTable = Field(default_factory=BindTable)
    modifier: MethodModifier = MethodModifier.NONE
    has_body: bool = False
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_virtual(self) -> bool:
        return self.modifier == MethodModifier.VIRTUAL

    @property
    def is_static(self) -> bool:
        return self.modifier == MethodModifier.STATIC

    @property
    def signature(self) -> str:
        """C-like signature text, e.g. `int add(int a, int b)`."""
        params = ", ".join(str(p) for p in self.params)
        prefix = "" if self.modifier == MethodModifier.NONE else f"{self.modifier.value} "
        return f"{prefix}{self.return_type} {self.name}({params})"
