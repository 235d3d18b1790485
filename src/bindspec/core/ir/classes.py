"""
Class declarations for bindspec IR.

Members and methods are kept in two separate sequences in source order.
Their relative interleaving is recoverable only through `loc.offset`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .location import SourceLocation
from .members import MemberSpec
from .methods import MethodSpec


class ClassSpec(BaseModel):
    """
    A bound native class.

    Attributes:
        name: Class name, possibly scope-qualified (cocos2d::CCNode)
        superclasses: Superclass names in source order, unresolved
        members: Data members in source order
        methods: Methods in source order
        loc: Where the `class` keyword starts
    """

    name: str
    superclasses: tuple[str, ...] = ()
    members: tuple[MemberSpec, ...] = ()
    methods: tuple[MethodSpec, ...] = ()
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    def get_method(self, name: str) -> MethodSpec | None:
        """Get first method by name (overloads share a name)."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def get_member(self, name: str) -> MemberSpec | None:
        """Get member by name."""
        for member in self.members:
            if member.name == name:
                return member
        return None
