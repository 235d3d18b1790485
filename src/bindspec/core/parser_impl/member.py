"""
Member and parameter parser mixin.

Both constructs are `type name` pairs on one line:

    Foo* m_foo;
    void setScale(float scale, bool animate)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir


class MemberParserMixin:
    """Parser mixin for data members and parameter lists."""

    if TYPE_CHECKING:
        pos: int
        accept: Any
        expect: Any
        expect_space: Any
        skip_space: Any
        read_identifier: Any
        location_of: Any

    def parse_member(self) -> ir.MemberSpec:
        """
        Parse a data member.

        Grammar:
            member := type SPACE+ IDENTIFIER SPACE* ";"
        """
        start = self.pos
        type_text = self.read_identifier(allow_pointer=True)
        self.expect_space(f"type '{type_text}'")
        name = self.read_identifier()
        self.skip_space()
        self.expect(";", f"';' after member '{name}'")
        return ir.MemberSpec(type=type_text, name=name, loc=self.location_of(start))

    def parse_params(self) -> list[ir.ParamSpec]:
        """
        Parse a parenthesised parameter list.

        Grammar:
            params := "(" SPACE* (param (SPACE* "," SPACE* param)*)? SPACE* ")"
        """
        self.expect("(")
        self.skip_space()

        params: list[ir.ParamSpec] = []
        if self.accept(")"):
            return params

        while True:
            params.append(self.parse_param())
            self.skip_space()
            if self.accept(","):
                self.skip_space()
                continue
            self.expect(")", "',' or ')' in parameter list")
            return params

    def parse_param(self) -> ir.ParamSpec:
        """
        Parse a single parameter.

        Grammar:
            param := type SPACE+ IDENTIFIER
        """
        type_text = self.read_identifier(allow_pointer=True)
        self.expect_space(f"type '{type_text}'")
        name = self.read_identifier()
        return ir.ParamSpec(type=type_text, name=name)
