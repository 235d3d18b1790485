"""Tests for class declaration parsing."""

import time
from pathlib import Path

import pytest

from bindspec.core import ir
from bindspec.core.errors import ParseError, ParseErrorKind
from bindspec.core.parser_impl import Parser, parse_bindings, parse_class


class TestClassHeader:
    """Tests for class names and superclass lists."""

    def test_empty_class(self) -> None:
        cls = parse_class("class Hi {}")

        assert cls.name == "Hi"
        assert cls.superclasses == ()
        assert cls.members == ()
        assert cls.methods == ()

    def test_superclasses_in_source_order(self) -> None:
        cls = parse_class("class A : B, C {}")
        assert cls.superclasses == ("B", "C")

    def test_single_superclass(self) -> None:
        cls = parse_class("class PlayLayer : GJBaseGameLayer {}")
        assert cls.name == "PlayLayer"
        assert cls.superclasses == ("GJBaseGameLayer",)

    def test_colon_glued_to_name(self) -> None:
        cls = parse_class("class A: B {}")
        assert cls.name == "A"
        assert cls.superclasses == ("B",)

    def test_scoped_names(self) -> None:
        cls = parse_class("class cocos2d::CCLayer : cocos2d::CCNode, CCTouchDelegate {}")
        assert cls.name == "cocos2d::CCLayer"
        assert cls.superclasses == ("cocos2d::CCNode", "CCTouchDelegate")

    def test_header_across_lines(self) -> None:
        cls = parse_class("class A\n  : B,\n    C\n{\n}")
        assert cls.superclasses == ("B", "C")

    def test_brace_glued_to_name(self) -> None:
        assert parse_class("class A{}").name == "A"

    def test_missing_name(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_NAME
        assert exc_info.value.offset == 6

    def test_missing_name_before_colon(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class : B {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_NAME

    def test_keyword_without_space(self) -> None:
        with pytest.raises(ParseError):
            parse_class("classA {}")

    def test_not_a_class(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("struct A {}")

        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_INPUT

    def test_colon_without_superclass(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class A : {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_SUPERCLASS_LIST

    def test_dangling_comma_in_superclasses(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class A : B, {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_SUPERCLASS_LIST

    def test_body_after_superclasses_required(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class {} : {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_NAME

    def test_single_colon_inside_name(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class A:B {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_NAME
        assert exc_info.value.offset == 6

    def test_single_colon_inside_superclass(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class A : B:C {}")

        assert exc_info.value.kind == ParseErrorKind.INVALID_SUPERCLASS_LIST
        assert exc_info.value.offset == 10


class TestClassBody:
    """Tests for members, methods and comments inside a class body."""

    def test_members(self) -> None:
        cls = parse_class("class T { int a; Foo* b; }")

        assert [(m.type, m.name) for m in cls.members] == [("int", "a"), ("Foo*", "b")]
        assert cls.methods == ()

    def test_whitespace_only_body(self) -> None:
        cls = parse_class("class T {\n\n   \n}")
        assert cls.members == ()
        assert cls.methods == ()

    def test_members_and_methods_are_partitioned(self) -> None:
        cls = parse_class(
            """class T {
    int a;
    void f() = win 0x1;
    bool b;
    static T* create() = win 0x2, mac inline { return new T(); }
}"""
        )

        assert [m.name for m in cls.members] == ["a", "b"]
        assert [m.name for m in cls.methods] == ["f", "create"]
        assert cls.get_method("create").is_static
        assert cls.get_member("b").type == "bool"
        assert cls.get_method("missing") is None

    def test_interleaving_recoverable_from_offsets(self) -> None:
        cls = parse_class("class T {\n    int a;\n    void f() = win 0x1;\n    bool b;\n}")
        entries = sorted([*cls.members, *cls.methods], key=lambda e: e.loc.offset)
        assert [e.name for e in entries] == ["a", "f", "b"]

    def test_comments_are_discarded(self) -> None:
        cls = parse_class(
            """class T {
    // the player
    PlayerObject* m_player; // trailing comment
    // void notAMethod() = win 0x1;
}"""
        )

        assert [m.name for m in cls.members] == ["m_player"]
        assert cls.methods == ()

    def test_comment_before_closing_brace(self) -> None:
        cls = parse_class("class T {\n    int a;\n    // done\n}")
        assert len(cls.members) == 1

    def test_method_body_with_nested_braces(self) -> None:
        cls = parse_class(
            """class T {
    void f() = win 0x1 {
        if (x) { y(); }
    }
    int after;
}"""
        )

        assert cls.methods[0].has_body
        assert [m.name for m in cls.members] == ["after"]

    def test_missing_member_semicolon(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class T { int a }")

        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_INPUT
        assert "';'" in exc_info.value.message
        assert exc_info.value.offset == 16

    def test_method_error_reported_when_it_gets_further(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class T { int f() = linux 0x1; }")

        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_PLATFORM

    def test_method_without_bind(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_class("class T { int f(); }")

        assert exc_info.value.kind == ParseErrorKind.MISSING_BIND

    def test_unclosed_body(self) -> None:
        text = "class T {\n    int a;\n"
        with pytest.raises(ParseError) as exc_info:
            parse_class(text)

        assert exc_info.value.kind == ParseErrorKind.UNCLOSED_BODY
        assert exc_info.value.offset == len(text)
        assert "line 1" in exc_info.value.message

    def test_class_location(self) -> None:
        cls = parse_class("\n// header\nclass T {}")
        assert cls.loc is not None
        assert (cls.loc.line, cls.loc.column) == (3, 1)

    def test_trailing_input_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse_class("class T {} junk")


class TestModuleParsing:
    """Tests for parsing several classes from one buffer."""

    def test_sample_bindings(self, sample_bindings: str) -> None:
        module = parse_bindings(sample_bindings, Path("GeometryDash.bind"))

        assert module.name == "GeometryDash"
        assert [c.name for c in module.classes] == ["cocos2d::CCNode", "PlayLayer"]

        node = module.get_class("cocos2d::CCNode")
        set_scale = node.get_method("setScale")
        assert set_scale.is_virtual
        assert set_scale.bind == ir.BindTable(win=0x1A0, intel_mac=0x3F00, m1_mac=0x3F00)

        play_layer = module.get_class("PlayLayer")
        assert play_layer.superclasses == ("GJBaseGameLayer", "CCCircleWaveDelegate")
        assert [m.name for m in play_layer.members] == ["m_player1", "m_isPracticeMode"]

        init = play_layer.get_method("init")
        assert init.has_body
        assert init.bind.intel_mac == 0x7F9F0
        assert init.bind.m1_mac == 0x6C2D0

        create = play_layer.get_method("create")
        assert create.bind.android32 is None
        assert create.bind.win == 0x1FB6D0

    def test_empty_buffer(self) -> None:
        module = parse_bindings("\n\n// nothing here\n", Path("empty.bind"))
        assert module.classes == ()

    def test_first_error_stops_parsing(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_bindings("class A {}\nclass {}\nclass C {}", Path("x.bind"))

        assert exc_info.value.kind == ParseErrorKind.INVALID_NAME
        assert exc_info.value.context.line == 2

    def test_recovery_skips_to_next_class(self) -> None:
        text = "class A {}\nclass B { int a }\nclass C { int c; }\nclass {}\nclass D {}"
        classes, errors = Parser(text, Path("x.bind")).parse_recovering()

        assert [c.name for c in classes] == ["A", "C", "D"]
        assert [e.kind for e in errors] == [
            ParseErrorKind.UNEXPECTED_INPUT,
            ParseErrorKind.INVALID_NAME,
        ]

    def test_recovery_at_end_of_input(self) -> None:
        classes, errors = Parser("class A {\n  int a;\n").parse_recovering()

        assert classes == []
        assert errors[0].kind == ParseErrorKind.UNCLOSED_BODY

    def test_parses_are_independent(self, sample_bindings: str) -> None:
        first = parse_bindings(sample_bindings, Path("a.bind"))
        second = parse_bindings(sample_bindings, Path("a.bind"))
        assert first == second


class TestLargeInput:
    """Tests for parsing cost on large classes."""

    @staticmethod
    def _best_time(count: int) -> float:
        fields = "\n".join(f"    int m_field{i};" for i in range(count))
        text = f"class Big {{\n{fields}\n}}\n"
        best = float("inf")
        for _ in range(3):
            started = time.perf_counter()
            module = parse_bindings(text, Path("big.bind"))
            best = min(best, time.perf_counter() - started)
        assert len(module.classes[0].members) == count
        return best

    def test_member_heavy_class_scales_linearly(self) -> None:
        small = self._best_time(2000)
        large = self._best_time(8000)

        # 4x the input; quadratic growth would be ~16x
        assert large < small * 8
