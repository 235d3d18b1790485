"""Tests for loading binding files from disk."""

import logging
from pathlib import Path

import pytest

from bindspec.core.errors import ParseError, ParseErrorKind, SourceError
from bindspec.core.loader import discover_files, parse_file, parse_files, parse_text

BROKEN = "class A {}\nclass B : {}\nclass C { int c; }\n"


class TestParseText:
    """Tests for parse_text."""

    def test_module_named_after_file(self) -> None:
        result = parse_text("class A {}", Path("bindings/Cocos.bind"))

        assert result.ok
        assert result.module.name == "Cocos"
        assert result.module.file == Path("bindings/Cocos.bind")

    def test_raises_without_recovery(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_text(BROKEN, Path("x.bind"))

        assert exc_info.value.kind == ParseErrorKind.INVALID_SUPERCLASS_LIST

    def test_recovery_collects_errors(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="bindspec.core.loader"):
            result = parse_text(BROKEN, Path("x.bind"), recover=True)

        assert not result.ok
        assert [c.name for c in result.module.classes] == ["A", "C"]
        assert len(result.errors) == 1
        assert "Skipped declaration in x.bind" in caplog.text


class TestParseFiles:
    """Tests for reading files."""

    def test_parse_file(self, bindings_file: Path) -> None:
        result = parse_file(bindings_file)
        assert [c.name for c in result.module.classes] == ["cocos2d::CCNode", "PlayLayer"]

    def test_parse_files_keeps_order(self, tmp_path: Path) -> None:
        first = tmp_path / "b.bind"
        second = tmp_path / "a.bind"
        first.write_text("class B {}")
        second.write_text("class A {}")

        results = parse_files([first, second])
        assert [r.module.name for r in results] == ["b", "a"]
        assert all(r.ok for r in results)

    def test_parse_files_returns_recovered_errors(self, tmp_path: Path) -> None:
        good = tmp_path / "good.bind"
        broken = tmp_path / "broken.bind"
        good.write_text("class A {}")
        broken.write_text(BROKEN)

        results = parse_files([good, broken], recover=True)

        assert results[0].ok
        assert [c.name for c in results[1].module.classes] == ["A", "C"]
        assert [e.kind for e in results[1].errors] == [ParseErrorKind.INVALID_SUPERCLASS_LIST]

    def test_invalid_utf8_raises_source_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.bind"
        bad.write_bytes(b"class A {\n  int \xff;\n}\n")

        with pytest.raises(SourceError) as exc_info:
            parse_file(bad)

        assert str(bad) in exc_info.value.message
        assert "not valid UTF-8" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_parse_files_error_has_file_context(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.bind"
        bad.write_text("class A {\n    int f() = win 0x1 ios 0x2;\n}\n")

        with pytest.raises(ParseError) as exc_info:
            parse_files([bad])

        assert exc_info.value.kind == ParseErrorKind.MISSING_SEPARATOR
        assert exc_info.value.context.file == bad
        assert exc_info.value.context.line == 2

    def test_logs_each_file(self, bindings_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="bindspec.core.loader"):
            parse_files([bindings_file])

        assert "2 classes" in caplog.text


class TestDiscoverFiles:
    """Tests for glob expansion."""

    def test_patterns_are_sorted_and_deduplicated(self, tmp_path: Path) -> None:
        (tmp_path / "bindings").mkdir()
        for name in ("b.bind", "a.bind", "notes.txt"):
            (tmp_path / "bindings" / name).write_text("")

        files = discover_files(tmp_path, ["bindings/*.bind", "bindings/a.bind"])
        assert [f.name for f in files] == ["a.bind", "b.bind"]

    def test_no_matches(self, tmp_path: Path) -> None:
        assert discover_files(tmp_path, ["*.bind"]) == []
