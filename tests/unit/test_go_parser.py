"""
Tests for the Go import parser

gofiximports/infrastructure/golang/parser.py 테스트
"""
import pytest
from pathlib import Path

from gofiximports.domain.errors import ErrorCode, ParseError, WalkError
from gofiximports.domain.models import FileSet
from gofiximports.infrastructure.golang import list_go_files, parse_dir, parse_file, parse_source

GROUPED = """package main

// Package doc.

import (
	"fmt" // printing

	// the old one
	old "example.com/old/pkg"
	_ "embed"
	. "strings"
)

import "os"

func main() {}
"""


def _parse(source: str, filename: str = "a.go"):
    return parse_source(FileSet(), filename, source)


@pytest.mark.unit
class TestParseSource:
    """소스 파싱 테스트"""

    def test_single_import(self):
        parsed = _parse('package main\n\nimport "fmt"\n')

        assert parsed.package_name == "main"
        assert len(parsed.decls) == 1
        assert not parsed.decls[0].is_grouped
        assert parsed.import_paths() == ["fmt"]

    def test_grouped_imports_and_names(self):
        parsed = _parse(GROUPED)

        assert [decl.is_grouped for decl in parsed.decls] == [True, False]
        assert parsed.import_paths() == ["fmt", "example.com/old/pkg", "embed", "strings", "os"]
        assert [spec.name for spec in parsed.imports] == [None, "old", "_", ".", None]

    def test_comments_attached(self):
        parsed = _parse(GROUPED)
        fmt_spec, old_spec, embed_spec = parsed.imports[:3]

        assert [c.text for c in fmt_spec.comment] == ["// printing"]
        assert [c.text for c in old_spec.doc] == ["// the old one"]
        assert embed_spec.doc == []
        assert [c.text for c in parsed.decls[0].comments] == ["// the old one"]

    def test_raw_string_import_path(self):
        parsed = _parse("package a\nimport `example.com/raw`\n")
        assert parsed.imports[0].path == "`example.com/raw`"
        assert parsed.import_paths() == ["example.com/raw"]

    def test_explicit_semicolons(self):
        parsed = _parse('package a; import "fmt"; func f() {}')
        assert parsed.import_paths() == ["fmt"]

    def test_no_imports(self):
        parsed = _parse("package a\n\nvar x = 1\n")
        assert parsed.decls == []
        assert parsed.imports == []

    def test_positions_map_back_to_file(self):
        fset = FileSet()
        parsed = parse_source(fset, "a.go", 'package a\n\nimport "fmt"\n')
        position = fset.position(parsed.imports[0].pos)

        assert (position.filename, position.line, position.column) == ("a.go", 3, 8)

    def test_files_share_fileset(self):
        fset = FileSet()
        first = parse_source(fset, "a.go", "package a\n")
        second = parse_source(fset, "b.go", "package a\n")

        assert fset.owns(first.source_file)
        assert fset.owns(second.source_file)
        assert first.source_file.base != second.source_file.base


@pytest.mark.unit
class TestParseErrors:
    """구문 오류 테스트"""

    @pytest.mark.parametrize("source, detail", [
        ('import "fmt"\n', "expected 'package', found 'import'"),
        ("package _\n", "invalid package name _"),
        ("package a\nimport x\n", "missing import path"),
        ("package a\nimport x 1\n", "import path must be a string"),
        ('package a\nimport "a b"\n', 'invalid import path: "a b"'),
        ('package a\nimport ("fmt" "os")\n', "expected ';', found STRING \"os\""),
        ("package a\nx := 1\n", "expected declaration, found IDENT x"),
        ('package a\nfunc f() {}\nimport "fmt"\n', "imports must appear before other declarations"),
        ("package a\n\nfunc f() {\n", "expected '}', found EOF"),
        ("package a\n\nfunc f() { )\n", "expected '}', found ')'"),
    ])
    def test_syntax_errors(self, source, detail):
        with pytest.raises(ParseError) as exc_info:
            _parse(source)

        error = exc_info.value
        assert error.error_code == ErrorCode.PARSE_SYNTAX_ERROR
        assert error.context["detail"] == detail
        assert error.filename == "a.go"

    def test_error_message_has_position(self):
        with pytest.raises(ParseError) as exc_info:
            _parse("package a\nx := 1\n")

        assert str(exc_info.value) == "a.go:2:1: expected declaration, found IDENT x"
        assert (exc_info.value.line, exc_info.value.column) == (2, 1)

    def test_scan_error_becomes_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            _parse('package a\n\nimport "fmt\n')

        assert str(exc_info.value) == "a.go:3:8: string literal not terminated"


@pytest.mark.unit
class TestParseFiles:
    """파일/디렉토리 파싱 테스트"""

    def test_parse_file_reads_disk(self, write_go):
        path = write_go("a.go", 'package a\n\nimport "fmt"\n')
        parsed = parse_file(FileSet(), str(path))

        assert parsed.filename == str(path)
        assert parsed.import_paths() == ["fmt"]

    def test_parse_file_missing(self, tmp_path: Path):
        with pytest.raises(ParseError) as exc_info:
            parse_file(FileSet(), str(tmp_path / "missing.go"))
        assert exc_info.value.error_code == ErrorCode.PARSE_READ_FAILED

    def test_parse_file_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "bad.go"
        path.write_bytes(b"package a\n// \xff\n")

        with pytest.raises(ParseError) as exc_info:
            parse_file(FileSet(), str(path))
        assert exc_info.value.error_code == ErrorCode.PARSE_INVALID_ENCODING

    def test_list_go_files(self, tmp_path: Path, write_go):
        write_go("b.go", "package a\n")
        write_go("a.go", "package a\n")
        write_go("notes.txt", "x")
        write_go("sub/c.go", "package c\n")
        (tmp_path / "dir.go").mkdir()

        assert list_go_files(str(tmp_path)) == [
            str(tmp_path / "a.go"),
            str(tmp_path / "b.go"),
        ]

    def test_parse_dir_groups_by_package(self, tmp_path: Path, write_go):
        write_go("a.go", "package a\n")
        write_go("b.go", "package a\n")
        write_go("a_test.go", "package a_test\n")
        write_go("sub/c.go", "package c\n")

        fset = FileSet()
        packages = parse_dir(fset, str(tmp_path))

        assert sorted(packages) == ["a", "a_test"]
        assert [f.filename for f in packages["a"].sorted_files()] == [
            str(tmp_path / "a.go"),
            str(tmp_path / "b.go"),
        ]
        assert len(fset) == 3

    def test_parse_dir_aborts_on_bad_file(self, write_go, tmp_path: Path):
        write_go("a.go", "package a\n")
        write_go("b.go", "not go\n")

        with pytest.raises(ParseError):
            parse_dir(FileSet(), str(tmp_path))

    def test_parse_dir_missing_directory(self, tmp_path: Path):
        with pytest.raises(WalkError) as exc_info:
            parse_dir(FileSet(), str(tmp_path / "nope"))
        assert exc_info.value.error_code == ErrorCode.WALK_DIR_READ_FAILED
