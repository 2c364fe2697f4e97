"""
Tests for import rewriting

gofiximports/infrastructure/golang/astutil.py 테스트
"""
import pytest

from gofiximports.domain.models import FileSet
from gofiximports.infrastructure.golang import AstImportRewriter, parse_source, rewrite_import

SOURCE = """package a

import (
	"fmt"
	x "example.com/old/pkg"
	_ "example.com/old/pkg"
)
"""


def _parse():
    fset = FileSet()
    return fset, parse_source(fset, "a.go", SOURCE)


@pytest.mark.unit
class TestRewriteImport:
    """rewrite_import 테스트"""

    def test_rewrites_every_matching_spec(self):
        fset, parsed = _parse()

        assert rewrite_import(fset, parsed, "example.com/old/pkg", "example.com/new/pkg")
        assert parsed.import_paths() == ["fmt", "example.com/new/pkg", "example.com/new/pkg"]
        assert [spec.name for spec in parsed.imports] == [None, "x", "_"]

    def test_no_match(self):
        fset, parsed = _parse()

        assert not rewrite_import(fset, parsed, "os", "example.com/os")
        assert parsed.import_paths() == ["fmt", "example.com/old/pkg", "example.com/old/pkg"]

    def test_same_path_still_reports_match(self):
        fset, parsed = _parse()

        assert rewrite_import(fset, parsed, "fmt", "fmt")
        assert parsed.imports[0].path == '"fmt"'

    def test_new_path_is_go_quoted(self):
        fset, parsed = _parse()

        rewrite_import(fset, parsed, "fmt", 'we"ird')
        assert parsed.imports[0].path == '"we\\"ird"'

    def test_positions_unchanged(self):
        fset, parsed = _parse()
        before = [(spec.pos, spec.end) for spec in parsed.imports]

        AstImportRewriter().rewrite_import(fset, parsed, "fmt", "example.com/fmt")
        assert [(spec.pos, spec.end) for spec in parsed.imports] == before
