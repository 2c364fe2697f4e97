"""
import 경로 재작성 시나리오 통합 테스트

디렉토리 / 디렉토리 트리 / 표준 입력 모드를 실제 파일로 검증합니다.
"""
import io
import os
import pytest
from pathlib import Path

from structlog.testing import capture_logs

from gofiximports.application.use_cases import (
    replace_imports_in_dir,
    replace_imports_in_dir_recursive,
    replace_imports_in_files_from_stdin,
)
from gofiximports.domain.errors import GoFixImportsError
from gofiximports.domain.models import FileSet
from gofiximports.domain.services import match_prefix
from gofiximports.infrastructure.golang import parse_file

MIXED = """package a

import (
	"fmt"
	"os" // os

	old "example.com/old/pkgX"
	"example.com/oldish/pkg"
	"example.com/old/pkgY/sub" // y
)

func f() { fmt.Println(os.Args, old.X) }
"""


@pytest.mark.integration
class TestDirectoryScenarios:
    """디렉토리 모드 시나리오"""

    def test_single_file_directory(self, tmp_path: Path, write_go, go_source, options):
        path = write_go("a.go", go_source("a", "example.com/old/pkgX"))

        assert replace_imports_in_dir(str(tmp_path), options) == 1
        parsed = parse_file(FileSet(), str(path))
        assert parsed.import_paths() == ["example.com/new/pkgX"]

    def test_only_matching_file_rewritten(self, tmp_path: Path, write_go, go_source, options):
        matching = write_go("a.go", go_source("a", "example.com/old/pkgX"))
        other_source = go_source("a", "fmt", "example.com/other")
        other = write_go("b.go", other_source)
        os.utime(other, (1_000_000, 1_000_000))

        assert replace_imports_in_dir(str(tmp_path), options) == 1
        assert "example.com/new/pkgX" in matching.read_text()
        assert other.read_bytes() == other_source.encode("utf-8")
        assert other.stat().st_mtime == 1_000_000

    def test_nested_match_in_recursive_mode(self, tmp_path: Path, write_go, go_source, options):
        nested = write_go("one/two/deep.go", go_source("deep", "example.com/old/pkgX"))
        sibling_source = go_source("sib", "fmt")
        sibling = write_go("one/sibling/s.go", sibling_source)
        write_go("top.go", go_source("top", "os"))

        with capture_logs() as logs:
            assert replace_imports_in_dir_recursive(str(tmp_path), options) == 1

        assert "example.com/new/pkgX" in nested.read_text()
        assert sibling.read_text() == sibling_source
        info = [entry for entry in logs if entry["log_level"] == "info"]
        assert [entry["path"] for entry in info] == [str(tmp_path / "one" / "two")]

    def test_stdin_aborts_on_missing_file(self, tmp_path: Path, write_go, go_source, options):
        first = write_go("a.go", go_source("a", "example.com/old/pkgX"))
        later = write_go("b.go", go_source("b", "example.com/old/pkgX"))
        stream = io.StringIO(f"{first}\n{tmp_path / 'nope.go'}\n{later}\n")

        with pytest.raises(GoFixImportsError):
            replace_imports_in_files_from_stdin(stream, options)

        assert "example.com/new/pkgX" in first.read_text()
        assert "example.com/old/pkgX" in later.read_text()


@pytest.mark.integration
class TestRewriteProperties:
    """재작성 결과의 성질"""

    def test_prefix_mapping_reflected_in_output(self, tmp_path: Path, write_go, options):
        path = write_go("a.go", MIXED)
        before = parse_file(FileSet(), str(path)).import_paths()

        replace_imports_in_dir(str(tmp_path), options)

        after = parse_file(FileSet(), str(path)).import_paths()
        expected = [
            match_prefix(p, options.from_prefix, options.to_prefix) or p for p in before
        ]
        assert after == expected
        assert "example.com/newish/pkg" in after

    def test_rest_of_file_preserved(self, tmp_path: Path, write_go, options):
        path = write_go("a.go", MIXED)

        replace_imports_in_dir(str(tmp_path), options)

        assert path.read_text() == MIXED.replace("example.com/old", "example.com/new")

    def test_second_run_changes_nothing(self, tmp_path: Path, write_go, options):
        path = write_go("a.go", MIXED)

        assert replace_imports_in_dir_recursive(str(tmp_path), options) == 1
        once = path.read_bytes()
        assert replace_imports_in_dir_recursive(str(tmp_path), options) == 0
        assert path.read_bytes() == once
