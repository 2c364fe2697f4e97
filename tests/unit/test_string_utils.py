"""
Tests for Go string literal helpers

gofiximports/utils/string_utils.py 테스트
"""
import pytest

from gofiximports.utils import go_quote, go_unquote, is_valid_import_path


@pytest.mark.unit
class TestGoUnquote:
    """go_unquote 테스트"""

    def test_interpreted_string(self):
        assert go_unquote('"example.com/pkg"') == "example.com/pkg"

    def test_raw_string(self):
        assert go_unquote("`example.com/pkg`") == "example.com/pkg"

    def test_escapes(self):
        assert go_unquote(r'"a\tb\\c\"d"') == 'a\tb\\c"d'

    def test_unicode_escapes(self):
        assert go_unquote(r'"é\U0001F600\x41\101"') == "é\U0001F600AA"

    @pytest.mark.parametrize("literal", ['"abc', "abc", '"', "'a'", r'"\q"', '"a"b"'])
    def test_invalid_literals(self, literal):
        with pytest.raises(ValueError):
            go_unquote(literal)


@pytest.mark.unit
class TestGoQuote:
    """go_quote 테스트"""

    def test_plain(self):
        assert go_quote("example.com/new/pkg") == '"example.com/new/pkg"'

    def test_escapes_quote_and_backslash(self):
        assert go_quote('a"b\\c') == '"a\\"b\\\\c"'

    def test_control_characters(self):
        assert go_quote("a\nb\x01") == '"a\\nb\\x01"'

    def test_printable_unicode_kept(self):
        assert go_quote("café") == '"café"'

    def test_unquote_inverts_quote(self):
        value = "example.com/é/x\ty"
        assert go_unquote(go_quote(value)) == value


@pytest.mark.unit
class TestIsValidImportPath:
    """import 경로 검사 테스트"""

    @pytest.mark.parametrize("path", ["fmt", "example.com/a/b", "gopkg.in/yaml.v3", "a-b_c~d+e"])
    def test_valid(self, path):
        assert is_valid_import_path(path)

    @pytest.mark.parametrize("path", ["", "a b", "a\tb", "a:b", "a\\b", "a\ufffdb", "a\x00"])
    def test_invalid(self, path):
        assert not is_valid_import_path(path)
