"""
Tests for the Go scanner

gofiximports/infrastructure/golang/scanner.py 테스트
"""
import pytest

from gofiximports.infrastructure.golang import ScanError, Scanner, TokenKind, scan


def _kinds(source):
    return [(t.kind, t.text) for t in Scanner(source).tokens()]


@pytest.mark.unit
class TestScanner:
    """스캐너 테스트"""

    def test_package_clause(self):
        assert _kinds("package main\n") == [
            (TokenKind.KEYWORD, "package"),
            (TokenKind.IDENT, "main"),
            (TokenKind.SEMICOLON, "\n"),
            (TokenKind.EOF, ""),
        ]

    def test_semicolon_inserted_at_eof(self):
        tokens = Scanner("x").tokens()
        assert tokens[1].is_auto_semicolon
        assert tokens[2].kind == TokenKind.EOF

    @pytest.mark.parametrize("source", ["return\n", "x++\n", "f()\n", "a[1]\n", "{}\n", '"s"\n', "1.5\n"])
    def test_semicolon_after_line_ending_tokens(self, source):
        assert any(t.is_auto_semicolon for t in Scanner(source).tokens())

    @pytest.mark.parametrize("source", ["import (\n", "x +\n", "func\n", "a,\n"])
    def test_no_semicolon_after_other_tokens(self, source):
        assert not any(t.is_auto_semicolon for t in Scanner(source).tokens())

    def test_line_comment_after_pending_semicolon(self):
        """세미콜론 삽입 대기 중이면 주석보다 세미콜론이 먼저 나온다"""
        kinds = _kinds("x // note\n")
        assert kinds == [
            (TokenKind.IDENT, "x"),
            (TokenKind.SEMICOLON, "\n"),
            (TokenKind.COMMENT, "// note"),
            (TokenKind.EOF, ""),
        ]

    def test_multiline_block_comment_acts_as_newline(self):
        kinds = _kinds("x /* a\nb */ y")
        assert kinds[1] == (TokenKind.SEMICOLON, "\n")
        assert kinds[2] == (TokenKind.COMMENT, "/* a\nb */")

    def test_longest_operator_wins(self):
        texts = [t.text for t in Scanner("a &^= b <<= c ... d").tokens() if t.kind == TokenKind.OPERATOR]
        assert texts == ["&^=", "<<=", "..."]

    @pytest.mark.parametrize("literal, kind", [
        ("42", TokenKind.INT),
        ("0x1F", TokenKind.INT),
        ("1_000", TokenKind.INT),
        ("1.5", TokenKind.FLOAT),
        (".5", TokenKind.FLOAT),
        ("1e10", TokenKind.FLOAT),
        ("0x1p-2", TokenKind.FLOAT),
        ("2i", TokenKind.IMAG),
    ])
    def test_numbers(self, literal, kind):
        token = Scanner(literal).tokens()[0]
        assert (token.kind, token.text) == (kind, literal)

    def test_runes(self):
        tokens = Scanner(r"'a' '\n' '\x41' 'é'").tokens()
        assert [t.kind for t in tokens[:4]] == [TokenKind.CHAR] * 4

    def test_raw_string_lines(self):
        tokens, raw_lines = scan("var s = `a\nb\nc`\n")
        assert tokens[3].text == "`a\nb\nc`"
        assert raw_lines == [2, 3]

    def test_byte_order_mark_skipped(self):
        tokens = Scanner("\ufeffpackage a\n").tokens()
        assert tokens[0].text == "package"
        assert tokens[0].offset == 1

    @pytest.mark.parametrize("source, message", [
        ('"abc\n', "string literal not terminated"),
        ("`abc", "raw string literal not terminated"),
        ("/* abc", "comment not terminated"),
        ("'ab'", "illegal rune literal"),
        (r'"\q"', "unknown escape sequence"),
        ("a @ b", "invalid character U+0040"),
        ("a \ufeff", "illegal byte order mark"),
    ])
    def test_scan_errors(self, source, message):
        with pytest.raises(ScanError) as exc_info:
            Scanner(source).tokens()
        assert exc_info.value.message == message

    def test_describe(self):
        tokens = Scanner("import x\n").tokens()
        assert tokens[0].describe() == "'import'"
        assert tokens[1].describe() == "IDENT x"
        assert tokens[2].describe() == "newline"
        assert tokens[3].describe() == "EOF"
