"""
Go 소스 스캐너

Go 언어 명세의 어휘 규칙에 따라 소스 텍스트를 토큰으로 나눕니다.
주석도 토큰으로 돌려주며, 줄바꿈 위치에 자동 세미콜론을 삽입합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class TokenKind(str, Enum):
    """토큰 종류"""
    IDENT = "IDENT"
    KEYWORD = "KEYWORD"
    INT = "INT"
    FLOAT = "FLOAT"
    IMAG = "IMAG"
    CHAR = "CHAR"
    STRING = "STRING"
    OPERATOR = "OPERATOR"
    SEMICOLON = "SEMICOLON"
    COMMENT = "COMMENT"
    EOF = "EOF"


KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})

# 긴 연산자부터 비교한다
OPERATORS = sorted([
    "+", "-", "*", "/", "%", "&", "|", "^", "<<", ">>", "&^",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", "&^=",
    "&&", "||", "<-", "++", "--", "==", "<", ">", "=", "!", "~",
    "!=", "<=", ">=", ":=", "...", "(", "[", "{", ",", ".",
    ")", "]", "}", ";", ":",
], key=len, reverse=True)

# 줄바꿈 앞에 오면 세미콜론이 자동 삽입되는 토큰
_SEMI_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})
_SEMI_OPERATORS = frozenset({"++", "--", ")", "]", "}"})

_BOM = "\ufeff"


@dataclass(frozen=True)
class Token:
    """
    토큰 하나

    Attributes:
        kind: 토큰 종류
        text: 원문 (자동 삽입 세미콜론은 "\\n", EOF는 "")
        offset: 시작 오프셋
        end: 끝 오프셋 (포함하지 않음)
    """
    kind: TokenKind
    text: str
    offset: int
    end: int

    @property
    def is_auto_semicolon(self) -> bool:
        return self.kind == TokenKind.SEMICOLON and self.text == "\n"

    def is_op(self, op: str) -> bool:
        return self.kind == TokenKind.OPERATOR and self.text == op

    def is_keyword(self, word: str) -> bool:
        return self.kind == TokenKind.KEYWORD and self.text == word

    def describe(self) -> str:
        """에러 메시지용 토큰 표현 (Go 파서와 같은 형식)"""
        if self.kind == TokenKind.EOF:
            return "EOF"
        if self.kind == TokenKind.SEMICOLON:
            return "newline" if self.is_auto_semicolon else "';'"
        if self.kind in (TokenKind.OPERATOR, TokenKind.KEYWORD):
            return f"'{self.text}'"
        return f"{self.kind.value} {self.text}"


class ScanError(Exception):
    """어휘 오류 (오프셋 포함)"""

    def __init__(self, offset: int, message: str):
        self.offset = offset
        self.message = message
        super().__init__(message)


def _is_letter(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isdigit()


class Scanner:
    """
    Go 소스 스캐너

    Example:
        >>> [t.text for t in Scanner('package main\\n').tokens()]
        ['package', 'main', '\\n', '']
    """

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.offset = 0
        self._insert_semi = False
        # raw string 리터럴 안에서 시작하는 줄 번호들 (1부터)
        self.raw_string_lines: List[int] = []
        self._line = 1

        if source.startswith(_BOM):
            self.offset = 1

    def tokens(self) -> List[Token]:
        """모든 토큰 (마지막은 EOF)"""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.scan()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def _peek(self, ahead: int = 0) -> str:
        index = self.offset + ahead
        if index < self.length:
            return self.source[index]
        return ""

    def _advance(self, count: int = 1) -> None:
        for _ in range(count):
            if self.offset < self.length and self.source[self.offset] == "\n":
                self._line += 1
            self.offset += 1

    def _semi_at(self, offset: int) -> Token:
        self._insert_semi = False
        return Token(TokenKind.SEMICOLON, "\n", offset, offset)

    def scan(self) -> Token:
        """다음 토큰 하나를 읽습니다."""
        # 공백 건너뛰기 (세미콜론 삽입 대기 중에는 줄바꿈에서 멈춤)
        while self.offset < self.length:
            ch = self.source[self.offset]
            if ch == "\n" and self._insert_semi:
                break
            if ch in " \t\r\n":
                self._advance()
                continue
            break

        start = self.offset
        if start >= self.length:
            if self._insert_semi:
                return self._semi_at(start)
            return Token(TokenKind.EOF, "", start, start)

        ch = self.source[start]

        if ch == "\n":
            token = self._semi_at(start)
            self._advance()
            return token

        if ch == "/" and self._peek(1) in ("/", "*"):
            return self._scan_comment(start)

        if _is_letter(ch):
            return self._scan_identifier(start)

        if _is_digit(ch) or (ch == "." and _is_digit(self._peek(1))):
            return self._scan_number(start)

        if ch == '"':
            return self._scan_string(start)

        if ch == "`":
            return self._scan_raw_string(start)

        if ch == "'":
            return self._scan_rune(start)

        for op in OPERATORS:
            if self.source.startswith(op, start):
                self._advance(len(op))
                self._insert_semi = op in _SEMI_OPERATORS
                if op == ";":
                    return Token(TokenKind.SEMICOLON, ";", start, self.offset)
                return Token(TokenKind.OPERATOR, op, start, self.offset)

        if ch == _BOM:
            raise ScanError(start, "illegal byte order mark")
        raise ScanError(start, f"invalid character U+{ord(ch):04X}")

    def _scan_comment(self, start: int) -> Token:
        if self._peek(1) == "/":
            end = self.source.find("\n", start)
            if end < 0:
                end = self.length
            # 세미콜론이 기다리는 중이면 주석보다 먼저 내보낸다
            if self._insert_semi:
                return self._semi_at(start)
            self._advance(end - start)
            return Token(TokenKind.COMMENT, self.source[start:end], start, end)

        end = self.source.find("*/", start + 2)
        if end < 0:
            raise ScanError(start, "comment not terminated")
        end += 2
        text = self.source[start:end]
        if "\n" in text and self._insert_semi:
            # 줄바꿈을 포함한 일반 주석은 줄바꿈처럼 동작한다
            return self._semi_at(start)
        self._advance(end - start)
        return Token(TokenKind.COMMENT, text, start, end)

    def _scan_identifier(self, start: int) -> Token:
        end = start
        while end < self.length:
            ch = self.source[end]
            if _is_letter(ch) or _is_digit(ch):
                end += 1
                continue
            break
        self._advance(end - start)
        text = self.source[start:end]
        if text in KEYWORDS:
            self._insert_semi = text in _SEMI_KEYWORDS
            return Token(TokenKind.KEYWORD, text, start, end)
        self._insert_semi = True
        return Token(TokenKind.IDENT, text, start, end)

    def _scan_number(self, start: int) -> Token:
        end = start
        kind = TokenKind.INT
        is_hex = self.source.startswith(("0x", "0X"), start)
        exponents = "pP" if is_hex else "eE"
        while end < self.length:
            ch = self.source[end]
            if ch in exponents:
                kind = TokenKind.FLOAT
                end += 1
                if end < self.length and self.source[end] in "+-":
                    end += 1
                continue
            if ch == ".":
                kind = TokenKind.FLOAT
                end += 1
                continue
            if ch.isalnum() and ch.isascii() or ch == "_":
                end += 1
                continue
            break
        text = self.source[start:end]
        if text.endswith("i"):
            kind = TokenKind.IMAG
        self._advance(end - start)
        self._insert_semi = True
        return Token(kind, text, start, end)

    def _scan_escape(self, index: int, quote: str) -> int:
        """index는 역슬래시 위치. 이스케이프 다음 오프셋을 반환합니다."""
        ch = self.source[index + 1] if index + 1 < self.length else ""
        if ch in ("a", "b", "f", "n", "r", "t", "v", "\\", quote):
            return index + 2
        digits: Tuple[str, int]
        if ch in "01234567" and ch:
            digits = ("01234567", 3)
            first = index + 1
        elif ch == "x":
            digits = ("0123456789abcdefABCDEF", 2)
            first = index + 2
        elif ch == "u":
            digits = ("0123456789abcdefABCDEF", 4)
            first = index + 2
        elif ch == "U":
            digits = ("0123456789abcdefABCDEF", 8)
            first = index + 2
        else:
            if not ch or ch == "\n":
                raise ScanError(index, "escape sequence not terminated")
            raise ScanError(index, "unknown escape sequence")
        allowed, count = digits
        for pos in range(first, first + count):
            if pos >= self.length or self.source[pos] not in allowed:
                raise ScanError(index, "illegal character in escape sequence")
        return first + count

    def _scan_string(self, start: int) -> Token:
        index = start + 1
        while True:
            if index >= self.length or self.source[index] == "\n":
                raise ScanError(start, "string literal not terminated")
            ch = self.source[index]
            if ch == '"':
                index += 1
                break
            if ch == "\\":
                index = self._scan_escape(index, '"')
                continue
            index += 1
        self._advance(index - start)
        self._insert_semi = True
        return Token(TokenKind.STRING, self.source[start:index], start, index)

    def _scan_raw_string(self, start: int) -> Token:
        end = self.source.find("`", start + 1)
        if end < 0:
            raise ScanError(start, "raw string literal not terminated")
        end += 1
        first_line = self._line
        self._advance(end - start)
        # 리터럴 내부에서 시작하는 줄들: 들여쓰기나 //line 지시문을 넣으면 안 된다
        self.raw_string_lines.extend(range(first_line + 1, self._line + 1))
        self._insert_semi = True
        return Token(TokenKind.STRING, self.source[start:end], start, end)

    def _scan_rune(self, start: int) -> Token:
        index = start + 1
        count = 0
        while True:
            if index >= self.length or self.source[index] == "\n":
                raise ScanError(start, "rune literal not terminated")
            ch = self.source[index]
            if ch == "'":
                index += 1
                break
            if ch == "\\":
                index = self._scan_escape(index, "'")
            else:
                index += 1
            count += 1
        if count != 1:
            raise ScanError(start, "illegal rune literal")
        self._advance(index - start)
        self._insert_semi = True
        return Token(TokenKind.CHAR, self.source[start:index], start, index)


def scan(source: str) -> Tuple[List[Token], List[int]]:
    """
    소스 전체를 스캔합니다.

    Returns:
        (토큰 목록, raw string 내부에서 시작하는 줄 번호 목록)

    Raises:
        ScanError: 어휘 오류가 있는 경우
    """
    scanner = Scanner(source)
    tokens = scanner.tokens()
    return tokens, scanner.raw_string_lines


__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "Scanner",
    "ScanError",
    "Token",
    "TokenKind",
    "scan",
]
