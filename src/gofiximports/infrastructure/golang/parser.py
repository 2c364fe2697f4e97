"""
Go import 파서

package 절과 import 선언을 구조화하여 ParsedFile로 만듭니다.
나머지 선언은 구조화하지 않지만 어휘 오류, 괄호 짝, 최상위 선언 형태는 검사하므로
잘못된 소스는 ParseError로 거부됩니다.

parse_file: 파일 하나 파싱 (주석 보존)
parse_dir: 디렉토리의 모든 .go 파일을 하나의 FileSet으로 함께 파싱
"""

import os
from typing import Dict, List, Optional

from ...application.ports import ISourceParser
from ...domain.errors import ErrorCode, ParseError, handle_error
from ...domain.models import (
    Comment,
    FileSet,
    ImportDecl,
    ImportSpec,
    ParsedFile,
    ParsedPackage,
    SourceFile,
)
from ...utils.string_utils import go_unquote, is_valid_import_path
from ..logging import get_logger
from .scanner import ScanError, Token, TokenKind, scan

logger = get_logger(__name__)

GO_FILE_SUFFIX = ".go"

_DECL_KEYWORDS = frozenset({"func", "var", "const", "type"})
_CLOSERS = {"(": ")", "[": "]", "{": "}"}


class _ImportParser:
    """토큰 목록에서 package 절과 import 선언을 읽는 재귀 하강 파서"""

    def __init__(self, source_file: SourceFile, tokens: List[Token]):
        self.source_file = source_file
        self.tokens = tokens
        self.index = -1
        self.comments: List[Comment] = []
        self.tok: Token = tokens[0]
        self._next()

    # ==================== 토큰 이동 ====================

    def _next(self) -> None:
        """다음 토큰으로 이동 (주석은 모아두고 건너뜀)"""
        while True:
            if self.index >= len(self.tokens) - 1:
                self.tok = self.tokens[-1]
                return
            self.index += 1
            token = self.tokens[self.index]
            if token.kind == TokenKind.COMMENT:
                self.comments.append(Comment(
                    token.text,
                    self.source_file.pos(token.offset),
                    self.source_file.pos(token.end),
                ))
                continue
            self.tok = token
            return

    def _error(self, token: Token, detail: str) -> ParseError:
        position = self.source_file.position(self.source_file.pos(token.offset))
        return handle_error(
            ErrorCode.PARSE_SYNTAX_ERROR,
            filename=self.source_file.name,
            line=position.line,
            column=position.column,
            detail=detail,
        )

    def _expect_semi(self) -> None:
        if self.tok.kind == TokenKind.SEMICOLON:
            self._next()
            return
        raise self._error(self.tok, f"expected ';', found {self.tok.describe()}")

    # ==================== 구문 ====================

    def parse_package_clause(self) -> str:
        if not self.tok.is_keyword("package"):
            raise self._error(self.tok, f"expected 'package', found {self.tok.describe()}")
        self._next()
        if self.tok.kind != TokenKind.IDENT:
            raise self._error(self.tok, f"expected 'IDENT', found {self.tok.describe()}")
        if self.tok.text == "_":
            raise self._error(self.tok, "invalid package name _")
        name = self.tok.text
        self._next()
        self._expect_semi()
        return name

    def parse_import_decls(self) -> List[ImportDecl]:
        decls = []
        while self.tok.is_keyword("import"):
            decls.append(self._parse_import_decl())
        return decls

    def _parse_import_decl(self) -> ImportDecl:
        pos = self.source_file.pos(self.tok.offset)
        self._next()

        if not self.tok.is_op("("):
            spec = self._parse_spec()
            decl = ImportDecl(pos=pos, end=spec.end, specs=[spec])
            self._expect_semi()
            return decl

        lparen = self.source_file.pos(self.tok.offset)
        self._next()
        specs = []
        while not self.tok.is_op(")") and self.tok.kind != TokenKind.EOF:
            specs.append(self._parse_spec())
            if self.tok.kind == TokenKind.SEMICOLON:
                self._next()
            elif not self.tok.is_op(")"):
                raise self._error(self.tok, f"expected ';', found {self.tok.describe()}")

        if not self.tok.is_op(")"):
            raise self._error(self.tok, f"expected ')', found {self.tok.describe()}")
        rparen = self.source_file.pos(self.tok.offset)
        end = self.source_file.pos(self.tok.end)
        self._next()
        self._expect_semi()
        return ImportDecl(pos=pos, end=end, specs=specs, lparen=lparen, rparen=rparen)

    def _parse_spec(self) -> ImportSpec:
        start = self.tok.offset
        name: Optional[str] = None
        if self.tok.kind == TokenKind.IDENT:
            name = self.tok.text
            self._next()
        elif self.tok.is_op("."):
            name = "."
            self._next()

        if self.tok.kind != TokenKind.STRING:
            if self.tok.kind == TokenKind.SEMICOLON or self.tok.is_op(")"):
                raise self._error(self.tok, "missing import path")
            raise self._error(self.tok, "import path must be a string")

        try:
            path_value = go_unquote(self.tok.text)
        except ValueError:
            path_value = ""
        if not is_valid_import_path(path_value):
            raise self._error(self.tok, f"invalid import path: {self.tok.text}")

        spec = ImportSpec(
            path=self.tok.text,
            pos=self.source_file.pos(start),
            end=self.source_file.pos(self.tok.end),
            name=name,
        )
        self._next()
        return spec

    def check_declarations(self) -> None:
        """import 이후 나머지 최상위 선언의 형태와 괄호 짝을 검사합니다."""
        stack: List[Token] = []
        expect_decl = True
        while self.tok.kind != TokenKind.EOF:
            tok = self.tok
            if tok.is_keyword("import"):
                raise self._error(tok, "imports must appear before other declarations")

            if not stack:
                if tok.kind == TokenKind.SEMICOLON:
                    expect_decl = True
                    self._next()
                    continue
                if expect_decl:
                    if not (tok.kind == TokenKind.KEYWORD and tok.text in _DECL_KEYWORDS):
                        raise self._error(tok, f"expected declaration, found {tok.describe()}")
                    expect_decl = False

            if tok.kind == TokenKind.OPERATOR:
                if tok.text in _CLOSERS:
                    stack.append(tok)
                elif tok.text in _CLOSERS.values():
                    if not stack:
                        raise self._error(tok, f"expected declaration, found {tok.describe()}")
                    expected = _CLOSERS[stack.pop().text]
                    if tok.text != expected:
                        raise self._error(tok, f"expected '{expected}', found {tok.describe()}")
            self._next()

        if stack:
            expected = _CLOSERS[stack[-1].text]
            raise self._error(self.tok, f"expected '{expected}', found EOF")


def _line(source_file: SourceFile, pos: int) -> int:
    return source_file.line(pos)


def _attach_comments(source_file: SourceFile, decl: ImportDecl, comments: List[Comment]) -> None:
    """선언 범위 안의 주석을 지정자 뒤 주석 / 선언 내부 주석으로 나눕니다."""
    inside = [c for c in comments if decl.pos < c.pos < decl.end]
    for comment in inside:
        owner = None
        for spec in decl.specs:
            if spec.end <= comment.pos and _line(source_file, spec.end) == _line(source_file, comment.pos):
                owner = spec
            elif spec.pos > comment.pos:
                break
        # 같은 줄에서 뒤에 다른 지정자가 이어지지 않을 때만 뒤 주석으로 본다
        if owner is not None and not any(
            owner.end <= other.pos < comment.pos for other in decl.specs
        ):
            owner.comment.append(comment)
        else:
            decl.comments.append(comment)

    # 지정자 바로 위에 빈 줄 없이 붙은 주석들은 doc 주석
    lparen_line = _line(source_file, decl.lparen) if decl.is_grouped else 0
    for spec in decl.specs:
        current_line = _line(source_file, spec.pos)
        for comment in reversed(decl.comments):
            if comment.pos >= spec.pos:
                continue
            if comment.pos < decl.lparen or _line(source_file, comment.pos) == lparen_line:
                break
            end_line = _line(source_file, comment.end)
            if end_line == current_line - 1 or end_line == current_line:
                spec.doc.insert(0, comment)
                current_line = _line(source_file, comment.pos)
            elif end_line < current_line - 1:
                break


def parse_source(fset: FileSet, filename: str, source: str) -> ParsedFile:
    """
    소스 텍스트를 파싱하여 ParsedFile을 만듭니다.

    Args:
        fset: 파일을 등록할 FileSet
        filename: 위치 정보에 기록할 파일 경로
        source: 소스 텍스트

    Returns:
        ParsedFile

    Raises:
        ParseError: 구문 오류가 있는 경우
    """
    source_file = fset.add_file(filename, source)

    try:
        tokens, raw_string_lines = scan(source)
    except ScanError as e:
        position = source_file.position(source_file.pos(e.offset))
        raise handle_error(
            ErrorCode.PARSE_SYNTAX_ERROR,
            filename=filename,
            line=position.line,
            column=position.column,
            detail=e.message,
        ) from e

    parser = _ImportParser(source_file, tokens)
    package_name = parser.parse_package_clause()
    decls = parser.parse_import_decls()
    parser.check_declarations()

    for decl in decls:
        _attach_comments(source_file, decl, parser.comments)

    return ParsedFile(
        filename=filename,
        source=source,
        package_name=package_name,
        source_file=source_file,
        decls=decls,
        imports=[spec for decl in decls for spec in decl.specs],
        raw_string_lines=frozenset(raw_string_lines),
    )


def read_source_file(filename: str) -> str:
    """
    소스 파일을 UTF-8 텍스트로 읽습니다.

    Raises:
        ParseError: 읽기 실패 또는 UTF-8이 아닌 경우
    """
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        raise handle_error(ErrorCode.PARSE_READ_FAILED, original_error=e, filename=filename) from e

    try:
        # 줄바꿈은 그대로 보존한다
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise handle_error(ErrorCode.PARSE_INVALID_ENCODING, original_error=e, filename=filename) from e


def parse_file(fset: FileSet, filename: str, source: Optional[str] = None) -> ParsedFile:
    """
    파일 하나를 파싱합니다 (주석 보존).

    Args:
        fset: 파일을 등록할 FileSet
        filename: 파일 경로
        source: 소스 텍스트 (None이면 파일에서 읽음)

    Raises:
        ParseError: 읽기 실패 또는 구문 오류
    """
    if source is None:
        source = read_source_file(filename)
    parsed = parse_source(fset, filename, source)
    logger.debug("parsed file", path=filename, package=parsed.package_name, imports=len(parsed.imports))
    return parsed


def list_go_files(path: str) -> List[str]:
    """
    디렉토리 바로 아래의 .go 파일 경로들 (이름순, 파일 심볼릭 링크 포함)

    Raises:
        WalkError: 디렉토리 목록을 읽을 수 없는 경우
    """
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise handle_error(ErrorCode.WALK_DIR_READ_FAILED, original_error=e, path=path) from e

    return [
        os.path.join(path, entry.name)
        for entry in entries
        if entry.name.endswith(GO_FILE_SUFFIX) and entry.is_file()
    ]


def parse_dir(fset: FileSet, path: str) -> Dict[str, ParsedPackage]:
    """
    디렉토리의 모든 .go 파일을 같은 FileSet으로 파싱합니다.

    하위 디렉토리는 파싱하지 않습니다. 파일 하나라도 파싱에 실패하면
    ParseError가 발생하고 디렉토리 전체가 중단됩니다.

    Args:
        fset: 모든 파일이 공유할 FileSet
        path: 디렉토리 경로

    Returns:
        패키지 이름 -> ParsedPackage
    """
    packages: Dict[str, ParsedPackage] = {}
    for filename in list_go_files(path):
        parsed = parse_file(fset, filename)
        package = packages.setdefault(parsed.package_name, ParsedPackage(parsed.package_name))
        package.files[filename] = parsed
    return packages



class GoSourceParser(ISourceParser):
    """parse_file / parse_dir를 ISourceParser로 감싼 구현체"""

    def parse_file(self, fset: FileSet, filename: str) -> ParsedFile:
        return parse_file(fset, filename)

    def parse_dir(self, fset: FileSet, path: str) -> Dict[str, ParsedPackage]:
        return parse_dir(fset, path)


__all__ = [
    "GO_FILE_SUFFIX",
    "GoSourceParser",
    "list_go_files",
    "parse_dir",
    "parse_file",
    "parse_source",
    "read_source_file",
]
