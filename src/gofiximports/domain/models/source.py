"""
Go 소스 도메인 모델

Position / SourceFile / FileSet: 위치 메타데이터 (Pos <-> 파일:줄:열)
Comment: 주석 한 개
ImportSpec: import 지정자 한 개 (경로 + 선택적 별칭)
ImportDecl: import 선언 한 개 (단일 형식 또는 괄호 그룹)
ParsedFile: 파싱된 소스 파일 하나
ParsedPackage: 한 디렉토리에서 같은 패키지로 함께 파싱된 파일들
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Optional

from ...utils.string_utils import go_unquote

# 유효하지 않은 위치
NO_POS = 0


@dataclass(frozen=True)
class Position:
    """
    사람이 읽을 수 있는 소스 위치

    Attributes:
        filename: 파일 경로
        offset: 파일 내 바이트가 아닌 문자 오프셋 (0부터)
        line: 줄 번호 (1부터)
        column: 열 번호 (1부터)
    """
    filename: str
    offset: int
    line: int
    column: int

    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        if not self.is_valid():
            return self.filename or "-"
        return f"{self.filename}:{self.line}:{self.column}"


class SourceFile:
    """
    FileSet에 등록된 파일 하나의 위치 정보

    base부터 base + size까지의 Pos 구간을 소유합니다.
    """

    def __init__(self, name: str, base: int, content: str):
        self.name = name
        self.base = base
        self.size = len(content)
        self._line_starts = [0]
        for index, ch in enumerate(content):
            if ch == "\n":
                self._line_starts.append(index + 1)

    def pos(self, offset: int) -> int:
        """오프셋을 Pos로 변환"""
        if offset < 0 or offset > self.size:
            raise ValueError(f"offset {offset} out of range for {self.name}")
        return self.base + offset

    def offset(self, pos: int) -> int:
        """Pos를 오프셋으로 변환"""
        if pos < self.base or pos > self.base + self.size:
            raise ValueError(f"pos {pos} not in file {self.name}")
        return pos - self.base

    def line_of_offset(self, offset: int) -> int:
        return bisect_right(self._line_starts, offset)

    def line(self, pos: int) -> int:
        return self.line_of_offset(self.offset(pos))

    def position(self, pos: int) -> Position:
        offset = self.offset(pos)
        line = self.line_of_offset(offset)
        column = offset - self._line_starts[line - 1] + 1
        return Position(self.name, offset, line, column)

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, base={self.base}, size={self.size})"


class FileSet:
    """
    여러 파일의 위치 메타데이터를 한 Pos 공간에서 관리합니다.

    같은 배치에서 파싱된 파일들은 반드시 같은 FileSet을 공유해야
    프린터가 올바른 위치를 계산할 수 있습니다.

    Example:
        >>> fset = FileSet()
        >>> f = fset.add_file("a.go", "package a\\n")
        >>> fset.position(f.pos(8))
        Position(filename='a.go', offset=8, line=1, column=9)
    """

    def __init__(self):
        self._base = 1
        self._files: List[SourceFile] = []

    def add_file(self, filename: str, content: str) -> SourceFile:
        source_file = SourceFile(filename, self._base, content)
        self._files.append(source_file)
        # 파일 끝 위치(EOF)도 유효한 Pos이므로 +1
        self._base += source_file.size + 1
        return source_file

    def file(self, pos: int) -> Optional[SourceFile]:
        for source_file in self._files:
            if source_file.base <= pos <= source_file.base + source_file.size:
                return source_file
        return None

    def owns(self, source_file: SourceFile) -> bool:
        return any(f is source_file for f in self._files)

    def position(self, pos: int) -> Position:
        if pos == NO_POS:
            return Position("", 0, 0, 0)
        source_file = self.file(pos)
        if source_file is None:
            return Position("", 0, 0, 0)
        return source_file.position(pos)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)


@dataclass
class Comment:
    """
    주석 하나 (``//...`` 또는 ``/*...*/``, 원문 그대로)
    """
    text: str
    pos: int
    end: int

    @property
    def is_line_comment(self) -> bool:
        return self.text.startswith("//")


@dataclass
class ImportSpec:
    """
    import 지정자 하나

    Attributes:
        path: 따옴표를 포함한 경로 리터럴 원문 (예: '"fmt"')
        pos: 지정자 시작 위치 (별칭 또는 경로)
        end: 지정자 끝 위치 (경로 리터럴 끝)
        name: 별칭 식별자 ("_", "." 포함), 없으면 None
        doc: 지정자 바로 위에 붙은 주석들
        comment: 지정자와 같은 줄 뒤에 붙은 주석들
    """
    path: str
    pos: int
    end: int
    name: Optional[str] = None
    doc: List[Comment] = field(default_factory=list)
    comment: List[Comment] = field(default_factory=list)

    def import_path(self) -> str:
        """따옴표를 벗긴 import 경로"""
        return go_unquote(self.path)


@dataclass
class ImportDecl:
    """
    import 선언 하나

    Attributes:
        pos: ``import`` 키워드 위치
        end: 선언 끝 위치 (``)`` 다음 또는 마지막 지정자 다음)
        specs: 선언에 포함된 지정자들
        lparen: ``(`` 위치 (단일 형식이면 NO_POS)
        rparen: ``)`` 위치 (단일 형식이면 NO_POS)
        comments: 어느 지정자의 뒤에도 붙지 않은 선언 내부 주석들
    """
    pos: int
    end: int
    specs: List[ImportSpec] = field(default_factory=list)
    lparen: int = NO_POS
    rparen: int = NO_POS
    comments: List[Comment] = field(default_factory=list)

    @property
    def is_grouped(self) -> bool:
        return self.lparen != NO_POS


@dataclass
class ParsedFile:
    """
    파싱된 Go 소스 파일 하나

    import 섹션만 구조화하고, 나머지 선언은 원문(source)으로 보관합니다.

    Attributes:
        filename: 파일 경로
        source: 원본 소스 텍스트
        package_name: package 절의 이름
        source_file: FileSet에 등록된 위치 정보
        decls: import 선언들 (소스 순서)
        imports: 모든 import 지정자 (소스 순서)
        raw_string_lines: raw string 리터럴 내부에서 시작하는 줄 번호들
    """
    filename: str
    source: str
    package_name: str
    source_file: SourceFile
    decls: List[ImportDecl] = field(default_factory=list)
    imports: List[ImportSpec] = field(default_factory=list)
    raw_string_lines: FrozenSet[int] = frozenset()

    def import_paths(self) -> List[str]:
        return [spec.import_path() for spec in self.imports]


@dataclass
class ParsedPackage:
    """
    한 디렉토리에서 같은 package 이름으로 파싱된 파일들

    Attributes:
        name: 패키지 이름
        files: 파일 경로 -> ParsedFile
    """
    name: str
    files: Dict[str, ParsedFile] = field(default_factory=dict)

    def sorted_files(self) -> List[ParsedFile]:
        return [self.files[path] for path in sorted(self.files)]
