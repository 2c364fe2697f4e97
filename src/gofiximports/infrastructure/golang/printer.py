"""
Go 소스 프린터

수정된 ParsedFile을 소스 텍스트로 되돌립니다.

- import 선언은 gofmt와 같은 정규 형식으로 다시 씁니다.
- 그 밖의 텍스트는 원문 그대로 복사합니다. 공백 들여쓰기 모드에서는 줄 앞의
  탭만 tabwidth 칸 공백으로 바꿉니다 (raw string 안의 줄은 제외).
- PrintConfig의 모드(RAW_FORMAT, TAB_INDENT, USE_SPACES, SOURCE_POS),
  탭 너비, 최소 들여쓰기를 따릅니다.

특이한 주석 배치나 빌드 태그 주석에 대해서는 gofmt와 바이트 단위로 같음을 보장하지 않습니다.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from ...application.ports import ISourcePrinter
from ...domain.errors import ErrorCode, handle_error
from ...domain.models import (
    FileSet,
    ImportDecl,
    ImportSpec,
    ParsedFile,
    PrintConfig,
    PrintMode,
    SourceFile,
)

# (텍스트, 원래 줄 번호) - 원래 줄이 없으면 None
RenderedLine = Tuple[str, Optional[int]]


@dataclass
class _OutputLine:
    text: str
    origin: Optional[int]
    in_raw_string: bool = False


class _LineBuffer:
    """출력 줄과 각 줄의 원래 줄 번호를 함께 기록합니다."""

    def __init__(self, raw_string_lines: FrozenSet[int]):
        self.raw_string_lines = raw_string_lines
        self.lines: List[_OutputLine] = [_OutputLine("", None)]

    def _append(self, text: str, origin: Optional[int]) -> None:
        current = self.lines[-1]
        if current.text == "" and current.origin is None:
            current.origin = origin
        current.text += text

    def write_verbatim(self, text: str, first_line: int) -> None:
        parts = text.split("\n")
        self._append(parts[0], first_line)
        for index, part in enumerate(parts[1:], start=1):
            origin = first_line + index
            self.lines.append(_OutputLine(part, origin, origin in self.raw_string_lines))

    def write_lines(self, lines: List[RenderedLine]) -> None:
        first_text, first_origin = lines[0]
        self._append(first_text, first_origin)
        for text, origin in lines[1:]:
            self.lines.append(_OutputLine(text, origin))


@dataclass
class _Entry:
    """import 그룹 안의 한 줄"""
    text: str
    origin: Optional[int]
    trailing: str = ""
    is_spec: bool = False


class Printer(ISourcePrinter):
    """
    Go 소스 프린터

    Example:
        >>> printer = Printer(PrintConfig())
        >>> text = printer.fprint(fset, parsed_file)
    """

    def __init__(self, config: Optional[PrintConfig] = None):
        """
        Args:
            config: 출력 설정 (기본: TAB_INDENT | USE_SPACES, tabwidth=8)
        """
        self.config = config or PrintConfig()

    # ==================== 설정 파생 값 ====================

    @property
    def _raw(self) -> bool:
        return self.config.has(PrintMode.RAW_FORMAT)

    @property
    def indent_unit(self) -> str:
        """들여쓰기 한 단계"""
        if (
            self._raw
            or self.config.has(PrintMode.TAB_INDENT)
            or not self.config.has(PrintMode.USE_SPACES)
        ):
            return "\t"
        return " " * self.config.tabwidth

    # ==================== 공개 API ====================

    def fprint(self, fset: FileSet, parsed_file: ParsedFile) -> str:
        """
        파일을 소스 텍스트로 출력합니다.

        Args:
            fset: 파일을 파싱할 때 사용한 FileSet
            parsed_file: 출력할 파일

        Returns:
            소스 텍스트

        Raises:
            PrintError: 파일이 fset에 속하지 않거나 출력에 실패한 경우
        """
        source_file = parsed_file.source_file
        if not fset.owns(source_file):
            raise handle_error(ErrorCode.PRINT_FILESET_MISMATCH, filename=parsed_file.filename)

        eol_cr = "\r" if "\r\n" in parsed_file.source else ""
        try:
            buffer = self._layout(source_file, parsed_file, eol_cr)
        except ValueError as e:
            raise handle_error(
                ErrorCode.PRINT_FAILED, original_error=e, filename=parsed_file.filename
            ) from e

        return self._finish(buffer, parsed_file.filename, eol_cr)

    # ==================== 배치 ====================

    def _layout(self, source_file: SourceFile, parsed_file: ParsedFile, eol_cr: str) -> _LineBuffer:
        source = parsed_file.source
        buffer = _LineBuffer(parsed_file.raw_string_lines)

        cursor = 0
        for decl in parsed_file.decls:
            start = source_file.offset(decl.pos)
            end = source_file.offset(decl.end)
            buffer.write_verbatim(source[cursor:start], source_file.line_of_offset(cursor))
            lines = self._render_decl(source_file, decl)
            if eol_cr:
                lines = [(text + eol_cr, origin) for text, origin in lines[:-1]] + lines[-1:]
            buffer.write_lines(lines)
            cursor = end
        buffer.write_verbatim(source[cursor:], source_file.line_of_offset(cursor))
        return buffer

    def _finish(self, buffer: _LineBuffer, filename: str, eol_cr: str) -> str:
        source_pos = self.config.has(PrintMode.SOURCE_POS)
        unit = self.indent_unit
        prefix = unit * self.config.indent

        out = []
        # 다음 출력 줄에 Go 도구가 매길 줄 번호
        virtual = 1
        for line in buffer.lines:
            if (
                source_pos
                and line.origin is not None
                and line.origin != virtual
                and not line.in_raw_string
            ):
                out.append(f"//line {filename}:{line.origin}{eol_cr}")
                virtual = line.origin
            text = line.text
            if not line.in_raw_string:
                if unit != "\t":
                    text = _expand_leading_tabs(text, unit)
                if prefix and text.strip():
                    text = prefix + text
            out.append(text)
            virtual += 1
        return "\n".join(out)

    # ==================== import 선언 ====================

    def spec_text(self, spec: ImportSpec) -> str:
        """지정자 정규 형식 (경로 리터럴은 쓰인 그대로)"""
        if spec.name:
            return f"{spec.name} {spec.path}"
        return spec.path

    def _render_decl(self, source_file: SourceFile, decl: ImportDecl) -> List[RenderedLine]:
        decl_line = source_file.line(decl.pos)
        if not decl.is_grouped:
            spec = decl.specs[0]
            parts = ["import"] + [c.text for c in decl.comments] + [self.spec_text(spec)]
            return _split_lines(" ".join(parts), decl_line)

        lparen_line = source_file.line(decl.lparen)
        first_spec_pos = decl.specs[0].pos if decl.specs else decl.rparen

        head = ["import"] + [c.text for c in decl.comments if c.pos < decl.lparen] + ["("]
        head_comments = [
            c for c in decl.comments
            if decl.lparen < c.pos < first_spec_pos and source_file.line(c.pos) == lparen_line
        ]
        head_text = " ".join(head + [c.text for c in head_comments])

        items: List[Tuple[int, object]] = [(spec.pos, spec) for spec in decl.specs]
        items += [
            (c.pos, c) for c in decl.comments
            if c.pos > decl.lparen and c not in head_comments
        ]
        items.sort(key=lambda item: item[0])

        if not items:
            if head_comments:
                return _split_lines(head_text, decl_line) + [(")", source_file.line(decl.rparen))]
            return [(head_text + ")", decl_line)]

        entries: List[_Entry] = []
        prev_end_line = None
        for _, item in items:
            if isinstance(item, ImportSpec):
                start_line = source_file.line(item.pos)
                last = item.comment[-1].end if item.comment else item.end
                end_line = source_file.line(last)
                entry = _Entry(
                    self.spec_text(item),
                    start_line,
                    trailing=" ".join(c.text for c in item.comment),
                    is_spec=True,
                )
            else:
                start_line = source_file.line(item.pos)
                end_line = source_file.line(item.end)
                entry = _Entry(item.text, start_line)
            # 빈 줄이 여러 개여도 하나로 줄인다
            if prev_end_line is not None and start_line - prev_end_line > 1:
                entries.append(_Entry("", None))
            entries.append(entry)
            prev_end_line = end_line

        lines: List[RenderedLine] = _split_lines(head_text, decl_line)
        lines += self._render_entries(entries)
        lines.append((")", source_file.line(decl.rparen)))
        return lines

    def _render_entries(self, entries: List[_Entry]) -> List[RenderedLine]:
        separators = self._align(entries)
        lines: List[RenderedLine] = []
        for entry, separator in zip(entries, separators):
            if not entry.text:
                lines.append(("", None))
                continue
            text = self.indent_unit + entry.text
            if entry.trailing:
                text += separator + entry.trailing
            lines += _split_lines(text, entry.origin)
        return lines

    def _align(self, entries: List[_Entry]) -> List[str]:
        """뒤 주석 앞에 넣을 구분자 (연속한 줄끼리 같은 열에 정렬)"""
        separators = [""] * len(entries)
        run: List[int] = []
        for index, entry in enumerate(entries + [_Entry("", None)]):
            if entry.is_spec and entry.trailing:
                run.append(index)
                continue
            if run:
                self._align_run(entries, run, separators)
                run = []
        return separators

    def _align_run(self, entries: List[_Entry], run: List[int], separators: List[str]) -> None:
        if self._raw:
            for index in run:
                separators[index] = "\t"
            return

        tabwidth = self.config.tabwidth
        use_spaces = self.config.has(PrintMode.USE_SPACES)
        minwidth = 0 if self.config.has(PrintMode.TAB_INDENT) else tabwidth

        width = max(len(entries[index].text) for index in run) + 1
        width = max(width, minwidth)

        if not use_spaces:
            if tabwidth <= 0:
                for index in run:
                    separators[index] = "\t"
                return
            width = -(-width // tabwidth) * tabwidth
            for index in run:
                padding = width - len(entries[index].text)
                separators[index] = "\t" * -(-padding // tabwidth)
            return

        for index in run:
            separators[index] = " " * (width - len(entries[index].text))


def _split_lines(text: str, origin: Optional[int]) -> List[RenderedLine]:
    """여러 줄 텍스트(예: 블록 주석)를 원래 줄 번호와 함께 나눕니다."""
    parts = [part.rstrip("\r") for part in text.split("\n")]
    if origin is None:
        return [(part, None) for part in parts]
    return [(part, origin + index) for index, part in enumerate(parts)]


def _expand_leading_tabs(text: str, unit: str) -> str:
    """줄 앞 공백 안의 탭을 unit으로 바꿉니다."""
    body = text.lstrip(" \t")
    leading = text[:len(text) - len(body)]
    if "\t" not in leading:
        return text
    return leading.replace("\t", unit) + body


def fprint(config: PrintConfig, fset: FileSet, parsed_file: ParsedFile) -> str:
    """Printer(config).fprint(fset, parsed_file)의 단축 함수"""
    return Printer(config).fprint(fset, parsed_file)


__all__ = ["Printer", "fprint"]
