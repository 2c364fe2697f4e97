"""
재작성/출력 옵션 도메인 모델

PrintMode: 프린터 모드 플래그
PrintConfig: 프린터 설정 (모드, 탭 너비, 들여쓰기)
RewriteOptions: 명령줄 플래그에서 만들어져 모든 호출에 전달되는 설정
"""

from dataclasses import dataclass, field
from enum import IntFlag


class PrintMode(IntFlag):
    """프린터 모드 플래그"""
    NONE = 0
    RAW_FORMAT = 1   # 정렬(tabwriter) 없이 출력, USE_SPACES 무시
    TAB_INDENT = 2   # USE_SPACES와 관계없이 들여쓰기는 탭
    USE_SPACES = 4   # 정렬 패딩에 탭 대신 공백 사용
    SOURCE_POS = 8   # 원래 줄 번호를 보존하는 //line 지시문 출력


DEFAULT_PRINT_MODE = PrintMode.TAB_INDENT | PrintMode.USE_SPACES
DEFAULT_TAB_WIDTH = 8


@dataclass(frozen=True)
class PrintConfig:
    """
    프린터 설정

    Attributes:
        mode: 출력 모드 플래그
        tabwidth: 탭 너비
        indent: 모든 코드에 추가할 최소 들여쓰기 단계
    """
    mode: PrintMode = DEFAULT_PRINT_MODE
    tabwidth: int = DEFAULT_TAB_WIDTH
    indent: int = 0

    def __post_init__(self):
        if self.tabwidth < 0:
            raise ValueError("tabwidth는 0 이상이어야 합니다")
        if self.indent < 0:
            raise ValueError("indent는 0 이상이어야 합니다")

    @classmethod
    def from_flags(
        cls,
        raw_format: bool = False,
        tab_indent: bool = True,
        use_spaces: bool = True,
        source_pos: bool = False,
        tabwidth: int = DEFAULT_TAB_WIDTH,
        indent: int = 0,
    ) -> "PrintConfig":
        """명령줄 불리언 플래그들로 PrintConfig 생성"""
        mode = PrintMode.NONE
        if raw_format:
            mode |= PrintMode.RAW_FORMAT
        if tab_indent:
            mode |= PrintMode.TAB_INDENT
        if use_spaces:
            mode |= PrintMode.USE_SPACES
        if source_pos:
            mode |= PrintMode.SOURCE_POS
        return cls(mode=mode, tabwidth=tabwidth, indent=indent)

    def has(self, flag: PrintMode) -> bool:
        return bool(self.mode & flag)


@dataclass(frozen=True)
class RewriteOptions:
    """
    import 재작성 설정

    Attributes:
        from_prefix: 바꿀 import 경로 접두사 (빈 문자열이면 모든 경로와 일치)
        to_prefix: 새 접두사
        print_config: 프린터 설정
    """
    from_prefix: str = ""
    to_prefix: str = ""
    print_config: PrintConfig = field(default_factory=PrintConfig)
