"""
CLI UI 컴포넌트

Rich 라이브러리를 사용하여 에러를 stderr에 표시합니다.
stdout에는 아무것도 출력하지 않습니다.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...domain.errors import GoFixImportsError


class ErrorDisplay:
    """
    에러 메시지 표시

    에러 분류(Parse, Walk, Print, Write)별로 색상을 구분합니다.

    Attributes:
        console: stderr에 출력하는 Rich Console 인스턴스
    """

    CATEGORY_COLORS = {
        "Parse": "#d29922",   # 노란색
        "Walk": "#ffa657",    # 주황
        "Print": "#d2a8ff",   # 보라
        "Write": "#f85149",   # 빨강
    }
    MUTED = "#8b949e"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def show_error(
        self,
        error_type: str,
        message: str,
        details: Optional[str] = None,
        traceback: Optional[str] = None,
        color: str = "#f85149",
    ) -> None:
        """
        에러 메시지 출력.

        Args:
            error_type: 에러 타입 (예: ParseError)
            message: 에러 메시지
            details: 상세 정보 (선택)
            traceback: 트레이스백 (선택)
            color: 에러 타입 색상
        """
        content = f"[bold {color}]{error_type}[/]: {escape(message)}"

        if details:
            content += f"\n\n[{self.MUTED}]{escape(details)}[/]"

        if traceback:
            content += f"\n\n[dim]Traceback:[/]\n{escape(traceback)}"

        panel = Panel(
            content,
            title="[bold red]Error[/]",
            border_style="red",
            box=box.ROUNDED
        )
        self.console.print(panel)

    def show_exception(self, error: Exception, traceback: Optional[str] = None) -> None:
        """예외 하나를 표시합니다 (GoFixImportsError면 에러 코드를 함께 표시)."""
        if isinstance(error, GoFixImportsError):
            self.show_error(
                error_type=type(error).__name__,
                message=error.message,
                details=f"{error.error_code} ({error.error_code.category})",
                traceback=traceback,
                color=self.CATEGORY_COLORS.get(error.error_code.category, "#f85149"),
            )
            return
        self.show_error(error_type=type(error).__name__, message=str(error), traceback=traceback)

