"""에러 핸들러

gofiximports의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class GoFixImportsError(Exception):
    """gofiximports의 기본 예외 클래스

    모든 gofiximports 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise GoFixImportsError(
        ...     ErrorCode.WALK_FAILED,
        ...     path="./pkg",
        ...     error="permission denied"
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error)

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅용)

        Returns:
            에러 정보를 담은 딕셔너리
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


class ParseError(GoFixImportsError):
    """Parse 관련 에러

    구문 오류인 경우 filename/line/column 속성으로 위치를 알 수 있습니다.
    """

    @property
    def filename(self) -> Optional[str]:
        return self.context.get("filename")

    @property
    def line(self) -> Optional[int]:
        return self.context.get("line")

    @property
    def column(self) -> Optional[int]:
        return self.context.get("column")


class WalkError(GoFixImportsError):
    """Walk 관련 에러"""
    pass


class PrintError(GoFixImportsError):
    """Print 관련 에러"""
    pass


class WriteError(GoFixImportsError):
    """Write 관련 에러"""
    pass


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    # Parse 에러
    ErrorCode.PARSE_SYNTAX_ERROR: ParseError,
    ErrorCode.PARSE_READ_FAILED: ParseError,
    ErrorCode.PARSE_INVALID_ENCODING: ParseError,
    # Walk 에러
    ErrorCode.WALK_FAILED: WalkError,
    ErrorCode.WALK_DIR_READ_FAILED: WalkError,
    # Print 에러
    ErrorCode.PRINT_FAILED: PrintError,
    ErrorCode.PRINT_FILESET_MISMATCH: PrintError,
    # Write 에러
    ErrorCode.WRITE_FAILED: WriteError,
    ErrorCode.WRITE_PERMISSION_DENIED: WriteError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> GoFixImportsError:
    """에러 코드에 맞는 예외를 생성하여 반환

    예외를 발생시키지는 않습니다. 호출자가 ``raise``합니다.

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 디버그 로그 기록 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 GoFixImportsError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     path.write_text(source)
        ... except PermissionError as e:
        ...     raise handle_error(
        ...         ErrorCode.WRITE_PERMISSION_DENIED,
        ...         original_error=e,
        ...         filename=str(path),
        ...     ) from e
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, GoFixImportsError)

    exception = error_class(
        error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from gofiximports.infrastructure.logging import get_logger

        # 최종 보고는 CLI에서 하므로 생성 시점은 debug로만 남긴다
        get_logger(__name__).debug(
            "error raised",
            error_code=error_code.name,
            category=error_code.category,
            error_message=exception.message,
        )

    return exception
