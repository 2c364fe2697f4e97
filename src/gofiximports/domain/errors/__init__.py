"""에러 관리 모듈

gofiximports의 표준화된 에러 코드 및 에러 처리 기능을 제공합니다.
"""

from .error_codes import ErrorCode
from .error_messages import get_error_message, format_error_message, ERROR_MESSAGES
from .error_handler import (
    GoFixImportsError,
    ParseError,
    WalkError,
    PrintError,
    WriteError,
    ERROR_CLASS_MAPPING,
    handle_error,
)

__all__ = [
    "ErrorCode",
    "get_error_message",
    "format_error_message",
    "ERROR_MESSAGES",
    "GoFixImportsError",
    "ParseError",
    "WalkError",
    "PrintError",
    "WriteError",
    "ERROR_CLASS_MAPPING",
    "handle_error",
]
