"""
로깅 모듈

structlog 기반 구조화된 로깅
"""

from .structured_logger import (
    DEBUG_LOG_FILE_NAME,
    ERROR_LOG_FILE_NAME,
    LOG_FILE_NAME,
    configure_structlog,
    get_logger,
)

__all__ = [
    "DEBUG_LOG_FILE_NAME",
    "ERROR_LOG_FILE_NAME",
    "LOG_FILE_NAME",
    "configure_structlog",
    "get_logger",
]
