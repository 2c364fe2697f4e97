"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 콘솔 또는 JSON 형식으로 로그를 출력합니다.
로그 디렉토리가 주어진 경우에만 로그 파일을 남깁니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_NAME = "gofiximports.log"
ERROR_LOG_FILE_NAME = "gofiximports-error.log"
DEBUG_LOG_FILE_NAME = "gofiximports-debug.log"


def _file_handlers(log_dir: str, log_level: str) -> List[logging.Handler]:
    """
    로그 디렉토리에 회전 파일 핸들러를 만듭니다.

    메인 로그: 10MB (모든 레벨)
    에러 로그: 5MB (ERROR 이상)
    디버그 로그: 20MB (DEBUG 레벨일 때만)
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    handlers: List[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            str(log_path / LOG_FILE_NAME),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        ),
    ]

    error_handler = logging.handlers.RotatingFileHandler(
        str(log_path / ERROR_LOG_FILE_NAME),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    handlers.append(error_handler)

    if log_level.upper() == "DEBUG":
        debug_handler = logging.handlers.RotatingFileHandler(
            str(log_path / DEBUG_LOG_FILE_NAME),
            maxBytes=20 * 1024 * 1024,  # 20MB
            backupCount=3,
            encoding="utf-8"
        )
        debug_handler.setLevel(logging.DEBUG)
        handlers.append(debug_handler)

    return handlers


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = False,
    colors: bool = False,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 파일을 남기지 않음)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)
        colors: 콘솔 형식일 때 ANSI 색상 사용 여부

    Raises:
        ValueError: 알 수 없는 로그 레벨

    Example:
        >>> configure_structlog(log_level="DEBUG")
        >>> logger = get_logger(__name__)
        >>> logger.info("Modified import paths in file \\"a.go\\"", path="a.go")
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    processors = [
        structlog.contextvars.merge_contextvars,  # context vars 병합
        structlog.stdlib.add_logger_name,  # 로거 이름 추가
        add_log_level,  # 로그 레벨 추가
        structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 타임스탬프
        structlog.stdlib.PositionalArgumentsFormatter(),  # 위치 인자 포맷팅
        structlog.processors.StackInfoRenderer(),  # 스택 정보 렌더링
        structlog.processors.format_exc_info,  # 예외 정보 포맷팅
        structlog.processors.UnicodeDecoder(),  # 유니코드 디코딩
    ]

    if enable_json:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    # 진단 출력은 항상 stderr (stdout은 사용하지 않음)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        handlers += _file_handlers(log_dir, log_level)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=handlers,
        force=True  # 기존 설정 덮어쓰기
    )


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)

    Returns:
        BoundLogger 인스턴스 (메타데이터가 바인딩된 로거)

    Note:
        context 파라미터는 JSON 직렬화 가능한 타입만 허용합니다.
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
