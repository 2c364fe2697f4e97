"""
진단(로깅) 설정

재작성 동작은 CLI 옵션으로만 정해지고, 여기서는 로그 출력 방식만 다룹니다.

환경변수:
    LOG_LEVEL: 로그 레벨 (기본: INFO)
    LOG_FORMAT: console 또는 json (기본: console)
    LOG_DIR: 로그 파일 디렉토리 (없으면 파일을 남기지 않음)
    LOG_COLORS: 콘솔 출력 색상 사용 여부 (기본: false)
"""

from dataclasses import dataclass
from typing import Optional

from .env_utils import parse_bool_env, parse_choice_env, parse_str_env

LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class LoggingSettings:
    """로깅 설정"""
    log_level: str = "INFO"
    log_format: str = "console"
    log_dir: Optional[str] = None
    colors: bool = False

    @property
    def enable_json(self) -> bool:
        return self.log_format == "json"


def load_logging_settings() -> LoggingSettings:
    """환경변수에서 LoggingSettings를 읽습니다."""
    return LoggingSettings(
        log_level=parse_str_env("LOG_LEVEL", "INFO").upper() or "INFO",
        log_format=parse_choice_env("LOG_FORMAT", LOG_FORMATS, "console"),
        log_dir=parse_str_env("LOG_DIR") or None,
        colors=parse_bool_env("LOG_COLORS", default=False),
    )
