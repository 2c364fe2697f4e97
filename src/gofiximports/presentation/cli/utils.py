"""
CLI 유틸리티 함수
"""

from ...infrastructure.config import load_logging_settings
from ...infrastructure.logging import configure_structlog


def setup_logging(verbose: bool = False) -> None:
    """
    로깅 설정 (구조화된 로깅 사용)

    Args:
        verbose: 상세 로깅 활성화 여부 (LOG_LEVEL보다 우선)
    """
    settings = load_logging_settings()
    configure_structlog(
        log_dir=settings.log_dir,
        log_level="DEBUG" if verbose else settings.log_level,
        enable_json=settings.enable_json,
        colors=settings.colors,
    )
