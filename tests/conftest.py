"""Pytest configuration and fixtures."""

import logging
import os
import sys
import pytest
import structlog
from pathlib import Path
from typing import Callable

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from gofiximports.domain.models import PrintConfig, RewriteOptions  # noqa: E402

OLD_PREFIX = "example.com/old"
NEW_PREFIX = "example.com/new"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "integration: 통합 테스트")


@pytest.fixture(autouse=True)
def clean_log_env(monkeypatch):
    """로깅 환경변수가 테스트 결과에 영향을 주지 않도록 제거"""
    for var in ("LOG_LEVEL", "LOG_FORMAT", "LOG_DIR", "LOG_COLORS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def options() -> RewriteOptions:
    """example.com/old -> example.com/new 기본 재작성 옵션"""
    return RewriteOptions(from_prefix=OLD_PREFIX, to_prefix=NEW_PREFIX, print_config=PrintConfig())


@pytest.fixture
def write_go(tmp_path: Path) -> Callable[..., Path]:
    """
    tmp_path 아래에 Go 소스 파일을 만드는 헬퍼

    Example:
        path = write_go("pkg/a.go", "package a\\n")
    """
    def _write(relative: str, content: str, mode: int = 0o644) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        os.chmod(path, mode)
        return path

    return _write


@pytest.fixture
def go_source() -> Callable[..., str]:
    """import 그룹 하나를 가진 Go 소스 텍스트를 만드는 헬퍼"""
    def _source(package: str, *imports: str, body: str = "func f() {}\n") -> str:
        lines = [f"package {package}", "", "import ("]
        lines += [f'\t"{path}"' for path in imports]
        lines += [")", "", body]
        return "\n".join(lines)

    return _source


@pytest.fixture
def reset_logging():
    """configure_structlog이 바꾼 structlog / 루트 로거 설정을 테스트 후 되돌림"""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
