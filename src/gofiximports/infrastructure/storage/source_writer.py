"""
소스 파일 저장소

출력된 소스를 원래 경로에 덮어씁니다. 기존 파일의 권한 비트를 유지하며,
임시 파일이나 원자적 rename은 사용하지 않습니다.
"""

import os
import stat

from ...application.ports import ISourceWriter
from ...domain.errors import ErrorCode, handle_error
from ..logging import get_logger

logger = get_logger(__name__)

# stat에 실패했을 때 사용하는 권한
DEFAULT_FILE_MODE = 0o666


def file_mode(filename: str) -> int:
    """파일의 권한 비트 (stat 실패 시 DEFAULT_FILE_MODE)"""
    try:
        return stat.S_IMODE(os.stat(filename).st_mode)
    except OSError:
        return DEFAULT_FILE_MODE


def write_source_file(filename: str, content: str) -> None:
    """
    content를 UTF-8로 filename에 씁니다.

    파일이 이미 있으면 내용만 바꾸므로 권한 비트는 그대로 유지됩니다.
    새로 만드는 경우에는 file_mode()로 얻은 권한(umask 적용)을 사용합니다.

    Args:
        filename: 대상 경로
        content: 파일 내용

    Raises:
        WriteError: 권한이 없거나 쓰기에 실패한 경우
    """
    mode = file_mode(filename)
    data = content.encode("utf-8")
    try:
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except PermissionError as e:
        raise handle_error(
            ErrorCode.WRITE_PERMISSION_DENIED, original_error=e, filename=filename
        ) from e
    except OSError as e:
        raise handle_error(ErrorCode.WRITE_FAILED, original_error=e, filename=filename) from e

    logger.debug("Source file written", path=filename, mode=oct(mode), size=len(data))


class FileSystemSourceWriter(ISourceWriter):
    """write_source_file을 ISourceWriter로 감싼 구현체"""

    def write(self, filename: str, content: str) -> None:
        write_source_file(filename, content)
