"""
Directory Walker

디렉토리 하나, 디렉토리 트리, 또는 표준 입력으로 받은 파일 목록에
FileProcessor를 적용합니다.

모든 처리는 순차적이며, 첫 에러에서 중단합니다.
이미 다시 쓴 파일은 되돌리지 않습니다.
"""

import os
import stat
from typing import Iterator, Optional, TextIO

from ...domain.errors import ErrorCode, handle_error
from ...domain.models import FileSet, RewriteOptions
from ...infrastructure.logging import get_logger
from .file_processor import FileProcessor

logger = get_logger(__name__)


def _lstat(path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except OSError as e:
        raise handle_error(ErrorCode.WALK_FAILED, original_error=e, path=path) from e


def _walk_dirs(path: str) -> Iterator[str]:
    """path부터 전위 순회로 하위 디렉토리를 돌려줍니다 (이름순, 심볼릭 링크 제외)"""
    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        raise handle_error(ErrorCode.WALK_DIR_READ_FAILED, original_error=e, path=path) from e

    yield path

    for name in names:
        child = os.path.join(path, name)
        if stat.S_ISDIR(_lstat(child).st_mode):
            yield from _walk_dirs(child)


class DirectoryWalker:
    """
    디렉토리 단위 재작성 Use Case

    Example:
        >>> walker = DirectoryWalker(processor)
        >>> walker.replace_imports_in_dir_recursive("./", options)
        3
    """

    def __init__(self, file_processor: FileProcessor):
        self.file_processor = file_processor

    def replace_imports_in_dir(self, path: str, options: RewriteOptions) -> int:
        """
        디렉토리 바로 아래의 .go 파일들을 재작성합니다.

        모든 파일을 하나의 FileSet으로 먼저 파싱하고, 패키지 이름순,
        경로순으로 처리합니다. 파일 하나라도 파싱에 실패하면 아무것도 쓰지 않습니다.

        Returns:
            바뀐 파일 수

        Raises:
            WalkError: 디렉토리를 읽을 수 없는 경우
            ParseError: 파싱 실패
            PrintError: 출력 실패
            WriteError: 쓰기 실패
        """
        fset = FileSet()
        packages = self.file_processor.parser.parse_dir(fset, path)

        modified = 0
        for name in sorted(packages):
            for parsed_file in packages[name].sorted_files():
                if self.file_processor.process_parsed(
                    fset, parsed_file, parsed_file.filename, options
                ):
                    modified += 1

        if modified > 0:
            logger.info(
                f'Modified import paths for {modified} files in path "{path}"',
                path=path,
                count=modified,
            )
        return modified

    def replace_imports_in_dir_recursive(self, root: str, options: RewriteOptions) -> int:
        """
        root와 그 아래 모든 디렉토리를 전위 순회하며 재작성합니다.

        디렉토리 심볼릭 링크는 따라가지 않습니다.
        root가 디렉토리가 아닌 파일이면 아무것도 하지 않습니다.

        Returns:
            바뀐 파일 수의 합

        Raises:
            WalkError: root가 없거나 순회 중 오류가 난 경우
        """
        if not stat.S_ISDIR(_lstat(root).st_mode):
            logger.debug("Walk root is not a directory", path=root)
            return 0

        total = 0
        for path in _walk_dirs(root):
            total += self.replace_imports_in_dir(path, options)
        return total

    def replace_imports_in_files_from_stdin(self, stream: TextIO, options: RewriteOptions) -> int:
        """
        stream에서 한 줄에 하나씩 파일 경로를 읽어 재작성합니다.

        줄 끝의 \\r\\n / \\n은 제거하고 빈 줄은 건너뜁니다.
        에러가 나면 그 뒤의 줄은 읽지 않습니다.

        Returns:
            바뀐 파일 수
        """
        modified = 0
        for line in stream:
            file_path = line.rstrip("\n").rstrip("\r")
            if not file_path:
                continue
            if self.file_processor.process_file(file_path, options):
                modified += 1
        return modified


def _default_walker() -> DirectoryWalker:
    # 순환 import 방지를 위해 여기서 import
    from .use_case_factory import create_directory_walker
    return create_directory_walker()


def replace_imports_in_dir(
    path: str,
    options: RewriteOptions,
    walker: Optional[DirectoryWalker] = None,
) -> int:
    """DirectoryWalker.replace_imports_in_dir의 단축 함수"""
    return (walker or _default_walker()).replace_imports_in_dir(path, options)


def replace_imports_in_dir_recursive(
    root: str,
    options: RewriteOptions,
    walker: Optional[DirectoryWalker] = None,
) -> int:
    """DirectoryWalker.replace_imports_in_dir_recursive의 단축 함수"""
    return (walker or _default_walker()).replace_imports_in_dir_recursive(root, options)


def replace_imports_in_files_from_stdin(
    stream: TextIO,
    options: RewriteOptions,
    walker: Optional[DirectoryWalker] = None,
) -> int:
    """DirectoryWalker.replace_imports_in_files_from_stdin의 단축 함수"""
    return (walker or _default_walker()).replace_imports_in_files_from_stdin(stream, options)
