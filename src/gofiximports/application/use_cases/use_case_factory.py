"""
Use Case Factory

Infrastructure 구현체를 주입하여 Use Case 인스턴스를 생성합니다.
"""

from typing import Optional

from ...infrastructure.golang import AstImportRewriter, GoSourceParser, Printer
from ...infrastructure.storage import FileSystemSourceWriter
from ..ports import ISourceWriter
from .directory_walker import DirectoryWalker
from .file_processor import FileProcessor


def create_file_processor(writer: Optional[ISourceWriter] = None) -> FileProcessor:
    """
    기본 구현체로 FileProcessor를 만듭니다.

    Args:
        writer: 소스 쓰기 구현체 (기본: FileSystemSourceWriter)
    """
    return FileProcessor(
        parser=GoSourceParser(),
        import_rewriter=AstImportRewriter(),
        printer_factory=Printer,
        writer=writer or FileSystemSourceWriter(),
    )


def create_directory_walker(writer: Optional[ISourceWriter] = None) -> DirectoryWalker:
    """기본 구현체로 DirectoryWalker를 만듭니다."""
    return DirectoryWalker(create_file_processor(writer))
