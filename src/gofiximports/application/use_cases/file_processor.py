"""
File Processor

파일 하나의 import 경로를 재작성하고, 바뀐 경우에만 다시 출력해 씁니다.
"""

from typing import Callable, Optional

from ...domain.models import FileSet, ParsedFile, PrintConfig, RewriteOptions
from ...domain.ports import IImportRewriter
from ...domain.services import TreeRewriter
from ...infrastructure.logging import get_logger
from ..ports import ISourceParser, ISourcePrinter, ISourceWriter

logger = get_logger(__name__)

PrinterFactory = Callable[[PrintConfig], ISourcePrinter]


class FileProcessor:
    """
    파일 단위 재작성 Use Case

    재작성 → (바뀐 경우) 출력 → 같은 경로에 쓰기 순서로 처리합니다.
    바뀌지 않은 파일은 출력하지도 쓰지도 않습니다.
    """

    def __init__(
        self,
        parser: ISourceParser,
        import_rewriter: IImportRewriter,
        printer_factory: PrinterFactory,
        writer: ISourceWriter,
    ):
        """
        Args:
            parser: 소스 파서
            import_rewriter: import 경로 재작성 구현체
            printer_factory: PrintConfig로 프린터를 만드는 함수
            writer: 소스 파일 쓰기 구현체
        """
        self.parser = parser
        self.tree_rewriter = TreeRewriter(import_rewriter)
        self.printer_factory = printer_factory
        self.writer = writer

    def process_parsed(
        self,
        fset: FileSet,
        parsed_file: ParsedFile,
        file_path: str,
        options: RewriteOptions,
    ) -> bool:
        """
        이미 파싱된 파일을 재작성합니다.

        Args:
            fset: parsed_file을 파싱한 FileSet (같은 배치의 것이어야 함)
            parsed_file: 파싱된 파일 (제자리에서 변경됨)
            file_path: 결과를 쓸 경로
            options: 재작성 설정

        Returns:
            파일이 바뀌어 다시 썼으면 True

        Raises:
            PrintError: 출력 실패
            WriteError: 쓰기 실패
        """
        rewrote = self.tree_rewriter.rewrite(
            fset, parsed_file, options.from_prefix, options.to_prefix
        )
        if not rewrote:
            return False

        content = self.printer_factory(options.print_config).fprint(fset, parsed_file)
        self.writer.write(file_path, content)
        return True

    def process_file(self, file_path: str, options: RewriteOptions) -> bool:
        """
        파일 하나를 새 FileSet으로 파싱한 뒤 재작성합니다.

        파싱에 실패하면 파일을 건드리지 않고 ParseError를 그대로 전파합니다.

        Returns:
            파일이 바뀌었으면 True
        """
        fset = FileSet()
        parsed_file = self.parser.parse_file(fset, file_path)

        rewrote = self.process_parsed(fset, parsed_file, file_path, options)
        if rewrote:
            logger.info(f'Modified import paths in file "{file_path}"', path=file_path)
        return rewrote


def _default_processor() -> FileProcessor:
    # 순환 import 방지를 위해 여기서 import
    from .use_case_factory import create_file_processor
    return create_file_processor()


def replace_imports_in_file_ast(
    fset: FileSet,
    parsed_file: ParsedFile,
    file_path: str,
    options: RewriteOptions,
    processor: Optional[FileProcessor] = None,
) -> bool:
    """FileProcessor.process_parsed의 단축 함수 (기본 구현체 사용)"""
    processor = processor or _default_processor()
    return processor.process_parsed(fset, parsed_file, file_path, options)


def replace_imports_in_file(
    file_path: str,
    options: RewriteOptions,
    processor: Optional[FileProcessor] = None,
) -> bool:
    """FileProcessor.process_file의 단축 함수 (기본 구현체 사용)"""
    processor = processor or _default_processor()
    return processor.process_file(file_path, options)
