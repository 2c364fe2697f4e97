"""
gofiximports 명령행 인터페이스

Go 소스 파일의 import 경로 접두사를 바꿉니다.

Usage:
    gofiximports --from github.com/old/proj --to example.org/new/proj
    find . -name '*.go' | gofiximports --stdin --from old/ --to new/
"""

import sys
import traceback

import click

from ... import __version__
from ...application.use_cases import create_directory_walker
from ...domain.errors import GoFixImportsError
from ...domain.models import DEFAULT_TAB_WIDTH, PrintConfig, RewriteOptions
from ...infrastructure.logging import get_logger
from .cli_ui import ErrorDisplay
from .utils import setup_logging

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--dir", "-dir", "directory",
    default="./",
    show_default=True,
    help="재작성할 디렉토리"
)
@click.option(
    "--recursive/--no-recursive", "-recursive/-no-recursive",
    default=True,
    show_default=True,
    help="하위 디렉토리까지 재작성 (끄려면 -recursive=false 대신 -no-recursive)"
)
@click.option(
    "--stdin", "-stdin", "use_stdin",
    is_flag=True,
    help="재작성할 파일 경로를 표준 입력에서 한 줄에 하나씩 읽음 (--dir, --recursive 무시)"
)
@click.option("--from", "-from", "from_prefix", default="", help="바꿀 import 경로 접두사")
@click.option("--to", "-to", "to_prefix", default="", help="새 import 경로 접두사")
@click.option("--rawformat", "-rawformat", is_flag=True, help="프린터 RawFormat 모드")
@click.option(
    "--tabindent/--no-tabindent", "-tabindent/-no-tabindent",
    default=True,
    show_default=True,
    help="프린터 TabIndent 모드 (끄려면 -no-tabindent)"
)
@click.option(
    "--usespaces/--no-usespaces", "-usespaces/-no-usespaces",
    default=True,
    show_default=True,
    help="프린터 UseSpaces 모드 (끄려면 -no-usespaces)"
)
@click.option("--sourcepos", "-sourcepos", is_flag=True, help="프린터 SourcePos 모드")
@click.option(
    "--tabwidth", "-tabwidth",
    type=click.IntRange(min=0),
    default=DEFAULT_TAB_WIDTH,
    show_default=True,
    help="탭 너비"
)
@click.option(
    "--indent", "-indent",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="모든 줄 앞에 넣을 들여쓰기 단계"
)
@click.option("--verbose", "-v", is_flag=True, help="상세 로깅 활성화")
@click.version_option(__version__, "--version", prog_name="gofiximports")
def main(
    directory: str,
    recursive: bool,
    use_stdin: bool,
    from_prefix: str,
    to_prefix: str,
    rawformat: bool,
    tabindent: bool,
    usespaces: bool,
    sourcepos: bool,
    tabwidth: int,
    indent: int,
    verbose: bool,
):
    """
    Go 소스 파일의 import 경로 접두사를 --from에서 --to로 바꿉니다.

    바뀐 파일만 다시 쓰며, 파일의 권한 비트는 그대로 유지합니다.

    \b
    예시:
        gofiximports --from github.com/old/proj --to example.org/new/proj
        gofiximports --dir ./pkg --no-recursive --from old/ --to new/
        git ls-files '*.go' | gofiximports --stdin --from old/ --to new/
    """
    setup_logging(verbose)

    options = RewriteOptions(
        from_prefix=from_prefix,
        to_prefix=to_prefix,
        print_config=PrintConfig.from_flags(
            raw_format=rawformat,
            tab_indent=tabindent,
            use_spaces=usespaces,
            source_pos=sourcepos,
            tabwidth=tabwidth,
            indent=indent,
        ),
    )
    walker = create_directory_walker()

    try:
        if use_stdin:
            modified = walker.replace_imports_in_files_from_stdin(sys.stdin, options)
        elif recursive:
            modified = walker.replace_imports_in_dir_recursive(directory, options)
        else:
            modified = walker.replace_imports_in_dir(directory, options)
    except (GoFixImportsError, OSError) as e:
        if isinstance(e, GoFixImportsError):
            logger.error("Import rewrite failed", **e.to_dict())
        else:
            logger.error("Import rewrite failed", error=str(e))
        ErrorDisplay().show_exception(e, traceback.format_exc() if verbose else None)
        sys.exit(1)

    logger.debug("Import rewrite finished", modified=modified)


if __name__ == "__main__":
    main()
