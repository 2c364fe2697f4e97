"""
import 재작성 구현

IImportRewriter의 구현체. 지정자의 경로 리터럴만 바꾸고 선언을 옮기거나
합치거나 나누지 않으므로 결과는 항상 구문상 유효합니다.
"""

from ...domain.models import FileSet, ParsedFile
from ...domain.ports import IImportRewriter
from ...utils.string_utils import go_quote


def rewrite_import(fset: FileSet, parsed_file: ParsedFile, old_path: str, new_path: str) -> bool:
    """
    old_path를 가져오는 모든 지정자의 경로를 new_path로 바꿉니다.

    경로가 같아도 일치한 지정자가 있으면 True를 반환합니다.

    Args:
        fset: 파일이 속한 FileSet (위치 정보는 바뀌지 않음)
        parsed_file: 수정할 파일
        old_path: 기존 import 경로 (따옴표 없음)
        new_path: 새 import 경로 (따옴표 없음)

    Returns:
        일치한 지정자가 있었으면 True
    """
    rewrote = False
    for spec in parsed_file.imports:
        if spec.import_path() == old_path:
            rewrote = True
            spec.path = go_quote(new_path)
    return rewrote


class AstImportRewriter(IImportRewriter):
    """rewrite_import를 IImportRewriter로 감싼 구현체"""

    def rewrite_import(
        self,
        fset: FileSet,
        parsed_file: ParsedFile,
        old_path: str,
        new_path: str
    ) -> bool:
        return rewrite_import(fset, parsed_file, old_path, new_path)
