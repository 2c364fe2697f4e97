"""
Tree Rewriter

파싱된 파일의 import 목록에 접두사 매칭을 적용하고,
일치하는 지정자를 IImportRewriter를 통해 제자리에서 바꿉니다.
"""

from ..models import FileSet, ParsedFile, RewriteSpec
from ..ports import IImportRewriter
from .prefix_matcher import match_prefix


def build_rewrite_spec(parsed_file: ParsedFile, from_prefix: str, to_prefix: str) -> RewriteSpec:
    """
    파일의 모든 import 경로에 접두사 매칭을 적용해 RewriteSpec을 만듭니다.

    같은 경로를 두 번 가져와도 규칙은 하나만 생깁니다.

    Args:
        parsed_file: 파싱된 파일
        from_prefix: 바꿀 접두사
        to_prefix: 새 접두사

    Returns:
        old_path 순으로 정렬된 RewriteSpec
    """
    pairs = []
    for import_path in parsed_file.import_paths():
        new_path = match_prefix(import_path, from_prefix, to_prefix)
        if new_path is not None:
            pairs.append((import_path, new_path))
    return RewriteSpec.from_pairs(pairs)


class TreeRewriter:
    """
    파일 하나의 import 경로 접두사를 재작성합니다.

    to_prefix가 from_prefix로 시작하면 두 번 실행했을 때 결과가 달라집니다.
    이 경우는 검사하지 않습니다.
    """

    def __init__(self, import_rewriter: IImportRewriter):
        """
        Args:
            import_rewriter: 구문 트리의 import 경로를 바꾸는 구현체
        """
        self.import_rewriter = import_rewriter

    def rewrite(
        self,
        fset: FileSet,
        parsed_file: ParsedFile,
        from_prefix: str,
        to_prefix: str
    ) -> bool:
        """
        접두사가 일치하는 모든 import를 재작성합니다.

        Returns:
            하나 이상의 import가 바뀌었으면 True
        """
        rewrote = False
        for rule in build_rewrite_spec(parsed_file, from_prefix, to_prefix):
            changed = self.import_rewriter.rewrite_import(
                fset, parsed_file, rule.old_path, rule.new_path
            )
            rewrote = rewrote or changed
        return rewrote


def rewrite_imports(
    fset: FileSet,
    parsed_file: ParsedFile,
    from_prefix: str,
    to_prefix: str,
    import_rewriter: IImportRewriter
) -> bool:
    """TreeRewriter(import_rewriter).rewrite(...)의 단축 함수"""
    return TreeRewriter(import_rewriter).rewrite(fset, parsed_file, from_prefix, to_prefix)
