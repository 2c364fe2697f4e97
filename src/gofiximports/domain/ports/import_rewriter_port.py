"""
import 재작성 포트

Domain Layer의 인터페이스 정의 - Clean Architecture의 의존성 역전 원칙(DIP) 준수
Infrastructure Layer가 이 인터페이스를 구현합니다.
"""

from abc import ABC, abstractmethod

from ..models import FileSet, ParsedFile


class IImportRewriter(ABC):
    """구문 트리의 import 경로를 바꾸는 기능 인터페이스"""

    @abstractmethod
    def rewrite_import(
        self,
        fset: FileSet,
        parsed_file: ParsedFile,
        old_path: str,
        new_path: str
    ) -> bool:
        """
        old_path를 가져오는 모든 import 지정자의 경로를 new_path로 바꿉니다.

        Args:
            fset: 파일이 속한 FileSet
            parsed_file: 수정할 파일 (제자리에서 변경됨)
            old_path: 기존 import 경로 (따옴표 없음)
            new_path: 새 import 경로 (따옴표 없음)

        Returns:
            하나 이상의 지정자가 바뀌었으면 True
        """
        pass
