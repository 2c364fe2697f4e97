"""
소스 포트 (인터페이스)

ISourceParser: Go 소스 파싱 인터페이스
ISourcePrinter: 파싱된 소스 출력 인터페이스
ISourceWriter: 소스 파일 쓰기 인터페이스
"""

from abc import ABC, abstractmethod
from typing import Dict

from ...domain.models import FileSet, ParsedFile, ParsedPackage


class ISourceParser(ABC):
    """
    소스 파서 인터페이스

    Infrastructure 계층에서 구현됨
    """

    @abstractmethod
    def parse_file(self, fset: FileSet, filename: str) -> ParsedFile:
        """
        파일 하나 파싱 (주석 보존)

        Raises:
            ParseError: 읽기 실패 또는 구문 오류
        """
        pass

    @abstractmethod
    def parse_dir(self, fset: FileSet, path: str) -> Dict[str, ParsedPackage]:
        """
        디렉토리의 모든 소스 파일을 같은 FileSet으로 파싱

        Returns:
            패키지 이름 -> ParsedPackage

        Raises:
            WalkError: 디렉토리를 읽을 수 없는 경우
            ParseError: 파일 하나라도 파싱에 실패한 경우
        """
        pass


class ISourcePrinter(ABC):
    """소스 프린터 인터페이스"""

    @abstractmethod
    def fprint(self, fset: FileSet, parsed_file: ParsedFile) -> str:
        """
        파싱된 파일을 소스 텍스트로 출력

        Raises:
            PrintError: 출력 실패
        """
        pass


class ISourceWriter(ABC):
    """소스 파일 쓰기 인터페이스"""

    @abstractmethod
    def write(self, filename: str, content: str) -> None:
        """
        파일을 같은 경로에 덮어씀 (기존 권한 비트 유지)

        Raises:
            WriteError: 쓰기 실패
        """
        pass
