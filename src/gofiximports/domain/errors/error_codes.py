"""에러 코드 정의

gofiximports의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """gofiximports 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        10xx: Parse 관련 에러
        20xx: Walk 관련 에러
        30xx: Print 관련 에러
        40xx: Write 관련 에러
        90xx: 기타 에러
    """

    # ==================== Parse 관련 (1000-1999) ====================
    PARSE_SYNTAX_ERROR = 1001
    """Go 소스 구문 오류"""

    PARSE_READ_FAILED = 1002
    """소스 파일 읽기 실패"""

    PARSE_INVALID_ENCODING = 1003
    """UTF-8이 아닌 소스 파일"""

    # ==================== Walk 관련 (2000-2999) ====================
    WALK_FAILED = 2001
    """디렉토리 순회 실패"""

    WALK_DIR_READ_FAILED = 2002
    """디렉토리 목록 읽기 실패"""

    # ==================== Print 관련 (3000-3999) ====================
    PRINT_FAILED = 3001
    """소스 출력 실패"""

    PRINT_FILESET_MISMATCH = 3002
    """파일이 주어진 FileSet에 속하지 않음"""

    # ==================== Write 관련 (4000-4999) ====================
    WRITE_FAILED = 4001
    """파일 쓰기 실패"""

    WRITE_PERMISSION_DENIED = 4002
    """파일 쓰기 권한 없음"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    INVALID_ARGUMENT = 9002
    """유효하지 않은 인자"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'PARSE_SYNTAX_ERROR (1001)')"""
        return f"{self.name} ({self.value})"

    @property
    def code(self) -> int:
        """에러 코드 숫자 반환"""
        return self.value

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 1000 <= code < 2000:
            return "Parse"
        elif 2000 <= code < 3000:
            return "Walk"
        elif 3000 <= code < 4000:
            return "Print"
        elif 4000 <= code < 5000:
            return "Write"
        else:
            return "Other"
