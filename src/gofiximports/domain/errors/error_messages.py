"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Parse 관련
    ErrorCode.PARSE_SYNTAX_ERROR: (
        "{filename}:{line}:{column}: {detail}"
    ),
    ErrorCode.PARSE_READ_FAILED: (
        "소스 파일 '{filename}'을 읽는 데 실패했습니다: {error}"
    ),
    ErrorCode.PARSE_INVALID_ENCODING: (
        "소스 파일 '{filename}'이 올바른 UTF-8이 아닙니다: {error}"
    ),
    # Walk 관련
    ErrorCode.WALK_FAILED: (
        "디렉토리 '{path}'를 순회하는 중 오류가 발생했습니다: {error}"
    ),
    ErrorCode.WALK_DIR_READ_FAILED: (
        "디렉토리 '{path}'의 목록을 읽는 데 실패했습니다: {error}"
    ),
    # Print 관련
    ErrorCode.PRINT_FAILED: (
        "'{filename}'을 출력하는 데 실패했습니다: {error}"
    ),
    ErrorCode.PRINT_FILESET_MISMATCH: (
        "'{filename}'은 주어진 FileSet에 등록된 파일이 아닙니다. "
        "같은 배치에서 파싱된 FileSet을 사용하세요."
    ),
    # Write 관련
    ErrorCode.WRITE_FAILED: (
        "'{filename}'에 쓰는 데 실패했습니다: {error}"
    ),
    ErrorCode.WRITE_PERMISSION_DENIED: (
        "'{filename}'에 쓸 권한이 없습니다: {error}"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 에러가 발생했습니다: {error}"
    ),
    ErrorCode.INVALID_ARGUMENT: (
        "유효하지 않은 인자입니다: {error}"
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.WALK_FAILED)
        "디렉토리 '{path}'를 순회하는 중 오류가 발생했습니다: {error}"
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(
        ...     ErrorCode.PARSE_SYNTAX_ERROR,
        ...     filename="a.go", line=3, column=1,
        ...     detail="expected 'package', found 'func'"
        ... )
        "a.go:3:1: expected 'package', found 'func'"
    """
    template = get_error_message(error_code)

    # 컨텍스트에 error_code도 추가 (템플릿에서 사용 가능)
    context = dict(context, error_code=error_code)

    try:
        return template.format(**context)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(context.keys())}]"
        )
