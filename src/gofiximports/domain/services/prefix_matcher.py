"""
import 경로 접두사 매칭

경로 구분자(/)를 고려하지 않는 단순 문자열 접두사 비교입니다.
from_prefix="foo"는 "foobar/x"와도 일치합니다.
"""

from typing import Optional


def match_prefix(import_path: str, from_prefix: str, to_prefix: str) -> Optional[str]:
    """
    import 경로가 from_prefix로 시작하면 바뀐 경로를 반환합니다.

    Args:
        import_path: 따옴표를 벗긴 import 경로
        from_prefix: 바꿀 접두사 (빈 문자열이면 모든 경로와 일치)
        to_prefix: 새 접두사

    Returns:
        일치하면 ``to_prefix + import_path[len(from_prefix):]``, 아니면 None

    Examples:
        >>> match_prefix("example.com/old/pkgX", "example.com/old", "example.com/new")
        'example.com/new/pkgX'

        >>> match_prefix("fmt", "example.com/old", "example.com/new") is None
        True
    """
    if not import_path.startswith(from_prefix):
        return None
    return to_prefix + import_path[len(from_prefix):]
