"""
import 경로 재작성 도메인 모델

RewriteRule: (기존 경로, 새 경로) 한 쌍
RewriteSpec: 한 파일에 적용할 재작성 규칙 집합 (값 객체)
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class RewriteRule:
    """
    import 경로 재작성 규칙 하나

    Attributes:
        old_path: 재작성할 기존 import 경로 (따옴표 없음)
        new_path: 새 import 경로 (따옴표 없음)
    """
    old_path: str
    new_path: str


@dataclass(frozen=True)
class RewriteSpec:
    """
    한 파일에 대한 재작성 규칙 집합

    같은 old_path는 한 번만 나타나며, 규칙은 old_path 순으로 정렬됩니다.
    파일 하나를 처리하는 동안만 사용되고 버려집니다.
    """
    rules: Tuple[RewriteRule, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "RewriteSpec":
        """
        (old_path, new_path) 쌍들로 RewriteSpec 생성

        같은 old_path가 여러 번 나오면 처음 것만 사용합니다.
        """
        seen = {}
        for old_path, new_path in pairs:
            seen.setdefault(old_path, new_path)
        return cls(tuple(
            RewriteRule(old_path, seen[old_path]) for old_path in sorted(seen)
        ))

    def __iter__(self) -> Iterator[RewriteRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)

    def get(self, old_path: str) -> Optional[str]:
        for rule in self.rules:
            if rule.old_path == old_path:
                return rule.new_path
        return None
