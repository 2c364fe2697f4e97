"""
Application Layer - Ports (Interfaces)

Infrastructure 계층이 구현해야 하는 인터페이스들을 정의합니다.
"""

from .source_port import ISourceParser, ISourcePrinter, ISourceWriter

__all__ = [
    "ISourceParser",
    "ISourcePrinter",
    "ISourceWriter",
]
