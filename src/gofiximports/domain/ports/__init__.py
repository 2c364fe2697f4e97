"""
Domain Layer Ports

Domain Layer의 인터페이스 정의 (의존성 역전 원칙)
"""

from .import_rewriter_port import IImportRewriter

__all__ = ["IImportRewriter"]
