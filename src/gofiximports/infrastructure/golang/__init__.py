"""
Go Source Infrastructure

Scanner, import parser, import rewriting and printer for Go source files
"""

from .astutil import AstImportRewriter, rewrite_import
from .parser import GoSourceParser, list_go_files, parse_dir, parse_file, parse_source
from .printer import Printer, fprint
from .scanner import ScanError, Scanner, Token, TokenKind, scan

__all__ = [
    "AstImportRewriter",
    "GoSourceParser",
    "Printer",
    "ScanError",
    "Scanner",
    "Token",
    "TokenKind",
    "fprint",
    "list_go_files",
    "parse_dir",
    "parse_file",
    "parse_source",
    "rewrite_import",
    "scan",
]
