"""
Domain Models

Go source entities, rewrite value objects and options
"""

from .source import (
    NO_POS,
    Position,
    SourceFile,
    FileSet,
    Comment,
    ImportSpec,
    ImportDecl,
    ParsedFile,
    ParsedPackage,
)
from .rewrite import RewriteRule, RewriteSpec
from .options import (
    PrintMode,
    PrintConfig,
    RewriteOptions,
    DEFAULT_PRINT_MODE,
    DEFAULT_TAB_WIDTH,
)

__all__ = [
    "NO_POS",
    "Position",
    "SourceFile",
    "FileSet",
    "Comment",
    "ImportSpec",
    "ImportDecl",
    "ParsedFile",
    "ParsedPackage",
    "RewriteRule",
    "RewriteSpec",
    "PrintMode",
    "PrintConfig",
    "RewriteOptions",
    "DEFAULT_PRINT_MODE",
    "DEFAULT_TAB_WIDTH",
]
