"""
Domain Services

Prefix matching and import tree rewriting
"""

from .prefix_matcher import match_prefix
from .import_rewriter import TreeRewriter, build_rewrite_spec, rewrite_imports

__all__ = [
    "match_prefix",
    "TreeRewriter",
    "build_rewrite_spec",
    "rewrite_imports",
]
