"""
Utility functions for gofiximports.
"""

from .string_utils import go_quote, go_unquote, is_valid_import_path

__all__ = ["go_quote", "go_unquote", "is_valid_import_path"]
