"""
Storage Infrastructure

Source file writer implementation
"""

from .source_writer import (
    DEFAULT_FILE_MODE,
    FileSystemSourceWriter,
    file_mode,
    write_source_file,
)

__all__ = [
    "DEFAULT_FILE_MODE",
    "FileSystemSourceWriter",
    "file_mode",
    "write_source_file",
]
