"""
Application Use Cases

File, directory, directory-tree and stdin import rewriting
"""

from .file_processor import (
    FileProcessor,
    replace_imports_in_file,
    replace_imports_in_file_ast,
)
from .directory_walker import (
    DirectoryWalker,
    replace_imports_in_dir,
    replace_imports_in_dir_recursive,
    replace_imports_in_files_from_stdin,
)
from .use_case_factory import create_directory_walker, create_file_processor

__all__ = [
    "FileProcessor",
    "DirectoryWalker",
    "replace_imports_in_file",
    "replace_imports_in_file_ast",
    "replace_imports_in_dir",
    "replace_imports_in_dir_recursive",
    "replace_imports_in_files_from_stdin",
    "create_file_processor",
    "create_directory_walker",
]
