"""Utility functions"""

from .file_utils import read_text, missing_markers, missing_paths, copy_file, atomic_write
from .git_utils import is_git_repository, get_porcelain_status, get_changed_files

__all__ = [
    "read_text",
    "missing_markers",
    "missing_paths",
    "copy_file",
    "atomic_write",
    "is_git_repository",
    "get_porcelain_status",
    "get_changed_files",
]
