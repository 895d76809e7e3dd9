# fork_publish/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import Iterable, List, Union


def read_text(file_path: Path) -> str:
    """
    Read a text file as UTF-8

    Args:
        file_path: Path to file

    Returns:
        File content
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def missing_markers(content: str, markers: Iterable[str]) -> List[str]:
    """
    Find marker strings absent from content

    Args:
        content: Text to search
        markers: Substrings that must all be present

    Returns:
        Markers not found, in the given order
    """
    return [marker for marker in markers if marker not in content]


def missing_paths(root: Path, paths: Iterable[str]) -> List[str]:
    """
    Find relative paths that do not exist under root

    Args:
        root: Base directory
        paths: Relative file or directory paths

    Returns:
        Paths that do not exist, in the given order
    """
    return [p for p in paths if not (root / p).exists()]


def copy_file(src: Path, dst: Path) -> None:
    """Copy file bytes and metadata"""
    shutil.copy2(src, dst)


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 mode: str = 'w') -> None:
    """
    Write file atomically

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode
    """
    import tempfile

    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent)

    try:
        if 'b' in mode:
            f = os.fdopen(temp_fd, mode)
        else:
            f = os.fdopen(temp_fd, mode, encoding='utf-8')
        with f:
            f.write(content)

        os.replace(temp_path, file_path)

    except Exception:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
