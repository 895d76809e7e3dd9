"""Git operation utilities"""

import subprocess
from pathlib import Path
from typing import List

from ..api.exceptions import GitError


def is_git_repository(path: Path) -> bool:
    """
    Check if directory is a Git repository

    Args:
        path: Directory path

    Returns:
        True if it's a Git repository
    """
    try:
        result = subprocess.run(
            ['git', 'rev-parse', '--is-inside-work-tree'],
            cwd=path,
            capture_output=True,
            text=True
        )
        return result.returncode == 0
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


def get_porcelain_status(path: Path) -> str:
    """
    Get machine-readable working tree status

    Args:
        path: Repository path

    Returns:
        Output of ``git status --porcelain``

    Raises:
        GitError: If git is missing or the command fails
    """
    try:
        result = subprocess.run(
            ['git', 'status', '--porcelain'],
            cwd=path,
            capture_output=True,
            text=True,
            check=True
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e
    except subprocess.CalledProcessError as e:
        raise GitError(f"git status failed: {(e.stderr or '').strip()}") from e

    return result.stdout


def get_changed_files(path: Path) -> List[str]:
    """
    List paths with uncommitted or untracked changes

    Args:
        path: Repository path

    Returns:
        Changed paths as reported by git
    """
    changed = []
    for line in get_porcelain_status(path).splitlines():
        if line.strip():
            # Porcelain v1: two status columns, a space, then the path
            changed.append(line[3:])
    return changed
