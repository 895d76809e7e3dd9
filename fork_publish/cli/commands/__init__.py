# fork_publish/cli/commands/__init__.py
"""CLI commands"""

from . import check
from . import publish

__all__ = [
    "check",
    "publish",
]
