"""Data models"""

from .check import Check, CheckResult, ChecklistReport
from .config import Config, PublishSettings, ChecklistSettings, MarkerRule, RunOptions
from .result import ManifestUpdate, PublishResult, PublishReport

__all__ = [
    "Check",
    "CheckResult",
    "ChecklistReport",
    "Config",
    "PublishSettings",
    "ChecklistSettings",
    "MarkerRule",
    "RunOptions",
    "ManifestUpdate",
    "PublishResult",
    "PublishReport",
]
