"""Core functionality"""

from .registry import NpmRegistry
from .manifest_editor import ManifestRewriter, mutated_manifest, recover_manifest, restore_manifest
from .checklist import ChecklistRunner
from .checks import build_checklist
from .orchestrator import PublishOrchestrator

__all__ = [
    "NpmRegistry",
    "ManifestRewriter",
    "mutated_manifest",
    "recover_manifest",
    "restore_manifest",
    "ChecklistRunner",
    "build_checklist",
    "PublishOrchestrator",
]
