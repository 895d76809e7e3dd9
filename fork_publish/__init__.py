"""fork-publish - publish a renamed fork of an npm monorepo.

Two tools share this package: a pre-publish checklist and a publish
orchestrator that rewrites each package's manifest only for the
duration of its publish.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

from .core import (
    NpmRegistry,
    ManifestRewriter,
    mutated_manifest,
    ChecklistRunner,
    build_checklist,
    PublishOrchestrator,
)
from .models import (
    Check,
    CheckResult,
    ChecklistReport,
    Config,
    PublishSettings,
    ChecklistSettings,
    RunOptions,
    PublishResult,
    PublishReport,
)
from .services import ConfigService
from .api.exceptions import (
    ForkPublishError,
    ConfigError,
    PackageNotFoundError,
    RegistryError,
    ValidationError,
    PublishError,
    UserCancelledError,
    GitError,
)

__all__ = [
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    "NpmRegistry",
    "ManifestRewriter",
    "mutated_manifest",
    "ChecklistRunner",
    "build_checklist",
    "PublishOrchestrator",

    "Check",
    "CheckResult",
    "ChecklistReport",
    "Config",
    "PublishSettings",
    "ChecklistSettings",
    "RunOptions",
    "PublishResult",
    "PublishReport",

    "ConfigService",

    "ForkPublishError",
    "ConfigError",
    "PackageNotFoundError",
    "RegistryError",
    "ValidationError",
    "PublishError",
    "UserCancelledError",
    "GitError",
]
