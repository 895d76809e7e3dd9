"""Global constants for fork-publish"""

from enum import Enum

APP_NAME = "fork-publish"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".fork-publish.yaml"

# Manifest handling
MANIFEST_FILE = "package.json"
MANIFEST_BACKUP_SUFFIX = ".backup"
MANIFEST_INDENT = 2

# Publish defaults
DEFAULT_PACKAGES_DIR = "packages"
DEFAULT_PACKAGES = [
    "playwright-core",
    "playwright",
]
DEFAULT_NAME_SUFFIX = "-kali"
DEFAULT_VERSION_SUFFIX = "-kali.1"
DEFAULT_PRERELEASE_TAG = "-next"
DEFAULT_DESCRIPTION_MARKER = "Kali Linux"
DEFAULT_DESCRIPTION_NOTE = " with Kali Linux support"
DEFAULT_KEYWORDS = [
    "kali-linux",
    "security-testing",
    "penetration-testing",
]
DEFAULT_ACCESS = "public"
DEFAULT_PACKAGE_REQUIRED_FILES = [MANIFEST_FILE, "README.md"]
DEFAULT_REPOSITORY_MARKER = "kali"
DEFAULT_NPM_EXECUTABLE = "npm"
DEFAULT_RELEASE_TAG = "v1.57.0-kali.1"

# Checklist defaults
DEFAULT_MARKER_RULES = [
    {
        "name": "Kali Linux platform detection",
        "path": "packages/playwright-core/src/server/utils/hostPlatform.ts",
        "markers": [
            "distroInfo?.id === 'kali'",
            "'kali-x64' | 'kali-arm64'",
            "isOfficiallySupportedPlatform = true",
        ],
    },
    {
        "name": "Kali Linux native dependencies",
        "path": "packages/playwright-core/src/server/registry/nativeDeps.ts",
        "markers": [
            "'kali-x64':",
            "deps['kali-arm64']",
            "chromium:",
            "firefox:",
            "webkit:",
        ],
    },
    {
        "name": "README documentation",
        "path": "README.md",
        "markers": [
            "Kali Linux",
            "Linux Distribution Support",
        ],
    },
]
DEFAULT_REQUIRED_PATHS = [
    "package.json",
    "README.md",
    "LICENSE",
    "packages/playwright/package.json",
    "packages/playwright-core/package.json",
    "scripts/publish.js",
    "scripts/quick-publish.sh",
]
DEFAULT_BUILD_OUTPUTS = [
    "packages/playwright/lib",
    "packages/playwright-core/lib",
]
DEFAULT_LICENSE_FILE = "LICENSE"
DEFAULT_LICENSE_MARKERS = ["Apache License", "Apache-2.0"]

# Environment variables
ENV_DRY_RUN = "DRY_RUN"
ENV_FORCE = "FORCE"
ENV_CONFIG_PATH = "FORK_PUBLISH_CONFIG"
ENV_LOG_LEVEL = "FORK_PUBLISH_LOG_LEVEL"
ENV_PROJECT_ROOT = "PROJECT_ROOT"
TRUTHY_VALUES = ("true", "1", "yes")


class PublishStatus(Enum):
    """Outcome of publishing a single package"""
    PUBLISHED = "published"
    SKIPPED = "skipped"
    DRY_RUN = "dry_run"
    CANCELLED = "cancelled"
    FAILED = "failed"
    PENDING = "pending"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "FP001"
    PACKAGE_NOT_FOUND = "FP002"
    REGISTRY_COMMAND_FAILED = "FP003"
    VALIDATION_FAILED = "FP004"
    PUBLISH_FAILED = "FP005"
    USER_CANCELLED = "FP006"
    GIT_COMMAND_FAILED = "FP007"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_PACKAGE = "📦"
EMOJI_ROCKET = "🚀"
EMOJI_SEARCH = "🔍"
EMOJI_CLIPBOARD = "📋"
EMOJI_CHART = "📊"
EMOJI_PARTY = "🎉"
EMOJI_MEMO = "📝"

# Prompts
PROMPT_CONTINUE_PUBLISH = "Continue publishing?"
PROMPT_CONFIRM_PUBLISH = "Publish {name} v{version}?"
