"""Configuration data models"""

import os
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Any, Mapping

from ..constants import (
    DEFAULT_PACKAGES_DIR,
    DEFAULT_PACKAGES,
    DEFAULT_NAME_SUFFIX,
    DEFAULT_VERSION_SUFFIX,
    DEFAULT_PRERELEASE_TAG,
    DEFAULT_DESCRIPTION_MARKER,
    DEFAULT_DESCRIPTION_NOTE,
    DEFAULT_KEYWORDS,
    DEFAULT_ACCESS,
    DEFAULT_PACKAGE_REQUIRED_FILES,
    DEFAULT_REPOSITORY_MARKER,
    DEFAULT_NPM_EXECUTABLE,
    DEFAULT_RELEASE_TAG,
    DEFAULT_MARKER_RULES,
    DEFAULT_REQUIRED_PATHS,
    DEFAULT_BUILD_OUTPUTS,
    DEFAULT_LICENSE_FILE,
    DEFAULT_LICENSE_MARKERS,
    ENV_DRY_RUN,
    ENV_FORCE,
    TRUTHY_VALUES,
)


def _known_fields(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the keys that map to dataclass fields"""
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class MarkerRule:
    """A file that must contain every listed marker string"""

    name: str
    path: str
    markers: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.markers:
            raise ValueError(f"Marker rule '{self.name}' requires at least one marker")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MarkerRule':
        return cls(
            name=data['name'],
            path=data['path'],
            markers=list(data.get('markers', []))
        )


@dataclass
class PublishSettings:
    """How packages are renamed, re-versioned and published"""

    packages_dir: str = DEFAULT_PACKAGES_DIR
    packages: List[str] = field(default_factory=lambda: list(DEFAULT_PACKAGES))
    name_suffix: str = DEFAULT_NAME_SUFFIX
    version_suffix: str = DEFAULT_VERSION_SUFFIX
    prerelease_tag: str = DEFAULT_PRERELEASE_TAG
    fork_marker: Optional[str] = None
    description_marker: str = DEFAULT_DESCRIPTION_MARKER
    description_note: str = DEFAULT_DESCRIPTION_NOTE
    keywords: List[str] = field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    access: str = DEFAULT_ACCESS
    required_files: List[str] = field(default_factory=lambda: list(DEFAULT_PACKAGE_REQUIRED_FILES))
    repository_marker: str = DEFAULT_REPOSITORY_MARKER
    npm_executable: str = DEFAULT_NPM_EXECUTABLE
    registry_url: Optional[str] = None
    release_tag: str = DEFAULT_RELEASE_TAG

    def __post_init__(self):
        if not self.name_suffix:
            raise ValueError("name_suffix must not be empty")
        if not self.version_suffix:
            raise ValueError("version_suffix must not be empty")
        # A version already carrying the fork marker is never suffixed again
        if self.fork_marker is None:
            self.fork_marker = self.name_suffix

    def renamed(self, package_name: str) -> str:
        """Get the published name of a package"""
        return f"{package_name}{self.name_suffix}"

    @property
    def reserved_names(self) -> List[str]:
        """Names the fork publishes under"""
        return [self.renamed(name) for name in self.packages]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PublishSettings':
        return cls(**_known_fields(cls, data or {}))


@dataclass
class ChecklistSettings:
    """What the pre-publish checklist inspects"""

    marker_rules: List[MarkerRule] = field(
        default_factory=lambda: [MarkerRule.from_dict(r) for r in DEFAULT_MARKER_RULES]
    )
    required_paths: List[str] = field(default_factory=lambda: list(DEFAULT_REQUIRED_PATHS))
    build_outputs: List[str] = field(default_factory=lambda: list(DEFAULT_BUILD_OUTPUTS))
    license_file: str = DEFAULT_LICENSE_FILE
    license_markers: List[str] = field(default_factory=lambda: list(DEFAULT_LICENSE_MARKERS))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChecklistSettings':
        data = _known_fields(cls, data or {})
        if 'marker_rules' in data:
            data['marker_rules'] = [MarkerRule.from_dict(r) for r in data['marker_rules'] or []]
        return cls(**data)


@dataclass
class Config:
    """Complete project configuration"""

    publish: PublishSettings = field(default_factory=PublishSettings)
    checklist: ChecklistSettings = field(default_factory=ChecklistSettings)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Config':
        data = data or {}
        return cls(
            publish=PublishSettings.from_dict(data.get('publish') or {}),
            checklist=ChecklistSettings.from_dict(data.get('checklist') or {})
        )


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


@dataclass
class RunOptions:
    """Runtime switches read from the environment"""

    dry_run: bool = False
    force: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RunOptions':
        environ = os.environ if environ is None else environ
        return cls(
            dry_run=_is_truthy(environ.get(ENV_DRY_RUN)),
            force=_is_truthy(environ.get(ENV_FORCE))
        )
