# fork_publish/core/manifest_editor.py
"""Temporary package.json rewriting with guaranteed restore"""

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator

from ..api.exceptions import ValidationError
from ..constants import MANIFEST_FILE, MANIFEST_BACKUP_SUFFIX, MANIFEST_INDENT
from ..models.config import PublishSettings
from ..models.result import ManifestUpdate
from ..utils.file_utils import read_text, copy_file, atomic_write

logger = logging.getLogger(__name__)


def backup_path_for(manifest_path: Path) -> Path:
    """Get the sibling backup path of a manifest"""
    return manifest_path.with_name(manifest_path.name + MANIFEST_BACKUP_SUFFIX)


def load_manifest(manifest_path: Path) -> Dict[str, Any]:
    """Parse a package.json file"""
    return json.loads(read_text(manifest_path))


def dump_manifest(manifest_path: Path, data: Dict[str, Any]) -> None:
    """Write a package.json file in npm's formatting"""
    content = json.dumps(data, indent=MANIFEST_INDENT, ensure_ascii=False) + "\n"
    atomic_write(manifest_path, content)


def restore_manifest(manifest_path: Path) -> bool:
    """Restore a manifest from its backup and delete the backup

    Returns:
        True if a backup was found and restored
    """
    backup_path = backup_path_for(manifest_path)
    if not backup_path.exists():
        return False

    copy_file(backup_path, manifest_path)
    backup_path.unlink()
    logger.debug("Restored %s from %s", manifest_path, backup_path)
    return True


def recover_manifest(manifest_path: Path, forked_name: str) -> bool:
    """Undo a rewrite left behind by an interrupted run

    The backup is only trusted when the manifest still carries the
    forked name, i.e. it is in the rewritten state.

    Returns:
        True if the manifest was recovered

    Raises:
        ValidationError: If a backup exists next to a manifest that was
            not rewritten
    """
    backup_path = backup_path_for(manifest_path)
    if not backup_path.exists():
        return False

    if load_manifest(manifest_path).get('name') != forked_name:
        raise ValidationError(
            f"Unexpected backup {backup_path} next to an unmodified manifest, "
            f"remove it before publishing"
        )

    restore_manifest(manifest_path)
    logger.warning("Recovered %s from a backup left by an interrupted run", manifest_path)
    return True


class ManifestRewriter:
    """Rewrites a parsed manifest into its forked identity"""

    def __init__(self, settings: PublishSettings):
        self.settings = settings

    def suffix_version(self, version: str) -> str:
        """Apply the fork version suffix

        A trailing prerelease tag is dropped first. Versions that already
        carry the fork marker are returned unchanged.
        """
        if self.settings.fork_marker in version:
            return version
        tag = self.settings.prerelease_tag
        if tag and version.endswith(tag):
            version = version[:-len(tag)]
        return version + self.settings.version_suffix

    def redirect_dependency(self, spec: str, package_name: str) -> str:
        """Point a dependency at the renamed package through an npm alias"""
        if spec.startswith('npm:'):
            return spec
        return f"npm:{self.settings.renamed(package_name)}@{self.suffix_version(spec)}"

    def apply(self, data: Dict[str, Any], new_name: str) -> ManifestUpdate:
        """Rewrite manifest data in place

        Args:
            data: Parsed package.json
            new_name: Name to publish under

        Returns:
            Description of the rewrite
        """
        settings = self.settings
        update = ManifestUpdate(
            original_name=data.get('name', ''),
            original_version=data.get('version', ''),
            new_name=new_name,
            new_version=''
        )

        data['name'] = new_name
        data['version'] = self.suffix_version(str(data.get('version', '')))
        update.new_version = data['version']

        data['publishConfig'] = {'access': settings.access}

        description = data.get('description') or ''
        if settings.description_marker not in description:
            data['description'] = description + settings.description_note

        keywords = data.get('keywords')
        if not isinstance(keywords, list):
            keywords = []
            data['keywords'] = keywords
        for keyword in settings.keywords:
            if keyword not in keywords:
                keywords.append(keyword)

        dependencies = data.get('dependencies') or {}
        for package_name in settings.packages:
            if package_name in dependencies:
                dependencies[package_name] = self.redirect_dependency(
                    str(dependencies[package_name]), package_name
                )

        repository = data.get('repository')
        if isinstance(repository, dict):
            repository_url = repository.get('url') or ''
        else:
            repository_url = repository or ''
        if settings.repository_marker not in repository_url:
            update.warnings.append(
                f"Update the repository URL of {new_name} manually"
            )

        return update


@contextmanager
def mutated_manifest(package_dir: Path,
                     rewrite: Callable[[Dict[str, Any]], ManifestUpdate]) -> Iterator[ManifestUpdate]:
    """Rewrite a package's manifest for the duration of the block

    The original file is copied to ``package.json.backup`` before the
    rewrite and copied back on every exit path, leaving the manifest
    byte-identical and the backup deleted. An existing backup is never
    overwritten; run ``recover_manifest`` first.

    Args:
        package_dir: Package directory containing package.json
        rewrite: Callable mutating the parsed manifest in place

    Yields:
        The rewrite description
    """
    manifest_path = Path(package_dir) / MANIFEST_FILE

    backup_path = backup_path_for(manifest_path)
    if backup_path.exists():
        raise ValidationError(f"Backup {backup_path} already exists")

    data = load_manifest(manifest_path)
    update = rewrite(data)

    copy_file(manifest_path, backup_path)
    try:
        dump_manifest(manifest_path, data)
        yield update
    finally:
        restore_manifest(manifest_path)
