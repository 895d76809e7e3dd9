"""Shared fixtures for fork-publish tests."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from fork_publish.api.exceptions import RegistryError
from fork_publish.core.registry import NpmRegistry


class FakeRegistry(NpmRegistry):
    """In-memory stand-in for the npm command-line tool."""

    def __init__(self, installed=True, user="tester", taken=(), pack_failures=(),
                 publish_failures=()):
        super().__init__()
        self.installed = installed
        self.user = user
        self.taken = set(taken)
        self.pack_failures = set(pack_failures)
        self.publish_failures = set(publish_failures)
        self.calls = []
        self.published_manifests = {}

    def is_installed(self):
        self.calls.append(("is_installed",))
        return self.installed

    def whoami(self):
        self.calls.append(("whoami",))
        return self.user

    def package_exists(self, package_name):
        self.calls.append(("view", package_name))
        return package_name in self.taken

    def pack_dry_run(self, package_dir):
        self.calls.append(("pack", Path(package_dir).name))
        if Path(package_dir).name in self.pack_failures:
            raise RegistryError("'npm pack --dry-run' exited with status 1", output="npm ERR! pack")

    def publish(self, package_dir, access="public"):
        name = Path(package_dir).name
        self.calls.append(("publish", name, access))
        if name in self.publish_failures:
            raise RegistryError("'npm publish --access public' exited with status 1")
        self.published_manifests[name] = json.loads(
            (Path(package_dir) / "package.json").read_text(encoding="utf-8")
        )

    def call_names(self):
        return [call[0] for call in self.calls]


# Deliberately not in the formatting json.dumps would produce
CORE_MANIFEST = """{
    "name": "playwright-core",
    "version": "1.57.0-next",
    "description": "A high-level API to automate web browsers",
    "keywords": ["playwright"],
    "repository": {"type": "git", "url": "git+https://github.com/microsoft/playwright.git"}
}"""

MAIN_MANIFEST = """{
  "name": "playwright",
  "version": "1.57.0-next",
  "description": "A high-level API to automate web browsers",
  "repository": {"type": "git", "url": "git+https://github.com/microsoft/playwright.git"},
  "dependencies": {"playwright-core": "1.57.0-next"}
}
"""

HOST_PLATFORM_TS = """
export type HostPlatform = 'ubuntu22.04-x64' | 'kali-x64' | 'kali-arm64';
if (distroInfo?.id === 'kali') {
  isOfficiallySupportedPlatform = true;
}
"""

NATIVE_DEPS_TS = """
export const deps = {
  'kali-x64': {
    tools: [],
    chromium: [],
    firefox: [],
    webkit: [],
  },
};
deps['kali-arm64'] = deps['kali-x64'];
"""

README = "# Playwright\n\n## Linux Distribution Support\n\nKali Linux is supported.\n"

LICENSE = "                                 Apache License\n                           Version 2.0, January 2004\n"


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_registry():
    """Factory for fake registries."""
    return FakeRegistry


@pytest.fixture
def fake_registry():
    """Registry where every name is free and every command succeeds."""
    return FakeRegistry()


@pytest.fixture
def monorepo(tmp_path):
    """A fork checkout that satisfies every default check."""
    root = tmp_path / "repo"
    write(root / "package.json", '{"name": "playwright-internal", "private": true}\n')
    write(root / "README.md", README)
    write(root / "LICENSE", LICENSE)
    write(root / "scripts/publish.js", "// publish\n")
    write(root / "scripts/quick-publish.sh", "#!/bin/sh\n")
    write(root / "packages/playwright-core/package.json", CORE_MANIFEST)
    write(root / "packages/playwright-core/README.md", "# playwright-core\n")
    write(root / "packages/playwright-core/src/server/utils/hostPlatform.ts", HOST_PLATFORM_TS)
    write(root / "packages/playwright-core/src/server/registry/nativeDeps.ts", NATIVE_DEPS_TS)
    write(root / "packages/playwright/package.json", MAIN_MANIFEST)
    write(root / "packages/playwright/README.md", "# playwright\n")
    (root / "packages/playwright/lib").mkdir()
    (root / "packages/playwright-core/lib").mkdir()
    return root


@pytest.fixture
def manifest_bytes(monorepo):
    """Original manifest bytes keyed by package name."""
    return {
        name: (monorepo / "packages" / name / "package.json").read_bytes()
        for name in ("playwright-core", "playwright")
    }


@pytest.fixture
def console():
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
