"""npm registry client built on the npm command-line tool"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import RegistryError
from ..constants import DEFAULT_NPM_EXECUTABLE, DEFAULT_ACCESS

logger = logging.getLogger(__name__)


class NpmRegistry:
    """Issues npm commands and interprets only their exit status"""

    def __init__(self, executable: str = DEFAULT_NPM_EXECUTABLE,
                 registry_url: Optional[str] = None):
        """Initialize registry client

        Args:
            executable: npm executable name or path
            registry_url: Registry to use instead of the npm default
        """
        self.executable = executable
        self.registry_url = registry_url

    def _command(self, args: List[str]) -> List[str]:
        command = [self.executable, *args]
        if self.registry_url:
            command.extend(['--registry', self.registry_url])
        return command

    def _run(self, args: List[str], cwd: Optional[Path] = None,
             capture: bool = True) -> subprocess.CompletedProcess:
        command = self._command(args)
        logger.debug("Running: %s", " ".join(command))
        try:
            return subprocess.run(
                command,
                cwd=cwd,
                capture_output=capture,
                text=True
            )
        except OSError as e:
            raise RegistryError(
                f"Cannot run {self.executable}: {e}",
                command=" ".join(command)
            ) from e

    def _check(self, args: List[str], cwd: Optional[Path] = None,
               capture: bool = True) -> subprocess.CompletedProcess:
        result = self._run(args, cwd=cwd, capture=capture)
        if result.returncode != 0:
            command = " ".join(self._command(args))
            output = (result.stderr or result.stdout or "").strip() if capture else None
            raise RegistryError(
                f"'{command}' exited with status {result.returncode}",
                command=command,
                output=output
            )
        return result

    def is_installed(self) -> bool:
        """Check whether the npm executable is on PATH"""
        return shutil.which(self.executable) is not None

    def whoami(self) -> Optional[str]:
        """Get the authenticated username, or None when not logged in"""
        try:
            result = self._check(['whoami'])
        except RegistryError as e:
            logger.debug("npm whoami failed: %s", e)
            return None
        return result.stdout.strip()

    def package_exists(self, package_name: str) -> bool:
        """Check whether a package name is already taken

        Any failure of ``npm view`` is read as the name being available.
        """
        try:
            self._check(['view', package_name, 'name'])
        except RegistryError as e:
            logger.debug("npm view %s failed: %s", package_name, e)
            return False
        return True

    def pack_dry_run(self, package_dir: Path) -> None:
        """Build the package tarball without writing it

        Raises:
            RegistryError: If npm rejects the package
        """
        self._check(['pack', '--dry-run'], cwd=package_dir)

    def publish(self, package_dir: Path, access: str = DEFAULT_ACCESS) -> None:
        """Publish the package, streaming npm output to the terminal

        Raises:
            RegistryError: If the registry rejects the publish
        """
        self._check(['publish', '--access', access], cwd=package_dir, capture=False)
