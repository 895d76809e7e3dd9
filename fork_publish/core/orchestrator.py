# fork_publish/core/orchestrator.py
"""Sequential publisher for the forked packages"""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from ..api.exceptions import (
    ForkPublishError,
    PackageNotFoundError,
    RegistryError,
    ValidationError,
    PublishError,
    UserCancelledError,
)
from ..constants import (
    MANIFEST_FILE,
    PublishStatus,
    PROMPT_CONFIRM_PUBLISH,
    EMOJI_SUCCESS,
    EMOJI_ERROR,
    EMOJI_WARNING,
    EMOJI_PACKAGE,
    EMOJI_SEARCH,
)
from ..models.config import PublishSettings, RunOptions
from ..models.result import PublishResult, PublishReport
from ..utils.file_utils import missing_paths
from .manifest_editor import ManifestRewriter, mutated_manifest, recover_manifest
from .registry import NpmRegistry

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


class PublishOrchestrator:
    """Publishes each configured package under its forked identity

    Packages are handled strictly one at a time. Each package's manifest
    is rewritten only inside ``mutated_manifest``, so it is restored
    before the next package starts, whatever the outcome.
    """

    def __init__(self,
                 project_root: Path,
                 settings: PublishSettings,
                 registry: NpmRegistry,
                 confirm: ConfirmCallback,
                 options: Optional[RunOptions] = None,
                 console: Optional[Console] = None):
        """Initialize orchestrator

        Args:
            project_root: Monorepo root
            settings: Publish settings
            registry: Registry client
            confirm: Prompt callback returning True to proceed
            options: Runtime switches (dry-run)
            console: Output console
        """
        self.project_root = Path(project_root)
        self.settings = settings
        self.registry = registry
        self.confirm = confirm
        self.options = options or RunOptions()
        self.console = console or Console()
        self.rewriter = ManifestRewriter(settings)

    @property
    def packages_root(self) -> Path:
        return self.project_root / self.settings.packages_dir

    def preflight(self) -> bool:
        """Verify npm is installed and authenticated

        Returns:
            True if publishing may start
        """
        if not self.registry.is_installed():
            self.console.print(f"[red]{EMOJI_ERROR} npm is not installed[/red]")
            return False

        username = self.registry.whoami()
        if not username:
            self.console.print(f"[red]{EMOJI_ERROR} Not logged in to npm, run 'npm login' first[/red]")
            return False

        self.console.print(f"[green]{EMOJI_SUCCESS} Logged in to npm as {username}[/green]")
        return True

    def validate_package(self, package_dir: Path) -> None:
        """Check required files and run ``npm pack --dry-run``

        Raises:
            ValidationError: If the package is not publishable
        """
        missing = missing_paths(package_dir, self.settings.required_files)
        if missing:
            raise ValidationError(f"Missing required files: {', '.join(missing)}")

        self.console.print("[cyan]Running pack dry run...[/cyan]")
        try:
            self.registry.pack_dry_run(package_dir)
        except RegistryError as e:
            detail = f": {e.output}" if e.output else ""
            raise ValidationError(f"Package validation failed: {e}{detail}") from e

        self.console.print(f"[green]{EMOJI_SUCCESS} Package validated[/green]")

    def _publish_mutated(self, package_dir: Path, result: PublishResult) -> None:
        """Validate, confirm and publish a package whose manifest is rewritten"""
        self.validate_package(package_dir)

        if self.options.dry_run:
            self.console.print(
                f"[yellow]{EMOJI_SEARCH} Dry run: {result.new_name} v{result.version}[/yellow]"
            )
            result.complete(PublishStatus.DRY_RUN)
            return

        prompt = PROMPT_CONFIRM_PUBLISH.format(name=result.new_name, version=result.version)
        if not self.confirm(prompt):
            raise UserCancelledError("Publish cancelled")

        self.console.print("[cyan]Publishing to npm...[/cyan]")
        try:
            self.registry.publish(package_dir, access=self.settings.access)
        except RegistryError as e:
            raise PublishError(f"npm publish failed: {e}") from e

        self.console.print(
            f"[green]{EMOJI_SUCCESS} {result.new_name} v{result.version} published[/green]"
        )
        result.complete(PublishStatus.PUBLISHED)

    def publish_package(self, package_name: str) -> PublishResult:
        """Publish a single package

        Never raises for per-package failures; they are recorded in the
        returned result.
        """
        package_dir = self.packages_root / package_name
        new_name = self.settings.renamed(package_name)
        result = PublishResult(package=package_name, new_name=new_name)

        self.console.print(f"\n[blue]{EMOJI_PACKAGE} Processing {package_name} -> {new_name}[/blue]")

        try:
            if not package_dir.is_dir():
                raise PackageNotFoundError(package_dir)

            if recover_manifest(package_dir / MANIFEST_FILE, new_name):
                self.console.print(
                    f"[yellow]{EMOJI_WARNING}  Restored {MANIFEST_FILE} left rewritten by an earlier run[/yellow]"
                )

            self.console.print("[cyan]Checking name availability...[/cyan]")
            if self.registry.package_exists(new_name):
                self.console.print(
                    f"[yellow]{EMOJI_WARNING}  {new_name} already exists, skipping[/yellow]"
                )
                return result.complete(PublishStatus.SKIPPED)

            self.console.print(f"[cyan]Rewriting {MANIFEST_FILE}...[/cyan]")
            rewrite = partial(self.rewriter.apply, new_name=new_name)
            with mutated_manifest(package_dir, rewrite) as update:
                result.version = update.new_version
                for warning in update.warnings:
                    self.console.print(f"[yellow]{EMOJI_WARNING}  {warning}[/yellow]")
                self._publish_mutated(package_dir, result)

        except UserCancelledError as e:
            self.console.print(f"[red]{EMOJI_ERROR} {e}[/red]")
            result.complete(PublishStatus.CANCELLED, str(e))

        except ForkPublishError as e:
            self.console.print(f"[red]{EMOJI_ERROR} Failed to publish {package_name}: {e}[/red]")
            result.complete(PublishStatus.FAILED, str(e))

        except Exception as e:
            logger.debug("Unexpected error publishing %s", package_name, exc_info=True)
            self.console.print(f"[red]{EMOJI_ERROR} Failed to publish {package_name}: {e}[/red]")
            result.complete(PublishStatus.FAILED, str(e))

        return result

    def run(self) -> PublishReport:
        """Publish every configured package in order"""
        report = PublishReport()
        for package_name in self.settings.packages:
            result = self.publish_package(package_name)
            logger.info("%s: %s", package_name, result.status.value)
            report.add(result)
        return report
