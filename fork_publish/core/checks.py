"""Built-in pre-publish checks

Each check prints its own verdict and returns a boolean. Read errors
propagate as exceptions and are counted as failures by the runner.
"""

from functools import partial
from pathlib import Path
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape

from ..api.exceptions import GitError
from ..constants import EMOJI_SUCCESS, EMOJI_ERROR, EMOJI_WARNING
from ..models.check import Check
from ..models.config import Config, MarkerRule
from ..utils.file_utils import read_text, missing_markers, missing_paths
from ..utils.git_utils import get_changed_files, is_git_repository
from .registry import NpmRegistry

# Cap on listed changed files
MAX_LISTED_CHANGES = 10


def check_markers(console: Console, root: Path, rule: MarkerRule) -> bool:
    """Every marker of the rule occurs in the rule's file"""
    path = root / rule.path
    if not path.exists():
        console.print(f"[red]{EMOJI_ERROR} {rule.path} does not exist[/red]")
        return False

    missing = missing_markers(read_text(path), rule.markers)
    if not missing:
        console.print(f"[green]{EMOJI_SUCCESS} {rule.name}: all markers present[/green]")
        return True

    console.print(f"[red]{EMOJI_ERROR} {rule.name}: {rule.path} is incomplete[/red]")
    for marker in missing:
        console.print(f"[red]   - missing: {escape(marker)}[/red]")
    return False


def check_required_paths(console: Console, root: Path, paths: Sequence[str]) -> bool:
    """Every required path exists"""
    missing = missing_paths(root, paths)
    if not missing:
        console.print(f"[green]{EMOJI_SUCCESS} All required files exist[/green]")
        return True

    console.print(f"[red]{EMOJI_ERROR} Missing required files:[/red]")
    for path in missing:
        console.print(f"[red]   - {path}[/red]")
    return False


def check_build_outputs(console: Console, root: Path, outputs: Sequence[str]) -> bool:
    """Build output directories exist"""
    missing = missing_paths(root, outputs)
    if not missing:
        console.print(f"[green]{EMOJI_SUCCESS} Project is built[/green]")
        return True

    console.print(f"[yellow]{EMOJI_WARNING}  Project is not built, run 'npm run build' first[/yellow]")
    for path in missing:
        console.print(f"[yellow]   - missing: {path}[/yellow]")
    return False


def check_git_clean(console: Console, root: Path) -> bool:
    """Working tree has no uncommitted changes"""
    if not is_git_repository(root):
        console.print(f"[red]{EMOJI_ERROR} Not a Git repository: {root}[/red]")
        return False

    try:
        changed = get_changed_files(root)
    except GitError as e:
        console.print(f"[red]{EMOJI_ERROR} Cannot check Git status: {e}[/red]")
        return False

    if not changed:
        console.print(f"[green]{EMOJI_SUCCESS} Git working tree is clean[/green]")
        return True

    console.print(f"[yellow]{EMOJI_WARNING}  Git working tree has {len(changed)} uncommitted change(s)[/yellow]")
    for path in changed[:MAX_LISTED_CHANGES]:
        console.print(f"[yellow]   - {path}[/yellow]")
    console.print("[yellow]   Commit all changes before publishing[/yellow]")
    return False


def check_registry_login(console: Console, registry: NpmRegistry) -> bool:
    """The registry reports an authenticated user"""
    username = registry.whoami()
    if username:
        console.print(f"[green]{EMOJI_SUCCESS} Logged in to npm as {username}[/green]")
        return True

    console.print(f"[red]{EMOJI_ERROR} Not logged in to npm, run 'npm login'[/red]")
    return False


def check_names_available(console: Console, registry: NpmRegistry, names: Sequence[str]) -> bool:
    """None of the reserved package names exist in the registry"""
    all_available = True
    for name in names:
        if registry.package_exists(name):
            console.print(f"[yellow]{EMOJI_WARNING}  Package {name} already exists[/yellow]")
            all_available = False
        else:
            console.print(f"[green]{EMOJI_SUCCESS} Package {name} is available[/green]")
    return all_available


def check_license(console: Console, root: Path, license_file: str, markers: Sequence[str]) -> bool:
    """License file exists and names the expected license"""
    path = root / license_file
    if not path.exists():
        console.print(f"[red]{EMOJI_ERROR} {license_file} does not exist[/red]")
        return False

    content = read_text(path)
    if any(marker in content for marker in markers):
        console.print(f"[green]{EMOJI_SUCCESS} License found in {license_file}[/green]")
        return True

    console.print(f"[red]{EMOJI_ERROR} {license_file} does not contain any of: {', '.join(markers)}[/red]")
    return False


def build_checklist(root: Path, config: Config, registry: NpmRegistry,
                    console: Console) -> List[Check]:
    """Assemble the default checks in display order"""
    settings = config.checklist
    checks = [
        Check(rule.name, partial(check_markers, console, root, rule))
        for rule in settings.marker_rules
    ]
    checks.extend([
        Check("Required files", partial(check_required_paths, console, root, settings.required_paths)),
        Check("Build output", partial(check_build_outputs, console, root, settings.build_outputs)),
        Check("Git working tree", partial(check_git_clean, console, root)),
        Check("npm login", partial(check_registry_login, console, registry)),
        Check("Package name availability",
              partial(check_names_available, console, registry, config.publish.reserved_names)),
        Check("License", partial(check_license, console, root,
                                 settings.license_file, settings.license_markers)),
    ])
    return checks
