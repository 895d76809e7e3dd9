"""Output formatting utilities"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import (
    EMOJI_SUCCESS,
    EMOJI_ERROR,
    EMOJI_CHART,
    EMOJI_PARTY,
    EMOJI_MEMO,
    PublishStatus,
)
from ...models import ChecklistReport, PublishReport, PublishSettings

console = Console()

STATUS_STYLES = {
    PublishStatus.PUBLISHED: "[green]published[/green]",
    PublishStatus.SKIPPED: "[yellow]skipped (already published)[/yellow]",
    PublishStatus.DRY_RUN: "[cyan]dry run[/cyan]",
    PublishStatus.CANCELLED: "[red]cancelled[/red]",
    PublishStatus.FAILED: "[red]failed[/red]",
    PublishStatus.PENDING: "[dim]pending[/dim]",
}


def format_checklist_report(report: ChecklistReport, out: Optional[Console] = None) -> None:
    """Format and display checklist results"""
    out = out or console

    table = Table(title=f"{EMOJI_CHART} Check Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for result in report.results:
        status = f"[green]{EMOJI_SUCCESS} PASS[/green]" if result.passed else f"[red]{EMOJI_ERROR} FAIL[/red]"
        table.add_row(result.name, status, result.error or "")

    out.print()
    out.print(table)
    out.print(f"[green]{EMOJI_SUCCESS} Passed: {report.passed}/{report.total}[/green]")
    failed_style = "red" if report.failed else "green"
    out.print(f"[{failed_style}]{EMOJI_ERROR} Failed: {report.failed}/{report.total}[/{failed_style}]")


def show_next_steps(out: Optional[Console] = None) -> None:
    """Show what to do once every check passes"""
    out = out or console
    steps = [
        "1. Build: npm run build",
        "2. Test: npm test",
        "3. Publish: fork-publish publish",
    ]
    out.print(f"\n[green]{EMOJI_PARTY} All checks passed, ready to publish![/green]")
    out.print(Panel("\n".join(steps), title=f"{EMOJI_MEMO} Next steps", border_style="yellow"))


def format_publish_report(report: PublishReport, out: Optional[Console] = None) -> None:
    """Format and display publish results"""
    out = out or console

    table = Table(title=f"{EMOJI_CHART} Publish Results", box=box.ROUNDED)
    table.add_column("Package", style="cyan")
    table.add_column("Published as")
    table.add_column("Version")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for result in report.results:
        table.add_row(
            result.package,
            result.new_name,
            result.version or "-",
            STATUS_STYLES[result.status],
            result.error or ""
        )

    out.print()
    out.print(table)

    if report.successful:
        out.print(f"[green]{EMOJI_SUCCESS} Successful packages:[/green]")
        for result in report.successful:
            out.print(f"[green]   - {result.new_name}[/green]")

    if report.failed:
        out.print(f"[red]{EMOJI_ERROR} Failed packages:[/red]")
        for result in report.failed:
            out.print(f"[red]   - {result.package}[/red]")


def post_publish_instructions(settings: PublishSettings) -> List[str]:
    """Build the manual follow-up steps after a real publish"""
    tag = settings.release_tag
    main_package = settings.reserved_names[-1] if settings.packages else ""
    return [
        f'1. Create a Git tag: git tag -a {tag} -m "Release {tag}"',
        f"2. Push the tag: git push origin {tag}",
        "3. Create a GitHub release",
        f"4. Test the install: npm install {main_package}",
        "5. Update the documentation and README",
    ]


def show_post_publish_instructions(settings: PublishSettings, out: Optional[Console] = None) -> None:
    """Display post-publish instructions"""
    out = out or console
    out.print()
    out.print(Panel(
        "\n".join(post_publish_instructions(settings)),
        title=f"[bold cyan]{EMOJI_MEMO} Post-Publish Instructions[/bold cyan]",
        border_style="cyan"
    ))


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")
