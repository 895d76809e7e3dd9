# fork_publish/cli/commands/check.py
"""Pre-publish checklist command"""

import sys

import click
from rich.panel import Panel

from ..utils.output import console, format_checklist_report, show_next_steps
from ...api.exceptions import ForkPublishError
from ...constants import EMOJI_SEARCH, EMOJI_WARNING
from ...core import ChecklistRunner, NpmRegistry, build_checklist


@click.command()
@click.pass_context
def check(ctx):
    """Run the pre-publish checklist

    Verifies the fork's source markers, required files, build output,
    Git working tree, npm login, package name availability and license.
    Every check runs even when an earlier one fails.

    Exits with status 0 only when every check passes.
    """
    try:
        config = ctx.obj.config
        settings = config.publish

        console.print(f"[bold]{EMOJI_SEARCH} Pre-publish checks[/bold]")
        console.print(f"[dim]Project root: {ctx.obj.project_root}[/dim]")

        registry = NpmRegistry(settings.npm_executable, settings.registry_url)
        checks = build_checklist(ctx.obj.project_root, config, registry, console)
        report = ChecklistRunner(checks, console).run()

    except ForkPublishError as e:
        console.print(Panel(
            f"[red]{str(e)}[/red]",
            title="[bold red]Check Error[/bold red]",
            border_style="red"
        ))
        sys.exit(1)

    format_checklist_report(report)

    if report.all_passed:
        show_next_steps()
    else:
        console.print(f"\n[yellow]{EMOJI_WARNING}  Fix the failed checks before publishing[/yellow]")

    sys.exit(report.exit_code)
