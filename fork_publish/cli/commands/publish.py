"""Publish command implementation"""

import sys

import click
from rich.panel import Panel

from ..utils.interactive import ConfirmPrompt
from ..utils.output import (
    console,
    format_publish_report,
    show_post_publish_instructions,
)
from ...api.exceptions import ForkPublishError
from ...constants import (
    ENV_DRY_RUN,
    ENV_FORCE,
    EMOJI_ROCKET,
    EMOJI_ERROR,
    EMOJI_PARTY,
    EMOJI_SEARCH,
    PROMPT_CONTINUE_PUBLISH,
)
from ...core import NpmRegistry, PublishOrchestrator


@click.command()
@click.pass_context
def publish(ctx):
    """Publish the forked packages to npm

    Each package's package.json is renamed and re-versioned for the
    duration of its publish and restored afterwards, whatever happens.
    Packages whose forked name already exists are skipped.

    Environment:

        DRY_RUN=true  validate only, never publish

        FORCE=true    auto-accept every confirmation
    """
    options = ctx.obj.options

    try:
        settings = ctx.obj.config.publish

        console.print(f"[bold]{EMOJI_ROCKET} Publishing forked packages to npm[/bold]")
        if options.dry_run:
            console.print(f"[yellow]{EMOJI_SEARCH} Dry run mode ({ENV_DRY_RUN}), nothing will be published[/yellow]")
        if options.force:
            console.print(f"[dim]{ENV_FORCE} is set, confirmations are auto-accepted[/dim]")

        confirm = ConfirmPrompt(assume_yes=options.force, console=console)
        orchestrator = PublishOrchestrator(
            project_root=ctx.obj.project_root,
            settings=settings,
            registry=NpmRegistry(settings.npm_executable, settings.registry_url),
            confirm=confirm,
            options=options,
            console=console
        )

        console.print("[cyan]Checking environment...[/cyan]")
        if not orchestrator.preflight():
            sys.exit(1)

        if not options.dry_run:
            console.print(Panel(
                "This publishes a modified fork of the upstream packages.\n"
                "Make sure you are allowed to publish this modified version.\n\n"
                "Packages: " + ", ".join(settings.reserved_names),
                title="[bold yellow]About to publish to npm[/bold yellow]",
                border_style="yellow"
            ))
            if not confirm(PROMPT_CONTINUE_PUBLISH):
                console.print(f"[red]{EMOJI_ERROR} Publishing cancelled[/red]")
                sys.exit(0)

        report = orchestrator.run()

    except ForkPublishError as e:
        console.print(Panel(
            f"[red]{str(e)}[/red]",
            title="[bold red]Publish Error[/bold red]",
            border_style="red"
        ))
        sys.exit(1)

    format_publish_report(report)

    if not options.dry_run and report.successful:
        show_post_publish_instructions(settings)

    console.print(f"\n[bold]{EMOJI_PARTY} Done![/bold]")
    sys.exit(report.exit_code)
