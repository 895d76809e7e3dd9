# fork_publish/cli/main.py
"""Main CLI entry point for fork-publish"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL, ENV_PROJECT_ROOT
from ..models.config import Config, RunOptions
from ..services.config_service import ConfigService
from .commands import check, publish
from .utils.output import console, print_error


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        quiet: Only show errors (ERROR level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, project_root: Optional[Path] = None):
        self._project_root = project_root
        self._config: Optional[Config] = None
        self.options = RunOptions.from_env()
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def project_root(self) -> Path:
        """Get project root ($PROJECT_ROOT or the working directory)"""
        if self._project_root is None:
            self._project_root = Path(os.environ.get(ENV_PROJECT_ROOT) or os.getcwd()).resolve()
        return self._project_root

    @property
    def config(self) -> Config:
        """Get project configuration (lazy loading)"""
        if self._config is None:
            self._config = ConfigService(self.project_root).load_config()
        return self._config


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all log output except errors')
@click.pass_context
def cli(ctx, verbose, debug, quiet):
    """fork-publish - check and publish a renamed npm fork

    Run 'check' before 'publish'. Behaviour is controlled through the
    DRY_RUN and FORCE environment variables and an optional
    .fork-publish.yaml in the project root.
    """
    setup_logging(verbose=verbose, debug=debug, quiet=quiet)

    ctx.obj = Context()
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


cli.add_command(check.check)
cli.add_command(publish.publish)


def _run(args: Optional[List[str]] = None) -> None:
    """Run the CLI, mapping interrupts to exit status 130 and any other
    escaped exception to exit status 1

    Commands exit through ``sys.exit``; their status passes through.
    """
    argv = sys.argv[1:] if args is None else args
    try:
        exit_code = cli.main(args=argv, prog_name=APP_NAME, standalone_mode=False)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except (click.exceptions.Abort, KeyboardInterrupt):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        print_error("Unexpected error", e)
        if '--debug' in argv or '-d' in argv:
            console.print_exception()
        sys.exit(1)

    sys.exit(exit_code if isinstance(exit_code, int) else 0)


def main():
    """Main entry point for the CLI application"""
    _run()


def check_main():
    """Entry point running only the pre-publish checklist"""
    _run(sys.argv[1:] + ['check'])


def publish_main():
    """Entry point running only the publish orchestrator"""
    _run(sys.argv[1:] + ['publish'])


if __name__ == "__main__":
    main()
