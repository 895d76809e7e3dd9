"""Checklist runner"""

import logging
from typing import List, Optional, Sequence

from rich.console import Console

from ..constants import EMOJI_CLIPBOARD, EMOJI_ERROR
from ..models.check import Check, CheckResult, ChecklistReport

logger = logging.getLogger(__name__)


class ChecklistRunner:
    """Runs an ordered sequence of independent checks

    Every check runs regardless of earlier outcomes. A check that raises
    is recorded as failed.
    """

    def __init__(self, checks: Sequence[Check], console: Optional[Console] = None):
        self.checks: List[Check] = list(checks)
        self.console = console or Console()

    def run_check(self, check: Check) -> CheckResult:
        """Run a single check, converting exceptions into failures"""
        self.console.print(f"\n[blue]{EMOJI_CLIPBOARD} Check: {check.name}[/blue]")
        try:
            passed = bool(check.predicate())
        except Exception as e:
            logger.debug("Check '%s' raised", check.name, exc_info=True)
            self.console.print(f"[red]{EMOJI_ERROR} Check raised an error: {e}[/red]")
            return CheckResult(name=check.name, passed=False, error=str(e))

        return CheckResult(name=check.name, passed=passed)

    def run(self) -> ChecklistReport:
        """Run all checks in order"""
        report = ChecklistReport()
        for check in self.checks:
            result = self.run_check(check)
            logger.info("Check '%s': %s", check.name, "passed" if result.passed else "failed")
            report.add(result)
        return report
