"""Checklist data models"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(frozen=True)
class Check:
    """A named boolean check

    The predicate takes no arguments and returns True when the check
    passes. Raising is treated the same as returning False.
    """

    name: str
    predicate: Callable[[], bool]


@dataclass
class CheckResult:
    """Outcome of a single check"""

    name: str
    passed: bool
    error: Optional[str] = None


@dataclass
class ChecklistReport:
    """Aggregated checklist outcome"""

    results: List[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        self.results.append(result)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.all_passed else 1
