"""Publish result models"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..constants import PublishStatus

SUCCESS_STATUSES = (PublishStatus.PUBLISHED, PublishStatus.SKIPPED, PublishStatus.DRY_RUN)


@dataclass
class ManifestUpdate:
    """Describes one manifest rewrite"""

    original_name: str
    original_version: str
    new_name: str
    new_version: str
    warnings: List[str] = field(default_factory=list)


@dataclass
class PublishResult:
    """Result of publishing a single package"""

    package: str
    new_name: str
    status: PublishStatus = PublishStatus.PENDING
    version: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if the package counts as successfully handled"""
        return self.status in SUCCESS_STATUSES

    def complete(self, status: PublishStatus, error: Optional[str] = None) -> 'PublishResult':
        """Mark the package as finished"""
        self.status = status
        self.error = error
        return self


@dataclass
class PublishReport:
    """Results of one orchestrator run, in processing order"""

    results: List[PublishResult] = field(default_factory=list)

    def add(self, result: PublishResult) -> None:
        self.results.append(result)

    @property
    def successful(self) -> List[PublishResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[PublishResult]:
        return [r for r in self.results if not r.success]

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
