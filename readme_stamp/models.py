"""
Data models for the README stamper.

This module contains the shared data structures used across all modules.
"""

import datetime
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class WeekStamp:
    """The label for one calendar week, computed once per run."""
    sunday_date: datetime.date
    iso_year: int
    iso_week: int
    label_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sundayDate": self.sunday_date.isoformat(),
            "isoYear": self.iso_year,
            "isoWeek": self.iso_week,
        }


@dataclass(frozen=True)
class RepositoryRef:
    """Identifies one repository by owner login and name."""
    owner_login: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner_login}/{self.name}"


@dataclass
class ReadmeDocument:
    """A README as fetched from GitHub; `sha` must be echoed back on write."""
    path: str
    sha: str
    text: str


class UpdateStatus(enum.Enum):
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "error"


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of stamping a single repository."""
    status: UpdateStatus
    reason: Optional[str] = None

    @classmethod
    def updated(cls, reason: Optional[str] = None) -> "UpdateOutcome":
        return cls(UpdateStatus.UPDATED, reason)

    @classmethod
    def skipped(cls, reason: Optional[str] = None) -> "UpdateOutcome":
        return cls(UpdateStatus.SKIPPED, reason)

    @classmethod
    def failed(cls, reason: str) -> "UpdateOutcome":
        return cls(UpdateStatus.FAILED, reason)


@dataclass
class RunSummary:
    """
    Everything a finished run produced.

    `results` keeps the order in which repositories were listed.
    """
    week_stamp: WeekStamp
    results: List[Tuple[RepositoryRef, UpdateOutcome]] = field(default_factory=list)

    def add(self, repo: RepositoryRef, outcome: UpdateOutcome) -> None:
        self.results.append((repo, outcome))

    def counts(self) -> Dict[str, int]:
        """Tally of outcomes keyed by status string."""
        tally = {status.value: 0 for status in UpdateStatus}
        for _, outcome in self.results:
            tally[outcome.status.value] += 1
        return tally

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the on-demand trigger."""
        summary = []
        for repo, outcome in self.results:
            entry: Dict[str, Any] = {"repo": repo.full_name, "status": outcome.status.value}
            if outcome.status is UpdateStatus.FAILED:
                entry["error"] = outcome.reason
            elif outcome.reason:
                entry["reason"] = outcome.reason
            summary.append(entry)
        return {"weekStamp": self.week_stamp.to_dict(), "summary": summary}
