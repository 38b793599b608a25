"""Whole-dataset integrity scan - diagnostic only, no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .constraints import MAX_IN_PROGRESS, count_in_progress
from .models import Dataset, Status
from .priority import in_red_zone

STALE_DAYS = 14


class IssueLevel(Enum):
    ERROR = "error"
    WARN = "warn"


@dataclass(frozen=True)
class Issue:
    """A single integrity finding."""

    level: IssueLevel
    message: str

    @property
    def prefix(self) -> str:
        return "[ERROR]" if self.level == IssueLevel.ERROR else "[WARN]"


def check(
    dataset: Dataset,
    as_of: date | None = None,
    stale_days: int = STALE_DAYS,
) -> list[Issue]:
    """
    Scan the dataset for rule violations, overdue and stale tasks.

    Order: WIP overflow, red-zone violations, overdue, stale. The last
    three follow area-then-task order. Works on datasets that already
    break the rules; never mutates.

    Pure function - no I/O.
    """
    as_of = as_of or date.today()
    issues: list[Issue] = []

    in_progress = count_in_progress(dataset)
    if in_progress > MAX_IN_PROGRESS:
        issues.append(
            Issue(
                IssueLevel.ERROR,
                f"WIP limit exceeded: {in_progress} in-progress tasks (max {MAX_IN_PROGRESS})",
            )
        )

    for pos, area in enumerate(dataset.focus_areas, start=1):
        if not in_red_zone(pos):
            continue
        for task in area.tasks_with_status(Status.IN_PROGRESS):
            issues.append(
                Issue(
                    IssueLevel.ERROR,
                    f'In-progress task in red zone: "{task.name}" in {area.name} (position {pos})',
                )
            )

    for area, task in dataset.all_tasks():
        if task.is_overdue(as_of):
            issues.append(
                Issue(
                    IssueLevel.WARN,
                    f'Overdue: "{task.name}" in {area.name} (due: {task.due.isoformat()})',
                )
            )

    for area, task in dataset.all_tasks():
        if task.is_stale(as_of, stale_days):
            issues.append(
                Issue(
                    IssueLevel.WARN,
                    f'Stale: "{task.name}" in {area.name} '
                    f"({task.status.value} since {task.status_since.isoformat()})",
                )
            )

    return issues


def errors(issues: list[Issue]) -> list[Issue]:
    return [i for i in issues if i.level == IssueLevel.ERROR]


def warnings(issues: list[Issue]) -> list[Issue]:
    return [i for i in issues if i.level == IssueLevel.WARN]
