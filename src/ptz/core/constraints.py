"""WIP limit and red-zone rules for status changes - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

from .models import Dataset, FocusArea, Status, Task
from .priority import RED_ZONE_START, in_red_zone, position

MAX_IN_PROGRESS = 3


class RejectionReason(Enum):
    """Why a mutation was refused."""

    NOT_FOUND = "not_found"
    DUPLICATE_NAME = "duplicate_name"
    INVALID_POSITION = "invalid_position"
    WIP_LIMIT_EXCEEDED = "wip_limit_exceeded"
    RED_ZONE_VIOLATION = "red_zone_violation"


@dataclass(frozen=True)
class Rejection:
    """A refused mutation. Returned, not raised."""

    reason: RejectionReason
    message: str

    def __str__(self) -> str:
        return self.message


def count_in_progress(dataset: Dataset) -> int:
    """Number of in-progress tasks across the whole dataset."""
    return sum(1 for _, task in dataset.all_tasks() if task.status == Status.IN_PROGRESS)


def validate_status_change(
    dataset: Dataset,
    area: FocusArea,
    task: Task | None,
    new_status: Status,
) -> Rejection | None:
    """
    Decide whether `task` in `area` may move to `new_status`.

    Only a change *into* in_progress is checked; `task=None` stands for a
    task about to be created. Returns None when the change is allowed.

    Pure function - no I/O, no mutation.
    """
    current = task.status if task is not None else None
    if new_status == current or new_status != Status.IN_PROGRESS:
        return None

    pos = position(dataset, area)
    if in_red_zone(pos):
        return Rejection(
            RejectionReason.RED_ZONE_VIOLATION,
            f"Cannot set in-progress in red zone (position {pos} >= {RED_ZONE_START}). "
            "Move the focus area up first.",
        )

    if count_in_progress(dataset) >= MAX_IN_PROGRESS:
        return Rejection(
            RejectionReason.WIP_LIMIT_EXCEEDED,
            f"WIP limit reached ({MAX_IN_PROGRESS}). Complete or pause a task first.",
        )

    return None


def validate_ranking(dataset: Dataset) -> Rejection | None:
    """
    Refuse a ranking that leaves an in-progress task in the red zone.

    Called on the reordered copy before it is committed. Returns None when
    no area at or below RED_ZONE_START has in-progress work.
    """
    for pos, area in enumerate(dataset.focus_areas, start=1):
        if not in_red_zone(pos):
            continue
        busy = area.tasks_with_status(Status.IN_PROGRESS)
        if busy:
            return Rejection(
                RejectionReason.RED_ZONE_VIOLATION,
                f'Cannot put {area.name} at position {pos} (>= {RED_ZONE_START}) while '
                f'"{busy[0].name}" is in progress. Complete or pause it first.',
            )
    return None
