"""
Mutation operations on the focus-area dataset.

Every operation works on a copy of the given dataset and returns either the
new dataset or a Rejection. The input dataset is never modified, so a
rejected call leaves the caller's state untouched.

Pure functions - no I/O.
"""

import copy
from dataclasses import dataclass
from datetime import date

from .constraints import Rejection, RejectionReason, validate_ranking, validate_status_change
from .models import Dataset, FocusArea, Status, Task, WeeklyFocus, generate_slug, parse_date, week_start
from .resolve import resolve_area, resolve_task


@dataclass
class TaskUpdate:
    """
    Requested changes to a task. None means "leave as is".

    An empty string for `due` or `notes` clears the field; an empty `name`
    is ignored.
    """

    status: Status | None = None
    name: str | None = None
    due: str | None = None
    notes: str | None = None


def _area_not_found(identifier: str) -> Rejection:
    return Rejection(RejectionReason.NOT_FOUND, f"Focus area not found: {identifier}")


def _task_not_found(identifier: str) -> Rejection:
    return Rejection(RejectionReason.NOT_FOUND, f"Task not found: {identifier}")


def _clear_stale_weekly_focus(dataset: Dataset) -> None:
    """Drop the weekly focus if its area is no longer at position 1."""
    weekly = dataset.weekly_focus
    if weekly is None:
        return
    if len(dataset.focus_areas) == 0 or dataset.focus_areas[0].name != weekly.area:
        dataset.weekly_focus = None


def add_focus_area(dataset: Dataset, name: str) -> Dataset | Rejection:
    """Append a new, empty focus area at the lowest priority."""
    lowered = name.lower()
    if any(area.name.lower() == lowered for area in dataset.focus_areas):
        return Rejection(RejectionReason.DUPLICATE_NAME, f"Focus area already exists: {name}")

    result = copy.deepcopy(dataset)
    result.focus_areas.append(FocusArea(slug=generate_slug(name, result.area_slugs()), name=name))
    return result


def remove_focus_area(dataset: Dataset, identifier: str) -> Dataset | Rejection:
    """Remove an area and all its tasks; clears the weekly focus if it named the area."""
    result = copy.deepcopy(dataset)
    area = resolve_area(result, identifier)
    if area is None:
        return _area_not_found(identifier)

    result.focus_areas.remove(area)
    if result.weekly_focus and result.weekly_focus.area == area.name:
        result.weekly_focus = None
    return result


def reorder_focus_area(dataset: Dataset, identifier: str, new_position: int) -> Dataset | Rejection:
    """
    Move an area to new_position (1-based); the others keep their relative order.

    A weekly focus that no longer sits at position 1 afterwards is cleared.
    Refused if the new order leaves in-progress work in the red zone.
    """
    result = copy.deepcopy(dataset)
    area = resolve_area(result, identifier)
    if area is None:
        return _area_not_found(identifier)

    count = len(result.focus_areas)
    if not 1 <= new_position <= count:
        return Rejection(
            RejectionReason.INVALID_POSITION,
            f"Invalid position: {new_position} (must be 1-{count})",
        )

    result.focus_areas.move(area, new_position)
    rejection = validate_ranking(result)
    if rejection:
        return rejection
    _clear_stale_weekly_focus(result)
    return result


def set_weekly_focus(
    dataset: Dataset,
    identifier: str,
    as_of: date | None = None,
) -> Dataset | Rejection:
    """Move an area to position 1 and mark it as this week's focus."""
    result = copy.deepcopy(dataset)
    area = resolve_area(result, identifier)
    if area is None:
        return _area_not_found(identifier)

    result.focus_areas.move(area, 1)
    rejection = validate_ranking(result)
    if rejection:
        return rejection
    result.weekly_focus = WeeklyFocus(area=area.name, week_of=week_start(as_of))
    return result


def add_task(
    dataset: Dataset,
    area_identifier: str,
    name: str,
    status: Status = Status.PENDING,
    due: date | None = None,
    notes: str | None = None,
    as_of: date | None = None,
) -> Dataset | Rejection:
    """Append a task to an area. An in-progress task must pass the WIP and red-zone rules."""
    as_of = as_of or date.today()
    result = copy.deepcopy(dataset)
    area = resolve_area(result, area_identifier)
    if area is None:
        return _area_not_found(area_identifier)

    rejection = validate_status_change(result, area, None, status)
    if rejection:
        return rejection

    area.tasks.append(
        Task(
            slug=generate_slug(name, {t.slug for t in area.tasks}),
            name=name,
            status=status,
            status_since=as_of,
            due=due,
            notes=notes or None,
        )
    )
    return result


def update_task(
    dataset: Dataset,
    area_identifier: str,
    task_identifier: str,
    updates: TaskUpdate,
    as_of: date | None = None,
) -> Dataset | Rejection:
    """
    Apply updates to a task, all or nothing.

    A status change is validated first; on rejection no field changes.
    An accepted status change refreshes status_since.
    """
    as_of = as_of or date.today()
    result = copy.deepcopy(dataset)
    area = resolve_area(result, area_identifier)
    if area is None:
        return _area_not_found(area_identifier)
    task = resolve_task(area, task_identifier)
    if task is None:
        return _task_not_found(task_identifier)

    status, status_since = task.status, task.status_since
    if updates.status is not None and updates.status != task.status:
        rejection = validate_status_change(result, area, task, updates.status)
        if rejection:
            return rejection
        status, status_since = updates.status, as_of

    name = updates.name or task.name
    due = task.due
    if updates.due is not None:
        due = parse_date(updates.due) if updates.due else None
    notes = task.notes
    if updates.notes is not None:
        notes = updates.notes or None

    task.status = status
    task.status_since = status_since
    task.name = name
    task.due = due
    task.notes = notes
    return result


def remove_task(dataset: Dataset, area_identifier: str, task_identifier: str) -> Dataset | Rejection:
    """Delete a task from an area."""
    result = copy.deepcopy(dataset)
    area = resolve_area(result, area_identifier)
    if area is None:
        return _area_not_found(area_identifier)
    task = resolve_task(area, task_identifier)
    if task is None:
        return _task_not_found(task_identifier)

    area.tasks.remove(task)
    return result
