"""Identifier resolution for focus areas and tasks."""

from typing import Iterable, TypeVar

from .models import Dataset, FocusArea, Task

T = TypeVar("T", FocusArea, Task)


def _resolve(candidates: Iterable[T], identifier: str) -> T | None:
    candidates = list(candidates)
    for candidate in candidates:
        if candidate.slug == identifier:
            return candidate
    lowered = identifier.lower()
    for candidate in candidates:
        if candidate.name.lower() == lowered:
            return candidate
    return None


def resolve_area(dataset: Dataset, identifier: str) -> FocusArea | None:
    """
    Find a focus area by slug, else by case-insensitive name.

    Slug matches win over name matches anywhere in the sequence. Among
    name matches the highest-ranked area wins.
    """
    return _resolve(dataset.focus_areas, identifier)


def resolve_task(area: FocusArea, identifier: str) -> Task | None:
    """Find a task in an area by slug, else by case-insensitive name (first match)."""
    return _resolve(area.tasks, identifier)
