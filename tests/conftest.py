"""Shared fixtures for PTZ tests."""

from datetime import date

import pytest

from ptz.core.models import Dataset, FocusArea, Status, Task
from ptz.core.ranking import RankedList


@pytest.fixture
def today():
    return date(2025, 6, 1)


@pytest.fixture
def make_dataset(today):
    """
    Build a dataset from {area name: [(task name, status), ...]}.

    Slugs are derived from names so tests can address entities by either.
    """

    def _make(areas: dict[str, list[tuple[str, Status]]] | None = None) -> Dataset:
        focus_areas = []
        for area_name, tasks in (areas or {}).items():
            area_slug = area_name.lower().replace(" ", "-")
            focus_areas.append(
                FocusArea(
                    slug=area_slug,
                    name=area_name,
                    tasks=[
                        Task(
                            slug=f"{area_slug}-{task_name.lower().replace(' ', '-')}",
                            name=task_name,
                            status=status,
                            status_since=today,
                        )
                        for task_name, status in tasks
                    ],
                )
            )
        return Dataset(focus_areas=RankedList(focus_areas))

    return _make


@pytest.fixture
def six_areas(make_dataset):
    return make_dataset({f"Area {i}": [] for i in range(1, 7)})
