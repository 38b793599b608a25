"""Position and traffic-light color of focus areas - no I/O dependencies."""

from enum import Enum

from .models import Dataset, FocusArea

GREEN_ZONE_END = 3
YELLOW_ZONE_END = 5
RED_ZONE_START = 6  # no in-progress tasks at this position or below


class PriorityColor(Enum):
    """Traffic-light priority of a focus area."""

    GOLD = "gold"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


def position(dataset: Dataset, area: FocusArea) -> int:
    """1-based position of area. Raises ValueError if it is not in the dataset."""
    return dataset.focus_areas.rank_of(area)


def color(position: int, is_weekly_focus: bool) -> PriorityColor:
    """
    Traffic-light color for a position.

    Gold for the weekly focus, otherwise green for 1-3, yellow for 4-5,
    red from 6 on. Pure and total.
    """
    if is_weekly_focus:
        return PriorityColor.GOLD
    if position <= GREEN_ZONE_END:
        return PriorityColor.GREEN
    if position <= YELLOW_ZONE_END:
        return PriorityColor.YELLOW
    return PriorityColor.RED


def is_weekly_focus(dataset: Dataset, area: FocusArea) -> bool:
    return dataset.weekly_focus is not None and dataset.weekly_focus.area == area.name


def in_red_zone(position: int) -> bool:
    return position >= RED_ZONE_START


def area_color(dataset: Dataset, area: FocusArea) -> PriorityColor:
    """Color of a member area, derived from its current position."""
    return color(position(dataset, area), is_weekly_focus(dataset, area))
