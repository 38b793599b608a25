"""Functional core - pure business logic with no I/O."""

from .models import Dataset, FocusArea, Status, Task, TimeOff, WeeklyFocus, week_start
from .ranking import RankedList
from .resolve import resolve_area, resolve_task
from .priority import RED_ZONE_START, PriorityColor, color, position
from .constraints import (
    MAX_IN_PROGRESS,
    Rejection,
    RejectionReason,
    validate_ranking,
    validate_status_change,
)
from .integrity import Issue, IssueLevel, check
from .operations import (
    TaskUpdate,
    add_focus_area,
    add_task,
    remove_focus_area,
    remove_task,
    reorder_focus_area,
    set_weekly_focus,
    update_task,
)
from .dashboard import AreaSummary, Dashboard, build_dashboard

__all__ = [
    # Models
    "Dataset",
    "FocusArea",
    "Status",
    "Task",
    "TimeOff",
    "WeeklyFocus",
    "week_start",
    "RankedList",
    # Resolution
    "resolve_area",
    "resolve_task",
    # Priority
    "RED_ZONE_START",
    "PriorityColor",
    "color",
    "position",
    # Constraints
    "MAX_IN_PROGRESS",
    "Rejection",
    "RejectionReason",
    "validate_ranking",
    "validate_status_change",
    # Integrity
    "Issue",
    "IssueLevel",
    "check",
    # Operations
    "TaskUpdate",
    "add_focus_area",
    "add_task",
    "remove_focus_area",
    "remove_task",
    "reorder_focus_area",
    "set_weekly_focus",
    "update_task",
    # Dashboard
    "AreaSummary",
    "Dashboard",
    "build_dashboard",
]
