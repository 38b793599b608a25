"""Pure dashboard assembly logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .constraints import MAX_IN_PROGRESS
from .integrity import STALE_DAYS, Issue, check
from .models import Dataset, FocusArea, Status, Task, TimeOff, WeeklyFocus
from .priority import PriorityColor, color, is_weekly_focus


@dataclass
class AreaSummary:
    """One focus area as shown on the dashboard."""

    position: int
    name: str
    slug: str
    color: PriorityColor
    is_weekly_focus: bool
    active_count: int
    in_progress: list[Task] = field(default_factory=list)
    blocked: list[Task] = field(default_factory=list)
    pending: list[Task] = field(default_factory=list)
    hidden_pending: int = 0


@dataclass
class Dashboard:
    """Assembled dashboard data ready for formatting."""

    as_of: date
    weekly_focus: WeeklyFocus | None
    areas: list[AreaSummary]
    in_progress: int
    pending: int
    done: int
    issues: list[Issue]
    upcoming_time_off: list[TimeOff]
    max_in_progress: int = MAX_IN_PROGRESS


def summarize_area(
    dataset: Dataset,
    area: FocusArea,
    position: int,
    pending_preview: int = 3,
) -> AreaSummary:
    """Summarize a single area at a known position."""
    weekly = is_weekly_focus(dataset, area)
    pending = area.tasks_with_status(Status.PENDING)
    return AreaSummary(
        position=position,
        name=area.name,
        slug=area.slug,
        color=color(position, weekly),
        is_weekly_focus=weekly,
        active_count=len(area.active_tasks),
        in_progress=area.tasks_with_status(Status.IN_PROGRESS),
        blocked=area.tasks_with_status(Status.BLOCKED),
        pending=pending[:pending_preview],
        hidden_pending=max(len(pending) - pending_preview, 0),
    )


def build_dashboard(
    dataset: Dataset,
    as_of: date | None = None,
    pending_preview: int = 3,
    stale_days: int = STALE_DAYS,
) -> Dashboard:
    """
    Assemble dashboard data from a dataset.

    Pure function - no I/O. Handles positions, colors, status counts,
    integrity issues and upcoming time off.
    """
    as_of = as_of or date.today()
    tasks = [task for _, task in dataset.all_tasks()]

    return Dashboard(
        as_of=as_of,
        weekly_focus=dataset.weekly_focus,
        areas=[
            summarize_area(dataset, area, pos, pending_preview)
            for pos, area in enumerate(dataset.focus_areas, start=1)
        ],
        in_progress=sum(1 for t in tasks if t.status == Status.IN_PROGRESS),
        pending=sum(1 for t in tasks if t.status == Status.PENDING),
        done=sum(1 for t in tasks if t.status == Status.DONE),
        issues=check(dataset, as_of, stale_days),
        upcoming_time_off=[t for t in dataset.time_off if t.is_upcoming(as_of)],
    )


def dashboard_to_dict(dashboard: Dashboard) -> dict:
    """Plain, JSON-ready representation of a dashboard."""
    return {
        "as_of": dashboard.as_of.isoformat(),
        "weekly_focus": dashboard.weekly_focus.to_dict() if dashboard.weekly_focus else None,
        "focus_areas": [
            {
                "position": a.position,
                "slug": a.slug,
                "name": a.name,
                "color": a.color.value,
                "weekly_focus": a.is_weekly_focus,
                "active": a.active_count,
                "in_progress": [t.to_dict() for t in a.in_progress],
                "blocked": [t.to_dict() for t in a.blocked],
                "pending": [t.to_dict() for t in a.pending],
                "hidden_pending": a.hidden_pending,
            }
            for a in dashboard.areas
        ],
        "summary": {
            "in_progress": dashboard.in_progress,
            "max_in_progress": dashboard.max_in_progress,
            "pending": dashboard.pending,
            "done": dashboard.done,
        },
        "issues": [{"level": i.level.value, "message": i.message} for i in dashboard.issues],
        "time_off": [t.to_dict() for t in dashboard.upcoming_time_off],
    }
