"""Text formatting for the dashboard and integrity report."""

import click

from .core.dashboard import AreaSummary, Dashboard
from .core.integrity import Issue, errors, warnings
from .core.models import Task
from .core.priority import PriorityColor

COLOR_STYLES = {
    PriorityColor.GOLD: {"fg": "yellow", "bold": True},
    PriorityColor.GREEN: {"fg": "green"},
    PriorityColor.YELLOW: {"fg": "yellow"},
    PriorityColor.RED: {"fg": "red"},
}


def _due_suffix(task: Task, dashboard: Dashboard) -> str:
    if not task.due:
        return ""
    overdue = " OVERDUE" if task.due < dashboard.as_of else ""
    return f" [due: {task.due.isoformat()}]{overdue}"


def format_area(area: AreaSummary, dashboard: Dashboard, use_color: bool = True) -> list[str]:
    """Header line plus task lines for one focus area."""
    marker = " ★" if area.is_weekly_focus else ""
    header = f"#{area.position} {area.name}{marker}"
    if use_color:
        header = click.style(header, **COLOR_STYLES[area.color])
    lines = [f"{header} ({area.active_count} active)"]

    # In-progress first, then blocked, then a preview of pending
    for task in area.in_progress:
        lines.append(f"  ▶ {task.name}{_due_suffix(task, dashboard)}")
    for task in area.blocked:
        lines.append(f"  ⊘ {task.name} (blocked)")
    for task in area.pending:
        lines.append(f"  ○ {task.name}{_due_suffix(task, dashboard)}")
    if area.hidden_pending:
        lines.append(f"  ... and {area.hidden_pending} more pending")
    return lines


def format_dashboard(dashboard: Dashboard, use_color: bool = True) -> str:
    """Full `show` output."""
    lines = ["", "=== PTZ Focus Areas ===", ""]

    if dashboard.weekly_focus:
        wf = dashboard.weekly_focus
        lines.append(f"Weekly Focus: {wf.area} (week of {wf.week_of.isoformat()})")
        lines.append("")

    if not dashboard.areas:
        lines.append("No focus areas yet. Add one with: ptz add-focus <name>")
        return "\n".join(lines)

    for area in dashboard.areas:
        lines.extend(format_area(area, dashboard, use_color))
        lines.append("")

    lines.append(
        f"Summary: {dashboard.in_progress}/{dashboard.max_in_progress} in progress, "
        f"{dashboard.pending} pending, {dashboard.done} done"
    )

    if dashboard.issues:
        lines.append("")
        lines.append("Issues:")
        lines.extend(f"  {issue.prefix} {issue.message}" for issue in dashboard.issues)

    if dashboard.upcoming_time_off:
        lines.append("")
        lines.append("Upcoming time off:")
        for t in dashboard.upcoming_time_off:
            lines.append(f"  {t.start.isoformat()} to {t.end.isoformat()}: {t.description}")

    return "\n".join(lines)


def format_check(issues: list[Issue]) -> str:
    """Full `check` output: errors first, then warnings, then a count."""
    lines = ["", "=== Integrity Check ===", ""]

    if not issues:
        lines.append("All checks passed!")
        return "\n".join(lines)

    found_errors = errors(issues)
    found_warnings = warnings(issues)
    lines.extend(f"{issue.prefix} {issue.message}" for issue in found_errors + found_warnings)
    lines.append("")
    lines.append(f"Found {len(found_errors)} error(s), {len(found_warnings)} warning(s)")
    return "\n".join(lines)
