"""Pure focus-area data model - no I/O dependencies."""

import re
import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from .ranking import RankedList


class Status(str, Enum):
    """Task status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    BLOCKED = "blocked"


def parse_date(value: str | date) -> date:
    """Accept an ISO date string or an already-parsed date (YAML loaders do that)."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _text(value, field_name: str) -> str:
    """Coerce a YAML scalar to a string. Numbers and dates load as non-strings."""
    if value is None or isinstance(value, (dict, list)):
        raise TypeError(f"{field_name} must be a string, got {value!r}")
    return str(value)


def week_start(as_of: date | None = None) -> date:
    """Monday on or before the given date (Sunday -> six days prior)."""
    as_of = as_of or date.today()
    return as_of - timedelta(days=as_of.weekday())


def generate_slug(name: str, taken: set[str] | None = None) -> str:
    """
    Build a stable identifier from a display name.

    Lowercased, non-alphanumeric runs collapsed to "-", cut to 13 chars,
    plus a random 7-char suffix. Regenerated until it is not in `taken`.
    """
    taken = taken or set()
    base = re.sub(r"[^a-z0-9]+", "-", name.lower())[:13]
    while True:
        slug = f"{base}-{uuid.uuid4().hex[:7]}"
        if slug not in taken:
            return slug


@dataclass
class Task:
    """A task owned by exactly one focus area."""

    slug: str
    name: str
    status: Status = Status.PENDING
    status_since: date = field(default_factory=date.today)
    due: date | None = None
    notes: str | None = None

    @property
    def is_done(self) -> bool:
        return self.status == Status.DONE

    def is_overdue(self, as_of: date | None = None) -> bool:
        """Due before as_of and not done."""
        as_of = as_of or date.today()
        return self.due is not None and self.due < as_of and not self.is_done

    def is_stale(self, as_of: date | None = None, stale_days: int = 14) -> bool:
        """Not done and status unchanged for more than stale_days."""
        as_of = as_of or date.today()
        return not self.is_done and self.status_since < as_of - timedelta(days=stale_days)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from a persisted document entry."""
        return cls(
            slug=_text(data["slug"], "slug"),
            name=_text(data["name"], "name"),
            status=Status(data.get("status", Status.PENDING.value)),
            status_since=parse_date(data["status_since"]) if data.get("status_since") else date.today(),
            due=parse_date(data["due"]) if data.get("due") else None,
            notes=_text(data["notes"], "notes") if data.get("notes") else None,
        )

    def to_dict(self) -> dict:
        data = {
            "slug": self.slug,
            "name": self.name,
            "status": self.status.value,
            "status_since": self.status_since.isoformat(),
        }
        if self.due:
            data["due"] = self.due.isoformat()
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass
class FocusArea:
    """A named category of tasks. Its rank in the dataset is its priority."""

    slug: str
    name: str
    tasks: list[Task] = field(default_factory=list)

    def tasks_with_status(self, status: Status) -> list[Task]:
        return [t for t in self.tasks if t.status == status]

    @property
    def active_tasks(self) -> list[Task]:
        return [t for t in self.tasks if not t.is_done]

    @classmethod
    def from_dict(cls, data: dict) -> "FocusArea":
        return cls(
            slug=_text(data["slug"], "slug"),
            name=_text(data["name"], "name"),
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
        )

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "name": self.name,
            "tasks": [t.to_dict() for t in self.tasks],
        }


@dataclass
class WeeklyFocus:
    """Reference (by name) to the focus area that leads this week."""

    area: str
    week_of: date

    @classmethod
    def from_dict(cls, data: dict) -> "WeeklyFocus":
        return cls(area=_text(data["area"], "area"), week_of=parse_date(data["week_of"]))

    def to_dict(self) -> dict:
        return {"area": self.area, "week_of": self.week_of.isoformat()}


@dataclass
class TimeOff:
    """Planned time away. Informational only."""

    start: date
    end: date
    description: str = ""

    def is_upcoming(self, as_of: date | None = None) -> bool:
        """Not yet over as of the given date."""
        as_of = as_of or date.today()
        return self.end >= as_of

    @classmethod
    def from_dict(cls, data: dict) -> "TimeOff":
        return cls(
            start=parse_date(data["start"]),
            end=parse_date(data["end"]),
            description=_text(data.get("description") or "", "description"),
        )

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "description": self.description,
        }


@dataclass
class Dataset:
    """Root aggregate: weekly focus, ranked focus areas, time off."""

    focus_areas: RankedList[FocusArea] = field(default_factory=RankedList)
    weekly_focus: WeeklyFocus | None = None
    time_off: list[TimeOff] = field(default_factory=list)

    def all_tasks(self) -> list[tuple[FocusArea, Task]]:
        """Every (area, task) pair in area-then-task order."""
        return [(area, task) for area in self.focus_areas for task in area.tasks]

    def area_slugs(self) -> set[str]:
        return {area.slug for area in self.focus_areas}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Dataset":
        """Create Dataset from a persisted document. None -> empty dataset."""
        data = data or {}
        weekly = data.get("weekly_focus")
        return cls(
            focus_areas=RankedList([FocusArea.from_dict(a) for a in data.get("focus_areas") or []]),
            weekly_focus=WeeklyFocus.from_dict(weekly) if weekly else None,
            time_off=[TimeOff.from_dict(t) for t in data.get("time_off") or []],
        )

    def to_dict(self) -> dict:
        data: dict = {}
        if self.weekly_focus:
            data["weekly_focus"] = self.weekly_focus.to_dict()
        data["focus_areas"] = [a.to_dict() for a in self.focus_areas]
        if self.time_off:
            data["time_off"] = [t.to_dict() for t in self.time_off]
        return data
