"""Tests for mutation operations."""

from datetime import date

import pytest

from ptz.core.constraints import MAX_IN_PROGRESS, Rejection, RejectionReason
from ptz.core.models import Dataset, Status, WeeklyFocus
from ptz.core.operations import (
    TaskUpdate,
    add_focus_area,
    add_task,
    remove_focus_area,
    remove_task,
    reorder_focus_area,
    set_weekly_focus,
    update_task,
)
from ptz.core.priority import RED_ZONE_START, position
from ptz.core.resolve import resolve_area, resolve_task


def names(dataset: Dataset) -> list[str]:
    return [a.name for a in dataset.focus_areas]


def in_progress(dataset: Dataset) -> int:
    return sum(1 for _, t in dataset.all_tasks() if t.status == Status.IN_PROGRESS)


def five_areas(make_dataset) -> Dataset:
    return make_dataset({f"Area {i}": [] for i in range(1, 6)})


class TestAddFocusArea:
    def test_appends_at_lowest_priority(self, make_dataset):
        result = add_focus_area(make_dataset({"Work": []}), "Learning")
        assert names(result) == ["Work", "Learning"]
        assert result.focus_areas[1].tasks == []
        assert result.focus_areas[1].slug.startswith("learning-")

    def test_rejects_duplicate_name_case_insensitive(self, make_dataset):
        result = add_focus_area(make_dataset({"Work": []}), "WORK")
        assert isinstance(result, Rejection)
        assert result.reason == RejectionReason.DUPLICATE_NAME

    def test_does_not_modify_input(self, make_dataset):
        dataset = make_dataset({"Work": []})
        add_focus_area(dataset, "Home")
        assert names(dataset) == ["Work"]

    def test_empty_dataset(self):
        result = add_focus_area(Dataset(), "Work")
        assert names(result) == ["Work"]


class TestRemoveFocusArea:
    def test_cascades_to_tasks(self, make_dataset):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)], "Home": []})
        result = remove_focus_area(dataset, "work")
        assert names(result) == ["Home"]
        assert all(t.name != "Email" for _, t in result.all_tasks())

    def test_clears_weekly_focus_for_removed_area(self, make_dataset):
        dataset = make_dataset({"Work": [], "Home": []})
        dataset.weekly_focus = WeeklyFocus(area="Work", week_of=date(2025, 5, 26))
        result = remove_focus_area(dataset, "Work")
        assert result.weekly_focus is None

    def test_keeps_weekly_focus_for_other_area(self, make_dataset):
        dataset = make_dataset({"Work": [], "Home": []})
        dataset.weekly_focus = WeeklyFocus(area="Work", week_of=date(2025, 5, 26))
        result = remove_focus_area(dataset, "Home")
        assert result.weekly_focus.area == "Work"

    def test_not_found(self, make_dataset):
        result = remove_focus_area(make_dataset({"Work": []}), "Play")
        assert result.reason == RejectionReason.NOT_FOUND


class TestReorderFocusArea:
    def test_move_fifth_to_first(self, make_dataset):
        result = reorder_focus_area(five_areas(make_dataset), "Area 5", 1)
        assert names(result) == ["Area 5", "Area 1", "Area 2", "Area 3", "Area 4"]

    def test_move_down(self, make_dataset):
        result = reorder_focus_area(five_areas(make_dataset), "area-1", 3)
        assert names(result) == ["Area 2", "Area 3", "Area 1", "Area 4", "Area 5"]

    @pytest.mark.parametrize("new_position", [0, -1, 6, 100])
    def test_out_of_range_rejected_and_unchanged(self, make_dataset, new_position):
        dataset = five_areas(make_dataset)
        before = dataset.to_dict()
        result = reorder_focus_area(dataset, "Area 3", new_position)
        assert result.reason == RejectionReason.INVALID_POSITION
        assert result.message == f"Invalid position: {new_position} (must be 1-5)"
        assert dataset.to_dict() == before

    def test_not_found(self, make_dataset):
        result = reorder_focus_area(five_areas(make_dataset), "Nope", 1)
        assert result.reason == RejectionReason.NOT_FOUND

    def test_tasks_untouched(self, make_dataset):
        dataset = make_dataset({"A": [("a1", Status.IN_PROGRESS)], "B": [("b1", Status.PENDING)]})
        result = reorder_focus_area(dataset, "B", 1)
        assert result.focus_areas[1].to_dict() == dataset.focus_areas[0].to_dict()
        assert result.focus_areas[0].to_dict() == dataset.focus_areas[1].to_dict()

    def test_moving_weekly_focus_down_clears_it(self, make_dataset):
        dataset = make_dataset({"A": [], "B": []})
        dataset.weekly_focus = WeeklyFocus(area="A", week_of=date(2025, 5, 26))
        result = reorder_focus_area(dataset, "A", 2)
        assert result.weekly_focus is None

    def test_moving_other_area_below_keeps_weekly_focus(self, make_dataset):
        dataset = make_dataset({"A": [], "B": [], "C": []})
        dataset.weekly_focus = WeeklyFocus(area="A", week_of=date(2025, 5, 26))
        result = reorder_focus_area(dataset, "B", 3)
        assert result.weekly_focus.area == "A"

    def test_moving_busy_area_into_red_zone_rejected(self, six_areas, today):
        dataset = add_task(six_areas, "Area 1", "busy", status=Status.IN_PROGRESS, as_of=today)
        before = dataset.to_dict()

        result = reorder_focus_area(dataset, "Area 1", 6)

        assert result.reason == RejectionReason.RED_ZONE_VIOLATION
        assert "Area 1" in result.message
        assert '"busy"' in result.message
        assert dataset.to_dict() == before

    def test_pushing_busy_area_down_into_red_zone_rejected(self, six_areas, today):
        dataset = add_task(six_areas, "Area 5", "busy", status=Status.IN_PROGRESS, as_of=today)
        result = reorder_focus_area(dataset, "Area 6", 1)
        assert result.reason == RejectionReason.RED_ZONE_VIOLATION
        assert "Area 5 at position 6" in result.message

    def test_moving_idle_area_into_red_zone_allowed(self, six_areas, today):
        dataset = add_task(six_areas, "Area 1", "later", as_of=today)
        result = reorder_focus_area(dataset, "Area 1", 6)
        assert names(result)[-1] == "Area 1"


class TestSetWeeklyFocus:
    def test_moves_to_top_and_sets_week(self, make_dataset):
        dataset = five_areas(make_dataset)
        result = set_weekly_focus(dataset, "Area 4", as_of=date(2025, 6, 5))
        area = resolve_area(result, "Area 4")
        assert position(result, area) == 1
        assert names(result) == ["Area 4", "Area 1", "Area 2", "Area 3", "Area 5"]
        assert result.weekly_focus == WeeklyFocus(area="Area 4", week_of=date(2025, 6, 2))

    def test_sunday_uses_previous_monday(self, make_dataset):
        result = set_weekly_focus(five_areas(make_dataset), "Area 1", as_of=date(2025, 6, 8))
        assert result.weekly_focus.week_of == date(2025, 6, 2)

    def test_uses_stored_display_name(self, make_dataset):
        result = set_weekly_focus(five_areas(make_dataset), "area 2", as_of=date(2025, 6, 2))
        assert result.weekly_focus.area == "Area 2"

    def test_not_found(self, make_dataset):
        result = set_weekly_focus(five_areas(make_dataset), "Nope")
        assert result.reason == RejectionReason.NOT_FOUND

    def test_pushing_busy_area_into_red_zone_rejected(self, six_areas, today):
        dataset = add_task(six_areas, "Area 5", "busy", status=Status.IN_PROGRESS, as_of=today)
        before = dataset.to_dict()

        result = set_weekly_focus(dataset, "Area 6", as_of=today)

        assert result.reason == RejectionReason.RED_ZONE_VIOLATION
        assert dataset.to_dict() == before
        assert dataset.weekly_focus is None

    def test_lifting_red_zone_area_with_idle_neighbours(self, six_areas, today):
        dataset = add_task(six_areas, "Area 4", "busy", status=Status.IN_PROGRESS, as_of=today)
        result = set_weekly_focus(dataset, "Area 6", as_of=today)
        assert names(result)[:2] == ["Area 6", "Area 1"]
        assert position(result, resolve_area(result, "Area 4")) == 5


class TestAddTask:
    def test_appends_pending_task(self, make_dataset, today):
        result = add_task(make_dataset({"Work": []}), "Work", "Review PR", due=date(2025, 6, 10), as_of=today)
        task = result.focus_areas[0].tasks[0]
        assert task.name == "Review PR"
        assert task.status == Status.PENDING
        assert task.status_since == today
        assert task.due == date(2025, 6, 10)
        assert task.notes is None

    def test_wip_limit_rejection(self, make_dataset, today):
        dataset = make_dataset(
            {
                "Area 1": [("one", Status.IN_PROGRESS)],
                "Area 2": [("two", Status.IN_PROGRESS), ("three", Status.IN_PROGRESS)],
                "Area 3": [],
            }
        )
        result = add_task(dataset, "Area 3", "x", status=Status.IN_PROGRESS, as_of=today)
        assert result.reason == RejectionReason.WIP_LIMIT_EXCEEDED
        assert dataset.focus_areas[2].tasks == []

    def test_red_zone_rejection(self, six_areas, today):
        result = add_task(six_areas, "Area 6", "x", status=Status.IN_PROGRESS, as_of=today)
        assert result.reason == RejectionReason.RED_ZONE_VIOLATION

    def test_pending_task_allowed_in_red_zone(self, six_areas, today):
        result = add_task(six_areas, "Area 6", "x", as_of=today)
        assert len(result.focus_areas[5].tasks) == 1

    def test_area_not_found(self, make_dataset):
        result = add_task(make_dataset({"Work": []}), "Play", "x")
        assert result.reason == RejectionReason.NOT_FOUND

    def test_slugs_unique_within_area(self, make_dataset, today):
        dataset = make_dataset({"Work": []})
        for _ in range(3):
            dataset = add_task(dataset, "Work", "Same", as_of=today)
        slugs = [t.slug for t in dataset.focus_areas[0].tasks]
        assert len(set(slugs)) == 3


class TestUpdateTask:
    def test_status_change_refreshes_status_since(self, make_dataset, today):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)]})
        dataset.focus_areas[0].tasks[0].status_since = date(2025, 5, 1)
        result = update_task(dataset, "Work", "Email", TaskUpdate(status=Status.DONE), as_of=today)
        task = result.focus_areas[0].tasks[0]
        assert task.status == Status.DONE
        assert task.status_since == today

    def test_same_status_keeps_status_since(self, make_dataset, today):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)]})
        dataset.focus_areas[0].tasks[0].status_since = date(2025, 5, 1)
        result = update_task(dataset, "Work", "Email", TaskUpdate(status=Status.PENDING), as_of=today)
        assert result.focus_areas[0].tasks[0].status_since == date(2025, 5, 1)

    def test_rejection_applies_nothing(self, make_dataset, today):
        dataset = make_dataset(
            {"Work": [("a", Status.IN_PROGRESS), ("b", Status.IN_PROGRESS), ("c", Status.IN_PROGRESS), ("d", Status.PENDING)]}
        )
        before = dataset.to_dict()
        updates = TaskUpdate(status=Status.IN_PROGRESS, name="Renamed", notes="n", due="2025-07-01")
        result = update_task(dataset, "Work", "d", updates, as_of=today)
        assert result.reason == RejectionReason.WIP_LIMIT_EXCEEDED
        assert dataset.to_dict() == before

    def test_red_zone_rejection(self, six_areas, today):
        dataset = add_task(six_areas, "Area 6", "x", as_of=today)
        result = update_task(dataset, "Area 6", "x", TaskUpdate(status=Status.IN_PROGRESS), as_of=today)
        assert result.reason == RejectionReason.RED_ZONE_VIOLATION

    def test_field_updates(self, make_dataset, today):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)]})
        updates = TaskUpdate(name="Inbox zero", due="2025-06-30", notes="before lunch")
        task = update_task(dataset, "Work", "email", updates, as_of=today).focus_areas[0].tasks[0]
        assert task.name == "Inbox zero"
        assert task.due == date(2025, 6, 30)
        assert task.notes == "before lunch"
        assert task.slug == "work-email"

    def test_empty_strings_clear_due_and_notes(self, make_dataset, today):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)]})
        task = dataset.focus_areas[0].tasks[0]
        task.due = date(2025, 6, 30)
        task.notes = "x"
        result = update_task(dataset, "Work", "Email", TaskUpdate(due="", notes="", name=""), as_of=today)
        updated = result.focus_areas[0].tasks[0]
        assert updated.due is None
        assert updated.notes is None
        assert updated.name == "Email"

    def test_none_leaves_fields(self, make_dataset, today):
        dataset = make_dataset({"Work": [("Email", Status.PENDING)]})
        dataset.focus_areas[0].tasks[0].notes = "keep"
        result = update_task(dataset, "Work", "Email", TaskUpdate(), as_of=today)
        assert result.focus_areas[0].tasks[0].notes == "keep"

    def test_area_not_found(self, make_dataset):
        result = update_task(make_dataset({"Work": []}), "Play", "x", TaskUpdate())
        assert result.message == "Focus area not found: Play"

    def test_task_not_found(self, make_dataset):
        result = update_task(make_dataset({"Work": []}), "Work", "x", TaskUpdate())
        assert result.reason == RejectionReason.NOT_FOUND
        assert result.message == "Task not found: x"


class TestRemoveTask:
    def test_removes_task(self, make_dataset):
        dataset = make_dataset({"Work": [("Email", Status.PENDING), ("Call", Status.PENDING)]})
        result = remove_task(dataset, "Work", "email")
        area = result.focus_areas[0]
        assert [t.name for t in area.tasks] == ["Call"]
        assert resolve_task(area, "Email") is None

    def test_not_found(self, make_dataset):
        result = remove_task(make_dataset({"Work": []}), "Work", "Email")
        assert result.reason == RejectionReason.NOT_FOUND


class TestInvariantsUnderMutation:
    """Run mixed mutation sequences and check WIP/red-zone invariants after each accepted step."""

    def test_wip_and_red_zone_hold(self, make_dataset, today):
        dataset = make_dataset({f"Area {i}": [] for i in range(1, 8)})
        steps = []
        for i in range(1, 8):
            steps.append((add_task, (f"Area {i}", f"task {i}"), {"status": Status.IN_PROGRESS, "as_of": today}))
            steps.append((add_task, (f"Area {i}", f"todo {i}"), {"as_of": today}))
        for i in range(1, 8):
            steps.append((update_task, (f"Area {i}", f"todo {i}", TaskUpdate(status=Status.IN_PROGRESS)), {"as_of": today}))
            steps.append((reorder_focus_area, (f"Area {i}", 8 - i), {}))
            steps.append((update_task, (f"Area {i}", f"task {i}", TaskUpdate(status=Status.DONE)), {"as_of": today}))

        for operation, args, kwargs in steps:
            result = operation(dataset, *args, **kwargs)
            if isinstance(result, Rejection):
                continue
            dataset = result
            assert in_progress(dataset) <= MAX_IN_PROGRESS
            for pos, area in enumerate(dataset.focus_areas, start=1):
                if pos >= RED_ZONE_START:
                    assert all(t.status != Status.IN_PROGRESS for t in area.tasks)
