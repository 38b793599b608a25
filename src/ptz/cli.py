"""PTZ CLI - Focus areas with traffic-light priorities."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.yaml_store import DatasetError, YamlDatasetStore
from .config import load_config
from .core.constraints import Rejection
from .core.dashboard import dashboard_to_dict
from .core.integrity import errors
from .core.models import Dataset, Status
from .core.operations import (
    TaskUpdate,
    add_focus_area,
    add_task,
    remove_focus_area,
    remove_task,
    reorder_focus_area,
    set_weekly_focus,
    update_task,
)
from .core.resolve import resolve_area, resolve_task
from .render import format_check, format_dashboard
from .workflows import apply_mutation, get_store, run_check, show_dashboard

STATUS_CHOICES = click.Choice([s.value for s in Status])


def _validate_due(ctx, param, value: str | None) -> str | None:
    """Accept YYYY-MM-DD, or an empty string (clears the due date on update)."""
    if not value:
        return value
    try:
        date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")
    return value


def _require_name(ctx, param, value: str) -> str:
    """Names must contain something other than whitespace."""
    if not value.strip():
        raise click.BadParameter("must not be empty")
    return value


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load(store: YamlDatasetStore) -> Dataset:
    try:
        return store.load()
    except DatasetError as e:
        _fail(str(e))


def _mutate(store: YamlDatasetStore, operation, *args, **kwargs) -> Dataset:
    """Run a mutation; print the rejection and exit 1 if refused."""
    try:
        result = apply_mutation(store, operation, *args, **kwargs)
    except DatasetError as e:
        _fail(str(e))
    if isinstance(result, Rejection):
        _fail(result.message)
    return result


@click.group()
@click.version_option(package_name="ptz")
@click.option("--file", "data_file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Data file (overrides config and PTZ_DATA_FILE)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: Path | None, debug: bool):
    """PTZ - Focus areas with weekly focus, traffic-light priorities and WIP limits."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if data_file:
        config.data_file = data_file
    ctx.obj = {"config": config, "store": get_store(config)}


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(obj, as_json: bool):
    """Display the priority dashboard."""
    try:
        dashboard = show_dashboard(obj["store"], obj["config"])
    except DatasetError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(dashboard_to_dict(dashboard), indent=2))
    else:
        click.echo(format_dashboard(dashboard, use_color=obj["config"].color))


@main.command("add-focus")
@click.argument("name", callback=_require_name)
@click.pass_obj
def add_focus(obj, name: str):
    """Add a new focus area (lowest priority)."""
    result = _mutate(obj["store"], add_focus_area, name)
    click.echo(f"Added focus area: {name} (position {len(result.focus_areas)})")


@main.command("remove-focus")
@click.argument("name")
@click.pass_obj
def remove_focus(obj, name: str):
    """Remove a focus area and all its tasks."""
    area = resolve_area(_load(obj["store"]), name)
    _mutate(obj["store"], remove_focus_area, name)
    click.echo(f"Removed focus area: {area.name}")


@main.command("reorder-focus")
@click.argument("name")
@click.option("--position", "-p", type=int, required=True, help="New position (1 = highest priority)")
@click.pass_obj
def reorder_focus(obj, name: str, position: int):
    """Move a focus area to a new position."""
    result = _mutate(obj["store"], reorder_focus_area, name, position)
    click.echo(f"Moved {resolve_area(result, name).name} to position {position}")


@main.command("set-weekly-focus")
@click.argument("name")
@click.pass_obj
def weekly_focus(obj, name: str):
    """Set the weekly focus (moves it to #1)."""
    result = _mutate(obj["store"], set_weekly_focus, name)
    click.echo(f"Set weekly focus: {result.weekly_focus.area}")


@main.command("add-task")
@click.argument("focus")
@click.argument("task", callback=_require_name)
@click.option("--status", type=STATUS_CHOICES, default=Status.PENDING.value, show_default=True)
@click.option("--due", callback=_validate_due, help="Due date (YYYY-MM-DD)")
@click.option("--notes", help="Notes or context")
@click.pass_obj
def add_task_cmd(obj, focus: str, task: str, status: str, due: str | None, notes: str | None):
    """Add a task to a focus area."""
    result = _mutate(
        obj["store"],
        add_task,
        focus,
        task,
        status=Status(status),
        due=date.fromisoformat(due) if due else None,
        notes=notes,
    )
    click.echo(f'Added task "{task}" to {resolve_area(result, focus).name}')


@main.command("update-task")
@click.argument("focus")
@click.argument("task")
@click.option("--status", type=STATUS_CHOICES, default=None)
@click.option("--due", callback=_validate_due, help="Due date (YYYY-MM-DD, empty string clears)")
@click.option("--notes", help="Notes (empty string clears)")
@click.option("--name", help="Rename the task")
@click.pass_obj
def update_task_cmd(
    obj,
    focus: str,
    task: str,
    status: str | None,
    due: str | None,
    notes: str | None,
    name: str | None,
):
    """Update a task's status, due date, notes or name."""
    updates = TaskUpdate(
        status=Status(status) if status else None,
        name=name,
        due=due,
        notes=notes,
    )
    result = _mutate(obj["store"], update_task, focus, task, updates)
    if not name:
        name = resolve_task(resolve_area(result, focus), task).name
    click.echo(f"Updated: {name}")


@main.command("remove-task")
@click.argument("focus")
@click.argument("task")
@click.pass_obj
def remove_task_cmd(obj, focus: str, task: str):
    """Remove a task from a focus area."""
    area = resolve_area(_load(obj["store"]), focus)
    removed = resolve_task(area, task) if area else None
    _mutate(obj["store"], remove_task, focus, task)
    click.echo(f"Removed: {removed.name}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def check(obj, as_json: bool):
    """Run the integrity check (exit 1 on errors)."""
    try:
        issues = run_check(obj["store"], obj["config"])
    except DatasetError as e:
        _fail(str(e))

    if as_json:
        click.echo(
            json.dumps(
                [{"level": i.level.value, "message": i.message} for i in issues],
                indent=2,
            )
        )
    else:
        click.echo(format_check(issues))

    if errors(issues):
        sys.exit(1)


if __name__ == "__main__":
    main()
