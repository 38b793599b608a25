"""Shared workflow layer between the CLI and the functional core.

Each mutating command: loads the dataset, applies one core operation,
saves only when the operation was accepted, and returns the outcome.
"""

import logging
from datetime import date
from typing import Callable

from .adapters.yaml_store import YamlDatasetStore
from .config import Config
from .core.constraints import Rejection
from .core.dashboard import Dashboard, build_dashboard
from .core.integrity import Issue, check
from .core.models import Dataset
from .ports.dataset_store import DatasetStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> YamlDatasetStore:
    """Resolve the dataset store from config."""
    return YamlDatasetStore(config.data_file)


def apply_mutation(
    store: DatasetStore,
    operation: Callable[..., Dataset | Rejection],
    *args,
    **kwargs,
) -> Dataset | Rejection:
    """Load, apply `operation`, save on success. Returns the operation's result."""
    dataset = store.load()
    result = operation(dataset, *args, **kwargs)

    if isinstance(result, Rejection):
        logger.debug(f"{_name(operation)} rejected ({result.reason.value}): {result.message}")
        return result

    store.save(result)
    logger.info(f"{_name(operation)} applied")
    return result


def show_dashboard(store: DatasetStore, config: Config, as_of: date | None = None) -> Dashboard:
    """Load the dataset and assemble the dashboard."""
    return build_dashboard(
        store.load(),
        as_of=as_of,
        pending_preview=config.pending_preview,
        stale_days=config.stale_days,
    )


def run_check(store: DatasetStore, config: Config, as_of: date | None = None) -> list[Issue]:
    """Load the dataset and run the integrity scan."""
    return check(store.load(), as_of=as_of, stale_days=config.stale_days)


def _name(operation: Callable) -> str:
    return getattr(operation, "__name__", repr(operation))
