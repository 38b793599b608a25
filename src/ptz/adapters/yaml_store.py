"""YAML file dataset store adapter."""

import logging
from pathlib import Path

import yaml

from ptz.core.models import Dataset

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Raised when the stored document cannot be read or understood."""

    pass


class YamlDatasetStore:
    """
    YAML file storage for the focus-area dataset.

    Implements DatasetStore protocol. No business logic - just I/O.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> Dataset:
        """Load the dataset from disk. Missing file -> empty dataset."""
        if not self.path.exists():
            logger.debug(f"No data file at {self.path}, starting empty")
            return Dataset()

        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise DatasetError(f"Cannot read {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise DatasetError(f"Malformed YAML in {self.path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise DatasetError(f"Expected a mapping at the top of {self.path}")

        try:
            dataset = Dataset.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DatasetError(f"Invalid data in {self.path}: {e}") from e

        logger.debug(f"Loaded {len(dataset.focus_areas)} focus areas from {self.path}")
        return dataset

    def save(self, dataset: Dataset) -> None:
        """Persist the dataset (2-space indent, stable key order)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = yaml.safe_dump(
            dataset.to_dict(),
            indent=2,
            width=120,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        self.path.write_text(content, encoding="utf-8")
        logger.debug(f"Saved {len(dataset.focus_areas)} focus areas to {self.path}")
