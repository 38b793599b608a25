"""Dataset store interface."""

from typing import Protocol

from ptz.core.models import Dataset


class DatasetStore(Protocol):
    """Interface for loading and saving the focus-area dataset."""

    def load(self) -> Dataset:
        """Load the dataset. A missing document yields an empty dataset."""
        ...

    def save(self, dataset: Dataset) -> None:
        """Persist the dataset, replacing what was stored."""
        ...
