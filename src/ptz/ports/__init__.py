"""Ports - interfaces/protocols for external dependencies."""

from .dataset_store import DatasetStore

__all__ = [
    "DatasetStore",
]
