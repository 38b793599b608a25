"""Adapters - I/O implementations of ports."""

from .yaml_store import DatasetError, YamlDatasetStore

__all__ = [
    "DatasetError",
    "YamlDatasetStore",
]
