"""Storage implementations."""

from .dataset import DatasetStorage

__all__ = ["DatasetStorage"]
