"""Computed column registry."""

from gridsql.columns.registry import ColumnRegistry

__all__ = [
    "ColumnRegistry",
]
