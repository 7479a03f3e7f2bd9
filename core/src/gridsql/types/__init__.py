"""Shared value types for gridsql."""

from gridsql.types.base import GridBaseModel
from gridsql.types.columns import ColumnEntry

__all__ = [
    "GridBaseModel",
    "ColumnEntry",
]
