"""Protocol definitions for gridsql.

Protocols are part of Layer 0 and have no dependencies. They provide
type-safe interfaces without requiring inheritance, following Python's
structural subtyping (duck typing with type hints).
"""

from .query import DisjunctionBranch, ProjectionItem, QueryHandle

__all__ = [
    "QueryHandle",
    "DisjunctionBranch",
    "ProjectionItem",
]
