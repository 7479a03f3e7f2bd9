"""Column registry value types."""

from pydantic import ConfigDict, Field

from gridsql.types.base import GridBaseModel


class ColumnEntry(GridBaseModel):
    """A computed column: a SQL expression selected under an alias.

    Entries are immutable. Re-registering an alias replaces the entry
    object in the registry rather than mutating it.

    Attributes:
        alias: Name the expression is selected as; unique per registry
        expression: Raw SQL expression, already rendered for the active dialect
        searchable: Whether the expression takes part in global search
    """
    model_config = ConfigDict(frozen=True)

    alias: str = Field(..., min_length=1, max_length=128)
    expression: str = Field(..., min_length=1)
    searchable: bool = Field(default=True)
