from pydantic import Field, field_validator

from gridsql.constants import DEFAULT_FALSE_TAG, DEFAULT_TRUE_TAG
from .base import GridBaseSettings


class QuerySettings(GridBaseSettings):

    strict_date_formats: bool = Field(
        default=False,
        description="Reject date formats containing tokens outside the canonical alphabet "
                   "instead of passing them through as literal text. Applies to every "
                   "dialect so a format that renders on MySQL cannot silently corrupt "
                   "on PostgreSQL."
    )

    search_wildcard: str = Field(
        default="%",
        min_length=1,
        max_length=1,
        description="Wildcard character wrapped around the global search text"
    )

    bool_true_tag: str = Field(
        default=DEFAULT_TRUE_TAG,
        description="Default tag rendered in {column}_class for true boolean values"
    )
    bool_false_tag: str = Field(
        default=DEFAULT_FALSE_TAG,
        description="Default tag rendered in {column}_class for false boolean values"
    )

    search_param: str = Field(
        default="search",
        description="Request parameter carrying the global search (either a string or {'value': ...})"
    )
    filter_param: str = Field(
        default="filter",
        description="Request parameter carrying the nested filter map"
    )

    @field_validator('search_param', 'filter_param')
    @classmethod
    def validate_param_name(cls, v: str) -> str:
        """Parameter names must be non-blank."""
        if not v or not v.strip():
            raise ValueError("Request parameter names cannot be empty")
        return v.strip()
