"""Datatable request parameters.

Grid front-ends send the global search either as ``search[value]``
(DataTables style) or as a plain ``search`` string, and the filters as a
nested ``filter`` map. HTTP parsing itself is the caller's job; this
module only normalizes the already-decoded mapping.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator

from gridsql.types.base import GridBaseModel


class DatatableParams(GridBaseModel):
    """Search text and filter map for one grid request.

    Attributes:
        search: Global search text, or None when no search was sent
        filters: Filter-parameter map (values are untyped request input)
    """

    search: Optional[str] = Field(default=None)
    filters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("search", mode="before")
    @classmethod
    def extract_search_value(cls, v: Any) -> Optional[str]:
        """Accept ``{"value": ...}`` as well as a plain value."""
        if isinstance(v, Mapping):
            v = v.get("value")
        if v is None:
            return None
        return str(v)

    @field_validator("filters", mode="before")
    @classmethod
    def ignore_malformed_filters(cls, v: Any) -> Dict[str, Any]:
        """Anything but a mapping means no filters."""
        if isinstance(v, Mapping):
            return dict(v)
        return {}

    @classmethod
    def from_mapping(
        cls,
        params: Mapping[str, Any],
        search_key: str = "search",
        filter_key: str = "filter",
    ) -> "DatatableParams":
        """Build parameters from a decoded request mapping.

        Args:
            params: Request parameters (query string or JSON body)
            search_key: Key holding the search
            filter_key: Key holding the filter map

        Returns:
            DatatableParams instance

        Example:
            >>> DatatableParams.from_mapping({"search": {"value": "smith"}, "filter": {"status": "1"}})
            DatatableParams(search='smith', filters={'status': '1'})
        """
        return cls(search=params.get(search_key), filters=params.get(filter_key))

    @property
    def has_search(self) -> bool:
        return self.search is not None and self.search != ""
