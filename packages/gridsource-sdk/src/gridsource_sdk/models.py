from __future__ import annotations

from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ColumnOption(BaseModel):
    """One value/label choice of a column backed by a select-like attribute."""

    value: Any = None
    label: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ColumnDefinition(BaseModel):
    """Immutable description of one grid column.

    ``label`` and ``options`` are only set when the column comes from the
    flexible attribute store. Use :meth:`to_dict` to get the fields that were
    actually provided, which keeps unset fields out of the output entirely.
    """

    key: str
    type: str = Field(default="unknown", description="Canonical type code.")
    label: Optional[str] = None
    options: Optional[Tuple[ColumnOption, ...]] = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def create(cls, arguments: Mapping[str, Any]) -> "ColumnDefinition":
        """Default column definition factory."""
        return cls.model_validate(dict(arguments))

    def has_label(self) -> bool:
        return "label" in self.model_fields_set

    def has_options(self) -> bool:
        return "options" in self.model_fields_set

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class Filter(BaseModel):
    field: str
    value: Any = None
    condition_type: str = "eq"

    model_config = ConfigDict(extra="ignore", frozen=True)


class FilterGroup(BaseModel):
    """Filters inside one group are OR-ed, groups are AND-ed."""

    filters: List[Filter] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)


class SortOrder(BaseModel):
    field: str
    direction: str = "ASC"

    model_config = ConfigDict(extra="ignore", frozen=True)


class SearchCriteria(BaseModel):
    """Filter, sort and paging specification handed to a repository list method."""

    filter_groups: List[FilterGroup] = Field(default_factory=list)
    sort_orders: List[SortOrder] = Field(default_factory=list)
    page_size: Optional[int] = None
    current_page: Optional[int] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class SearchResults(BaseModel, Generic[T]):
    """One page of records as returned by a repository list method."""

    items: List[T] = Field(default_factory=list)
    total_count: int = 0
    search_criteria: Optional[SearchCriteria] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)


class RawGridSourceContainer:
    """Opaque box around the raw result of one fetch.

    Grid layers pass the container around without looking inside; only the
    grid source that produced it opens it again through :func:`unbox`.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any):
        self._data = data

    @classmethod
    def for_data(cls, data: Any) -> "RawGridSourceContainer":
        return cls(data)

    def __repr__(self) -> str:
        return f"RawGridSourceContainer({type(self._data).__name__})"


def unbox(container: RawGridSourceContainer) -> Any:
    """Returns the raw result held by a container."""
    return container._data
