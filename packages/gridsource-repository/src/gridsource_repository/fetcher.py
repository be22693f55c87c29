from __future__ import annotations

from gridsource_sdk import (
    Filter,
    RawGridSourceContainer,
    RepositorySourceResolver,
    SearchCriteria,
)

from gridsource_repository.common.logger import get_logger
from gridsource_repository.lazy import Lazy

logger = get_logger(__name__)

ID_FIELD = "id"
ENTITY_ID_FIELD = "entity_id"


def map_id_filters(criteria: SearchCriteria) -> SearchCriteria:
    """
    Returns criteria in which every filter on ``id`` targets ``entity_id`` instead.

    Grids address records by a generic ``id`` while repositories filter on their
    primary key column. The caller's criteria are left untouched; when no filter
    needs rewriting the same object is returned.
    """
    if not any(f.field == ID_FIELD for group in criteria.filter_groups for f in group.filters):
        return criteria

    groups = [
        group.model_copy(update={"filters": [_map_filter(f) for f in group.filters]})
        for group in criteria.filter_groups
    ]
    return criteria.model_copy(update={"filter_groups": groups})


def _map_filter(search_filter: Filter) -> Filter:
    if search_filter.field != ID_FIELD:
        return search_filter
    return search_filter.model_copy(update={"field": ENTITY_ID_FIELD})


class RecordFetcher:
    """Loads one page of records through the configured repository list method."""

    def __init__(self, list_method: str, repository_resolver: RepositorySourceResolver):
        self._list_method = list_method
        self._repository_get_list = Lazy(lambda: repository_resolver.create(list_method))

    def fetch(self, criteria: SearchCriteria) -> RawGridSourceContainer:
        prepared = map_id_filters(criteria)
        repository_get_list = self._repository_get_list.get()
        logger.info(
            "Fetching records via %s (%d filter groups)",
            self._list_method,
            len(prepared.filter_groups),
        )
        result = repository_get_list(prepared)
        return RawGridSourceContainer.for_data(result)
