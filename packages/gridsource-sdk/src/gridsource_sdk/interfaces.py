from abc import ABC, abstractmethod
from typing import Any, List

from .models import ColumnDefinition, RawGridSourceContainer, SearchCriteria


class GridSourceType(ABC):
    """Canonical interface every grid source must implement."""

    @property
    @abstractmethod
    def grid_name(self) -> str:
        """Name of the grid this source feeds."""
        pass

    @abstractmethod
    def get_column_keys(self) -> List[str]:
        """Return the keys of all columns the source can provide."""
        pass

    @abstractmethod
    def get_column_definition(self, key: str) -> ColumnDefinition:
        """Return the column definition for a key."""
        pass

    @abstractmethod
    def fetch_data(self, search_criteria: SearchCriteria) -> RawGridSourceContainer:
        """Load one page of records and box the raw result."""
        pass

    @abstractmethod
    def extract_records(self, raw_grid_data: RawGridSourceContainer) -> List[Any]:
        """Return the records held by a container, in repository order."""
        pass

    @abstractmethod
    def extract_value(self, record: Any, key: str) -> Any:
        """Return the value of one column for one record."""
        pass

    @abstractmethod
    def extract_total_row_count(self, raw_grid_data: RawGridSourceContainer) -> int:
        """Return the total number of matching records reported by the backend."""
        pass
