"""Base service class for HBaseSearch services."""

from abc import ABC
from typing import Iterable, List

from core.models import Cell
from interfaces.record_mapper import RecordMapper


class BaseService(ABC):
    """Base service class holding the record mapper that decides which changes matter."""

    def __init__(self, record_mapper: RecordMapper):
        """Initialize service with record mapper dependency.

        Args:
            record_mapper: Record mapper implementation
        """
        self._mapper = record_mapper

    @property
    def mapper(self) -> RecordMapper:
        """Get record mapper instance."""
        return self._mapper

    def filter_relevant(self, cells: Iterable[Cell]) -> List[Cell]:
        """Get the cells that could affect an indexed document.

        Args:
            cells: Changed cells

        Returns:
            Relevant cells in input order
        """
        return [cell for cell in cells if self._mapper.is_relevant(cell)]
