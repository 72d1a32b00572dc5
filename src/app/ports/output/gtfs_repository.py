from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Mapping


class IGtfsRepository(ABC):
    """Port for reading the raw rows of one GTFS dataset."""

    @abstractmethod
    def has_table(self, table: str) -> bool:
        """Return whether the dataset ships `table` (e.g. 'shapes.txt')."""

    @abstractmethod
    def rows(self, table: str) -> Iterator[tuple[int, Mapping[str, str]]]:
        """Yield (line number, row) pairs in file order.

        Raises FileNotFoundError when the table is missing.
        """
