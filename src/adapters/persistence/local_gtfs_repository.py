from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping

from src.app.ports.output import IGtfsRepository


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Reads GTFS tables from a directory of .txt files.

    Env vars:
      - GTFS_PATH: path to the directory containing agency.txt, routes.txt, ...
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH") or "data/gtfs"
        return Path(value)

    def has_table(self, table: str) -> bool:
        return (self._base() / table).is_file()

    def rows(self, table: str) -> Iterator[tuple[int, Mapping[str, str]]]:
        # utf-8-sig: many feeds start with a BOM that would corrupt the first header.
        with (self._base() / table).open("r", encoding="utf-8-sig", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                yield reader.line_num, row
