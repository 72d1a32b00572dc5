from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import ILineColorRepository
from src.domain.models import Color


@dataclass(slots=True)
class LocalLineColorRepository(ILineColorRepository):
    """Rail line colours from a CSV file with `line` and `color` (hex) columns.

    Env vars:
      - LINE_COLORS_PATH: path to the CSV file; no file means no colours
    """

    path: str | Path | None = None

    def load_colors(self) -> dict[str, Color]:
        value = self.path or os.getenv("LINE_COLORS_PATH")
        if not value:
            return {}

        colors: dict[str, Color] = {}
        with Path(value).open("r", encoding="utf-8-sig", newline="") as fp:
            for row in csv.DictReader(fp):
                name = (row.get("line") or "").strip()
                raw = (row.get("color") or "").strip()
                if not name or not raw:
                    continue
                colors[name] = Color.from_hex(raw)
        return colors
