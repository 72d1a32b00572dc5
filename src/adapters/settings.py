from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


@dataclass(frozen=True, slots=True)
class ImportSettings:
    """Import configuration.

    Env vars:
      - GTFS_PATH: directory with the GTFS .txt tables (default: data/gtfs)
      - LINE_COLORS_PATH: optional CSV with `line,color` rows for rail lines
      - SERVICE_DATE: ISO date whose running trips are imported (default: today)
      - NETWORK_PATH: local snapshot file (default: data/network.json)
      - NETWORK_BUCKET: when set, snapshots go to S3 instead
      - NETWORK_KEY: S3 object key (default: networks/network.json)
    """

    gtfs_path: Path
    line_colors_path: Path | None
    service_date: date
    network_path: Path
    network_bucket: str | None
    network_key: str

    @staticmethod
    def from_env() -> "ImportSettings":
        colors = _env_str("LINE_COLORS_PATH")
        service_date = _env_str("SERVICE_DATE")
        return ImportSettings(
            gtfs_path=Path(_env_str("GTFS_PATH") or "data/gtfs"),
            line_colors_path=Path(colors) if colors else None,
            service_date=(
                date.fromisoformat(service_date) if service_date else date.today()
            ),
            network_path=Path(_env_str("NETWORK_PATH") or "data/network.json"),
            network_bucket=_env_str("NETWORK_BUCKET"),
            network_key=_env_str("NETWORK_KEY") or "networks/network.json",
        )
