from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Color


class ILineColorRepository(ABC):
    """Port for the externally maintained rail line name -> colour table."""

    @abstractmethod
    def load_colors(self) -> dict[str, Color]:
        raise NotImplementedError
