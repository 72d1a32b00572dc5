from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.storage import StoredNetwork


class INetworkRepository(ABC):
    """Persistence port for durable network snapshots."""

    @abstractmethod
    def save(self, network: StoredNetwork) -> None:
        """Persist the snapshot, replacing any previous one."""

    @abstractmethod
    def load(self) -> StoredNetwork:
        """Return the last persisted snapshot."""
