"""Abstract database interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from shopledger.domain.entities import Snapshot


class Database(ABC):
    """Abstract database interface for shopledger.

    Storage only has to load and save whole snapshots; all reporting works
    on the in-memory record store built from them.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load_snapshot(self) -> Snapshot:
        """Load every record. An empty database yields a default snapshot."""
        pass

    @abstractmethod
    def save_snapshot(self, snapshot: Snapshot) -> None:
        """Replace every stored record with the contents of ``snapshot``."""
        pass
