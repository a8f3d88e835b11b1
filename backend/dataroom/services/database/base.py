"""
Abstract base class for state store adapters.
All persistence implementations must inherit from this class.
"""
from abc import ABC, abstractmethod
from typing import Optional
from ...domain.entities import DataRoomState
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class StateStoreInterface(ABC):
    """
    Abstract interface for persisting the data room state.
    The whole tree is saved and loaded as one document.
    This allows plug-and-play persistence without changing business logic.
    """

    @abstractmethod
    async def load(self) -> Optional[DataRoomState]:
        """Load the saved state, or None if nothing usable is stored."""
        pass

    @abstractmethod
    async def save(self, state: DataRoomState) -> None:
        """
        Save the state.

        Raises:
            StorageError: If the state could not be written
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove any saved state."""
        pass

    @abstractmethod
    async def initialize(self):
        """Initialize the store (create directories, etc.)."""
        pass

    @abstractmethod
    async def close(self):
        """Close the store."""
        pass
