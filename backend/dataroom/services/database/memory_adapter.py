"""
In-memory adapter implementing StateStoreInterface.
Perfect for demos and testing - keeps the serialized state in memory.
Data is lost on restart.
"""
from typing import Optional

from .base import StateStoreInterface
from ...api.mappers import StateMapper
from ...domain.entities import DataRoomState
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class MemoryStateStore(StateStoreInterface):
    """
    In-memory state store.
    Keeps the JSON text rather than the object so that a save/load
    round-trip goes through the same serialization as the file store.
    """

    def __init__(self):
        self._document: Optional[str] = None
        self.save_count = 0

    async def initialize(self):
        """Initialize store (no-op for in-memory, but required by interface)."""
        pass

    async def close(self):
        """Close store (no-op for in-memory)."""
        pass

    async def load(self) -> Optional[DataRoomState]:
        if self._document is None:
            return None
        return StateMapper.from_json(self._document)

    async def save(self, state: DataRoomState) -> None:
        self._document = StateMapper.to_json(state)
        self.save_count += 1

    async def clear(self) -> None:
        self._document = None
