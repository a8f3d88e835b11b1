"""
State Store Factory for creating persistence adapters.
Implements Factory Pattern for plug-and-play persistence support.
"""
from pathlib import Path
from typing import Optional

from .base import StateStoreInterface
from .memory_adapter import MemoryStateStore
from .json_adapter import JSONStateStore
from ...core.config import STATE_STORE_TYPE
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class StateStoreFactory:
    """
    Factory for creating state store adapters.
    Supports JSON (file-based) and Memory (in-memory) backends.
    """

    @staticmethod
    def create(store_type: Optional[str] = None, **kwargs) -> StateStoreInterface:
        """
        Create a state store instance.

        Args:
            store_type: Type of store ('json', 'memory', or None for the configured default)
            **kwargs: Additional arguments for specific adapters

        Returns:
            StateStoreInterface instance

        Examples:
            # JSON (file-based, persistent)
            store = StateStoreFactory.create('json', data_dir=Path('data/json_db'))

            # Memory (in-memory, non-persistent)
            store = StateStoreFactory.create('memory')
        """
        if store_type is None:
            store_type = STATE_STORE_TYPE

        store_type = store_type.lower()

        if store_type == "json":
            return StateStoreFactory._create_json(**kwargs)
        elif store_type == "memory":
            return StateStoreFactory._create_memory(**kwargs)
        else:
            raise ValueError(
                f"Unsupported state store type: {store_type}. "
                f"Supported types: 'json', 'memory'"
            )

    @staticmethod
    def _create_memory(**kwargs) -> MemoryStateStore:
        """Create in-memory store (for demos and testing)."""
        return MemoryStateStore()

    @staticmethod
    def _create_json(**kwargs) -> JSONStateStore:
        """Create JSON file-based store."""
        data_dir = kwargs.get("data_dir")
        if data_dir:
            data_dir = Path(data_dir) if isinstance(data_dir, str) else data_dir
        return JSONStateStore(data_dir=data_dir)

    @staticmethod
    async def create_and_initialize(store_type: Optional[str] = None, **kwargs) -> StateStoreInterface:
        """
        Create state store and initialize it.

        Args:
            store_type: Type of store
            **kwargs: Additional arguments

        Returns:
            Initialized StateStoreInterface instance
        """
        store = StateStoreFactory.create(store_type, **kwargs)
        await store.initialize()
        logger.debug(f"State store ready: {type(store).__name__}")
        return store
