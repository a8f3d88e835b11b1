"""
Blob Storage Factory for creating storage adapters.
Implements Factory Pattern for plug-and-play storage support.
"""
from pathlib import Path
from typing import Optional

from .base import BlobStorageInterface
from .local_storage import LocalBlobStorage
from .memory_storage import MemoryBlobStorage
from ...core.config import BLOB_STORAGE_TYPE
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class BlobStorageFactory:
    """
    Factory for creating blob storage adapters.
    Supports Local (filesystem) and Memory backends.
    """

    @staticmethod
    def create(storage_type: Optional[str] = None, **kwargs) -> BlobStorageInterface:
        """
        Create a storage adapter instance.

        Args:
            storage_type: Type of storage ('local', 'memory', or None for the configured default)
            **kwargs: Additional arguments for specific storage adapters

        Returns:
            BlobStorageInterface instance

        Examples:
            # Local filesystem
            storage = BlobStorageFactory.create('local', base_dir=Path('data/blobs'))

            # In-memory
            storage = BlobStorageFactory.create('memory')
        """
        if storage_type is None:
            storage_type = BLOB_STORAGE_TYPE

        storage_type = storage_type.lower()

        if storage_type == "local":
            return BlobStorageFactory._create_local(**kwargs)
        elif storage_type == "memory":
            return MemoryBlobStorage()
        else:
            raise ValueError(
                f"Unsupported storage type: {storage_type}. "
                f"Supported types: 'local', 'memory'"
            )

    @staticmethod
    def _create_local(**kwargs) -> LocalBlobStorage:
        """Create local filesystem storage adapter."""
        base_dir = kwargs.get("base_dir")
        if isinstance(base_dir, str):
            base_dir = Path(base_dir)
        return LocalBlobStorage(base_dir=base_dir)

    @staticmethod
    async def create_and_initialize(storage_type: Optional[str] = None, **kwargs) -> BlobStorageInterface:
        """
        Create storage adapter and initialize it.

        Args:
            storage_type: Type of storage
            **kwargs: Additional arguments

        Returns:
            Initialized BlobStorageInterface instance
        """
        storage = BlobStorageFactory.create(storage_type, **kwargs)
        await storage.initialize()
        logger.debug(f"Blob storage ready: {type(storage).__name__}")
        return storage
