"""
Abstract base class for blob storage adapters.
All storage implementations must inherit from this class.
"""
from abc import ABC, abstractmethod
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class BlobStorageInterface(ABC):
    """
    Abstract interface for the raw bytes of uploaded files.
    Blobs are keyed by the file id assigned in the data room state.
    This allows plug-and-play storage support without changing business logic.
    """

    @abstractmethod
    async def save_blob(self, file_id: str, data: bytes) -> None:
        """
        Store the bytes of a file.

        Args:
            file_id: Id of the file in the state
            data: Raw file content

        Raises:
            StorageError: If the bytes could not be written
        """
        pass

    @abstractmethod
    async def get_blob(self, file_id: str) -> bytes:
        """
        Retrieve the bytes of a file.

        Raises:
            BlobNotFoundError: If nothing is stored for file_id
        """
        pass

    @abstractmethod
    async def delete_blob(self, file_id: str) -> bool:
        """
        Delete the bytes of a file.

        Returns:
            True if a blob was deleted, False if not found
        """
        pass

    @abstractmethod
    async def blob_exists(self, file_id: str) -> bool:
        """Check if bytes are stored for file_id."""
        pass

    @abstractmethod
    async def initialize(self):
        """Initialize storage (create directories, etc.)."""
        pass

    @abstractmethod
    async def close(self):
        """Close storage."""
        pass
