"""
Local filesystem storage adapter implementing BlobStorageInterface.
Stores one file per blob - perfect for development and demos.
"""
import asyncio
import re
from pathlib import Path
from typing import Optional

from .base import BlobStorageInterface
from ...core.config import BLOB_KEY_PREFIX, BLOB_STORAGE_DIR, DATA_DIR
from ...core.logging_config import get_logger
from ...domain.exceptions import BlobNotFoundError, StorageError

logger = get_logger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class LocalBlobStorage(BlobStorageInterface):
    """
    Local filesystem storage adapter.
    Blob for file id X lives at <base_dir>/file-X.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Initialize local blob storage.

        Args:
            base_dir: Base directory for blobs (defaults to BLOB_STORAGE_DIR or DATA_DIR/blobs)
        """
        if base_dir is None:
            base_dir = BLOB_STORAGE_DIR or DATA_DIR / "blobs"

        self.base_dir = Path(base_dir)

    async def initialize(self):
        """Initialize storage - ensure base directory exists."""
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create blob directory {self.base_dir}: {e}") from e

    async def close(self):
        """Close storage (no-op for local filesystem)."""
        pass

    def _get_full_path(self, file_id: str) -> Path:
        """Get filesystem path for a file id."""
        # Ids are opaque; keep them from escaping base_dir
        safe_id = _UNSAFE_KEY_CHARS.sub("_", file_id).lstrip(".")
        return self.base_dir / f"{BLOB_KEY_PREFIX}{safe_id}"

    async def save_blob(self, file_id: str, data: bytes) -> None:
        """Write blob to local filesystem."""
        full_path = self._get_full_path(file_id)

        def _save():
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_bytes(data)

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, _save)
        except OSError as e:
            logger.error(f"Failed to store file data for {file_id}: {e}", exc_info=True)
            raise StorageError(f"Failed to store file: {e}") from e

        logger.debug(f"Stored {len(data)} bytes for {file_id}")

    async def get_blob(self, file_id: str) -> bytes:
        """Read blob from local filesystem."""
        full_path = self._get_full_path(file_id)

        def _read():
            return full_path.read_bytes()

        try:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, _read)
        except FileNotFoundError as e:
            raise BlobNotFoundError(f"File data not found: {file_id}") from e
        except OSError as e:
            raise StorageError(f"Failed to read file data for {file_id}: {e}") from e

    async def delete_blob(self, file_id: str) -> bool:
        """Delete blob from local filesystem."""
        full_path = self._get_full_path(file_id)

        def _delete() -> bool:
            try:
                full_path.unlink()
            except FileNotFoundError:
                return False
            return True

        try:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, _delete)
        except OSError as e:
            raise StorageError(f"Failed to delete file data for {file_id}: {e}") from e

    async def blob_exists(self, file_id: str) -> bool:
        """Check if a blob exists on the local filesystem."""
        full_path = self._get_full_path(file_id)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, full_path.is_file)
