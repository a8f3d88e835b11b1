"""
In-memory storage adapter implementing BlobStorageInterface.
For demos and tests; blobs are lost on restart.
"""
from typing import Dict

from .base import BlobStorageInterface
from ...domain.exceptions import BlobNotFoundError


class MemoryBlobStorage(BlobStorageInterface):
    """Keeps blobs in a dict keyed by file id."""

    def __init__(self):
        self._blobs: Dict[str, bytes] = {}

    async def initialize(self):
        pass

    async def close(self):
        pass

    async def save_blob(self, file_id: str, data: bytes) -> None:
        self._blobs[file_id] = bytes(data)

    async def get_blob(self, file_id: str) -> bytes:
        try:
            return self._blobs[file_id]
        except KeyError:
            raise BlobNotFoundError(f"File data not found: {file_id}") from None

    async def delete_blob(self, file_id: str) -> bool:
        return self._blobs.pop(file_id, None) is not None

    async def blob_exists(self, file_id: str) -> bool:
        return file_id in self._blobs
