"""
Blob storage abstraction layer for plug-and-play storage support.
Holds the raw bytes of uploaded files, keyed by file id.
"""
from .base import BlobStorageInterface
from .local_storage import LocalBlobStorage
from .memory_storage import MemoryBlobStorage
from .factory import BlobStorageFactory

__all__ = [
    "BlobStorageInterface",
    "LocalBlobStorage",
    "MemoryBlobStorage",
    "BlobStorageFactory"
]
