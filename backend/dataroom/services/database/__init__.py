"""
State persistence layer for plug-and-play storage support.
Supports JSON (file-based) and Memory (in-memory) backends.
"""
from .base import StateStoreInterface
from .memory_adapter import MemoryStateStore
from .json_adapter import JSONStateStore
from .factory import StateStoreFactory

__all__ = [
    "StateStoreInterface",
    "MemoryStateStore",
    "JSONStateStore",
    "StateStoreFactory"
]
