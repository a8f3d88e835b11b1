"""
Data room - nested folders of PDF documents with collision-free naming.
"""
from .domain import (
    DataRoomError,
    DataRoomState,
    FileItem,
    Folder,
    UploadDescriptor,
    ValidationError,
)
from .services import DataRoomService

__version__ = "1.0.0"

__all__ = [
    "DataRoomError",
    "DataRoomState",
    "FileItem",
    "Folder",
    "UploadDescriptor",
    "ValidationError",
    "DataRoomService"
]
