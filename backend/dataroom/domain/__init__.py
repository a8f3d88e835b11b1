"""
Domain layer - Contains business entities and domain errors.
This layer is independent of infrastructure and frameworks.
"""
from .entities import DataRoomState, FileItem, Folder, UploadDescriptor
from .value_objects import FileId, FolderId, PDF_FILE_KIND
from .exceptions import (
    BlobNotFoundError,
    DataRoomError,
    FileItemNotFoundError,
    FileTooLargeError,
    FolderNotFoundError,
    InvalidStateError,
    NotFoundError,
    PdfLoadError,
    PdfPageError,
    StorageError,
    UnsupportedFileTypeError,
    ValidationError,
)

__all__ = [
    "DataRoomState",
    "FileItem",
    "Folder",
    "UploadDescriptor",
    "FileId",
    "FolderId",
    "PDF_FILE_KIND",
    "BlobNotFoundError",
    "DataRoomError",
    "FileItemNotFoundError",
    "FileTooLargeError",
    "FolderNotFoundError",
    "InvalidStateError",
    "NotFoundError",
    "PdfLoadError",
    "PdfPageError",
    "StorageError",
    "UnsupportedFileTypeError",
    "ValidationError",
]
