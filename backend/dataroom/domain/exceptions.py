"""
Domain exceptions.
Business errors raised by the core and its adapters.
"""


class DataRoomError(Exception):
    """Base class for all data room errors."""
    pass


class ValidationError(DataRoomError, ValueError):
    """Raised when a name, file type or request is rejected."""
    pass


class UnsupportedFileTypeError(ValidationError):
    """Raised when an upload is not a PDF."""
    pass


class FileTooLargeError(ValidationError):
    """Raised when an upload exceeds the size limit."""
    pass


class NotFoundError(DataRoomError, LookupError):
    """Raised when an id is not present in the state or storage."""
    pass


class FolderNotFoundError(NotFoundError):
    """Raised when folder is not found."""
    pass


class FileItemNotFoundError(NotFoundError):
    """Raised when file is not found."""
    pass


class BlobNotFoundError(NotFoundError):
    """Raised when the stored bytes for a file are missing."""
    pass


class StorageError(DataRoomError):
    """Raised when persisting state or file bytes fails."""
    pass


class InvalidStateError(DataRoomError):
    """Raised when a state violates the tree invariants."""
    pass


class PdfLoadError(DataRoomError):
    """Raised when stored bytes cannot be opened as a PDF."""
    pass


class PdfPageError(DataRoomError, IndexError):
    """Raised when a page number is out of range."""
    pass
