"""
Domain entities - Core business objects.
These represent the business concepts, not persistence records.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from .value_objects import FileId, FolderId, PDF_FILE_KIND


@dataclass(frozen=True)
class Folder:
    """
    Folder entity - a node of the data room tree.
    """
    id: FolderId
    name: str
    parent_id: Optional[FolderId]
    created_at: datetime
    updated_at: datetime

    def is_root(self) -> bool:
        """Check if folder is the root folder."""
        return self.parent_id is None


@dataclass(frozen=True)
class FileItem:
    """
    File entity - an uploaded document living in exactly one folder.
    """
    id: FileId
    name: str
    folder_id: FolderId
    size: int
    created_at: datetime
    updated_at: datetime
    type: str = PDF_FILE_KIND


@dataclass(frozen=True)
class UploadDescriptor:
    """
    File handed over by the upload pathway.
    `data` is opaque to the core and only ever passed to blob storage.
    """
    name: str
    media_type: str
    byte_length: int
    data: bytes = field(default=b"", repr=False)


@dataclass(frozen=True)
class DataRoomState:
    """
    Aggregate root: every folder and file plus the root pointer.

    Treated as an immutable value. Operations build a new state and share
    whichever mapping they did not touch; nothing writes into these dicts.
    """
    folders: Dict[FolderId, Folder]
    files: Dict[FileId, FileItem]
    root_folder_id: FolderId

    @property
    def root_folder(self) -> Folder:
        return self.folders[self.root_folder_id]
