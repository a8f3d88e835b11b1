"""
Data Transfer Objects (DTOs) for the persisted state blob.
Separates the storage contract from domain entities.
"""
from pydantic import BaseModel
from typing import Dict, Literal, Optional
from datetime import datetime


class FolderDTO(BaseModel):
    """Folder record as stored."""
    id: str
    name: str
    parent_id: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FileItemDTO(BaseModel):
    """File record as stored."""
    id: str
    name: str
    folder_id: str
    size: int
    type: Literal["pdf"] = "pdf"
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DataRoomStateDTO(BaseModel):
    """Whole data room as stored."""
    folders: Dict[str, FolderDTO]
    files: Dict[str, FileItemDTO]
    root_folder_id: str
