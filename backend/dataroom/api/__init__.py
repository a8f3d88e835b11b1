"""
Serialization boundary - DTOs and mappers for the persisted state.
"""
from .dto import DataRoomStateDTO, FileItemDTO, FolderDTO
from .mappers import FileItemMapper, FolderMapper, StateMapper

__all__ = [
    "DataRoomStateDTO",
    "FileItemDTO",
    "FolderDTO",
    "FileItemMapper",
    "FolderMapper",
    "StateMapper"
]
