"""
Services - folder/file operations, state lifecycle, adapters and the session facade.
"""
from .data_room_service import DataRoomService
from .folder_service import collect_descendant_ids, create_folder, delete_folder, rename_folder
from .file_service import add_file, delete_file, rename_file
from .pdf_service import PdfDocument, Viewport, open_pdf
from .state_service import (
    check_invariants,
    get_child_files,
    get_child_folders,
    get_folder_path,
    initialize_state,
)

__all__ = [
    "DataRoomService",
    "collect_descendant_ids",
    "create_folder",
    "delete_folder",
    "rename_folder",
    "add_file",
    "delete_file",
    "rename_file",
    "PdfDocument",
    "Viewport",
    "open_pdf",
    "check_invariants",
    "get_child_files",
    "get_child_folders",
    "get_folder_path",
    "initialize_state"
]
