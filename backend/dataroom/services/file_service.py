"""
File Service - Business logic for file operations.

Files are scoped to a folder. Names get an extension-aware numbered suffix
on collision ("report.pdf" -> "report (1).pdf").
"""
from dataclasses import replace
from typing import Optional

from .state_service import default_clock, default_id_factory
from ..core.config import SUPPORTED_FILE_TYPE
from ..core.logging_config import get_logger
from ..domain.entities import DataRoomState, FileItem, UploadDescriptor
from ..domain.exceptions import FolderNotFoundError, ValidationError
from ..domain.value_objects import Clock, FileId, FolderId, IdFactory, PDF_FILE_KIND
from ..utils.naming import generate_unique_file_name
from ..utils.validators import validate_file_type, validate_name

logger = get_logger(__name__)


def add_file(
    state: DataRoomState,
    folder_id: str,
    descriptor: UploadDescriptor,
    *,
    id_factory: Optional[IdFactory] = None,
    clock: Optional[Clock] = None
) -> DataRoomState:
    """
    Register an uploaded file in folder_id.

    Only metadata is recorded; the bytes in descriptor.data are left to
    blob storage.

    Args:
        state: Current state
        folder_id: Target folder id
        descriptor: Upload descriptor (name, media type, byte length)

    Returns:
        New state with the file inserted

    Raises:
        UnsupportedFileTypeError: If the media type is not PDF
        ValidationError: If the file name is blank
        FolderNotFoundError: If folder_id does not exist
    """
    validate_file_type(descriptor.media_type, [SUPPORTED_FILE_TYPE])
    if not descriptor.name.strip():
        raise ValidationError("File name cannot be empty")
    if folder_id not in state.folders:
        raise FolderNotFoundError(f"Folder '{folder_id}' not found")

    unique_name = generate_unique_file_name(state, folder_id, descriptor.name)
    file_id = FileId((id_factory or default_id_factory)())
    now = (clock or default_clock)()

    file = FileItem(
        id=file_id,
        name=unique_name,
        folder_id=FolderId(folder_id),
        size=descriptor.byte_length,
        type=PDF_FILE_KIND,
        created_at=now,
        updated_at=now
    )
    logger.info(f"Added file '{unique_name}' ({file_id}, {descriptor.byte_length} bytes) to {folder_id}")
    return replace(state, files={**state.files, file_id: file})


def rename_file(
    state: DataRoomState,
    file_id: str,
    new_name: str,
    *,
    clock: Optional[Clock] = None
) -> DataRoomState:
    """
    Rename a file, keeping it unique within its folder.

    Unknown ids and renames that resolve to the current name return state unchanged.

    Raises:
        ValidationError: If the name is empty or invalid
    """
    file = state.files.get(file_id)
    if file is None:
        logger.debug(f"Rename skipped, file {file_id} not found")
        return state

    trimmed = validate_name(new_name, "File name")
    unique_name = generate_unique_file_name(state, file.folder_id, trimmed, exclude_id=file_id)
    if unique_name == file.name:
        return state

    now = (clock or default_clock)()
    renamed = replace(file, name=unique_name, updated_at=max(now, file.updated_at))

    logger.info(f"Renamed file {file_id}: '{file.name}' -> '{unique_name}'")
    return replace(state, files={**state.files, file_id: renamed})


def delete_file(state: DataRoomState, file_id: str) -> DataRoomState:
    """Remove a file. Unknown ids return state unchanged."""
    if file_id not in state.files:
        return state
    files = {fid: file for fid, file in state.files.items() if fid != file_id}
    logger.info(f"Deleted file {file_id}")
    return replace(state, files=files)
