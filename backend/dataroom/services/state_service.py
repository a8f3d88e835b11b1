"""
State Service - lifecycle and read-side queries of the data room tree.
Follows Single Responsibility Principle.
"""
import uuid
from datetime import datetime
from typing import List, Optional, Set

from ..core.config import ROOT_FOLDER_NAME
from ..core.logging_config import get_logger
from ..domain.entities import DataRoomState, FileItem, Folder
from ..domain.exceptions import InvalidStateError
from ..domain.value_objects import Clock, FolderId, IdFactory

logger = get_logger(__name__)


def default_id_factory() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid.uuid4())


def default_clock() -> datetime:
    """Current local time."""
    return datetime.now()


def initialize_state(
    root_name: str = ROOT_FOLDER_NAME,
    *,
    id_factory: Optional[IdFactory] = None,
    clock: Optional[Clock] = None
) -> DataRoomState:
    """
    Create an empty data room holding only the root folder.

    Args:
        root_name: Label of the root folder
        id_factory: Identifier generator (defaults to uuid4)
        clock: Time source (defaults to datetime.now)

    Returns:
        Fresh state
    """
    id_factory = id_factory or default_id_factory
    clock = clock or default_clock

    root_id = FolderId(id_factory())
    now = clock()
    root = Folder(
        id=root_id,
        name=root_name,
        parent_id=None,
        created_at=now,
        updated_at=now
    )
    logger.info(f"Initialized data room '{root_name}' ({root_id})")
    return DataRoomState(folders={root_id: root}, files={}, root_folder_id=root_id)


def check_invariants(state: DataRoomState) -> None:
    """
    Verify the tree invariants.

    Raises:
        InvalidStateError: On the first violation found
    """
    roots = [folder.id for folder in state.folders.values() if folder.parent_id is None]
    if roots != [state.root_folder_id]:
        raise InvalidStateError(
            f"Expected exactly one root folder '{state.root_folder_id}', found {roots}"
        )

    for key, folder in state.folders.items():
        if key != folder.id:
            raise InvalidStateError(f"Folder stored under '{key}' has id '{folder.id}'")
        if folder.parent_id is not None and folder.parent_id not in state.folders:
            raise InvalidStateError(f"Folder '{folder.id}' references missing parent '{folder.parent_id}'")
        if folder.updated_at < folder.created_at:
            raise InvalidStateError(f"Folder '{folder.id}' was updated before it was created")

    for key, file in state.files.items():
        if key != file.id:
            raise InvalidStateError(f"File stored under '{key}' has id '{file.id}'")
        if file.folder_id not in state.folders:
            raise InvalidStateError(f"File '{file.id}' references missing folder '{file.folder_id}'")
        if file.size < 0:
            raise InvalidStateError(f"File '{file.id}' has negative size")
        if file.updated_at < file.created_at:
            raise InvalidStateError(f"File '{file.id}' was updated before it was created")

    # Every folder must reach the root
    for folder in state.folders.values():
        seen: Set[str] = set()
        cursor: Optional[Folder] = folder
        while cursor is not None and cursor.parent_id is not None:
            if cursor.id in seen:
                raise InvalidStateError(f"Folder '{folder.id}' is part of a cycle")
            seen.add(cursor.id)
            cursor = state.folders.get(cursor.parent_id)

    folder_names = set()
    for folder in state.folders.values():
        key = (folder.parent_id, folder.name.lower())
        if key in folder_names:
            raise InvalidStateError(f"Duplicate folder name '{folder.name}' under '{folder.parent_id}'")
        folder_names.add(key)

    file_names = set()
    for file in state.files.values():
        key = (file.folder_id, file.name.lower())
        if key in file_names:
            raise InvalidStateError(f"Duplicate file name '{file.name}' in '{file.folder_id}'")
        file_names.add(key)


def get_child_folders(state: DataRoomState, folder_id: str) -> List[Folder]:
    """Folders directly under folder_id, in insertion order."""
    return [folder for folder in state.folders.values() if folder.parent_id == folder_id]


def get_child_files(state: DataRoomState, folder_id: str) -> List[FileItem]:
    """Files directly in folder_id, in insertion order."""
    return [file for file in state.files.values() if file.folder_id == folder_id]


def get_folder_path(state: DataRoomState, folder_id: str) -> List[Folder]:
    """
    Breadcrumb trail from the root down to folder_id.
    Unknown ids fall back to the root.
    """
    cursor = state.folders.get(folder_id) or state.folders.get(state.root_folder_id)
    path: List[Folder] = []
    seen: Set[str] = set()
    while cursor is not None and cursor.id not in seen:
        seen.add(cursor.id)
        path.append(cursor)
        if cursor.parent_id is None:
            break
        cursor = state.folders.get(cursor.parent_id)
    path.reverse()
    return path
