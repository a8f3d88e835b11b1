"""
Folder Service - Business logic for folder operations.

Every function takes a state and returns a new one; the input is never
modified. Unchanged mappings are shared with the returned state.
"""
from dataclasses import replace
from typing import List, Optional, Set

from .state_service import default_clock, default_id_factory
from ..core.logging_config import get_logger
from ..domain.entities import DataRoomState, Folder
from ..domain.exceptions import FolderNotFoundError, ValidationError
from ..domain.value_objects import Clock, FolderId, IdFactory
from ..utils.naming import generate_unique_folder_name
from ..utils.validators import validate_name

logger = get_logger(__name__)


def create_folder(
    state: DataRoomState,
    parent_id: str,
    name: str,
    *,
    id_factory: Optional[IdFactory] = None,
    clock: Optional[Clock] = None
) -> DataRoomState:
    """
    Create a new folder under parent_id.

    Args:
        state: Current state
        parent_id: Containing folder id
        name: Desired name; a numbered suffix is added if a sibling uses it

    Returns:
        New state with the folder inserted

    Raises:
        ValidationError: If the name is empty or invalid
        FolderNotFoundError: If parent_id does not exist
    """
    trimmed = validate_name(name, "Folder name")
    if parent_id not in state.folders:
        raise FolderNotFoundError(f"Parent folder '{parent_id}' not found")

    unique_name = generate_unique_folder_name(state, parent_id, trimmed)
    folder_id = FolderId((id_factory or default_id_factory)())
    now = (clock or default_clock)()

    folder = Folder(
        id=folder_id,
        name=unique_name,
        parent_id=FolderId(parent_id),
        created_at=now,
        updated_at=now
    )
    logger.info(f"Created folder '{unique_name}' ({folder_id}) in {parent_id}")
    return replace(state, folders={**state.folders, folder_id: folder})


def rename_folder(
    state: DataRoomState,
    folder_id: str,
    new_name: str,
    *,
    clock: Optional[Clock] = None
) -> DataRoomState:
    """
    Rename a folder, keeping it unique among its siblings.

    Unknown ids and renames that resolve to the current name return state unchanged.

    Raises:
        ValidationError: If the name is empty or invalid
    """
    folder = state.folders.get(folder_id)
    if folder is None:
        logger.debug(f"Rename skipped, folder {folder_id} not found")
        return state

    trimmed = validate_name(new_name, "Folder name")
    unique_name = generate_unique_folder_name(state, folder.parent_id, trimmed, exclude_id=folder_id)
    if unique_name == folder.name:
        return state

    now = (clock or default_clock)()
    renamed = replace(folder, name=unique_name, updated_at=max(now, folder.updated_at))

    logger.info(f"Renamed folder {folder_id}: '{folder.name}' -> '{unique_name}'")
    return replace(state, folders={**state.folders, folder_id: renamed})


def collect_descendant_ids(state: DataRoomState, folder_id: str) -> Set[str]:
    """
    Return folder_id plus the ids of all folders below it.

    Uses an explicit worklist so deep trees do not hit the recursion limit.
    """
    if folder_id not in state.folders:
        return set()

    children: dict = {}
    for folder in state.folders.values():
        if folder.parent_id is not None:
            children.setdefault(folder.parent_id, []).append(folder.id)

    collected = {folder_id}
    pending: List[str] = [folder_id]
    while pending:
        current = pending.pop()
        for child_id in children.get(current, []):
            if child_id not in collected:
                collected.add(child_id)
                pending.append(child_id)
    return collected


def delete_folder(state: DataRoomState, folder_id: str) -> DataRoomState:
    """
    Delete a folder together with every descendant folder and all their files.

    Unknown ids return state unchanged.

    Raises:
        ValidationError: If folder_id is the root folder
    """
    if folder_id == state.root_folder_id:
        raise ValidationError("The root folder cannot be deleted")

    doomed = collect_descendant_ids(state, folder_id)
    if not doomed:
        logger.debug(f"Delete skipped, folder {folder_id} not found")
        return state

    folders = {fid: folder for fid, folder in state.folders.items() if fid not in doomed}
    files = {fid: file for fid, file in state.files.items() if file.folder_id not in doomed}

    logger.info(
        f"Deleted folder {folder_id}: {len(doomed)} folder(s), "
        f"{len(state.files) - len(files)} file(s)"
    )
    return replace(state, folders=folders, files=files)
