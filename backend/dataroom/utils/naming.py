"""
Naming utilities - scope-aware uniqueness checks and numbered-suffix generation.

Folders are unique among siblings sharing a parent; files are unique among
files sharing a folder. The two namespaces are independent. All comparisons
are case-insensitive, while generated names keep the caller's casing.
"""
import re
from typing import Callable, Optional, Tuple

from ..domain.entities import DataRoomState
from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Trailing " (<digits>)" suffix, e.g. "Report (5)"
SUFFIX_PATTERN = re.compile(r"^(.+?)\s*\((\d+)\)$")


def is_duplicate_folder_name(
    state: DataRoomState,
    parent_id: Optional[str],
    name: str,
    exclude_id: Optional[str] = None
) -> bool:
    """
    Check whether a sibling folder under parent_id already uses name.

    Args:
        state: Current state
        parent_id: Parent folder id (the scope)
        name: Name to test
        exclude_id: Folder id to ignore (the folder being renamed)
    """
    lowered = name.lower()
    return any(
        folder.id != exclude_id
        and folder.parent_id == parent_id
        and folder.name.lower() == lowered
        for folder in state.folders.values()
    )


def is_duplicate_file_name(
    state: DataRoomState,
    folder_id: str,
    name: str,
    exclude_id: Optional[str] = None
) -> bool:
    """
    Check whether a file in folder_id already uses name.

    Args:
        state: Current state
        folder_id: Containing folder id (the scope)
        name: Name to test
        exclude_id: File id to ignore (the file being renamed)
    """
    lowered = name.lower()
    return any(
        file.id != exclude_id
        and file.folder_id == folder_id
        and file.name.lower() == lowered
        for file in state.files.values()
    )


def split_numbered_suffix(name: str) -> Tuple[str, int]:
    """
    Split "Report (5)" into ("Report", 5).

    Names without a suffix come back unchanged with 0. A name that simply
    ends in "(1)" text is indistinguishable from a suffixed one.
    """
    match = SUFFIX_PATTERN.match(name)
    if not match:
        return name, 0
    return match.group(1).strip(), int(match.group(2))


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split at the last dot: "report.final.pdf" -> ("report.final", ".pdf").
    Names without a dot have an empty extension.
    """
    dot_index = name.rfind(".")
    if dot_index == -1:
        return name, ""
    return name[:dot_index], name[dot_index:]


def _next_free_name(stem: str, extension: str, is_taken: Callable[[str], bool]) -> str:
    base, number = split_numbered_suffix(stem)
    number += 1
    candidate = f"{base} ({number}){extension}"
    while is_taken(candidate):
        number += 1
        candidate = f"{base} ({number}){extension}"
    return candidate


def generate_unique_folder_name(
    state: DataRoomState,
    parent_id: Optional[str],
    base_name: str,
    exclude_id: Optional[str] = None
) -> str:
    """
    Generate a folder name that is free under parent_id.

    Examples: "Folder" -> "Folder (1)" -> "Folder (2)".
    An existing number keeps counting up: "Report (5)" -> "Report (6)".

    Args:
        state: Current state
        parent_id: Parent folder id
        base_name: Desired name
        exclude_id: Folder id to ignore (the folder being renamed)

    Returns:
        A name not used by any sibling
    """
    def is_taken(candidate: str) -> bool:
        return is_duplicate_folder_name(state, parent_id, candidate, exclude_id)

    if not is_taken(base_name):
        return base_name

    unique_name = _next_free_name(base_name, "", is_taken)
    logger.debug(f"Folder name '{base_name}' taken in {parent_id}, using '{unique_name}'")
    return unique_name


def generate_unique_file_name(
    state: DataRoomState,
    folder_id: str,
    base_name: str,
    exclude_id: Optional[str] = None
) -> str:
    """
    Generate a file name that is free in folder_id.

    The suffix goes before the extension: "file.pdf" -> "file (1).pdf".
    Files without an extension are numbered like folders: "notes" -> "notes (1)".

    Args:
        state: Current state
        folder_id: Containing folder id
        base_name: Desired name (with or without extension)
        exclude_id: File id to ignore (the file being renamed)

    Returns:
        A name not used by any other file in the folder
    """
    def is_taken(candidate: str) -> bool:
        return is_duplicate_file_name(state, folder_id, candidate, exclude_id)

    if not is_taken(base_name):
        return base_name

    stem, extension = split_extension(base_name)
    unique_name = _next_free_name(stem, extension, is_taken)
    logger.debug(f"File name '{base_name}' taken in {folder_id}, using '{unique_name}'")
    return unique_name
