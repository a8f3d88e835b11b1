"""
Validation utilities - Pure validation functions.
"""
from typing import Iterable
from ..core.config import INVALID_NAME_CHARS, MAX_NAME_LENGTH
from ..core.logging_config import get_logger
from ..domain.exceptions import FileTooLargeError, UnsupportedFileTypeError, ValidationError

logger = get_logger(__name__)


def validate_name(name: str, kind: str = "Name") -> str:
    """
    Validate a folder or file name.

    Args:
        name: Requested name
        kind: Label used in error messages ("Folder name", "File name", ...)

    Returns:
        The trimmed name

    Raises:
        ValidationError: If the name is empty, too long or has forbidden characters
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError(f"{kind} cannot be empty")

    if len(trimmed) > MAX_NAME_LENGTH:
        raise ValidationError(f"{kind} is too long (max {MAX_NAME_LENGTH} characters)")

    found_chars = [char for char in INVALID_NAME_CHARS if char in trimmed]
    if found_chars:
        raise ValidationError(f"{kind} cannot contain: {' '.join(found_chars)}")

    return trimmed


def validate_file_size(size: int, max_size: int) -> None:
    """
    Validate upload size.

    Raises:
        FileTooLargeError: If size exceeds max_size
    """
    if size > max_size:
        max_mb = round(max_size / 1024 / 1024)
        raise FileTooLargeError(f"File is too large (max {max_mb}MB)")


def validate_file_type(media_type: str, allowed_types: Iterable[str]) -> None:
    """
    Validate upload media type.

    Raises:
        UnsupportedFileTypeError: If media_type is not allowed
    """
    if media_type not in allowed_types:
        raise UnsupportedFileTypeError("Only PDF files are supported")
