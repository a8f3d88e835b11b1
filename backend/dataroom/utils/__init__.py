"""
Utility functions - Pure functions with no dependencies.
These can be used across all layers.
"""
from .naming import (
    generate_unique_file_name,
    generate_unique_folder_name,
    is_duplicate_file_name,
    is_duplicate_folder_name,
)
from .validators import validate_file_size, validate_file_type, validate_name
from .search_utils import FolderView, ViewOptions, build_folder_view

__all__ = [
    "generate_unique_file_name",
    "generate_unique_folder_name",
    "is_duplicate_file_name",
    "is_duplicate_folder_name",
    "validate_file_size",
    "validate_file_type",
    "validate_name",
    "FolderView",
    "ViewOptions",
    "build_folder_view"
]
