"""
Search utility functions for filtering, sorting and paging folder listings.
Pure projections over folder/file entities - nothing here mutates its input.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from ..core.config import ITEMS_PER_PAGE
from ..domain.entities import FileItem, Folder
from ..core.logging_config import get_logger

logger = get_logger(__name__)

SORT_ORDERS = ("default", "asc", "desc")
FILTER_TYPES = ("all", "folders", "files")

# Recency buckets, matched against the age of updated_at
DATE_FILTERS = {
    "any": None,
    "24h": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}

Item = TypeVar("Item", Folder, FileItem)


@dataclass(frozen=True)
class ViewOptions:
    """Listing options chosen in the toolbar."""
    search_term: str = ""
    sort_order: str = "default"
    filter_type: str = "all"
    date_filter: str = "any"
    page: int = 1
    page_size: int = ITEMS_PER_PAGE

    def __post_init__(self):
        if self.sort_order not in SORT_ORDERS:
            raise ValueError(f"Unsupported sort order: {self.sort_order}")
        if self.filter_type not in FILTER_TYPES:
            raise ValueError(f"Unsupported filter type: {self.filter_type}")
        if self.date_filter not in DATE_FILTERS:
            raise ValueError(f"Unsupported date filter: {self.date_filter}")
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")

    @property
    def normalized_search(self) -> str:
        return self.search_term.strip().lower()

    @property
    def has_active_filters(self) -> bool:
        return bool(self.normalized_search) or self.filter_type != "all" or self.date_filter != "any"


@dataclass(frozen=True)
class FolderView:
    """One page of a folder listing, folders before files."""
    folders: Tuple[Folder, ...]
    files: Tuple[FileItem, ...]
    page: int
    total_pages: int
    total_items: int
    has_active_filters: bool

    @property
    def items(self) -> Tuple[Union[Folder, FileItem], ...]:
        return self.folders + self.files


def matches_search(name: str, normalized_term: str) -> bool:
    """Case-insensitive substring match; an empty term matches everything."""
    if not normalized_term:
        return True
    return normalized_term in name.lower()


def matches_date_filter(updated_at: datetime, date_filter: str, now: datetime) -> bool:
    """Check whether updated_at falls within the chosen recency bucket."""
    window = DATE_FILTERS[date_filter]
    if window is None:
        return True
    return now - updated_at <= window


def sort_items(items: Iterable[Item], sort_order: str) -> List[Item]:
    """
    Sort by lower-cased name. "default" keeps the given order.
    sorted() is stable, so equal names keep their relative order.
    """
    items = list(items)
    if sort_order == "asc":
        return sorted(items, key=lambda item: item.name.lower())
    if sort_order == "desc":
        return sorted(items, key=lambda item: item.name.lower(), reverse=True)
    return items


def filter_items(
    items: Iterable[Item],
    options: ViewOptions,
    now: datetime
) -> List[Item]:
    """Apply the search term and recency filter."""
    term = options.normalized_search
    return [
        item for item in items
        if matches_search(item.name, term)
        and matches_date_filter(item.updated_at, options.date_filter, now)
    ]


def build_folder_view(
    folders: Sequence[Folder],
    files: Sequence[FileItem],
    options: Optional[ViewOptions] = None,
    now: Optional[datetime] = None
) -> FolderView:
    """
    Build the visible page of a folder's children.

    Args:
        folders: Child folders of the current folder
        files: Files in the current folder
        options: Search/sort/filter/page options (defaults to no filtering)
        now: Reference time for the recency filter (defaults to datetime.now())

    Returns:
        FolderView with the requested page; the page number is clamped
    """
    if options is None:
        options = ViewOptions()
    if now is None:
        now = datetime.now()

    visible_folders: List[Folder] = []
    visible_files: List[FileItem] = []
    if options.filter_type != "files":
        visible_folders = sort_items(filter_items(folders, options, now), options.sort_order)
    if options.filter_type != "folders":
        visible_files = sort_items(filter_items(files, options, now), options.sort_order)

    total_items = len(visible_folders) + len(visible_files)
    total_pages = max(1, math.ceil(total_items / options.page_size))
    page = min(max(options.page, 1), total_pages)

    start = (page - 1) * options.page_size
    end = start + options.page_size
    folder_count = len(visible_folders)

    page_folders = visible_folders[start:end]
    page_files = visible_files[max(start - folder_count, 0):max(end - folder_count, 0)]

    return FolderView(
        folders=tuple(page_folders),
        files=tuple(page_files),
        page=page,
        total_pages=total_pages,
        total_items=total_items,
        has_active_filters=options.has_active_filters,
    )
