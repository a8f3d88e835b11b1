"""
Data Room Service - the session facade over the pure state operations.

Holds the current state value, applies folder/file operations to it,
persists every accepted transition and keeps uploaded bytes in blob
storage in step with the file records.
"""
from typing import List, Optional

from . import file_service, folder_service
from .database.base import StateStoreInterface
from .pdf_service import PdfDocument, open_pdf
from .state_service import (
    check_invariants,
    default_clock,
    default_id_factory,
    get_child_files,
    get_child_folders,
    get_folder_path,
    initialize_state,
)
from .storage.base import BlobStorageInterface
from ..core.config import DEFAULT_FOLDER_NAME, MAX_FILE_SIZE, ROOT_FOLDER_NAME, SUPPORTED_FILE_TYPE
from ..core.logging_config import get_logger
from ..domain.entities import DataRoomState, FileItem, Folder, UploadDescriptor
from ..domain.exceptions import (
    DataRoomError,
    FileItemNotFoundError,
    FolderNotFoundError,
    StorageError,
)
from ..domain.value_objects import Clock, FolderId, IdFactory
from ..utils.search_utils import FolderView, ViewOptions, build_folder_view
from ..utils.validators import validate_file_size, validate_file_type

logger = get_logger(__name__)


class DataRoomService:
    """
    Stateful data room session.

    Every mutation builds a new state through the pure operations, then
    persists it. A failed save does not undo the transition: the error is
    logged and kept in `last_save_error` for the caller to report.
    """

    def __init__(
        self,
        state_store: StateStoreInterface,
        blob_storage: BlobStorageInterface,
        *,
        max_file_size: int = MAX_FILE_SIZE,
        root_name: str = ROOT_FOLDER_NAME,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize data room service.

        Args:
            state_store: Persistence adapter (dependency injection)
            blob_storage: Storage adapter for uploaded bytes
            max_file_size: Upload size limit in bytes
            root_name: Label of the root folder of a fresh data room
            id_factory: Identifier generator
            clock: Time source
        """
        self._store = state_store
        self._blobs = blob_storage
        self.max_file_size = max_file_size
        self.root_name = root_name
        self._id_factory = id_factory or default_id_factory
        self._clock = clock or default_clock

        self._state: Optional[DataRoomState] = None
        self._current_folder_id: Optional[FolderId] = None
        self.last_save_error: Optional[StorageError] = None
        self._save_error_reported = False

    # Lifecycle

    async def open(self) -> DataRoomState:
        """
        Load the saved data room, or start a fresh one.

        Raises:
            InvalidStateError: If the saved state breaks the tree invariants
        """
        state = await self._store.load()
        if state is None:
            logger.info("No saved data room found, initializing a new one")
            state = initialize_state(self.root_name, id_factory=self._id_factory, clock=self._clock)
            self._state = state
            await self._persist()
        else:
            check_invariants(state)
            self._state = state

        self._current_folder_id = state.root_folder_id
        return state

    async def close(self):
        """Close the underlying adapters."""
        await self._store.close()
        await self._blobs.close()

    @property
    def state(self) -> DataRoomState:
        if self._state is None:
            raise DataRoomError("Data room is not open")
        return self._state

    @property
    def current_folder_id(self) -> FolderId:
        if self._current_folder_id is None:
            raise DataRoomError("Data room is not open")
        return self._current_folder_id

    async def _commit(self, new_state: DataRoomState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        if self._current_folder_id not in new_state.folders:
            self._current_folder_id = new_state.root_folder_id
        await self._persist()

    async def _persist(self) -> None:
        try:
            await self._store.save(self.state)
        except StorageError as e:
            self.last_save_error = e
            if not self._save_error_reported:
                logger.error(f"Unable to save changes locally: {e}")
                self._save_error_reported = True
            else:
                logger.debug(f"Save failed again: {e}")
            return
        self.last_save_error = None
        self._save_error_reported = False

    # Folders

    async def create_folder(self, name: str = DEFAULT_FOLDER_NAME, parent_id: Optional[str] = None) -> Folder:
        """Create a folder in parent_id (defaults to the current folder)."""
        parent_id = parent_id or self.current_folder_id
        before = self.state
        new_state = folder_service.create_folder(
            before, parent_id, name, id_factory=self._id_factory, clock=self._clock
        )
        folder_id = next(iter(new_state.folders.keys() - before.folders.keys()))
        await self._commit(new_state)
        return new_state.folders[folder_id]

    async def rename_folder(self, folder_id: str, new_name: str) -> Optional[Folder]:
        """Rename a folder. Returns None if it no longer exists."""
        await self._commit(folder_service.rename_folder(self.state, folder_id, new_name, clock=self._clock))
        return self.state.folders.get(folder_id)

    async def delete_folder(self, folder_id: str) -> int:
        """
        Delete a folder, its subfolders and their files.

        Returns:
            Number of items deleted (folders and files)
        """
        before = self.state
        new_state = folder_service.delete_folder(before, folder_id)
        if new_state is before:
            return 0

        doomed_files = [file_id for file_id in before.files if file_id not in new_state.files]
        for file_id in doomed_files:
            await self._discard_blob(file_id)

        if self._current_folder_id not in new_state.folders:
            parent_id = before.folders[folder_id].parent_id
            self._current_folder_id = parent_id if parent_id in new_state.folders else new_state.root_folder_id

        await self._commit(new_state)
        return (len(before.folders) - len(new_state.folders)) + len(doomed_files)

    # Files

    async def upload_file(self, descriptor: UploadDescriptor, folder_id: Optional[str] = None) -> FileItem:
        """
        Upload a PDF into folder_id (defaults to the current folder).

        The bytes are stored before the state changes, so a storage failure
        leaves the data room exactly as it was.

        Raises:
            UnsupportedFileTypeError: If the file is not a PDF
            FileTooLargeError: If the file exceeds max_file_size
            StorageError: If the bytes could not be stored
        """
        validate_file_type(descriptor.media_type, [SUPPORTED_FILE_TYPE])
        validate_file_size(descriptor.byte_length, self.max_file_size)

        target_id = folder_id or self.current_folder_id
        before = self.state
        new_state = file_service.add_file(
            before, target_id, descriptor, id_factory=self._id_factory, clock=self._clock
        )
        file_id = next(iter(new_state.files.keys() - before.files.keys()))

        await self._blobs.save_blob(file_id, descriptor.data)
        await self._commit(new_state)

        file = new_state.files[file_id]
        logger.info(f"Uploaded {descriptor.name} as '{file.name}' ({file_id})")
        return file

    async def rename_file(self, file_id: str, new_name: str) -> Optional[FileItem]:
        """Rename a file. Returns None if it no longer exists."""
        await self._commit(file_service.rename_file(self.state, file_id, new_name, clock=self._clock))
        return self.state.files.get(file_id)

    async def delete_file(self, file_id: str) -> bool:
        """Delete a file and its bytes. Returns False if it was already gone."""
        before = self.state
        new_state = file_service.delete_file(before, file_id)
        if new_state is before:
            return False
        await self._discard_blob(file_id)
        await self._commit(new_state)
        return True

    async def read_file(self, file_id: str) -> bytes:
        """
        Get the stored bytes of a file.

        Raises:
            FileItemNotFoundError: If the file is not in the data room
            BlobNotFoundError: If its bytes are missing from storage
        """
        if file_id not in self.state.files:
            raise FileItemNotFoundError(f"File '{file_id}' not found")
        return await self._blobs.get_blob(file_id)

    async def open_file(self, file_id: str) -> PdfDocument:
        """Open a stored file for viewing."""
        return open_pdf(await self.read_file(file_id))

    async def _discard_blob(self, file_id: str) -> None:
        try:
            await self._blobs.delete_blob(file_id)
        except StorageError as e:
            logger.warning(f"Could not remove stored data for {file_id}: {e}")

    # Navigation and listing

    def navigate(self, folder_id: str) -> Folder:
        """
        Make folder_id the current folder.

        Raises:
            FolderNotFoundError: If the folder does not exist
        """
        folder = self.state.folders.get(folder_id)
        if folder is None:
            raise FolderNotFoundError(f"Folder '{folder_id}' not found")
        self._current_folder_id = folder.id
        return folder

    def go_back(self) -> Folder:
        """Move to the parent of the current folder; stays put at the root."""
        current = self.state.folders[self.current_folder_id]
        if current.parent_id is not None:
            self._current_folder_id = current.parent_id
        return self.state.folders[self.current_folder_id]

    def breadcrumbs(self) -> List[Folder]:
        """Folders from the root down to the current folder."""
        return get_folder_path(self.state, self.current_folder_id)

    def view(self, options: Optional[ViewOptions] = None) -> FolderView:
        """List the current folder's children with search/sort/filter/paging."""
        state = self.state
        return build_folder_view(
            get_child_folders(state, self.current_folder_id),
            get_child_files(state, self.current_folder_id),
            options,
            now=self._clock()
        )
