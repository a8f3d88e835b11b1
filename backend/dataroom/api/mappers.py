"""
Mappers between domain entities and DTOs.
Separates domain layer from the storage format.
"""
from ..domain.entities import DataRoomState, FileItem, Folder
from ..domain.value_objects import FileId, FolderId
from .dto import DataRoomStateDTO, FileItemDTO, FolderDTO


class FolderMapper:
    """Maps between Folder entity and FolderDTO."""

    @staticmethod
    def to_dto(folder: Folder) -> FolderDTO:
        """Convert domain entity to DTO."""
        return FolderDTO(
            id=folder.id,
            name=folder.name,
            parent_id=folder.parent_id,
            created_at=folder.created_at,
            updated_at=folder.updated_at
        )

    @staticmethod
    def to_entity(dto: FolderDTO) -> Folder:
        """Convert DTO to domain entity."""
        return Folder(
            id=FolderId(dto.id),
            name=dto.name,
            parent_id=FolderId(dto.parent_id) if dto.parent_id is not None else None,
            created_at=dto.created_at,
            updated_at=dto.updated_at
        )


class FileItemMapper:
    """Maps between FileItem entity and FileItemDTO."""

    @staticmethod
    def to_dto(file: FileItem) -> FileItemDTO:
        """Convert domain entity to DTO."""
        return FileItemDTO(
            id=file.id,
            name=file.name,
            folder_id=file.folder_id,
            size=file.size,
            type=file.type,
            created_at=file.created_at,
            updated_at=file.updated_at
        )

    @staticmethod
    def to_entity(dto: FileItemDTO) -> FileItem:
        """Convert DTO to domain entity."""
        return FileItem(
            id=FileId(dto.id),
            name=dto.name,
            folder_id=FolderId(dto.folder_id),
            size=dto.size,
            type=dto.type,
            created_at=dto.created_at,
            updated_at=dto.updated_at
        )


class StateMapper:
    """Maps between DataRoomState and its serialized form."""

    @staticmethod
    def to_dto(state: DataRoomState) -> DataRoomStateDTO:
        return DataRoomStateDTO(
            folders={fid: FolderMapper.to_dto(folder) for fid, folder in state.folders.items()},
            files={fid: FileItemMapper.to_dto(file) for fid, file in state.files.items()},
            root_folder_id=state.root_folder_id
        )

    @staticmethod
    def to_entity(dto: DataRoomStateDTO) -> DataRoomState:
        return DataRoomState(
            folders={FolderId(fid): FolderMapper.to_entity(folder) for fid, folder in dto.folders.items()},
            files={FileId(fid): FileItemMapper.to_entity(file) for fid, file in dto.files.items()},
            root_folder_id=FolderId(dto.root_folder_id)
        )

    @staticmethod
    def to_json(state: DataRoomState) -> str:
        """Serialize a state to JSON text."""
        return StateMapper.to_dto(state).model_dump_json(indent=2)

    @staticmethod
    def from_json(text: str) -> DataRoomState:
        """
        Parse JSON text into a state.

        Raises:
            pydantic.ValidationError: If the text is not a valid state document
        """
        return StateMapper.to_entity(DataRoomStateDTO.model_validate_json(text))
