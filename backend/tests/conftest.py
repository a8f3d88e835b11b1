import io
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from pypdf import PdfWriter

from dataroom.domain.entities import DataRoomState, FileItem, Folder, UploadDescriptor
from dataroom.services.data_room_service import DataRoomService
from dataroom.services.database import MemoryStateStore
from dataroom.services.storage import MemoryBlobStorage

EPOCH = datetime(2024, 1, 1, 12, 0, 0)


class TickingClock:
    """Clock that moves one second forward on every call."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


class SequentialIds:
    """Predictable id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


def make_folder(folder_id, name, parent_id, at=EPOCH):
    return Folder(id=folder_id, name=name, parent_id=parent_id, created_at=at, updated_at=at)


def make_file(file_id, name, folder_id, size=100, at=EPOCH):
    return FileItem(id=file_id, name=name, folder_id=folder_id, size=size, created_at=at, updated_at=at)


def make_state(folders, files=(), root_folder_id="root"):
    return DataRoomState(
        folders={folder.id: folder for folder in folders},
        files={file.id: file for file in files},
        root_folder_id=root_folder_id
    )


def make_pdf_bytes(pages: int = 1, width: float = 612, height: float = 792) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=width, height=height)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def pdf_upload(name: str = "report.pdf", data: bytes = None) -> UploadDescriptor:
    if data is None:
        data = make_pdf_bytes()
    return UploadDescriptor(name=name, media_type="application/pdf", byte_length=len(data), data=data)


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def base_state():
    """Root with two "New Folder" variants and two "file" variants."""
    return make_state(
        folders=[
            make_folder("root", "Root", None),
            make_folder("folder_a", "New Folder", "root"),
            make_folder("folder_b", "New Folder (1)", "root"),
        ],
        files=[
            make_file("file_1", "file.pdf", "root"),
            make_file("file_2", "file (1).pdf", "root"),
        ]
    )


@pytest.fixture
def root_only_state():
    return make_state(folders=[make_folder("root", "Root", None)])


@pytest.fixture
def state_store():
    return MemoryStateStore()


@pytest.fixture
def blob_storage():
    return MemoryBlobStorage()


@pytest_asyncio.fixture
async def service(state_store, blob_storage, ids, clock):
    data_room = DataRoomService(
        state_store,
        blob_storage,
        max_file_size=5 * 1024 * 1024,
        root_name="Acme Corp Data Room",
        id_factory=ids,
        clock=clock
    )
    await data_room.open()
    return data_room
