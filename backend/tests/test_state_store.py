"""Tests for the state persistence adapters."""
import pytest

from dataroom.domain.exceptions import StorageError
from dataroom.services.database import JSONStateStore, MemoryStateStore, StateStoreFactory
from dataroom.services.file_service import add_file
from dataroom.services.folder_service import create_folder
from dataroom.services.state_service import initialize_state
from conftest import pdf_upload


@pytest.fixture
def populated_state(ids, clock):
    state = initialize_state("Data Room", id_factory=ids, clock=clock)
    root_id = state.root_folder_id
    state = create_folder(state, root_id, "Contracts", id_factory=ids, clock=clock)
    state = add_file(state, "id-2", pdf_upload("nda.pdf", data=b"123"), id_factory=ids, clock=clock)
    return add_file(state, root_id, pdf_upload("overview.pdf", data=b"45"), id_factory=ids, clock=clock)


@pytest.mark.asyncio
async def test_json_round_trip(tmp_path, populated_state):
    store = JSONStateStore(data_dir=tmp_path)
    await store.initialize()
    await store.save(populated_state)

    loaded = await JSONStateStore(data_dir=tmp_path).load()
    assert loaded == populated_state


@pytest.mark.asyncio
async def test_json_load_without_file(tmp_path):
    store = JSONStateStore(data_dir=tmp_path)
    assert await store.load() is None


@pytest.mark.asyncio
async def test_json_load_ignores_corrupt_file(tmp_path):
    store = JSONStateStore(data_dir=tmp_path)
    await store.initialize()
    store.state_file.write_text("{not json", encoding="utf-8")
    assert await store.load() is None


@pytest.mark.asyncio
async def test_json_load_ignores_wrong_schema(tmp_path):
    store = JSONStateStore(data_dir=tmp_path)
    await store.initialize()
    store.state_file.write_text('{"folders": []}', encoding="utf-8")
    assert await store.load() is None


@pytest.mark.asyncio
async def test_json_save_failure_raises_storage_error(tmp_path, populated_state):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file where a directory should be")
    store = JSONStateStore(data_dir=blocker / "nested")
    with pytest.raises(StorageError):
        await store.save(populated_state)


@pytest.mark.asyncio
async def test_json_clear(tmp_path, populated_state):
    store = JSONStateStore(data_dir=tmp_path)
    await store.save(populated_state)
    await store.clear()
    assert not store.state_file.exists()
    assert await store.load() is None


@pytest.mark.asyncio
async def test_memory_round_trip(populated_state):
    store = MemoryStateStore()
    assert await store.load() is None
    await store.save(populated_state)
    assert await store.load() == populated_state
    assert store.save_count == 1
    await store.clear()
    assert await store.load() is None


@pytest.mark.asyncio
async def test_factory(tmp_path):
    assert isinstance(StateStoreFactory.create("memory"), MemoryStateStore)
    store = await StateStoreFactory.create_and_initialize("json", data_dir=str(tmp_path / "db"))
    assert isinstance(store, JSONStateStore)
    assert store.data_dir.is_dir()


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError, match="Unsupported state store type"):
        StateStoreFactory.create("postgres")
