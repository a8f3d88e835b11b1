"""
JSON file-based adapter implementing StateStoreInterface.
Stores the whole data room in a single JSON document on disk.
Data persists between restarts, no database setup needed.
"""
import asyncio
import os
from pathlib import Path
from typing import Optional
from threading import Lock

from pydantic import ValidationError as SchemaError

from .base import StateStoreInterface
from ...api.mappers import StateMapper
from ...core.config import DATA_DIR, JSON_DB_PATH, STATE_FILE_NAME
from ...core.logging_config import get_logger
from ...domain.entities import DataRoomState
from ...domain.exceptions import StorageError

logger = get_logger(__name__)


class JSONStateStore(StateStoreInterface):
    """
    JSON file-based state store.
    Writes go to a temporary file first and are then swapped in,
    so a crash mid-write never leaves a truncated document behind.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize JSON store.

        Args:
            data_dir: Directory for the state file (defaults to JSON_DB_PATH or DATA_DIR/json_db)
        """
        if data_dir is None:
            data_dir = JSON_DB_PATH or DATA_DIR / "json_db"

        self.data_dir = Path(data_dir)
        self.state_file = self.data_dir / STATE_FILE_NAME

        # Lock for thread-safe file operations
        self._lock = Lock()

    async def initialize(self):
        """Initialize store - ensure the data directory exists."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create data directory {self.data_dir}: {e}") from e

    async def close(self):
        """Close store (no-op, every save is flushed immediately)."""
        pass

    async def load(self) -> Optional[DataRoomState]:
        """Load state from the JSON file."""
        def _read() -> Optional[str]:
            with self._lock:
                if not self.state_file.exists():
                    return None
                return self.state_file.read_text(encoding="utf-8")

        try:
            loop = asyncio.get_running_loop()
            text = await loop.run_in_executor(None, _read)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {self.state_file}: {e}")
            return None

        if text is None:
            logger.debug(f"No saved state at {self.state_file}")
            return None

        try:
            state = StateMapper.from_json(text)
        except SchemaError as e:
            logger.warning(f"Ignoring unreadable state file {self.state_file}: {e}")
            return None

        logger.info(f"Loaded state: {len(state.folders)} folder(s), {len(state.files)} file(s)")
        return state

    async def save(self, state: DataRoomState) -> None:
        """Save state to the JSON file."""
        text = StateMapper.to_json(state)

        def _write():
            with self._lock:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                tmp_file = self.state_file.with_suffix(".tmp")
                tmp_file.write_text(text, encoding="utf-8")
                os.replace(tmp_file, self.state_file)

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, _write)
        except OSError as e:
            logger.error(f"Error saving {self.state_file}: {e}", exc_info=True)
            raise StorageError(f"Unable to save changes: {e}") from e

    async def clear(self) -> None:
        """Delete the JSON file."""
        def _delete():
            with self._lock:
                if self.state_file.exists():
                    self.state_file.unlink()

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, _delete)
        except OSError as e:
            raise StorageError(f"Unable to clear saved state: {e}") from e
