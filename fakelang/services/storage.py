# fakelang/services/storage.py
import copy
import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional
from loguru import logger


def atomic_write_text(path: Path, text: str) -> None:
    """
    Writes `text` to `path` via a temporary file in the same directory and os.replace.
    Errors propagate; the temporary file is removed if the replace did not happen.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_file_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            dir=path.parent,
            prefix=f".{path.name}_tmp",
            suffix=path.suffix,
            delete=False # Keep the file after closing for os.replace
        ) as temp_f:
            temp_file_path = Path(temp_f.name)
            temp_f.write(text)
            temp_f.flush()
            os.fsync(temp_f.fileno())
        os.replace(temp_file_path, path)
        temp_file_path = None
    finally:
        if temp_file_path and temp_file_path.exists():
            logger.warning(f"Cleaning up leftover temporary file: {temp_file_path}")
            try:
                temp_file_path.unlink()
            except OSError as unlink_err:
                logger.error(f"Failed to remove temporary file {temp_file_path}: {unlink_err}")


class DictionaryStore(ABC):
    """Key-value store of JSON objects (dictionaries, graph adjacency maps)."""

    @abstractmethod
    def read(self, name: str) -> Dict[str, Any]:
        """Returns the stored mapping, or an empty dict when nothing is stored under `name`."""
        pass

    @abstractmethod
    def write(self, name: str, mapping: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass


class JsonDictionaryStore(DictionaryStore):
    """One compact UTF-8 JSON file per key: <base_dir>/<name>.json"""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"JSON store initialized at {self.base_dir}")

    def path_for(self, name: str) -> Path:
        return self.base_dir / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> Dict[str, Any]:
        path = self.path_for(name)
        if not path.is_file():
            logger.debug(f"No stored data for '{name}', treating as empty.")
            return {}
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f) # Malformed JSON propagates as JSONDecodeError
        if not isinstance(data, dict):
            raise ValueError(f"Stored data in {path} is not a JSON object")
        logger.trace(f"Read {len(data)} entries from {path}")
        return data

    def write(self, name: str, mapping: Dict[str, Any]) -> None:
        path = self.path_for(name)
        text = json.dumps(mapping, ensure_ascii=False, separators=(",", ":"))
        atomic_write_text(path, text)
        logger.debug(f"Wrote {len(mapping)} entries to {path}")


class InMemoryDictionaryStore(DictionaryStore):
    """Process-local store. Values are copied in and out so callers cannot alias stored state."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(initial) if initial else {}

    def exists(self, name: str) -> bool:
        return name in self._data

    def read(self, name: str) -> Dict[str, Any]:
        return copy.deepcopy(self._data.get(name, {}))

    def write(self, name: str, mapping: Dict[str, Any]) -> None:
        self._data[name] = copy.deepcopy(mapping)
