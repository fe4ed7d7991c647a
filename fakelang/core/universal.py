# fakelang/core/universal.py
from typing import Optional
from loguru import logger

from ..services.storage import DictionaryStore

DEFAULT_RESOURCE_NAME = "UniversalFakeDictionary"


class UniversalDictionary:
    """
    Cross-language overflow mapping (word -> fake word) for words outside the
    per-language dictionary. Read from the store on every lookup and written
    back after every change; nothing is cached between calls.
    """

    def __init__(self, store: DictionaryStore, resource_name: str = DEFAULT_RESOURCE_NAME):
        self.store = store
        self.resource_name = resource_name

    def get(self, word: str) -> Optional[str]:
        return self.store.read(self.resource_name).get(word)

    def add(self, word: str, replacement: str) -> None:
        """Adds or overwrites one pair and persists the whole mapping."""
        mapping = self.store.read(self.resource_name)
        mapping[word] = replacement
        self.store.write(self.resource_name, mapping)
        logger.debug(f"Universal dictionary now holds {len(mapping)} entries (added '{word}').")
