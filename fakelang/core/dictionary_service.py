# fakelang/core/dictionary_service.py
from typing import Callable, Collection, Dict, List, Set
from loguru import logger

from ..services.storage import DictionaryStore
from .generators import GenerationExhaustedError, SyllableGenerator
from .models import Language
from .phonetics import PhoneticConverter
from .tokenizer import is_single_word

MIN_FAKE_WORD_LENGTH = 3
DEFAULT_DICTIONARY_MAX_ATTEMPTS = 10_000
PROGRESS_LOG_INTERVAL = 5_000


def get_target_length(assigned_count: int, source_length: int) -> int:
    """
    Length handed to the generator for the next word. Short fake words while
    the dictionary is small, longer ones as the namespace fills up.
    """
    if assigned_count <= 100:
        return 3
    if assigned_count <= 1_000:
        return 4 if source_length < 6 else 6
    if assigned_count <= 10_000:
        return 5 if source_length < 7 else 7
    if assigned_count <= 50_000:
        return 8
    return 10


def is_acceptable_fake_word(candidate: str, taken: Collection[str],
                            min_length: int = MIN_FAKE_WORD_LENGTH) -> bool:
    """Unused, long enough, and a single word token so decryption can find it again."""
    return (
        len(candidate) >= min_length
        and candidate not in taken
        and is_single_word(candidate)
    )


class FakeDictionaryService:
    """Builds, persists and reloads the per-language word -> fake word dictionary."""

    def __init__(self, store: DictionaryStore, generator: SyllableGenerator,
                 converter: PhoneticConverter,
                 word_list_loader: Callable[[Language], List[str]],
                 max_attempts: int = DEFAULT_DICTIONARY_MAX_ATTEMPTS):
        self.store = store
        self.generator = generator
        self.converter = converter
        self.word_list_loader = word_list_loader
        self.max_attempts = max_attempts

    def get_or_create(self, language: Language, force_rebuild: bool = False) -> Dict[str, str]:
        key = language.dictionary_key
        if not force_rebuild:
            cached = self.store.read(key)
            if cached:
                logger.debug(f"Using cached {language.value} dictionary ({len(cached)} entries).")
                return cached

        words = self.word_list_loader(language)
        logger.info(f"Building {language.value} fake dictionary from {len(words)} words...")
        fake_dictionary: Dict[str, str] = {}
        used: Set[str] = set()

        for word in words:
            if word in fake_dictionary:
                continue
            target_length = get_target_length(len(fake_dictionary), len(word))
            candidate = self._next_fake_word(word, target_length, used)
            fake_dictionary[word] = candidate
            used.add(candidate)
            if len(fake_dictionary) % PROGRESS_LOG_INTERVAL == 0:
                logger.debug(f"{len(fake_dictionary)} fake words assigned...")

        self.store.write(key, fake_dictionary)
        logger.info(f"Stored {language.value} fake dictionary under '{key}' ({len(fake_dictionary)} entries).")
        return fake_dictionary

    def _next_fake_word(self, word: str, target_length: int, used: Set[str]) -> str:
        for _ in range(self.max_attempts):
            try:
                syllable = self.generator.generate(target_length, used)
            except GenerationExhaustedError as e:
                raise GenerationExhaustedError(f"Generator exhausted while assigning '{word}': {e}") from e
            candidate = self.converter.to_readable_word(syllable).lower()
            if is_acceptable_fake_word(candidate, used):
                return candidate
        raise GenerationExhaustedError(
            f"No unused fake word of length >= {MIN_FAKE_WORD_LENGTH} for '{word}' "
            f"after {self.max_attempts} attempts (target length {target_length})."
        )
