# fakelang/core/cipher.py
import random
from functools import partial
from typing import Dict, Optional
from loguru import logger

from ..config.schema import CipherConfig
from ..services.storage import DictionaryStore, JsonDictionaryStore
from .corpus import load_training_corpus, load_word_list
from .dictionary_service import MIN_FAKE_WORD_LENGTH, FakeDictionaryService, is_acceptable_fake_word
from .generators import GenerationExhaustedError, SyllableGenerator, create_generator
from .graph_builder import GraphBuilder
from .models import Language, Token
from .phonetics import PhoneticConverter
from .tokenizer import detokenize, is_passthrough_token, tokenize
from .universal import UniversalDictionary

MAX_UNIVERSAL_ATTEMPTS = 100


class TextCipher:
    """Substitutes every word of a text with its fake word, and back."""

    def __init__(self, dictionary_service: FakeDictionaryService,
                 universal: UniversalDictionary,
                 converter: PhoneticConverter,
                 generator: Optional[SyllableGenerator] = None):
        self.dictionary_service = dictionary_service
        self.universal = universal
        self.converter = converter
        # Seeds fresh candidates for unseen words once the dictionary has values
        self.generator = generator if generator is not None else dictionary_service.generator

    @classmethod
    def from_config(cls, config: CipherConfig, language: Language,
                    store: Optional[DictionaryStore] = None) -> "TextCipher":
        """Wires store, converter, graph, generator and services for `language`."""
        data_dir = config.resolved_data_dir()
        store = store if store is not None else JsonDictionaryStore(config.resolved_cache_dir())
        rng = random.Random(config.seed)
        converter = PhoneticConverter.from_data_dir(data_dir)

        graph = None
        if config.generator == "markov":
            builder = GraphBuilder(store, converter, partial(load_training_corpus, data_dir), rng=rng)
            graph = builder.build(language)
        generator = create_generator(config.generator, graph=graph, rng=rng,
                                     max_attempts=config.markov_max_attempts)

        service = FakeDictionaryService(
            store, generator, converter,
            word_list_loader=partial(load_word_list, data_dir),
            max_attempts=config.dictionary_max_attempts,
        )
        universal = UniversalDictionary(store, config.universal_resource_name)
        logger.debug(f"TextCipher wired for {language.value} (generator={config.generator}, data={data_dir}).")
        return cls(service, universal, converter, generator)

    def encrypt(self, text: str, language: Language = Language.ENGLISH,
                rewrite_dictionary: bool = False) -> str:
        dictionary = self.dictionary_service.get_or_create(language, rewrite_dictionary)
        return detokenize(
            Token(self._convert_word(token.text.lower(), dictionary), is_word=True) if token.is_word else token
            for token in tokenize(text)
        )

    def decrypt(self, text: str, language: Language = Language.ENGLISH) -> str:
        dictionary = self.dictionary_service.get_or_create(language)
        # First source word wins when a value repeats
        originals: Dict[str, str] = {}
        for word, fake in dictionary.items():
            originals.setdefault(fake, word)

        return detokenize(
            Token(self._convert_back(token.text.lower(), originals), is_word=True) if token.is_word else token
            for token in tokenize(text)
        )

    # --- Word conversions ---

    def _convert_word(self, word: str, dictionary: Dict[str, str]) -> str:
        direct = dictionary.get(word)
        if direct is not None:
            return direct
        if is_passthrough_token(word):
            return word

        stored = self.universal.get(word)
        if stored is not None:
            return stored

        new_word = self._generate_unseen(word, dictionary)
        self.universal.add(word, new_word)
        return new_word

    def _generate_unseen(self, word: str, dictionary: Dict[str, str]) -> str:
        length = max(MIN_FAKE_WORD_LENGTH, len(word))
        taken = set(dictionary.values())
        for _ in range(MAX_UNIVERSAL_ATTEMPTS):
            if taken:
                seed = self.generator.generate(length, taken)
                min_length = MIN_FAKE_WORD_LENGTH
            else:
                # Nothing to collide with yet: the word stands for itself, whatever its length
                seed = word
                min_length = 1
            candidate = self.converter.to_readable_word(seed).lower()
            if is_acceptable_fake_word(candidate, taken, min_length):
                logger.debug(f"Generated universal fake word for '{word}'.")
                return candidate
        raise GenerationExhaustedError(
            f"Cannot generate unique fake for '{word}' after {MAX_UNIVERSAL_ATTEMPTS} tries."
        )

    def _convert_back(self, fake: str, originals: Dict[str, str]) -> str:
        original = originals.get(fake)
        if original:
            return original
        # Universal entries are looked up by key; unknown tokens come back unchanged
        stored = self.universal.get(fake)
        return stored if stored is not None else fake
