# fakelang/core/corpus.py
"""Readers for the flat data files that live in the data directory."""
from pathlib import Path
from typing import Dict, List, Tuple
from loguru import logger

from .models import Language


def word_list_path(data_dir: Path, language: Language) -> Path:
    return Path(data_dir) / f"{language.value}_DictionarySorted.txt"


def training_corpus_path(data_dir: Path, language: Language) -> Path:
    if language == Language.RUSSIAN:
        return Path(data_dir) / f"{Language.RUSSIAN.value}_DictionaryIPA.txt"
    return Path(data_dir) / f"{Language.ENGLISH.value}_IPASyllables.txt"


def ipa_dictionary_path(data_dir: Path) -> Path:
    return Path(data_dir) / f"{Language.ENGLISH.value}_DictionaryIPA.txt"


def ipa_sounds_path(data_dir: Path) -> Path:
    return Path(data_dir) / f"{Language.ENGLISH.value}_IPASounds.txt"


def load_word_list(data_dir: Path, language: Language) -> List[str]:
    """
    Ordered words of a language: first tab-delimited field of each line,
    stripped and lower-cased. Blank lines are skipped; duplicates are kept
    (the dictionary build ignores repeats).
    """
    path = word_list_path(data_dir, language)
    content = path.read_text(encoding='utf-8') # FileNotFoundError propagates
    words = []
    for line in content.split("\n"):
        word = line.split("\t", 1)[0].strip().lower()
        if word:
            words.append(word)
    logger.info(f"Loaded {len(words)} words for {language.value} from {path.name}")
    return words


def load_training_corpus(data_dir: Path, language: Language) -> str:
    path = training_corpus_path(data_dir, language)
    content = path.read_text(encoding='utf-8')
    logger.info(f"Loaded training corpus for {language.value} from {path.name} ({len(content)} chars)")
    return content


def load_ipa_dictionary(data_dir: Path) -> Dict[str, str]:
    """`word,ipa` lines. Missing file -> empty dictionary."""
    path = ipa_dictionary_path(data_dir)
    if not path.is_file():
        logger.warning(f"IPA dictionary not found at {path}; readable words will not map back to real words.")
        return {}
    dictionary: Dict[str, str] = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            parts = line.split(",", 1)
            if len(parts) == 2:
                dictionary[parts[0].strip()] = parts[1].strip()
    logger.debug(f"Loaded {len(dictionary)} IPA transcriptions from {path.name}")
    return dictionary


def load_ipa_sounds(data_dir: Path) -> List[Tuple[str, str]]:
    """
    Ordered `ipa=letters` replacement pairs. Returns an empty list when the
    file is missing so the caller can pick its own default table.
    """
    path = ipa_sounds_path(data_dir)
    if not path.is_file():
        return []
    sounds: List[Tuple[str, str]] = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            parts = line.rstrip("\r\n").split("=")
            if len(parts) == 2:
                sounds.append((parts[0].strip(), parts[1].strip()))
    logger.debug(f"Loaded {len(sounds)} IPA sound replacements from {path.name}")
    return sounds
