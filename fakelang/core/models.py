# fakelang/core/models.py
from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Languages with a word list and a training corpus in the data directory."""
    ENGLISH = "English"
    RUSSIAN = "Russian"

    @property
    def dictionary_key(self) -> str:
        return f"{self.value}_FakeDictionary"

    @property
    def graph_key(self) -> str:
        return f"{self.value}_Graph"


@dataclass(frozen=True)
class Token:
    """A fragment of input text."""
    text: str
    is_word: bool # False for whitespace/punctuation separators, emitted verbatim
