# fakelang/core/phonetics.py
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple
from loguru import logger

from .corpus import load_ipa_dictionary, load_ipa_sounds
from .tokenizer import tokenize

# ARPAbet (CMU dictionary) symbols, stress digits removed
ARPABET_TO_IPA: Dict[str, str] = {
    "AA": "ɑ", "AE": "æ", "AH": "ʌ", "AO": "ɔ", "AW": "aʊ", "AX": "əɹ", "AXR": "ə",
    "AY": "aɪ", "EH": "ɛ", "ER": "ɛɹ", "EY": "eɪ", "IH": "ɪ", "IX": "ɨ", "IY": "i",
    "OW": "oʊ", "OY": "ɔɪ", "UH": "ʊ", "UW": "u", "UX": "ʉ",
    "B": "b", "CH": "tʃ", "D": "d", "DH": "ð", "DX": "ɾ", "EL": "l̩", "EM": "m̩",
    "EN": "n̩", "F": "f", "G": "ɡ", "HH": "h", "H": "h", "JH": "dʒ", "K": "k",
    "L": "l", "M": "m", "N": "n", "NG": "ŋ", "NX": "ɾ̃", "P": "p", "Q": "ʔ",
    "R": "ɹ", "S": "s", "SH": "ʃ", "T": "t", "TH": "θ", "V": "v", "W": "w",
    "WH": "ʍ", "Y": "j", "Z": "z", "ZH": "ʒ",
}

# Used when the data directory has no English_IPASounds.txt. Applied in order,
# so multi-symbol sounds come before their single-symbol parts.
DEFAULT_IPA_SOUNDS: List[Tuple[str, str]] = [
    ("j", "y"), ("tʃ", "ch"), ("dʒ", "j"), ("aʊ", "ow"), ("aɪ", "i"), ("eɪ", "ay"), ("oʊ", "o"),
    ("ɔɪ", "oy"), ("əɹ", "er"), ("ɛɹ", "er"), ("ʃ", "sh"), ("ʒ", "zh"),
    ("θ", "th"), ("ð", "th"), ("ŋ", "ng"), ("ʍ", "wh"), ("ɑ", "a"), ("æ", "a"),
    ("ʌ", "u"), ("ɔ", "o"), ("ə", "a"), ("ɛ", "e"), ("ɪ", "i"), ("ɨ", "i"),
    ("ʊ", "u"), ("ʉ", "u"), ("ɹ", "r"), ("ɡ", "g"), ("ɾ", "t"), ("ʔ", ""),
    ("̩", ""), ("̃", ""),
]


def arpabet_to_ipa(phone: str) -> str:
    """Converts one ARPAbet phone ("AW1") to IPA. Unknown phones are returned as-is."""
    symbol = phone.rstrip("012")
    return ARPABET_TO_IPA.get(symbol, phone)


class PhoneticConverter:
    """
    Moves between spelling and IPA.

    `ipa_dictionary` maps real words to transcriptions; `sounds` is the ordered
    IPA -> letters table used to spell out transcriptions that are not words.
    """

    def __init__(self, ipa_dictionary: Optional[Dict[str, str]] = None,
                 sounds: Optional[Sequence[Tuple[str, str]]] = None):
        self.ipa_dictionary: Dict[str, str] = dict(ipa_dictionary or {})
        self.sounds: List[Tuple[str, str]] = list(sounds) if sounds else list(DEFAULT_IPA_SOUNDS)
        # Reverse map keeps the first word listed for a transcription
        self._words_by_ipa: Dict[str, str] = {}
        for word, ipa in self.ipa_dictionary.items():
            self._words_by_ipa.setdefault(ipa, word)

    @classmethod
    def from_data_dir(cls, data_dir: Path) -> "PhoneticConverter":
        sounds = load_ipa_sounds(data_dir)
        if not sounds:
            logger.info("No IPA sound table in data directory, using the built-in table.")
        return cls(ipa_dictionary=load_ipa_dictionary(data_dir), sounds=sounds or None)

    def to_phonetic(self, text: str) -> str:
        """Replaces every known word by its IPA transcription; other fragments are lower-cased."""
        return "".join(
            self.ipa_dictionary.get(token.text.lower(), token.text.lower())
            for token in tokenize(text)
        )

    def _spell_out(self, fragment: str) -> str:
        spelled = fragment.replace("'", "")
        for ipa, letters in self.sounds:
            spelled = spelled.replace(ipa, letters)
        return spelled.replace(" ", "")

    def to_readable_word(self, phonetic: str) -> str:
        """
        Turns an IPA string into something readable. A transcription of a
        known word becomes that word; anything else is spelled out with the
        sound table. Fragments are joined by single spaces.
        """
        pieces = []
        for token in tokenize(phonetic):
            fragment = token.text.lower()
            known_word = self._words_by_ipa.get(fragment)
            if known_word is not None:
                pieces.append(known_word.replace(".", "").replace("(1)", ""))
            elif fragment.strip():
                pieces.append(self._spell_out(fragment))
        return " ".join(piece for piece in pieces if piece).strip()

    def split_corpus_into_syllables(self, raw_corpus: str) -> List[str]:
        """
        Parses CMU-style syllabified pronunciations ("ABOUT  AH0 . B AW1 T")
        into IPA syllables, in corpus order. Lines without the two-space
        separator are skipped.
        """
        syllables: List[str] = []
        for line in raw_corpus.split("\n"):
            parts = line.rstrip("\r").split("  ")
            if len(parts) < 2:
                continue
            for syllable in parts[1].split(" . "):
                syllables.append("".join(arpabet_to_ipa(phone) for phone in syllable.split(" ") if phone))
        logger.debug(f"Split corpus into {len(syllables)} syllables.")
        return syllables
