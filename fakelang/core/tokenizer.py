# fakelang/core/tokenizer.py
import unicodedata
from typing import Iterable, List

from .models import Token

# Tokens that never get a fake word, even when they reach the word path
PASSTHROUGH_TOKENS = frozenset({
    " ", ",", "-", ".", "`", "'", "#", "!", "?", "...", "..", "..?", "..!", ".?!",
    "’", ":", "=", "+", "—", ";", "(", ")", "[", "]", "{", "}", "*", "\"", "\t",
    "\n", "\r",
})


def is_boundary(char: str) -> bool:
    """Whitespace or any Unicode punctuation character (categories Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return char.isspace() or unicodedata.category(char).startswith("P")


def is_passthrough_token(value: str) -> bool:
    """Punctuation from the fixed set, or anything that parses as an integer."""
    if value in PASSTHROUGH_TOKENS:
        return True
    try:
        int(value)
    except ValueError:
        return False
    return True


def tokenize(text: str) -> List[Token]:
    """
    Splits text into word runs and single-character separators, in order.
    Joining the token texts gives back the input unchanged.
    """
    tokens: List[Token] = []
    word_start = None
    for index, char in enumerate(text):
        if is_boundary(char):
            if word_start is not None:
                tokens.append(Token(text[word_start:index], is_word=True))
                word_start = None
            tokens.append(Token(char, is_word=False))
        elif word_start is None:
            word_start = index
    if word_start is not None:
        tokens.append(Token(text[word_start:], is_word=True))
    return tokens


def detokenize(tokens: Iterable[Token]) -> str:
    return "".join(token.text for token in tokens)


def is_single_word(text: str) -> bool:
    """True when `text` tokenizes to exactly one word token, with no separators."""
    tokens = tokenize(text)
    return len(tokens) == 1 and tokens[0].is_word
