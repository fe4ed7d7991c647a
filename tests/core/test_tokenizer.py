# tests/core/test_tokenizer.py
from fakelang.core.models import Token
from fakelang.core.tokenizer import detokenize, is_boundary, is_passthrough_token, is_single_word, tokenize


def test_tokenize_keeps_separators_in_order():
    tokens = tokenize("cat dog bird.")
    assert tokens == [
        Token("cat", True), Token(" ", False), Token("dog", True),
        Token(" ", False), Token("bird", True), Token(".", False),
    ]


def test_each_boundary_character_is_its_own_token():
    tokens = tokenize("wait...  now")
    assert [t.text for t in tokens] == ["wait", ".", ".", ".", " ", " ", "now"]


def test_unicode_punctuation_splits_words():
    tokens = tokenize("don’t—stop «ok»")
    assert [t.text for t in tokens if t.is_word] == ["don", "t", "stop", "ok"]
    assert [t.text for t in tokens if not t.is_word] == ["’", "—", " ", "«", "»"]


def test_symbols_are_not_boundaries():
    # '+' and '=' are math symbols, not punctuation
    assert not is_boundary("+")
    assert [t.text for t in tokenize("a+b=c")] == ["a+b=c"]


def test_detokenize_restores_input():
    text = "\tLine one,\r\nline (two)!  "
    assert detokenize(tokenize(text)) == text


def test_empty_text():
    assert tokenize("") == []


def test_passthrough_tokens():
    assert is_passthrough_token("...")
    assert is_passthrough_token("’")
    assert is_passthrough_token("42")
    assert is_passthrough_token("-7")
    assert not is_passthrough_token("cat")
    assert not is_passthrough_token("4x4")


def test_single_word():
    assert is_single_word("kat")
    assert not is_single_word("do'")
    assert not is_single_word("two words")
    assert not is_single_word(".")
    assert not is_single_word("")
