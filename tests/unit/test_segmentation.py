"""Tests for word segmentation."""

import pytest

from cyrlat.normalize.segmentation import is_word_char, split_words


def test_split_words():
    """Test words and separators alternate."""
    assert split_words("Йошкар-Олы, да") == ["Йошкар", "-", "Олы", ", ", "да"]


def test_split_words_empty():
    """Test empty text has no segments."""
    assert split_words("") == []


def test_split_words_no_words():
    """Test text without word characters is a single segment."""
    assert split_words(" ... ") == [" ... "]


def test_split_words_keeps_combining_marks():
    """Test a stress accent does not break a word apart."""
    assert split_words("по\u0301ет, ё\u0308") == ["по\u0301ет", ", ", "ё\u0308"]


@pytest.mark.parametrize(
    "text",
    [
        "Юлия, съешь ещё этих мягких французских булок",
        "  leading and trailing  ",
        "tabs\tand\nnewlines\r\n",
        "mixed: Москва2024 / hello_world!",
        "«кавычки» — тире",
        "уда\u0301рение",
    ],
)
def test_split_words_is_lossless(text):
    """Test segments join back into the original text."""
    assert "".join(split_words(text)) == text


def test_is_word_char():
    """Test word character classes."""
    assert is_word_char("ж")
    assert is_word_char("7")
    assert is_word_char("_")
    assert is_word_char("\u0301")
    assert not is_word_char(" ")
    assert not is_word_char("-")
    assert not is_word_char("«")
