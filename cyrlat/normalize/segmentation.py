"""Text segmentation utilities."""

import unicodedata
from itertools import groupby


# Zero-width joiner and non-joiner count as word characters
JOIN_CONTROLS = frozenset("\u200c\u200d")


def is_word_char(char: str) -> bool:
    """
    Check whether a character belongs to a word.

    Letters, decimal digits, connector punctuation and combining marks are
    word characters, so a stress accent (U+0301) stays inside its word.
    """
    if char.isalpha() or char in JOIN_CONTROLS:
        return True
    category = unicodedata.category(char)
    return category in ("Nd", "Pc") or category.startswith("M")


def split_words(text: str) -> list[str]:
    """
    Split text on word boundaries without losing any character.

    Word runs and the separator runs between them alternate, so joining
    the result gives back the input.

    Args:
        text: Input text

    Returns:
        Word and separator segments in order
    """
    return ["".join(run) for _, run in groupby(text, key=is_word_char)]
