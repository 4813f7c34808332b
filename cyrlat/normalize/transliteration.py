"""Schema-driven transliteration of Cyrillic text into Latin script."""

from collections.abc import Iterable, Sequence

from cyrlat.models import BOUNDARY, Ending, Schema
from cyrlat.normalize.segmentation import split_words
from cyrlat.schemas import load_schema
from cyrlat.utils.parallel import map_parallel_ordered


DEFAULT_SCHEMA = "wikipedia"

# Endings are only tried when at least this many letters are present
MIN_ENDING_WORD_LENGTH = 3


def propagate_case(result: str, source: str, only_first_symbol: bool) -> str:
    """
    Reapply the capitalization of ``source`` to ``result``.

    Args:
        result: Resolved target sequence
        source: Source letter(s) the result was resolved from
        only_first_symbol: Uppercase only the first character of ``result``
            (single letters) instead of all of it (endings)

    Returns:
        Result with case applied
    """
    if not any(char.isupper() for char in source):
        return result
    if only_first_symbol:
        return result[:1].upper() + result[1:]
    return result.upper()


def resolve_ending(letters: Sequence[str], schema: Schema) -> Ending | None:
    """
    Match the word's last one or two letters against the ending table.

    A one-letter ending takes priority over a two-letter one. Words shorter
    than three letters never match.

    Args:
        letters: Word split into single characters
        schema: Transliteration schema

    Returns:
        Matched ending or None
    """
    length = len(letters)
    if length < MIN_ENDING_WORD_LENGTH:
        return None

    for size in (1, 2):
        source = "".join(letters[length - size:])
        matched = schema.get_ending(source)
        if matched is not None:
            return Ending(
                translation=propagate_case(matched, source, only_first_symbol=False),
                start=length - size,
            )
    return None


def resolve_letter(prev: str, letter: str, next_: str, schema: Schema) -> str:
    """
    Transliterate one letter given its neighbours.

    Priority: previous-letter context, then next-letter context, then the
    plain letter mapping, then the letter itself.
    """
    translation = schema.get_prev(prev + letter)
    if translation is None:
        translation = schema.get_next(letter + next_)
    if translation is None:
        translation = schema.get_letter(letter)
    if translation is None:
        translation = letter
    return propagate_case(translation, letter, only_first_symbol=True)


def transliterate_word(word: str, schema: Schema) -> str:
    """
    Transliterate a single word.

    Args:
        word: Word (or non-word segment) to transliterate
        schema: Transliteration schema

    Returns:
        Transliterated word
    """
    letters = list(word)

    ending = resolve_ending(letters, schema)
    if ending is not None:
        tail = ending.translation
        body = letters[: ending.start]
    else:
        tail = ""
        body = letters

    padded = [BOUNDARY, *body, BOUNDARY]
    parts = [
        resolve_letter(padded[i - 1], padded[i], padded[i + 1], schema)
        for i in range(1, len(padded) - 1)
    ]
    parts.append(tail)
    return "".join(parts)


def transliterate_with_schema(text: str, schema: Schema) -> str:
    """
    Transliterate text with an already loaded schema.

    Args:
        text: Input text
        schema: Transliteration schema

    Returns:
        Transliterated text, punctuation and spacing preserved
    """
    return "".join(transliterate_word(segment, schema) for segment in split_words(text))


def transliterate(text: str, schema_name: str = DEFAULT_SCHEMA) -> str:
    """
    Transliterate text with a bundled schema.

    Args:
        text: Input text
        schema_name: Name of a bundled schema

    Returns:
        Transliterated text

    Raises:
        SchemaLoadError: If the schema cannot be loaded
    """
    return transliterate_with_schema(text, load_schema(schema_name))


def transliterate_many(
    texts: Iterable[str],
    schema: Schema,
    max_workers: int = 4,
) -> list[str]:
    """
    Transliterate many texts in parallel, preserving order.

    Args:
        texts: Input texts
        schema: Transliteration schema, shared by all workers
        max_workers: Maximum parallel workers

    Returns:
        Transliterated texts in input order
    """
    return list(
        map_parallel_ordered(
            lambda text: transliterate_with_schema(text, schema),
            texts,
            max_workers=max_workers,
        )
    )
