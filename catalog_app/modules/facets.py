"""Distinct facet values for the sidebar filters.

Facet labels come from a mixed Latin/Cyrillic corpus, so plain code point
ordering is not good enough (Ukrainian ``і``, ``ї``, ``є`` and ``ґ`` live after
``я`` in Unicode). :func:`collation_key` implements a small collation close to
the CLDR root order: punctuation and digits first, then Latin, then other
alphabets, then Cyrillic in alphabetical order. Case and diacritics only break
ties.
"""

from __future__ import annotations

import re
import unicodedata
from collections import Counter
from typing import Iterable, Mapping, Sequence

_CYRILLIC_ALPHABET = "абвгґдђѓеєжзѕиіїйјклљмнњопрстћќуўфхцчџшщъыьэюя"
_CYRILLIC_RANK = {letter: rank for rank, letter in enumerate(_CYRILLIC_ALPHABET)}
# ``ё`` is a secondary variant of ``е`` at the primary level.
_CYRILLIC_RANK["ё"] = _CYRILLIC_RANK["е"]

_RANK_SYMBOL = 0
_RANK_DIGIT = 1
_RANK_LATIN = 2
_RANK_OTHER = 3
_RANK_CYRILLIC = 4


_LATIN_NAME = re.compile(r"^LATIN (?:SMALL |CAPITAL )?(?:LETTER|LIGATURE) (.+?)(?: WITH .*)?$")
# Letters without an ASCII base (thorn, eth, eng, schwa ...) follow ``z``.
_LATIN_EXTRA = 0x10000


def _latin_weights(base: str) -> list[tuple[int, int]] | None:
    """Weights for Latin letters NFKD cannot reduce to ASCII (ł, ø, đ, æ, þ).

    The base letter is read from the Unicode name: ``LATIN SMALL LETTER L
    WITH STROKE`` sorts as ``l`` and ``LATIN SMALL LETTER AE`` as ``ae``.
    """

    match = _LATIN_NAME.match(unicodedata.name(base, ""))
    if match is None:
        return None
    letters = match.group(1).split()[-1].lower()
    if len(letters) <= 2 and letters.isascii() and letters.isalpha():
        return [(_RANK_LATIN, ord(letter)) for letter in letters]
    return [(_RANK_LATIN, _LATIN_EXTRA + ord(base))]


def _primary_weights(char: str) -> Iterable[tuple[int, int]]:
    if char in _CYRILLIC_RANK:
        yield (_RANK_CYRILLIC, _CYRILLIC_RANK[char])
        return
    for base in unicodedata.normalize("NFKD", char):
        if unicodedata.combining(base):
            continue
        if base.isdigit():
            yield (_RANK_DIGIT, ord(base))
        elif "a" <= base <= "z":
            yield (_RANK_LATIN, ord(base))
        elif base.isalpha():
            latin = _latin_weights(base)
            if latin is not None:
                yield from latin
            else:
                yield (_RANK_OTHER, ord(base))
        else:
            yield (_RANK_SYMBOL, ord(base))


def collation_key(value: str) -> tuple:
    """Return a sort key ordering ``value`` the way a reader expects.

    The key compares base letters first, then the case-folded text (accents),
    then the raw value (case), so the ordering is total and deterministic.
    """

    folded = unicodedata.normalize("NFC", value).casefold()
    primary = tuple(weight for char in folded for weight in _primary_weights(char))
    return (primary, folded, value)


def index_facet(records: Sequence[Mapping[str, str]], field: str) -> tuple[str, ...]:
    """Return the distinct non-empty values of ``field`` sorted for display."""

    if records is None:
        raise TypeError("index_facet requires a record sequence, got None")

    values = {record.get(field, "") for record in records}
    values.discard("")
    return tuple(sorted(values, key=collation_key))


def index_facets(
    records: Sequence[Mapping[str, str]], fields: Iterable[str]
) -> dict[str, tuple[str, ...]]:
    """Index several facet fields at once."""

    return {field: index_facet(records, field) for field in fields}


def facet_counts(records: Sequence[Mapping[str, str]], field: str) -> dict[str, int]:
    """Count how many records carry each non-empty value of ``field``."""

    counts = Counter(record.get(field, "") for record in records)
    counts.pop("", None)
    return {value: counts[value] for value in sorted(counts, key=collation_key)}


__all__ = [
    "collation_key",
    "index_facet",
    "index_facets",
    "facet_counts",
]
