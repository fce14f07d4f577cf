"""Bubble Babble alphabet tables.

Vowels carry the seed-shifted 2-bit fields, consonants carry 4-bit nibbles.
The 17th consonant (``x``) is the sentinel: it only ever appears in the middle
slot of a checksum-only terminal group.
"""

from __future__ import annotations

VOWELS = "aeiouy"
CONSONANTS = "bcdfghklmnprstvzx"

SENTINEL = 16  # index of "x" in CONSONANTS

HEADER = "x"
TRAILER = "x"
SEPARATOR = "-"

# Same mask letters used by the vc0 text layer: Vowel / Consonant / Other.
KIND_VOWEL = "V"
KIND_CONSONANT = "C"
KIND_OTHER = "O"

# Every character that may legally appear between the header and the trailer.
ALPHABET = frozenset(VOWELS + CONSONANTS + SEPARATOR)

_CLASSES: dict[str, tuple[str, int]] = {}
for _i, _ch in enumerate(VOWELS):
    _CLASSES[_ch] = (KIND_VOWEL, _i)
for _i, _ch in enumerate(CONSONANTS):
    _CLASSES[_ch] = (KIND_CONSONANT, _i)
del _i, _ch

_NEITHER = (KIND_OTHER, -1)


def vowel_at(index: int) -> str:
    return VOWELS[index]


def consonant_at(index: int) -> str:
    return CONSONANTS[index]


def classify(ch: str) -> tuple[str, int]:
    """Return ``(kind, index)`` for a single character.

    ``kind`` is one of KIND_VOWEL / KIND_CONSONANT / KIND_OTHER; the index is
    the position in the matching table, or -1 for KIND_OTHER.
    """
    return _CLASSES.get(ch, _NEITHER)
