"""Bubble Babble decoder.

Decoding is a pure validation problem: the input is walked group by group with
the same rolling seed the encoder used, and the first violation is raised.
No partial output is ever returned.

Layout inside the ``x`` wrapper:

    V C V C - C   (one per byte pair, repeated)
    V C V         (terminal: one odd byte, or sentinel ``x`` + checksum)
"""

from __future__ import annotations

from bubblebabble.core.alphabet import (
    ALPHABET,
    CONSONANTS,
    HEADER,
    KIND_CONSONANT,
    KIND_VOWEL,
    SENTINEL,
    SEPARATOR,
    TRAILER,
    classify,
)
from bubblebabble.core.checksum import SEED_INIT, next_seed, seed_vowels
from bubblebabble.errors import (
    ChecksumMismatch,
    InvalidCharacter,
    MalformedHeader,
    MalformedTrailer,
    MalformedTuple,
    NonAsciiCharacter,
    UnexpectedTrailingData,
)

_SENTINEL_CHAR = CONSONANTS[SENTINEL]
_PAIR_LEN = 6  # V C V C - C
_TERMINAL_LEN = 3  # V C V


def _vowel(body: str, i: int) -> int:
    ch = body[i]
    kind, idx = classify(ch)
    if kind == KIND_VOWEL:
        return idx
    if ch == SEPARATOR:
        raise MalformedTuple(f"misplaced '-' at position {i + 1}", position=i + 1)
    raise InvalidCharacter(ch, i + 1, expected="vowel")


def _consonant(body: str, i: int) -> int:
    ch = body[i]
    kind, idx = classify(ch)
    if kind == KIND_CONSONANT and idx != SENTINEL:
        return idx
    if ch == SEPARATOR:
        raise MalformedTuple(f"misplaced '-' at position {i + 1}", position=i + 1)
    raise InvalidCharacter(ch, i + 1, expected="consonant")


def _decode_3(v0: int, c1: int, v2: int, seed: int, position: int) -> int:
    # Inverse of encoder._odd_partial; a field >= 4 cannot come from this seed.
    high = (v0 - seed % 6) % 6
    low = (v2 - seed // 6) % 6
    if high >= 4 or low >= 4:
        raise ChecksumMismatch(
            f"checksum mismatch in group at position {position}", position=position
        )
    return (high << 6) | (c1 << 2) | low


def decode(text: str) -> bytes:
    """Decode a Bubble Babble string back to bytes.

    Raises a DecodeError subclass (MalformedWrapper, MalformedTuple,
    InvalidCharacter, ChecksumMismatch, UnexpectedTrailingData) on any
    violation.

    >>> decode("xexax")
    b''
    >>> decode("xigak-nyryk-humil-bosek-sonax")
    b'Pineapple'
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")

    if not text.startswith(HEADER):
        raise MalformedHeader()
    if len(text) < 2 or not text.endswith(TRAILER):
        raise MalformedTrailer(position=len(text) - 1)

    for pos, ch in enumerate(text):
        if ord(ch) > 0x7F:
            raise NonAsciiCharacter(ch, pos)

    body = text[1:-1]
    for i, ch in enumerate(body):
        if ch not in ALPHABET:
            raise InvalidCharacter(ch, i + 1)

    out = bytearray()
    seed = SEED_INIT
    n = len(body)
    i = 0
    while True:
        left = n - i
        if left < _TERMINAL_LEN:
            raise MalformedTuple(
                f"truncated group at position {i + 1}: {left} of {_TERMINAL_LEN} characters",
                position=i + 1,
            )
        if left == _TERMINAL_LEN:
            break
        if body[i + 1] == _SENTINEL_CHAR:
            raise UnexpectedTrailingData(
                f"data after terminal group at position {i + 1 + _TERMINAL_LEN}",
                position=i + 1 + _TERMINAL_LEN,
            )
        if left < _PAIR_LEN:
            raise MalformedTuple(
                f"truncated group at position {i + 1}: {left} of {_PAIR_LEN} characters",
                position=i + 1,
            )
        if body[i + 4] != SEPARATOR:
            raise MalformedTuple(f"expected '-' at position {i + 5}", position=i + 5)

        v0 = _vowel(body, i)
        c1 = _consonant(body, i + 1)
        v2 = _vowel(body, i + 2)
        c3 = _consonant(body, i + 3)
        c5 = _consonant(body, i + 5)

        b0 = _decode_3(v0, c1, v2, seed, i + 1)
        b1 = (c3 << 4) | c5
        out.append(b0)
        out.append(b1)
        seed = next_seed(seed, b0, b1)
        i += _PAIR_LEN

    v0 = _vowel(body, i)
    v2 = _vowel(body, i + 2)
    if body[i + 1] == _SENTINEL_CHAR:
        # even payload: the terminal group carries the checksum only
        if (v0, v2) != seed_vowels(seed):
            raise ChecksumMismatch(
                f"checksum mismatch in terminal group at position {i + 1}", position=i + 1
            )
    else:
        c1 = _consonant(body, i + 1)
        out.append(_decode_3(v0, c1, v2, seed, i + 1))

    return bytes(out)
