from __future__ import annotations

from bubblebabble.core.alphabet import (
    CONSONANTS,
    HEADER,
    SENTINEL,
    SEPARATOR,
    TRAILER,
    VOWELS,
)
from bubblebabble.core.checksum import SEED_INIT, next_seed, seed_vowels


def _odd_partial(b: int, seed: int, out: list[str]) -> None:
    """V C V for one byte: 2 high bits + seed, 4 middle bits, 2 low bits + seed."""
    out.append(VOWELS[(((b >> 6) & 3) + seed) % 6])
    out.append(CONSONANTS[(b >> 2) & 15])
    out.append(VOWELS[((b & 3) + seed // 6) % 6])


def _even_partial(seed: int, out: list[str]) -> None:
    a, c = seed_vowels(seed)
    out.append(VOWELS[a])
    out.append(CONSONANTS[SENTINEL])
    out.append(VOWELS[c])


def encode(data: bytes) -> str:
    """Encode a byte buffer as a Bubble Babble string.

    Total: every input (including b"") has an encoding.

    >>> encode(b"")
    'xexax'
    >>> encode(b"1234567890")
    'xesef-disof-gytuf-katof-movif-baxux'
    >>> encode(b"Pineapple")
    'xigak-nyryk-humil-bosek-sonax'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes")
    raw = bytes(data)
    n = len(raw)

    out: list[str] = [HEADER]
    seed = SEED_INIT
    pairs_end = n - (n & 1)
    for i in range(0, pairs_end, 2):
        b0 = raw[i]
        b1 = raw[i + 1]
        _odd_partial(b0, seed, out)
        out.append(CONSONANTS[(b1 >> 4) & 15])
        out.append(SEPARATOR)
        out.append(CONSONANTS[b1 & 15])
        seed = next_seed(seed, b0, b1)

    if n & 1:
        # odd length: the last byte rides in the terminal group, no seed update
        _odd_partial(raw[-1], seed, out)
    else:
        _even_partial(seed, out)

    out.append(TRAILER)
    return "".join(out)
