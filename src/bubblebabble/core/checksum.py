from __future__ import annotations

SEED_INIT = 1
SEED_MODULUS = 36


def next_seed(seed: int, b0: int, b1: int) -> int:
    """Advance the rolling checksum by one consumed byte pair."""
    return (seed * 5 + b0 * 7 + b1) % SEED_MODULUS


def seed_vowels(seed: int) -> tuple[int, int]:
    """Vowel indices of a checksum-only terminal group."""
    return seed % 6, seed // 6
