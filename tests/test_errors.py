from __future__ import annotations

import pytest

from bubblebabble import errors
from bubblebabble.errors import (
    EXIT_CHECKSUM_MISMATCH,
    EXIT_CODES,
    EXIT_INVALID_CHARACTER,
    EXIT_MALFORMED,
    EXIT_USAGE,
    ChecksumMismatch,
    DecodeError,
    InvalidCharacter,
    MalformedHeader,
    MalformedTrailer,
    MalformedTuple,
    NonAsciiCharacter,
    UnexpectedTrailingData,
    UsageError,
    exit_code_info,
)


def test_exit_codes_unique_and_lookup() -> None:
    codes = [e.code for e in EXIT_CODES]
    names = [e.name for e in EXIT_CODES]
    assert len(set(codes)) == len(codes)
    assert len(set(names)) == len(names)

    info = exit_code_info(EXIT_CHECKSUM_MISMATCH)
    assert info is not None and info.name == "CHECKSUM_MISMATCH"
    assert exit_code_info(99) is None


@pytest.mark.parametrize(
    "err, code, kind",
    [
        (MalformedHeader(), EXIT_MALFORMED, "malformed_wrapper"),
        (MalformedTrailer(4), EXIT_MALFORMED, "malformed_wrapper"),
        (MalformedTuple("bad group"), EXIT_MALFORMED, "malformed_tuple"),
        (UnexpectedTrailingData("tail"), EXIT_MALFORMED, "unexpected_trailing_data"),
        (InvalidCharacter("9", 1), EXIT_INVALID_CHARACTER, "invalid_character"),
        (NonAsciiCharacter("\xe9", 2), EXIT_INVALID_CHARACTER, "invalid_character"),
        (ChecksumMismatch("bad"), EXIT_CHECKSUM_MISMATCH, "checksum_mismatch"),
    ],
)
def test_decode_error_taxonomy(err: DecodeError, code: int, kind: str) -> None:
    assert isinstance(err, DecodeError)
    assert isinstance(err, ValueError)
    assert err.exit_code == code
    assert err.kind == kind
    assert exit_code_info(code) is not None


def test_error_details() -> None:
    e = InvalidCharacter("9", 3, expected="vowel")
    assert e.char == "9"
    assert e.position == 3
    assert str(e) == "expected vowel at position 3, got '9'"

    n = NonAsciiCharacter("\xe9", 2)
    assert n.char == "\xe9"
    assert "non-ASCII" in str(n)

    assert MalformedHeader().position == 0
    assert UsageError("x").exit_code == EXIT_USAGE


def test_render_exit_codes_markdown() -> None:
    md = errors.render_exit_codes_markdown()
    assert md.startswith("# Exit codes\n")
    for e in EXIT_CODES:
        assert f"| {e.code} | `{e.name}` |" in md
