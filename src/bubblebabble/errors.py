"""Typed errors for bubblebabble.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Decoding never corrects input: every violation is raised to the caller.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_MALFORMED = 11
EXIT_INVALID_CHARACTER = 12
EXIT_CHECKSUM_MISMATCH = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid args, unreadable input path, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(
        EXIT_MALFORMED,
        "MALFORMED",
        "Structural error (missing 'x' wrapper, bad group length/dash, trailing data)",
    ),
    ExitCodeInfo(
        EXIT_INVALID_CHARACTER,
        "INVALID_CHARACTER",
        "Character outside the alphabet, or vowel/consonant in the wrong slot",
    ),
    ExitCodeInfo(
        EXIT_CHECKSUM_MISMATCH,
        "CHECKSUM_MISMATCH",
        "Integrity failure (characters do not match the rolling checksum)",
    ),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/bubblebabble/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every decode failure extends `DecodeError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append(
        "- `verify --json` prints a JSON object to stdout (ok) or stderr (error), and returns the same exit code.\n"
    )
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class BubbleBabbleError(Exception):
    """Base error for bubblebabble."""

    exit_code: int = EXIT_GENERIC


class UsageError(BubbleBabbleError):
    exit_code = EXIT_USAGE


class DecodeError(BubbleBabbleError, ValueError):
    """Base for every decode failure.

    ``kind`` is a short stable tag (used by ``verify --json``); ``position`` is
    the 0-based offset in the encoded string where the problem was detected,
    or None when it applies to the whole input.
    """

    kind: str = "decode_error"
    exit_code = EXIT_GENERIC

    def __init__(self, message: str, *, position: int | None = None):
        super().__init__(message)
        self.position = position


class MalformedWrapper(DecodeError):
    kind = "malformed_wrapper"
    exit_code = EXIT_MALFORMED


class MalformedHeader(MalformedWrapper):
    def __init__(self) -> None:
        super().__init__("missing required 'x' header", position=0)


class MalformedTrailer(MalformedWrapper):
    def __init__(self, position: int | None = None):
        super().__init__("missing required 'x' trailer", position=position)


class MalformedTuple(DecodeError):
    kind = "malformed_tuple"
    exit_code = EXIT_MALFORMED


class UnexpectedTrailingData(DecodeError):
    kind = "unexpected_trailing_data"
    exit_code = EXIT_MALFORMED


class InvalidCharacter(DecodeError):
    kind = "invalid_character"
    exit_code = EXIT_INVALID_CHARACTER

    def __init__(self, char: str, position: int, expected: str | None = None):
        if expected:
            msg = f"expected {expected} at position {position}, got {char!r}"
        else:
            msg = f"symbol not in encoding alphabet at position {position}: {char!r}"
        super().__init__(msg, position=position)
        self.char = char


class NonAsciiCharacter(InvalidCharacter):
    def __init__(self, char: str, position: int):
        DecodeError.__init__(
            self,
            f"non-ASCII character outside of encoding alphabet at position {position}: {char!r}",
            position=position,
        )
        self.char = char


class ChecksumMismatch(DecodeError):
    kind = "checksum_mismatch"
    exit_code = EXIT_CHECKSUM_MISMATCH
