"""Bubble Babble binary-to-text encoding.

    >>> import bubblebabble
    >>> bubblebabble.encode(b"Pineapple")
    'xigak-nyryk-humil-bosek-sonax'
    >>> bubblebabble.decode("xexax")
    b''
"""

from __future__ import annotations

from bubblebabble.core.decoder import decode
from bubblebabble.core.encoder import encode
from bubblebabble.errors import (
    BubbleBabbleError,
    ChecksumMismatch,
    DecodeError,
    InvalidCharacter,
    MalformedHeader,
    MalformedTrailer,
    MalformedTuple,
    MalformedWrapper,
    NonAsciiCharacter,
    UnexpectedTrailingData,
)

__version__ = "0.1.0"

__all__ = [
    "BubbleBabbleError",
    "ChecksumMismatch",
    "DecodeError",
    "InvalidCharacter",
    "MalformedHeader",
    "MalformedTrailer",
    "MalformedTuple",
    "MalformedWrapper",
    "NonAsciiCharacter",
    "UnexpectedTrailingData",
    "__version__",
    "decode",
    "encode",
]
