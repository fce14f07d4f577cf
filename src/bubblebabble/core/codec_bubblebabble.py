from __future__ import annotations

from bubblebabble.core.decoder import decode
from bubblebabble.core.encoder import encode
from bubblebabble.errors import NonAsciiCharacter


class CodecBubbleBabble:
    """
    Codec bytes -> bytes: payload in, ASCII Bubble Babble text out.

    decompress() is strict: any decode failure propagates as DecodeError.
    """

    codec_id: str = "bubblebabble"

    def compress(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes")
        return encode(data).encode("ascii")

    def decompress(self, data: bytes, out_size: int | None = None) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes")
        b = bytes(data)
        try:
            text = b.decode("ascii")
        except UnicodeDecodeError as e:
            raise NonAsciiCharacter(chr(b[e.start]), e.start) from e
        out = decode(text)
        if out_size is not None and len(out) != int(out_size):
            raise ValueError(f"bubblebabble: out_size mismatch: got={len(out)} expected={out_size}")
        return out
