"""bubblebabble CLI.

This is the stable CLI entrypoint (console-script: ``bubblebabble``).

UX policy:
  - ``encode`` reads raw bytes, writes one line of Bubble Babble text.
  - ``decode`` reads text (surrounding whitespace ignored), writes raw bytes.
  - ``verify`` only validates; ``--json`` gives a machine-readable result.
  - INPUT / OUTPUT default to stdin / stdout; ``-`` means the same.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bubblebabble.core.codec_bubblebabble import CodecBubbleBabble
from bubblebabble.errors import (
    EXIT_GENERIC,
    EXIT_OK,
    EXIT_USAGE,
    BubbleBabbleError,
    DecodeError,
    UsageError,
)

VERIFY_SCHEMA = "bubblebabble.verify.v1"


def _pkg_version() -> str:
    try:
        from importlib.metadata import PackageNotFoundError, version

        try:
            return version("bubblebabble")
        except PackageNotFoundError:
            # script invoked from source, metadata missing
            from bubblebabble import __version__

            return __version__
    except Exception:
        return "0+unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _read_input(arg: str) -> bytes:
    if arg == "-":
        return sys.stdin.buffer.read()
    p = Path(arg).expanduser()
    if not p.is_file():
        raise UsageError(f"input file not found: {p}")
    return p.read_bytes()


def _write_output(arg: str, data: bytes) -> None:
    if arg == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(arg).expanduser().write_bytes(data)


def _cmd_encode(input_arg: str, output_arg: str) -> int:
    codec = CodecBubbleBabble()
    data = _read_input(input_arg)
    _write_output(output_arg, codec.compress(data) + b"\n")
    return EXIT_OK


def _cmd_decode(input_arg: str, output_arg: str) -> int:
    codec = CodecBubbleBabble()
    text = _read_input(input_arg).strip()
    _write_output(output_arg, codec.decompress(text))
    return EXIT_OK


def _print_verify_json(target: str, n_bytes: int) -> None:
    print(
        json.dumps(
            {
                "schema": VERIFY_SCHEMA,
                "ok": True,
                "target": target,
                "bytes": n_bytes,
                "version": _pkg_version(),
            },
            ensure_ascii=False,
            separators=(",", ":"),
        )
    )


def _print_verify_json_error(target: str, e: DecodeError) -> None:
    """Emit stable JSON on stderr for verify errors when --json is used."""
    obj = {
        "schema": VERIFY_SCHEMA,
        "ok": False,
        "target": target,
        "version": _pkg_version(),
        "error": {"type": e.kind, "message": str(e), "position": e.position},
    }
    print(json.dumps(obj, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _cmd_verify(input_arg: str, *, as_json: bool) -> int:
    codec = CodecBubbleBabble()
    text = _read_input(input_arg).strip()
    try:
        out = codec.decompress(text)
    except DecodeError as e:
        if as_json:
            _print_verify_json_error(input_arg, e)
            return e.exit_code
        raise
    if as_json:
        _print_verify_json(input_arg, len(out))
    else:
        print("OK")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bubblebabble", description="Bubble Babble binary-to-text encoder/decoder"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_pkg_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_e = sub.add_parser("encode", help="Encode raw bytes as Bubble Babble text")
    p_e.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    p_e.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    _add_common_args(p_e)

    p_d = sub.add_parser("decode", help="Decode Bubble Babble text back to raw bytes")
    p_d.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    p_d.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    _add_common_args(p_d)

    p_v = sub.add_parser("verify", help="Validate Bubble Babble text (format + checksum)")
    p_v.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    p_v.add_argument("--json", action="store_true", help="Machine-readable result")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "encode":
            return _cmd_encode(ns.input, ns.output)
        if ns.cmd == "decode":
            return _cmd_decode(ns.input, ns.output)
        if ns.cmd == "verify":
            return _cmd_verify(ns.input, as_json=bool(ns.json))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except BubbleBabbleError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[bubblebabble] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except OSError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[bubblebabble] {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[bubblebabble] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
