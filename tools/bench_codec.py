#!/usr/bin/env python3
"""Encode/decode throughput benchmark.

Runs encode -> decode -> compare over seeded random payloads, collecting
timing and peak RSS. One JSON row per payload size, then a summary row.

Usage example:
  python tools/bench_codec.py --sizes 16,1024,65536 --iters 5

Notes:
- Uses the library API directly (no subprocess). Run inside repo venv.
"""

from __future__ import annotations

import argparse
import json
import random
import resource
import time
from typing import Any


def _peak_rss_kb() -> int:
    # Linux: ru_maxrss is KB
    return int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)


def _parse_sizes(s: str) -> list[int]:
    out: list[int] = []
    for part in s.split(","):
        part = part.strip()
        if not part:
            continue
        n = int(part)
        if n < 0:
            raise SystemExit(f"invalid size: {n}")
        out.append(n)
    if not out:
        raise SystemExit("--sizes: at least one size required")
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="bench_codec.py", description="bubblebabble codec benchmark")
    ap.add_argument("--sizes", default="0,1,64,1024,65536", help="Comma-separated payload sizes")
    ap.add_argument("--iters", type=int, default=5)
    ap.add_argument("--seed", type=int, default=1234, help="RNG seed for payload generation")
    ns = ap.parse_args(argv)

    from bubblebabble import decode, encode

    rng = random.Random(int(ns.seed))
    rows: list[dict[str, Any]] = []
    t0_all = time.perf_counter()

    for size in _parse_sizes(ns.sizes):
        payload = rng.randbytes(size)
        t_enc = 0.0
        t_dec = 0.0
        same = True
        for _ in range(max(1, int(ns.iters))):
            t0 = time.perf_counter()
            text = encode(payload)
            t_enc += time.perf_counter() - t0

            t1 = time.perf_counter()
            back = decode(text)
            t_dec += time.perf_counter() - t1
            same = same and back == payload

        iters = max(1, int(ns.iters))
        row = {
            "size": size,
            "iters": iters,
            "encoded_len": len(text),
            "times_sec": {"encode_avg": t_enc / iters, "decode_avg": t_dec / iters},
            "peak_rss_kb": _peak_rss_kb(),
            "roundtrip_ok": bool(same),
        }
        rows.append(row)
        print(json.dumps(row, ensure_ascii=False))
        if not same:
            raise SystemExit("roundtrip mismatch")

    summary = {
        "schema": "bubblebabble.bench_codec.v1",
        "sizes": len(rows),
        "wall_total_sec": time.perf_counter() - t0_all,
        "max_peak_rss_kb": max((r["peak_rss_kb"] for r in rows), default=0),
    }
    print(json.dumps(summary, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
