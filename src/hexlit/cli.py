# hexlit/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from .__about__ import about_text
from .errors import HexLiteralError
from .logic import hex_literal

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _as_list_literal(data: bytes) -> str:
    return "[" + ", ".join(f"0x{b:02X}" for b in data) + "]"

def _read_tokens(args: argparse.Namespace) -> list[str]:
    if args.tokens:
        return list(args.tokens)
    # Line breaks and tabs are not separators, so split stdin into tokens
    return sys.stdin.read().split()


# ---------- output ----------
def emit(data: bytes, fmt: str) -> None:
    if fmt == "raw":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    elif fmt == "list":
        print(_as_list_literal(data))
    else:
        _print_kv("Bytes", [f"{b:02X}" for b in data])
        _print_kv("Length", str(len(data)))


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hexlit",
        description="Decode a hex literal (with optional ' \"_|-' separators) into bytes.",
    )
    p.add_argument("--version", action="store_true", help="show version and exit")
    p.add_argument(
        "tokens", nargs="*",
        help="hex like '0A 0B', 'E5_E6|90-92' or bare tokens 0a 0B 0C0d (default: stdin)",
    )
    p.add_argument(
        "--format", choices=("hex", "list", "raw"), default="hex",
        help="output format (default: hex)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="log decoding details to stderr",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(about_text())
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tokens = _read_tokens(args)
    try:
        data = hex_literal(*tokens)
    except HexLiteralError as exc:
        logger.debug("Decoding failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    emit(data, args.format)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
