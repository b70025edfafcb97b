# hexlit/logic.py

from __future__ import annotations

import logging
from typing import Iterable, Union

from .errors import HexLiteralError, InvalidDigitError, OddDigitCountError

logger = logging.getLogger(__name__)

# Separators ignored anywhere in a literal, including between the two
# digits of one byte.
DELIMITERS = b' "_|-'

BytesLike = Union[str, bytes, bytearray, memoryview]


def _as_buffer(data: BytesLike) -> bytes:
    if isinstance(data, str):
        # argv hands undecodable bytes over as lone surrogates
        return data.encode("utf-8", "surrogateescape")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like, got {type(data).__name__}")


def _as_byte(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("expected a single character")
        return ord(value)
    return value


# ---------------- Classification ----------------
def is_delimiter(byte: int | str) -> bool:
    """Return True if ``byte`` is one of the fixed separators."""
    return _as_byte(byte) in DELIMITERS


def digit_value(byte: int | str, *, position: int | None = None, text: bytes = b"") -> int:
    """Map one hex digit to its nibble value (0..15).

    ``position`` and ``text`` are only used to enrich the error raised for
    anything outside ``0-9A-Fa-f``.
    """
    b = _as_byte(byte)
    if 0x30 <= b <= 0x39:  # 0-9
        return b - 0x30
    if 0x41 <= b <= 0x46:  # A-F
        return b - 0x41 + 10
    if 0x61 <= b <= 0x66:  # a-f
        return b - 0x61 + 10
    raise InvalidDigitError(b, text, position)


# ---------------- Length ----------------
def count_skipped(data: BytesLike) -> int:
    """Count the delimiter bytes in ``data``."""
    skipped = 0
    for b in _as_buffer(data):
        if b in DELIMITERS:
            skipped += 1
    return skipped


def array_length(data: BytesLike) -> int:
    """Number of output bytes ``data`` decodes to.

    Raises OddDigitCountError when the non-delimiter count is odd; the
    length is never rounded down.
    """
    buf = _as_buffer(data)
    digits = len(buf) - count_skipped(buf)
    if digits % 2 != 0:
        raise OddDigitCountError(digits, buf)
    return digits // 2


def validate(data: BytesLike) -> int:
    """Check every significant byte, then the digit count.

    Returns the output length. Digits are checked first so a stray
    character is reported as such even when it also makes the count odd.
    """
    buf = _as_buffer(data)
    for pos, b in enumerate(buf):
        if b not in DELIMITERS:
            digit_value(b, position=pos, text=buf)
    return array_length(buf)


# ---------------- Conversion ----------------
def convert(data: BytesLike, length: int) -> bytes:
    """Pair significant digits of ``data`` into exactly ``length`` bytes.

    Delimiters are skipped wherever they appear, so ``"0_b"`` is one byte
    (0x0B). Anything after the last pair that is a delimiter is ignored.
    """
    buf = _as_buffer(data)
    size = len(buf)
    out = bytearray(length)

    write = 0
    read = 0
    while write < length and read < size:
        if buf[read] in DELIMITERS:
            read += 1
            continue

        high_val = digit_value(buf[read], position=read, text=buf)

        low = read + 1
        while low < size and buf[low] in DELIMITERS:
            low += 1
        if low >= size:
            # High nibble with no partner
            raise OddDigitCountError(size - count_skipped(buf), buf)

        low_val = digit_value(buf[low], position=low, text=buf)
        out[write] = high_val * 16 + low_val

        read = low + 1
        write += 1

    if write < length:
        raise HexLiteralError(
            f"Expected {length} bytes but input holds only {write}.", buf
        )
    return bytes(out)


def flatten_tokens(parts: Iterable[BytesLike]) -> bytes:
    """Join literal pieces with single spaces.

    Quotes left on a piece (``'"0b"'``) are delimiters, so mixing quoted and
    bare tokens decodes the same as one quoted literal.
    """
    return b" ".join(_as_buffer(p) for p in parts)


def hex_literal(*parts: BytesLike) -> bytes:
    """Decode a hex literal into bytes.

    Accepts one literal or a sequence of tokens:
      - hex_literal("0A 0B")                  -> b"\\x0a\\x0b"
      - hex_literal("0a0B0C0d")               -> b"\\x0a\\x0b\\x0c\\x0d"
      - hex_literal("E5_E6|90-92")            -> b"\\xe5\\xe6\\x90\\x92"
      - hex_literal("0a", '"01"', "0C", "02") -> b"\\x0a\\x01\\x0c\\x02"

    Raises InvalidDigitError or OddDigitCountError before any byte is built.
    """
    buf = flatten_tokens(parts)
    try:
        length = validate(buf)
    except HexLiteralError as exc:
        logger.debug("Rejected hex literal %r: %s", buf, exc)
        raise
    result = convert(buf, length)
    logger.debug("Decoded %d chars into %d bytes", len(buf), length)
    return result
