# hexlit/errors.py
"""Errors raised while turning hex text into bytes.

Both kinds derive from ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations


class HexLiteralError(ValueError):
    """Base class: the input cannot become a byte sequence."""

    def __init__(self, message: str, text: bytes = b"", position: int | None = None):
        super().__init__(message)
        self.text = text
        self.position = position


class InvalidDigitError(HexLiteralError):
    """A significant character is outside ``0-9A-Fa-f``."""

    def __init__(self, byte: int, text: bytes = b"", position: int | None = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid hex digit {_describe(byte)}{where}", text, position)
        self.byte = byte


class OddDigitCountError(HexLiteralError):
    def __init__(self, digit_count: int, text: bytes = b""):
        super().__init__(
            f"Hex literal must have an even number of digits (got {digit_count}).",
            text,
        )
        self.digit_count = digit_count


def _describe(byte: int) -> str:
    if 32 <= byte <= 126:
        return f"{chr(byte)!r} (0x{byte:02X})"
    return f"0x{byte:02X}"
