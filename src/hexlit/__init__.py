# hexlit/__init__.py
"""hexlit package.

Re-exports the decoder so callers can ``from hexlit import hex_literal``.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .errors import (
    HexLiteralError,
    InvalidDigitError,
    OddDigitCountError,
)

from .logic import (
    DELIMITERS,
    array_length,
    convert,
    count_skipped,
    digit_value,
    flatten_tokens,
    hex_literal,
    is_delimiter,
    validate,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Errors
    "HexLiteralError", "InvalidDigitError", "OddDigitCountError",
    # Logic
    "DELIMITERS",
    "array_length", "convert", "count_skipped", "digit_value",
    "flatten_tokens", "hex_literal", "is_delimiter", "validate",
]
