"""Daily word selection.

Every client and server must agree on the word for a date without a stored
schedule, so the hash below reproduces 32-bit signed wraparound exactly.
"""

import re
from datetime import date

WORDS = [
    "EPHEMERAL", "SERENDIPITY", "LUMINESCENT", "ETHEREAL", "MELANCHOLY",
    "SOLITUDE", "RESONANCE", "PETRICHOR", "HALCYON", "SYMPHONY",
    "LABYRINTH", "ENIGMATIC", "CELESTIAL", "INFINITE", "RADIANCE",
    "HARMONY", "TRANQUIL", "BLOSSOM", "WHISPER", "EUPHORIA",
    "NOSTALGIA", "PARADOX", "SPECTRUM", "VIBRANT", "ZENITH",
]

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def validate_date_string(date_string: str) -> str:
    """Return `date_string` if it is a real calendar date in YYYY-MM-DD form.

    Raises:
        ValueError: on any other format or an impossible date.
    """
    if not isinstance(date_string, str) or not _DATE_PATTERN.fullmatch(date_string):
        raise ValueError(f"date must be in YYYY-MM-DD form, got {date_string!r}")
    date.fromisoformat(date_string)
    return date_string


def string_hash(value: str) -> int:
    """Polynomial rolling hash (multiplier 31) over UTF-16 code units.

    Each step is truncated to 32 bits and the result is read as a signed
    32-bit integer.
    """
    data = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & _UINT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


def word_for_date(date_string: str) -> str:
    """Return the daily word for a YYYY-MM-DD date string."""
    validate_date_string(date_string)
    return WORDS[abs(string_hash(date_string)) % len(WORDS)]
