"""Token normalization for word comparison."""

import re
import string
from typing import Iterable

# ASCII-only case folding; non-ASCII letters are left for the strip step
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Apostrophes are kept so contractions stay distinct ("it's" vs "its")
_NON_KEY_CHARS = re.compile(r"[^a-z0-9']")


def normalize_token(token: str) -> str:
    """Normalize a raw token into its comparison key.

    Lower-cases ASCII letters, then drops every character outside
    ``[a-z0-9']``. Accented letters are dropped as well, so a word made only
    of them normalizes to an empty key.

    Args:
        token: Raw token spelling

    Returns:
        Comparison key, possibly empty
    """
    return _NON_KEY_CHARS.sub("", token.translate(_ASCII_LOWER))


def normalize_tokens(tokens: Iterable[str]) -> list[str]:
    """Normalize a sequence of raw token spellings, preserving order."""
    return [normalize_token(t) for t in tokens]
