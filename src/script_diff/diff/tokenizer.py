"""Whitespace tokenization of script and transcript text."""

import re

from script_diff.core.base import Token

# Whitespace as JS runtimes define it (regex class body). Python's str.split
# set differs: it omits U+FEFF and adds U+0085 and the \x1c-\x1f separators.
_WHITESPACE_CLASS = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_RUN = re.compile(f"[{_WHITESPACE_CLASS}]+")


def is_blank(text: str | None) -> bool:
    """True if text is None, empty, or whitespace only."""
    return not text or _WHITESPACE_RUN.fullmatch(text) is not None


def tokenize(text: str | None) -> list[Token]:
    """Split text into ordered tokens on runs of whitespace.

    Leading, trailing and repeated whitespace never produce empty tokens.

    Example: "  Hello,  world. " -> [Token("Hello,", 0), Token("world.", 1)]
    """
    if not text:
        return []
    words = [w for w in _WHITESPACE_RUN.split(text) if w]
    return [Token(text=word, index=i) for i, word in enumerate(words)]


def count_words(text: str | None) -> int:
    """Number of tokens ``tokenize`` would produce, without building them."""
    if not text:
        return 0
    return sum(1 for w in _WHITESPACE_RUN.split(text) if w)
