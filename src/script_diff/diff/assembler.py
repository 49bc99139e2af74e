"""Assemble per-word diff results in original script order."""

from typing import Collection, Sequence

from script_diff.core.base import DiffWord, Token


def assemble(original_tokens: Sequence[Token], matched: Collection[int]) -> list[DiffWord]:
    """Pair every original token with its matched flag.

    The word keeps its original spelling, and the output has exactly one
    entry per original token.
    """
    return [
        DiffWord(word=token.text, matched=token.index in matched)
        for token in original_tokens
    ]
