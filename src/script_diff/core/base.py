"""Data classes shared across the diff pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited substring of an input text."""
    text: str
    index: int  # 0-based position in its source sequence


@dataclass(frozen=True)
class DiffWord:
    """An original script word and whether the learner reproduced it."""
    word: str
    matched: bool

    def to_dict(self) -> dict:
        return {"word": self.word, "matched": self.matched}
