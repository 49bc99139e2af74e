"""Script reproduction diff: tokenize, normalize, align, assemble."""

from script_diff.diff.engine import diff_script
from script_diff.diff.tokenizer import tokenize, count_words, is_blank
from script_diff.diff.normalizer import normalize_token, normalize_tokens
from script_diff.diff.alignment import (
    AlignmentTable,
    build_alignment_table,
    backtrack_matches,
    find_matched_indices,
)
from script_diff.diff.assembler import assemble

__all__ = [
    "diff_script",
    "tokenize",
    "count_words",
    "is_blank",
    "normalize_token",
    "normalize_tokens",
    "AlignmentTable",
    "build_alignment_table",
    "backtrack_matches",
    "find_matched_indices",
    "assemble",
]
