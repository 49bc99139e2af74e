"""Longest-common-subsequence alignment of original and transcribed words."""

from typing import Sequence

AlignmentTable = list[list[int]]


def build_alignment_table(
    original_keys: Sequence[str], transcribed_keys: Sequence[str]
) -> AlignmentTable:
    """Fill the LCS length table.

    ``table[i][j]`` is the LCS length of the first ``i`` original keys and the
    first ``j`` transcribed keys. Row 0 and column 0 stay zero.

    Args:
        original_keys: Normalized original tokens (length m)
        transcribed_keys: Normalized transcribed tokens (length n)

    Returns:
        (m + 1) x (n + 1) table of LCS lengths
    """
    m, n = len(original_keys), len(transcribed_keys)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        orig = original_keys[i - 1]
        prev_row, row = table[i - 1], table[i]
        for j in range(1, n + 1):
            if orig == transcribed_keys[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    return table


def backtrack_matches(
    table: AlignmentTable,
    original_keys: Sequence[str],
    transcribed_keys: Sequence[str],
) -> set[int]:
    """Walk the table back from the bottom-right corner to collect matches.

    On equal sub-problem lengths the transcribed side is consumed first, so
    among several optimal alignments the one matching later original words
    is chosen ("a a" against "a" matches the second "a").

    Returns:
        Indices of original tokens that were reproduced
    """
    matched: set[int] = set()
    i, j = len(original_keys), len(transcribed_keys)

    while i > 0 and j > 0:
        if original_keys[i - 1] == transcribed_keys[j - 1]:
            matched.add(i - 1)
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    return matched


def find_matched_indices(
    original_keys: Sequence[str], transcribed_keys: Sequence[str]
) -> set[int]:
    """Return the original indices on the selected LCS alignment path."""
    if not original_keys or not transcribed_keys:
        return set()
    table = build_alignment_table(original_keys, transcribed_keys)
    return backtrack_matches(table, original_keys, transcribed_keys)
