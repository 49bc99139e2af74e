"""Script reproduction diff: which original words appear in a transcript."""

from script_diff.core.base import DiffWord
from script_diff.diff.alignment import find_matched_indices
from script_diff.diff.assembler import assemble
from script_diff.diff.normalizer import normalize_tokens
from script_diff.diff.tokenizer import is_blank, tokenize
from script_diff.utils import get_logger, timed

logger = get_logger(__name__)


@timed
def diff_script(original: str | None, transcription: str | None) -> list[DiffWord]:
    """Compare an original script with a speech-to-text transcription.

    Words are compared case- and punctuation-insensitively and aligned with a
    longest common subsequence, so out-of-order or extra transcribed words
    never mark an original word twice.

    Args:
        original: Script text the learner memorized
        transcription: Transcript of what the learner said; None counts as empty

    Returns:
        One DiffWord per whitespace-delimited original word, in original order

    Example:
        >>> [w.matched for w in diff_script("I am a student", "a student")]
        [False, False, True, True]
    """
    original_tokens = tokenize(original)

    if is_blank(transcription):
        logger.debug(f"Empty transcription, {len(original_tokens)} words unmatched")
        return assemble(original_tokens, set())

    transcribed_tokens = tokenize(transcription)
    original_keys = normalize_tokens(t.text for t in original_tokens)
    transcribed_keys = normalize_tokens(t.text for t in transcribed_tokens)

    matched = find_matched_indices(original_keys, transcribed_keys)
    logger.debug(
        f"Matched {len(matched)}/{len(original_tokens)} words "
        f"against {len(transcribed_tokens)} transcribed words"
    )

    return assemble(original_tokens, matched)
