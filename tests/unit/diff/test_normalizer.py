"""Tests for token normalization."""

from script_diff.diff.normalizer import normalize_token, normalize_tokens


class TestNormalizeToken:
    def test_lowercases(self):
        assert normalize_token("Hello") == "hello"
        assert normalize_token("WORLD") == "world"

    def test_strips_punctuation(self):
        assert normalize_token("Hello,") == "hello"
        assert normalize_token("World!") == "world"
        assert normalize_token('"quoted."') == "quoted"
        assert normalize_token("(end)") == "end"

    def test_keeps_digits(self):
        assert normalize_token("42nd") == "42nd"
        assert normalize_token("3.14") == "314"

    def test_keeps_apostrophes(self):
        assert normalize_token("Don't") == "don't"
        assert normalize_token("students'") == "students'"

    def test_internal_hyphen_merges_word(self):
        assert normalize_token("well-known") == "wellknown"

    def test_empty_input(self):
        assert normalize_token("") == ""

    def test_punctuation_only_is_empty(self):
        assert normalize_token("-") == ""
        assert normalize_token("...") == ""

    def test_accented_letters_are_stripped(self):
        assert normalize_token("café") == "caf"
        assert normalize_token("Élan") == "lan"
        assert normalize_token("àéî") == ""

    def test_non_latin_is_empty(self):
        assert normalize_token("안녕") == ""

    def test_only_ascii_letters_are_case_folded(self):
        # KELVIN SIGN lower-cases to "k" under Unicode rules, not ASCII ones
        assert normalize_token("K") == ""


class TestNormalizeTokens:
    def test_preserves_order_and_length(self):
        assert normalize_tokens(["I", "am,", "-", "OK!"]) == ["i", "am", "", "ok"]

    def test_accepts_generator(self):
        assert normalize_tokens(w for w in ["A", "b"]) == ["a", "b"]

    def test_empty(self):
        assert normalize_tokens([]) == []
