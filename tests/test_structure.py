"""
Tests for the structural analyzer.

Functions tested:
- count_sentence_words(): per-sentence word counts
- find_long_sentences(): mean plus one standard deviation with a floor of 20 words
- content_word_set() / jaccard(): token-set similarity
- find_similar_sentences(): near-duplicate pairs
"""

import pytest

from echoscan.analysis.structure import (
    MAX_COMPARED_SENTENCES,
    MIN_COMPARED_CHARACTERS,
    content_word_set,
    count_sentence_words,
    find_long_sentences,
    find_similar_sentences,
    jaccard,
)
from echoscan.nlp.sentence_splitter import split_sentences


def _sentence(word: str, words: int) -> str:
    return " ".join([word] * words) + "."


class TestCountSentenceWords:
    """Tests for count_sentence_words() function."""

    def test_counts_tokens_per_sentence(self):
        assert count_sentence_words(["One two.", "Don't stop now!", "42."]) == [2, 3, 0]


class TestFindLongSentences:
    """Tests for find_long_sentences() function."""

    def test_flags_outlier_sentence(self, one_long_sentence_text):
        """
        Given: Sentences of 10 words and a single sentence of 40 words
        When: find_long_sentences() is called
        Then: Only the 40-word sentence is reported together with its length
        """
        sentences = split_sentences(one_long_sentence_text)
        long_sentences = find_long_sentences(sentences)
        assert len(long_sentences) == 1
        assert long_sentences[0].words == 40
        assert long_sentences[0].sentence == _sentence("ipsum", 40)

    def test_uniform_text_has_no_long_sentences(self, uniform_text):
        assert find_long_sentences(split_sentences(uniform_text)) == []

    def test_outlier_below_absolute_floor_is_not_flagged(self):
        sentences = [_sentence("lorem", 3)] * 5 + [_sentence("ipsum", 19)]
        assert find_long_sentences(sentences) == []

    def test_single_long_sentence_is_flagged(self):
        sentence = _sentence("lorem", 25)
        assert [s.words for s in find_long_sentences([sentence])] == [25]

    def test_keeps_order_and_limits_to_ten(self):
        sentences = []
        for index in range(12):
            sentences.extend([_sentence("lorem", 5)] * 3)
            sentences.append(_sentence("ipsum", 30 + index))
        long_sentences = find_long_sentences(sentences)
        assert [s.words for s in long_sentences] == list(range(30, 40))

    def test_uses_precomputed_word_counts(self):
        sentences = ["a.", "b."]
        long_sentences = find_long_sentences(sentences, word_counts=[1, 30])
        assert [s.sentence for s in long_sentences] == ["b."]

    def test_no_sentences(self):
        assert find_long_sentences([]) == []


class TestJaccard:
    """Tests for jaccard() and content_word_set() functions."""

    def test_content_words_skip_stopwords_and_duplicates(self):
        assert content_word_set("The cat and the other cat sat.") == frozenset(
            {"cat", "sat"}
        )

    def test_identical_sets_score_one(self):
        words = content_word_set("Budgets grow when libraries expand.")
        assert jaccard(words, words) == 1.0

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            ("Red apples taste sweet.", "Green apples taste sour."),
            ("Cats sleep.", "Dogs bark loudly."),
            ("The the the.", "Cats sleep."),
        ],
    )
    def test_is_symmetric(self, first, second):
        a, b = content_word_set(first), content_word_set(second)
        assert jaccard(a, b) == jaccard(b, a)

    def test_intersection_over_union(self):
        a = frozenset({"a", "b", "c"})
        b = frozenset({"b", "c", "d"})
        assert jaccard(a, b) == 0.5

    def test_empty_sets_score_zero(self):
        assert jaccard(frozenset(), frozenset()) == 0.0
        assert jaccard(frozenset({"a"}), frozenset()) == 0.0


class TestFindSimilarSentences:
    """Tests for find_similar_sentences() function."""

    def test_reports_near_duplicates(self, similar_text):
        """
        Given: Two long sentences differing only in stopwords
        When: find_similar_sentences() is called
        Then: The pair is reported with score 1.0
        """
        pairs = find_similar_sentences(split_sentences(similar_text))
        assert len(pairs) == 1
        assert pairs[0].sentence_a.startswith("The committee approved")
        assert pairs[0].sentence_b.startswith("The committee has approved")
        assert pairs[0].score == 1.0

    def test_threshold_is_inclusive(self):
        sentences = [
            "The committee approved the annual budget for the new library building.",
            "The committee approved the annual budget for the library building today.",
        ]
        pairs = find_similar_sentences(sentences)
        assert [pair.score for pair in pairs] == [0.75]

    def test_scores_below_threshold_are_dropped(self):
        sentences = [
            "The committee approved the annual budget for the new library building.",
            "The council rejected the annual budget for the new museum building.",
        ]
        assert find_similar_sentences(sentences) == []

    def test_short_sentences_are_never_compared(self):
        assert find_similar_sentences(["Cats sleep.", "Cats sleep."]) == []

    def test_unrelated_short_sentences(self):
        assert find_similar_sentences(["Cats sleep.", "Dogs bark."]) == []

    def test_scores_are_rounded_and_sorted(self):
        base = "alpha bravo charlie delta echo foxtrot golf hotel india juliet"
        sentences = [
            f"{base} kilo lima.",
            f"{base} kilo mike.",
            f"{base} kilo lima.",
        ]
        pairs = find_similar_sentences(sentences)
        assert [pair.score for pair in pairs] == [1.0, 0.85, 0.85]

    def test_only_first_sentences_are_compared(self):
        filler = [
            f"Sentence number {word} talks about its own unique topic here."
            for word in ["x" * (i + 1) for i in range(MAX_COMPARED_SENTENCES)]
        ]
        duplicate = "This sentence appears twice after the comparison window ends."
        assert find_similar_sentences([*filler, duplicate, duplicate]) == []

    def test_limited_to_ten_pairs(self):
        sentence = "Identical sentences keep appearing across this long document."
        pairs = find_similar_sentences([sentence] * 6)
        assert len(pairs) == 10

    def test_length_counts_code_points(self):
        """
        Given: Sentences ending with an emoji, one character per code point
        When: find_similar_sentences() is called
        Then: A 40-character pair is skipped and a 41-character pair is reported
        """
        at_limit = "roses bloom everywhere tonight xxxxxxx\U0001f339."
        above_limit = "roses bloom everywhere tonight xxxxxxxx\U0001f339."
        assert len(at_limit) == MIN_COMPARED_CHARACTERS
        assert len(above_limit) == MIN_COMPARED_CHARACTERS + 1

        assert find_similar_sentences([at_limit, at_limit]) == []
        assert len(find_similar_sentences([above_limit, above_limit])) == 1
