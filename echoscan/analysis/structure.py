"""Module with structural checks: long sentences and near-duplicate sentences."""

from itertools import combinations
from typing import Final

import numpy as np

from echoscan.data_models import LongSentence, SimilarityPair
from echoscan.nlp.stopwords import remove_stopwords
from echoscan.nlp.tokeniser import tokenize_words
from echoscan.utils import round_half_up

LONG_SENTENCE_MIN_WORDS: Final = 20
LONG_SENTENCE_LIMIT: Final = 10

# Pairwise comparison is quadratic, 200 sentences give at most 19,900 pairs.
MAX_COMPARED_SENTENCES: Final = 200
MIN_COMPARED_CHARACTERS: Final = 40
SIMILARITY_THRESHOLD: Final = 0.75
SIMILARITY_DIGITS: Final = 2
SIMILAR_PAIRS_LIMIT: Final = 10


def count_sentence_words(sentences: list[str]) -> list[int]:
    """Get a number of words in each sentence."""
    return [len(tokenize_words(sentence)) for sentence in sentences]


def find_long_sentences(
    sentences: list[str], word_counts: list[int] | None = None
) -> list[LongSentence]:
    """
    Find sentences at least one standard deviation longer than the mean.

    Sentences shorter than 20 words are never flagged, so short texts made of
    evenly sized sentences stay clean.

    Args:
        sentences (list[str]): Sentences of the text.
        word_counts (list[int] | None, optional): Precomputed numbers of words
            in the sentences. Counted from `sentences` if None. Defaults to None.

    Returns:
        list[LongSentence]: Up to 10 long sentences in order of appearance.
    """
    if not sentences:
        return []
    if word_counts is None:
        word_counts = count_sentence_words(sentences)

    counts = np.array(word_counts, dtype=np.float64)
    # Population standard deviation (ddof=0).
    threshold = counts.mean() + counts.std()

    long_sentences = [
        LongSentence(sentence=sentence, words=words)
        for sentence, words in zip(sentences, word_counts, strict=True)
        if words >= threshold and words >= LONG_SENTENCE_MIN_WORDS
    ]
    return long_sentences[:LONG_SENTENCE_LIMIT]


def content_word_set(sentence: str) -> frozenset[str]:
    """Get distinct words of a sentence that are not stopwords."""
    return frozenset(remove_stopwords(tokenize_words(sentence)))


def jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    """
    Calculate the Jaccard similarity of two sets.

    Args:
        a (frozenset[str]): The first set.
        b (frozenset[str]): The second set.

    Returns:
        float: Size of the intersection divided by size of the union. 0.0 if any
            of the sets is empty.
    """
    if not a or not b:
        return 0.0
    intersection = len(a & b)
    return intersection / (len(a) + len(b) - intersection)


def find_similar_sentences(sentences: list[str]) -> list[SimilarityPair]:
    """
    Find pairs of sentences sharing most of their content words.

    Only the first 200 sentences are compared. Both sentences of a pair must be
    longer than 40 characters and their similarity at least 0.75. Characters are
    Unicode code points, so a character outside the Basic Multilingual Plane
    (an emoji, for example) counts once rather than as two UTF-16 units.

    Args:
        sentences (list[str]): Sentences of the text.

    Returns:
        list[SimilarityPair]: Up to 10 pairs with the most similar first.
    """
    compared = sentences[:MAX_COMPARED_SENTENCES]
    word_sets = [content_word_set(sentence) for sentence in compared]

    pairs: list[SimilarityPair] = []
    for i, j in combinations(range(len(compared)), 2):
        if (
            len(compared[i]) <= MIN_COMPARED_CHARACTERS
            or len(compared[j]) <= MIN_COMPARED_CHARACTERS
        ):
            continue
        score = jaccard(word_sets[i], word_sets[j])
        if score < SIMILARITY_THRESHOLD:
            continue
        pairs.append(
            SimilarityPair(
                sentence_a=compared[i],
                sentence_b=compared[j],
                score=round_half_up(score, SIMILARITY_DIGITS),
            )
        )

    pairs.sort(key=lambda pair: pair.score, reverse=True)
    return pairs[:SIMILAR_PAIRS_LIMIT]
