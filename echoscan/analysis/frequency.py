"""Module with frequency tables of words, phrases and sentence starters."""

from collections import Counter
from collections.abc import Iterable
from typing import Final

from echoscan.data_models import PhraseEntry, TermCount, WordEntry
from echoscan.nlp.stopwords import STOPWORDS, remove_stopwords
from echoscan.nlp.tokeniser import tokenize_words

MIN_REPETITIONS: Final = 2
PHRASE_SIZES: Final = (3, 4)
PHRASE_LIMIT: Final = 10
STARTER_WORDS: Final = 3
STARTER_LIMIT: Final = 10


def build_frequency(tokens: Iterable[str], exclude_stopwords: bool) -> Counter[str]:
    """
    Count occurrences of tokens.

    Args:
        tokens (Iterable[str]): Lowercase tokens.
        exclude_stopwords (bool): If True, stopwords are skipped entirely.

    Returns:
        Counter[str]: Mapping of tokens to their counts in first-seen order.
    """
    if exclude_stopwords:
        return Counter(token for token in tokens if token not in STOPWORDS)
    return Counter(tokens)


def top_entries(
    table: Counter[str],
    min_count: int = MIN_REPETITIONS,
    limit: int = 20,
) -> list[WordEntry]:
    """
    Get the most frequent entries of a frequency table.

    Entries with equal counts keep the order in which they were first seen.

    Args:
        table (Counter[str]): The frequency table.
        min_count (int, optional): The minimum count of a returned entry.
            Defaults to 2.
        limit (int, optional): The maximum number of entries. Defaults to 20.

    Returns:
        list[WordEntry]: Entries sorted by count in descending order.
    """
    frequent = [(key, count) for key, count in table.items() if count >= min_count]
    # `sorted` is stable, also with `reverse=True`.
    frequent = sorted(frequent, key=lambda item: item[1], reverse=True)
    return [WordEntry(value=key, count=count) for key, count in frequent[:limit]]


def ngram_frequency(tokens: list[str], n: int) -> Counter[str]:
    """
    Count phrases made of `n` consecutive tokens.

    Args:
        tokens (list[str]): Lowercase tokens.
        n (int): Number of tokens in a phrase.

    Returns:
        Counter[str]: Mapping of space-joined phrases to their counts.
    """
    return Counter(
        " ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)
    )


def find_repeated_words(
    tokens: list[str], exclude_stopwords: bool, limit: int
) -> list[WordEntry]:
    """Get words occurring at least twice."""
    return top_entries(build_frequency(tokens, exclude_stopwords), limit=limit)


def find_repeated_phrases(
    tokens: list[str], exclude_stopwords: bool
) -> list[PhraseEntry]:
    """
    Get repeated 3-word and 4-word phrases.

    Args:
        tokens (list[str]): Lowercase tokens of the whole text.
        exclude_stopwords (bool): If True, phrases are built after dropping
            stopwords from the token sequence.

    Returns:
        list[PhraseEntry]: Up to 10 three-word phrases followed by up to 10
            four-word phrases, each group sorted by count.
    """
    phrase_tokens = remove_stopwords(tokens) if exclude_stopwords else tokens
    phrases: list[PhraseEntry] = []
    for n in PHRASE_SIZES:
        table = ngram_frequency(phrase_tokens, n)
        phrases.extend(
            PhraseEntry(value=entry.value, count=entry.count, n=n)
            for entry in top_entries(table, limit=PHRASE_LIMIT)
        )
    return phrases


def find_repeated_starters(sentences: list[str]) -> list[WordEntry]:
    """
    Get repeated sentence openings.

    A starter is made of the first three words of a sentence. Stopwords are never
    removed here, since openings like "the quick brown" are mostly stopwords.

    Args:
        sentences (list[str]): Sentences of the text.

    Returns:
        list[WordEntry]: Up to 10 starters used at least twice.
    """
    starters: Counter[str] = Counter()
    for sentence in sentences:
        starter = " ".join(tokenize_words(sentence)[:STARTER_WORDS])
        if not starter:
            continue
        starters[starter] += 1
    return top_entries(starters, limit=STARTER_LIMIT)


def count_terms(table: Counter[str], terms: Iterable[str]) -> list[TermCount]:
    """
    Look up counts of focus terms.

    Args:
        table (Counter[str]): Frequency table built without stopword exclusion.
        terms (Iterable[str]): Lowercase terms in the requested order.

    Returns:
        list[TermCount]: Terms with their counts, 0 for absent terms.
    """
    return [TermCount(value=term, count=table[term]) for term in terms]
