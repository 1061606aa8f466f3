"""Module with the closed list of English function words."""

from typing import Final

STOPWORDS: Final[frozenset[str]] = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "aren", "as", "at",
        "be", "because", "been", "before", "being", "below", "between", "both",
        "but", "by",
        "can", "could",
        "did", "do", "does", "doing", "down", "during",
        "each", "few", "for", "from", "further",
        "had", "has", "have", "having", "he", "her", "here", "hers", "herself",
        "him", "himself", "his", "how",
        "i", "if", "in", "into", "is", "it", "its", "itself",
        "just",
        "me", "more", "most", "my", "myself",
        "no", "nor", "not", "now",
        "of", "off", "on", "once", "only", "or", "other", "our", "ours",
        "ourselves", "out", "over", "own",
        "s", "same", "she", "should", "so", "some", "such",
        "t", "than", "that", "the", "their", "theirs", "them", "themselves",
        "then", "there", "these", "they", "this", "those", "through", "to", "too",
        "under", "until", "up",
        "very",
        "was", "we", "were", "what", "when", "where", "which", "while", "who",
        "whom", "why", "will", "with",
        "you", "your", "yours", "yourself", "yourselves",
    }
)  # fmt: skip


def is_stopword(word: str) -> bool:
    """
    Check whether a lowercase token is a stopword.

    Args:
        word (str): A lowercase token.

    Returns:
        bool: True if the token is on the stopword list.
    """
    return word in STOPWORDS


def remove_stopwords(tokens: list[str]) -> list[str]:
    """
    Drop stopwords from a sequence of tokens keeping the order of the rest.

    Args:
        tokens (list[str]): Lowercase tokens.

    Returns:
        list[str]: Tokens that are not stopwords.
    """
    return [token for token in tokens if token not in STOPWORDS]
