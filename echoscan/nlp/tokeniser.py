"""Module with natural language tokenisers."""

from abc import ABC, abstractmethod
from typing import Final

from typing_extensions import override

from nltk.tokenize import RegexpTokenizer

# Basic Latin, Latin-1 Supplement (without the multiplication and division signs)
# and Latin Extended-A letters.
LETTERS: Final = "A-Za-zÀ-ÖØ-öø-ÿĀ-ſ"
WORD_PATTERN: Final = rf"[{LETTERS}]+(?:'[{LETTERS}]+)?"


class Tokeniser(ABC):
    """An interface of a natural language tokeniser."""

    @abstractmethod
    def tokenise(self, text: str) -> list[str]:
        """
        Split a text into textual tokens.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: A list of resulting textual tokens.

        """


class WordTokeniser(Tokeniser):
    """Tokeniser extracting lowercase words together with simple contractions."""

    def __init__(self, pattern: str = WORD_PATTERN) -> None:
        """
        Compile the regular expression matching a single word.

        Args:
            pattern (str, optional): Pattern of a word. The pattern must not contain
                capturing groups. Defaults to letters optionally followed by
                an apostrophe and more letters, e.g. "don't".
        """
        self._tokeniser = RegexpTokenizer(pattern)

    @override
    def tokenise(self, text: str) -> list[str]:
        return [token.lower() for token in self._tokeniser.tokenize(text)]


_default_tokeniser = WordTokeniser()


def tokenize_words(text: str) -> list[str]:
    """
    Split a text into lowercase words with the default tokeniser.

    Args:
        text (str): A text to be split.

    Returns:
        list[str]: Lowercase words in order of appearance. Empty if the text has
            no letters.
    """
    return _default_tokeniser.tokenise(text)
