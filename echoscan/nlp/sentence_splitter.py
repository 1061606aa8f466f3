"""Module for splitting a text into sentences."""

from abc import ABC, abstractmethod
from typing import Final

from typing_extensions import override

SENTENCE_TERMINATORS: Final = frozenset(".!?")


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: List of sentences, one items is one sentence.
        """


class TerminatorSentenceSplitter(SentenceSplitter):
    """
    Single-pass splitter cutting a text after every terminating punctuation mark.

    Characters are buffered until `.`, `!` or `?` is met. The buffer, including
    the terminator, is then trimmed and emitted unless it has no letters or digits.
    A trailing fragment without a terminator becomes the last sentence. Runs of
    terminators such as "..." and punctuation-only texts produce no sentences.
    """

    def __init__(self, terminators: frozenset[str] = SENTENCE_TERMINATORS) -> None:
        """
        Set characters closing a sentence.

        Args:
            terminators (frozenset[str], optional): Single characters ending
                a sentence. Defaults to full stop, exclamation and question marks.
        """
        self._terminators = terminators

    @override
    def split_into_sentences(self, text: str) -> list[str]:
        sentences: list[str] = []
        buffer: list[str] = []
        for character in text:
            buffer.append(character)
            if character in self._terminators:
                self._flush(buffer, sentences)

        self._flush(buffer, sentences)
        return sentences

    @staticmethod
    def _flush(buffer: list[str], sentences: list[str]) -> None:
        sentence = "".join(buffer).strip()
        if any(character.isalnum() for character in sentence):
            sentences.append(sentence)
        buffer.clear()


_default_splitter = TerminatorSentenceSplitter()


def split_sentences(text: str) -> list[str]:
    """
    Split a text into trimmed sentences with the default splitter.

    Args:
        text (str): Text to be split.

    Returns:
        list[str]: Sentences in order of appearance.
    """
    return _default_splitter.split_into_sentences(text)
