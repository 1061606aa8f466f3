"""Module orchestrating all analyses of a single text."""

from loguru import logger

from echoscan.analysis.frequency import (
    build_frequency,
    count_terms,
    find_repeated_phrases,
    find_repeated_starters,
    find_repeated_words,
)
from echoscan.analysis.structure import (
    count_sentence_words,
    find_long_sentences,
    find_similar_sentences,
)
from echoscan.data_models import AnalysisConfig, AnalysisResult, Totals
from echoscan.errors import InvalidInputError
from echoscan.nlp.normaliser import normalise
from echoscan.nlp.sentence_splitter import SentenceSplitter, TerminatorSentenceSplitter
from echoscan.nlp.tokeniser import Tokeniser, WordTokeniser
from echoscan.utils import round_half_up


class Analyzer:
    """Text analyzer surfacing repetitions and structural patterns."""

    def __init__(
        self,
        tokeniser: Tokeniser | None = None,
        sentence_splitter: SentenceSplitter | None = None,
    ) -> None:
        """
        Set up the tokeniser and sentence splitter applied to whole texts.

        Both collaborators are stateless, so one analyzer can serve concurrent
        requests.

        Args:
            tokeniser (Tokeniser | None, optional): Tokeniser splitting the whole
                text into words. Defaults to `WordTokeniser`.
            sentence_splitter (SentenceSplitter | None, optional): Splitter of
                the whole text. Defaults to `TerminatorSentenceSplitter`.
        """
        self._tokeniser = tokeniser or WordTokeniser()
        self._sentence_splitter = sentence_splitter or TerminatorSentenceSplitter()

    def analyze(
        self, text: str, config: AnalysisConfig | None = None
    ) -> AnalysisResult:
        """
        Run the selected analyses on a text.

        Args:
            text (str): Raw text to be analyzed.
            config (AnalysisConfig | None, optional): Selection of analyses.
                If None, every analysis runs with default settings.
                Defaults to None.

        Raises:
            InvalidInputError: Raised if the text is empty after normalisation.

        Returns:
            AnalysisResult: Totals and every result list. Disabled analyses
                produce empty lists.
        """
        config = config or AnalysisConfig()
        normalised = normalise(text)
        if not normalised:
            raise InvalidInputError("No text provided.")

        words = self._tokeniser.tokenise(normalised)
        sentences = self._sentence_splitter.split_into_sentences(normalised)
        totals = self._summarise(words, sentences)
        logger.debug(
            f"Analyzing {totals.total_words} words in "
            f"{totals.total_sentences} sentences."
        )

        repeated_words = (
            find_repeated_words(
                words, exclude_stopwords=config.exclude_common, limit=config.max_results
            )
            if config.repeated_words
            else []
        )
        repeated_phrases = (
            find_repeated_phrases(words, exclude_stopwords=config.exclude_common)
            if config.repeated_phrases
            else []
        )
        repeated_starters = (
            find_repeated_starters(sentences)
            if config.repeated_starters and sentences
            else []
        )
        long_sentences = find_long_sentences(
            sentences, count_sentence_words(sentences)
        )
        similar_sentences = (
            find_similar_sentences(sentences)
            if config.similar_sentences and sentences
            else []
        )
        custom_counts = count_terms(
            build_frequency(words, exclude_stopwords=False), config.custom_words
        )

        return AnalysisResult(
            text=normalised,
            totals=totals,
            repeated_words=tuple(repeated_words),
            repeated_phrases=tuple(repeated_phrases),
            repeated_starters=tuple(repeated_starters),
            long_sentences=tuple(long_sentences),
            similar_sentences=tuple(similar_sentences),
            custom_counts=tuple(custom_counts),
        )

    @staticmethod
    def _summarise(words: list[str], sentences: list[str]) -> Totals:
        total_words = len(words)
        unique_words = len(set(words))
        lexical_diversity = unique_words / total_words if total_words else 0.0
        return Totals(
            total_words=total_words,
            unique_words=unique_words,
            lexical_diversity=round_half_up(lexical_diversity, 3),
            total_sentences=len(sentences),
        )


_default_analyzer = Analyzer()


def analyze(text: str, config: AnalysisConfig | None = None) -> AnalysisResult:
    """
    Analyze a text with the default analyzer.

    Args:
        text (str): Raw text to be analyzed.
        config (AnalysisConfig | None, optional): Selection of analyses.
            Defaults to None, meaning all analyses with default settings.

    Raises:
        InvalidInputError: Raised if the text is empty after normalisation.

    Returns:
        AnalysisResult: Outcome of the analysis.
    """
    return _default_analyzer.analyze(text, config)
