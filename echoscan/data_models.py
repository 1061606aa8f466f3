"""Module with project-wide data models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """Immutable model serialised with camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AnalysisConfig(FrozenModel):
    """Selection of analyses to run on a text."""

    repeated_words: bool = True
    repeated_phrases: bool = True
    repeated_starters: bool = True
    similar_sentences: bool = True
    exclude_common: bool = True
    max_results: int = Field(20, ge=1)
    custom_words: tuple[str, ...] = ()

    @field_validator("custom_words", mode="after")
    @classmethod
    def normalise_custom_words(cls, words: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase and trim focus terms, dropping the empty ones."""
        stripped = (word.strip().lower() for word in words)
        return tuple(word for word in stripped if word)


class WordEntry(FrozenModel):
    """A repeated word or sentence starter with its number of occurrences."""

    value: str
    count: int = Field(..., ge=0)


class PhraseEntry(WordEntry):
    """A repeated phrase of `n` consecutive words."""

    n: int = Field(..., ge=1)


class TermCount(WordEntry):
    """Number of occurrences of a user-supplied focus term."""


class LongSentence(FrozenModel):
    """A sentence noticeably longer than the rest of the text."""

    sentence: str
    words: int = Field(..., ge=0)


class SimilarityPair(FrozenModel):
    """Two sentences sharing most of their content words."""

    sentence_a: str
    sentence_b: str
    score: float = Field(..., ge=0.0, le=1.0)


class Totals(FrozenModel):
    """Summary counts of a text."""

    total_words: int = Field(..., ge=0)
    unique_words: int = Field(..., ge=0)
    lexical_diversity: float = Field(..., ge=0.0, le=1.0)
    total_sentences: int = Field(..., ge=0)


class AnalysisResult(FrozenModel):
    """Aggregate outcome of a single text analysis."""

    text: str
    totals: Totals
    repeated_words: tuple[WordEntry, ...] = ()
    repeated_phrases: tuple[PhraseEntry, ...] = ()
    repeated_starters: tuple[WordEntry, ...] = ()
    long_sentences: tuple[LongSentence, ...] = ()
    similar_sentences: tuple[SimilarityPair, ...] = ()
    custom_counts: tuple[TermCount, ...] = ()
