"""Module with JSON and CSV renderings of an analysis result."""

import csv
import io
from typing import Final

from echoscan.data_models import AnalysisResult

CSV_HEADER: Final = ("Category", "Item", "Count/Score")


def to_json(result: AnalysisResult, indent: int | None = 2) -> str:
    """
    Serialise a result to JSON with camelCase field names.

    Args:
        result (AnalysisResult): The result of an analysis.
        indent (int | None, optional): Indentation of the output. Defaults to 2.

    Returns:
        str: JSON document.
    """
    return result.model_dump_json(by_alias=True, indent=indent)


def to_csv(result: AnalysisResult) -> str:
    """
    Flatten result lists into a three-column CSV table.

    Args:
        result (AnalysisResult): The result of an analysis.

    Returns:
        str: CSV document with one row per reported item.
    """
    rows: list[tuple[str, str, float | int]] = []
    rows.extend(("Repeated Word", e.value, e.count) for e in result.repeated_words)
    rows.extend(
        ("Repeated Phrase", e.value, e.count) for e in result.repeated_phrases
    )
    rows.extend(
        ("Repeated Starter", e.value, e.count) for e in result.repeated_starters
    )
    rows.extend(
        ("Long Sentence", e.sentence, e.words) for e in result.long_sentences
    )
    rows.extend(
        ("Similar Pair", f"{pair.sentence_a} <-> {pair.sentence_b}", pair.score)
        for pair in result.similar_sentences
    )
    rows.extend(("Custom Term", e.value, e.count) for e in result.custom_counts)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(rows)
    return buffer.getvalue()
