"""Shared pytest fixtures for Echoscan tests."""

import pytest


@pytest.fixture
def similar_text() -> str:
    """Two sentences with the same content words and one unrelated sentence."""
    return (
        "The committee approved the annual budget for the new library building. "
        "The committee has approved an annual budget for a new library building. "
        "Cats sleep."
    )


@pytest.fixture
def one_long_sentence_text() -> str:
    """Five sentences of ten words followed by a sentence of forty words."""
    short = " ".join(["lorem"] * 10) + "."
    long = " ".join(["ipsum"] * 40) + "."
    return " ".join([short] * 5 + [long])


@pytest.fixture
def uniform_text() -> str:
    """Six sentences of exactly ten words each."""
    return " ".join([" ".join(["dolor"] * 10) + "."] * 6)
