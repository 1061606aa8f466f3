"""Module with a text normaliser."""


def normalise(text: str) -> str:
    """
    Unify line endings to `\\n` and trim whitespace around the whole text.

    Args:
        text (str): Raw text as received from a user or a document.

    Returns:
        str: Normalised text. It may be empty.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").strip()
