"""Module with exceptions raised by the analysis engine and its collaborators."""


class EchoscanError(Exception):
    """Base class for all errors raised by the application."""


class InvalidInputError(EchoscanError, ValueError):
    """Raised if a text is empty or whitespace-only after normalisation."""


class UnsupportedFormatError(EchoscanError):
    """Raised if a document cannot be converted into plain text."""


class InputTooLargeError(EchoscanError):
    """Raised if an input exceeds the configured size ceiling."""

    def __init__(self, size: int, max_bytes: int) -> None:
        """
        Store the offending size together with the ceiling.

        Args:
            size (int): Size of the rejected input in bytes.
            max_bytes (int): The maximum accepted size in bytes.
        """
        super().__init__(
            f"The input has {size} bytes, but at most {max_bytes} bytes are accepted."
        )
        self.size = size
        self.max_bytes = max_bytes
