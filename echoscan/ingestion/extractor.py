"""Module converting uploaded documents into plain text."""

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path, PurePath
from typing import Final
from zipfile import BadZipFile

from docx import Document
from docx.document import Document as DocumentBody
from docx.opc.exceptions import PackageNotFoundError
from docx.table import _Cell
from docx.text.paragraph import Paragraph
from loguru import logger

from echoscan.errors import InputTooLargeError, UnsupportedFormatError

PLAIN_TEXT_EXTENSIONS: Final = frozenset({".txt", ".md"})
WORD_EXTENSIONS: Final = frozenset({".docx"})
SUPPORTED_EXTENSIONS: Final = PLAIN_TEXT_EXTENSIONS | WORD_EXTENSIONS


def ensure_within_limit(content: bytes | str, max_bytes: int) -> None:
    """
    Reject an input larger than the ceiling.

    Args:
        content (bytes | str): Raw document bytes or text. Text is measured in
            UTF-8 bytes.
        max_bytes (int): The maximum accepted size in bytes.

    Raises:
        InputTooLargeError: Raised if the input exceeds `max_bytes`.
    """
    size = len(content.encode("utf-8") if isinstance(content, str) else content)
    if size > max_bytes:
        logger.warning(f"Rejected an input of {size} bytes (limit {max_bytes}).")
        raise InputTooLargeError(size=size, max_bytes=max_bytes)


def _decode_plain_text(content: bytes) -> str:
    return content.decode("utf-8-sig", errors="replace")


def _block_lines(container: DocumentBody | _Cell) -> Iterator[str]:
    # Paragraphs and tables in document order; table cells row by row.
    for block in container.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block.text
            continue
        # A merged cell is repeated for every grid position it spans.
        seen = set()
        for row in block.rows:
            for cell in row.cells:
                if cell._tc in seen:  # noqa: SLF001
                    continue
                seen.add(cell._tc)  # noqa: SLF001
                yield from _block_lines(cell)


def _extract_docx(content: bytes) -> str:
    try:
        document = Document(BytesIO(content))
    except (BadZipFile, PackageNotFoundError, KeyError, ValueError) as e:
        raise UnsupportedFormatError("The file is not a valid .docx document.") from e
    return "\n".join(_block_lines(document))


def extract_text(filename: str, content: bytes) -> str:
    """
    Convert a document into plain text based on its file extension.

    Args:
        filename (str): Original name of the file. Only its extension is used.
        content (bytes): Raw content of the file.

    Raises:
        UnsupportedFormatError: Raised if the extension is not `.txt`, `.md` or
            `.docx`, or if a `.docx` file cannot be read.

    Returns:
        str: Text of the document. It may be empty.
    """
    extension = PurePath(filename).suffix.lower()
    if extension in PLAIN_TEXT_EXTENSIONS:
        text = _decode_plain_text(content)
    elif extension in WORD_EXTENSIONS:
        text = _extract_docx(content)
    else:
        raise UnsupportedFormatError(
            f"Unsupported file type `{extension or filename}`. "
            "Upload .txt, .md, or .docx."
        )

    logger.debug(f"Extracted {len(text)} characters from `{filename}`.")
    return text


def read_document(path: Path, max_bytes: int) -> str:
    """
    Read a local document applying the size guard and text extraction.

    Args:
        path (Path): Path to a `.txt`, `.md` or `.docx` file.
        max_bytes (int): The maximum accepted size of the file in bytes.

    Raises:
        InputTooLargeError: Raised if the file exceeds `max_bytes`.
        UnsupportedFormatError: Raised if the file cannot be converted to text.

    Returns:
        str: Text of the document.
    """
    content = path.read_bytes()
    ensure_within_limit(content, max_bytes)
    return extract_text(path.name, content)
