"""
Tests for document ingestion.

Functions tested:
- ensure_within_limit(): byte ceiling
- extract_text(): .txt, .md and .docx conversion
- read_document(): local files
"""

from io import BytesIO

import pytest
from docx import Document

from echoscan.errors import InputTooLargeError, UnsupportedFormatError
from echoscan.ingestion.extractor import (
    ensure_within_limit,
    extract_text,
    read_document,
)


def _docx_bytes(*paragraphs: str) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class TestEnsureWithinLimit:
    """Tests for ensure_within_limit() function."""

    def test_accepts_input_at_the_limit(self):
        ensure_within_limit(b"12345", max_bytes=5)

    def test_rejects_larger_bytes(self):
        with pytest.raises(InputTooLargeError) as error:
            ensure_within_limit(b"123456", max_bytes=5)
        assert error.value.size == 6
        assert error.value.max_bytes == 5

    def test_measures_text_in_utf8_bytes(self):
        """
        Given: Three characters taking two bytes each
        When: ensure_within_limit() is called with a 5-byte ceiling
        Then: The text is rejected
        """
        with pytest.raises(InputTooLargeError):
            ensure_within_limit("ééé", max_bytes=5)


class TestExtractText:
    """Tests for extract_text() function."""

    def test_plain_text(self):
        assert extract_text("notes.txt", "Hello world.".encode()) == "Hello world."

    def test_markdown_is_kept_verbatim(self):
        content = b"# Title\n\nSome *text*."
        assert extract_text("README.md", content) == "# Title\n\nSome *text*."

    def test_extension_is_case_insensitive(self):
        assert extract_text("NOTES.TXT", b"Loud.") == "Loud."

    def test_byte_order_mark_is_dropped(self):
        assert extract_text("bom.txt", "\ufeffStart.".encode()) == "Start."

    def test_invalid_utf8_is_replaced(self):
        assert extract_text("broken.txt", b"caf\xe9") == "caf\ufffd"

    def test_docx_paragraphs_are_joined_with_newlines(self):
        content = _docx_bytes("First paragraph.", "Second paragraph.")
        text = extract_text("essay.docx", content)
        assert text.strip() == "First paragraph.\nSecond paragraph."

    def test_docx_table_cells_follow_document_order(self):
        """
        Given: A document with a paragraph, a table and another paragraph.
        When: The text is extracted.
        Then: Table cells appear row by row between the two paragraphs.
        """
        document = Document()
        document.add_paragraph("Before the table.")
        table = document.add_table(rows=2, cols=2)
        table.cell(0, 0).text = "The garden was quiet."
        table.cell(0, 1).text = "The garden was green."
        table.cell(1, 0).text = "Roses grew."
        table.cell(1, 1).text = "Roses smelled sweet."
        document.add_paragraph("After the table.")
        buffer = BytesIO()
        document.save(buffer)

        text = extract_text("essay.docx", buffer.getvalue())

        assert text.strip().splitlines() == [
            "Before the table.",
            "The garden was quiet.",
            "The garden was green.",
            "Roses grew.",
            "Roses smelled sweet.",
            "After the table.",
        ]

    def test_docx_merged_cell_is_read_once(self):
        document = Document()
        table = document.add_table(rows=1, cols=3)
        merged = table.cell(0, 0).merge(table.cell(0, 1))
        merged.text = "Merged cell."
        table.cell(0, 2).text = "Last cell."
        buffer = BytesIO()
        document.save(buffer)

        text = extract_text("table.docx", buffer.getvalue())

        assert text.strip().splitlines() == ["Merged cell.", "Last cell."]

    def test_corrupt_docx_is_unsupported(self):
        with pytest.raises(UnsupportedFormatError):
            extract_text("essay.docx", b"definitely not a zip archive")

    @pytest.mark.parametrize("filename", ["scan.pdf", "image.png", "no_extension"])
    def test_other_formats_are_unsupported(self, filename):
        with pytest.raises(UnsupportedFormatError):
            extract_text(filename, b"whatever")


class TestReadDocument:
    """Tests for read_document() function."""

    def test_reads_local_file(self, tmp_path):
        path = tmp_path / "draft.md"
        path.write_text("A draft.", encoding="utf-8")
        assert read_document(path, max_bytes=100) == "A draft."

    def test_reads_local_docx(self, tmp_path):
        path = tmp_path / "draft.docx"
        path.write_bytes(_docx_bytes("Only paragraph."))
        assert read_document(path, max_bytes=1024 * 1024).strip() == "Only paragraph."

    def test_size_guard_runs_before_extraction(self, tmp_path):
        path = tmp_path / "big.pdf"
        path.write_bytes(b"x" * 11)
        with pytest.raises(InputTooLargeError):
            read_document(path, max_bytes=10)
