"""Unit tests for PDF processing utilities."""

import pytest

from quill.utils.pdf_processing import PDFDocument, has_pdf_header, strip_glyph_artifacts


@pytest.mark.unit
@pytest.mark.parametrize(
    "data, expected",
    [
        (b"%PDF-1.7\n...", True),
        (b"\xef\xbb\xbf%PDF-1.4\n", True),
        (b"junk" * 10 + b"%PDF-1.4", True),
        (b"x" * 2048 + b"%PDF-1.4", False),
        (b"PK\x03\x04 docx archive", False),
        (b"", False),
    ],
)
def test_has_pdf_header(data, expected):
    assert has_pdf_header(data) is expected


@pytest.mark.unit
def test_strip_glyph_artifacts():
    assert strip_glyph_artifacts("(cid:127)Python(cid:3) and SQL") == "Python and SQL"
    assert strip_glyph_artifacts("no artifacts (here)") == "no artifacts (here)"


class TestPDFDocument:
    """Tests for PDFDocument over in-memory payloads."""

    @pytest.mark.unit
    def test_page_text(self, text_pdf_factory):
        pdf = PDFDocument(text_pdf_factory([["Jane Doe", "SKILLS"], ["PROJECTS"]]))

        assert pdf.page_count == 2
        assert not pdf.is_encrypted
        assert pdf.get_text(1) == "Jane Doe\nSKILLS"
        assert pdf.get_text(2) == "PROJECTS"

    @pytest.mark.unit
    def test_out_of_range_page(self, text_pdf_factory):
        pdf = PDFDocument(text_pdf_factory([["Jane Doe"]]))
        assert pdf.get_text(0) == ""
        assert pdf.get_text(2) == ""

    @pytest.mark.unit
    def test_iter_pages(self, text_pdf_factory):
        pdf = PDFDocument(text_pdf_factory([["one"], ["two"], ["three"]]))
        assert list(pdf.iter_pages()) == [1, 2, 3]

    @pytest.mark.unit
    def test_get_page_texts_returns_copy(self, text_pdf_factory):
        pdf = PDFDocument(text_pdf_factory([["one"]]))
        pdf.get_page_texts().append("extra")
        assert pdf.get_page_texts() == ["one"]

    @pytest.mark.unit
    def test_max_pages(self, text_pdf_factory):
        pdf = PDFDocument(text_pdf_factory([["one"], ["two"], ["three"]]), max_pages=2)

        assert pdf.page_count == 3
        assert pdf.is_truncated
        assert pdf.get_page_texts() == ["one", "two"]

    @pytest.mark.unit
    def test_blank_pages_have_empty_text(self, blank_pdf_factory):
        pdf = PDFDocument(blank_pdf_factory(2))
        assert pdf.get_page_texts() == ["", ""]
        assert not pdf.is_truncated

    @pytest.mark.unit
    def test_from_path(self, sample_pdf_path):
        pdf = PDFDocument(sample_pdf_path)
        assert pdf.page_count == 2
        assert pdf.get_text(1).startswith("Jane Doe")

    @pytest.mark.unit
    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PDFDocument(tmp_path / "missing.pdf")

    @pytest.mark.unit
    def test_construction_never_parses(self):
        """Bad bytes only fail once the document is actually read."""
        pdf = PDFDocument(b"not a pdf")
        assert pdf.data == b"not a pdf"
