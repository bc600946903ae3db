"""
PDF processing utilities for in-memory text extraction.

Main class:
    PDFDocument: Parsed PDF with per-page text extraction.

Helper functions:
    has_pdf_header: Cheap signature check before handing bytes to a parser.
    strip_glyph_artifacts: Remove "(cid:N)" placeholders left by unmapped glyphs.
"""

import io
import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

# pdfminer logs every malformed CropBox / font table at WARNING
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)

PDF_SIGNATURE = b"%PDF-"

# Readers tolerate junk before the header, within the first KB
HEADER_SEARCH_WINDOW = 1024

_CID_RE = re.compile(r"\(cid:\d+\)")


def has_pdf_header(data: bytes) -> bool:
    """Check for the %PDF- signature near the start of the payload."""
    return PDF_SIGNATURE in data[:HEADER_SEARCH_WINDOW]


def strip_glyph_artifacts(text: str) -> str:
    """Remove (cid:N) artifacts that pdfminer emits for glyphs without a unicode mapping."""
    return _CID_RE.sub("", text)


class PDFDocument:
    """
    Parsed PDF held entirely in memory.

    Structure (page tree, encryption flag) is read with PyPDF2; text is
    extracted page by page with pdfplumber. Both are lazily loaded and cached
    on first access, so constructing a PDFDocument never fails on bad input.
    Library errors surface from the accessors instead.

    Args:
        source: Raw PDF bytes, or a path to a PDF file
        max_pages: Only the first max_pages pages are extracted

    Example:
        >>> pdf = PDFDocument(Path("resume.pdf").read_bytes())
        >>> for page in pdf.iter_pages():
        ...     print(pdf.get_text(page))
    """

    def __init__(self, source: Union[bytes, str, Path], max_pages: int = 100):
        if isinstance(source, (str, Path)):
            pdf_path = Path(source)
            if not pdf_path.exists():
                raise FileNotFoundError(f"PDF not found: {pdf_path}")
            source = pdf_path.read_bytes()

        self.data = bytes(source)
        self.max_pages = max_pages
        self._reader: Optional[PdfReader] = None
        self._page_texts: Optional[List[str]] = None

    @property
    def reader(self) -> PdfReader:
        """PyPDF2 reader over the payload. Raises PdfReadError on malformed input."""
        if self._reader is None:
            self._reader = PdfReader(io.BytesIO(self.data))
        return self._reader

    @property
    def is_encrypted(self) -> bool:
        return self.reader.is_encrypted

    @property
    def page_count(self) -> int:
        """Total number of pages in the document (ignores max_pages)."""
        return len(self.reader.pages)

    @property
    def is_truncated(self) -> bool:
        return self.page_count > self.max_pages

    def _extract_pages(self) -> List[str]:
        """
        Extract text from each page in page order.

        Pages without a text layer (scanned images) yield an empty string.
        """
        with pdfplumber.open(io.BytesIO(self.data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages[: self.max_pages]]
        return [strip_glyph_artifacts(text) for text in pages]

    def _ensure_loaded(self) -> None:
        """Lazily extract page text if not already cached."""
        if self._page_texts is None:
            self._page_texts = self._extract_pages()

    def get_page_texts(self) -> List[str]:
        """Text of every extracted page, in page order."""
        self._ensure_loaded()
        return list(self._page_texts)

    def get_text(self, page: int) -> str:
        """
        Get text for a specific page.

        Args:
            page: Page number (1-indexed)

        Returns:
            Page text, or empty string if the page doesn't exist.
        """
        self._ensure_loaded()
        if not 1 <= page <= len(self._page_texts):
            return ""
        return self._page_texts[page - 1]

    def iter_pages(self) -> Iterator[int]:
        """Iterate over extracted page numbers (1-indexed)."""
        self._ensure_loaded()
        return iter(range(1, len(self._page_texts) + 1))
