"""
Document loading for the Importing context.

Turns an uploaded PDF payload into page text and joins the pages into the
single corpus string every field extractor reads. Loading is the only step
of an import that can fail; every failure is reported as DocumentLoadError.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

from quill.contexts.importing.exceptions import DocumentLoadError
from quill.contexts.importing.logger import _log_debug, _log_warning
from quill.utils.pdf_processing import PDFDocument, has_pdf_header

load_dotenv()

# 5 MiB matches the limit the upload dialog advertises
MAX_PDF_BYTES = int(os.getenv("QUILL_MAX_PDF_BYTES", str(5 * 1024 * 1024)))
MAX_PDF_PAGES = int(os.getenv("QUILL_MAX_PDF_PAGES", "50"))

PAGE_SEPARATOR = " "


def load_page_texts(
    pdf_bytes: bytes,
    source: Optional[str] = None,
    max_bytes: int = MAX_PDF_BYTES,
    max_pages: int = MAX_PDF_PAGES,
) -> List[str]:
    """
    Extract the text of each page of a PDF payload.

    Args:
        pdf_bytes: Raw PDF content
        source: Optional file name, used in error messages and logs
        max_bytes: Payloads larger than this are rejected
        max_pages: Only the first max_pages pages are read

    Returns:
        One string per page, in page order. Pages without a text layer
        (scanned images) give empty strings; that is not an error.

    Raises:
        DocumentLoadError: If the payload is empty, oversized, not a PDF,
            encrypted, has no pages, or cannot be parsed
    """
    if not pdf_bytes:
        raise DocumentLoadError("Uploaded file is empty", source=source, reason="empty")

    if len(pdf_bytes) > max_bytes:
        raise DocumentLoadError(
            f"Uploaded file is {len(pdf_bytes)} bytes; the limit is {max_bytes} bytes",
            source=source,
            reason="too_large",
        )

    if not has_pdf_header(pdf_bytes):
        raise DocumentLoadError(
            "Uploaded file is not a PDF (missing %PDF- header)", source=source, reason="not_pdf"
        )

    document = PDFDocument(pdf_bytes, max_pages=max_pages)

    try:
        is_encrypted = document.is_encrypted
        total_pages = 0 if is_encrypted else document.page_count
    except Exception as e:
        # PyPDF2 raises KeyError, ValueError, TypeError, etc. on broken trailers and xrefs
        raise DocumentLoadError(f"Could not parse PDF: {e}", source=source, reason="malformed") from e

    if is_encrypted:
        raise DocumentLoadError(
            "PDF is password-protected; upload an unencrypted, text-based PDF",
            source=source,
            reason="encrypted",
        )

    if total_pages == 0:
        raise DocumentLoadError("PDF has no pages", source=source, reason="no_pages")

    if total_pages > max_pages:
        _log_warning(f"PDF has {total_pages} pages; only the first {max_pages} will be read")

    try:
        page_texts = document.get_page_texts()
    except Exception as e:
        # pdfminer raises a wide range of its own exception types on broken streams
        raise DocumentLoadError(
            f"Could not extract text from PDF: {e}", source=source, reason="malformed"
        ) from e

    _log_debug(
        f"Loaded {len(page_texts)} page(s), {sum(len(text) for text in page_texts)} characters"
    )
    return page_texts


def aggregate_pages(page_texts: List[str]) -> str:
    """
    Join page texts into the corpus, preserving page order.

    Example:
        >>> aggregate_pages(["Jane Doe", "EDUCATION"])
        'Jane Doe EDUCATION'
    """
    return PAGE_SEPARATOR.join(page_texts)
