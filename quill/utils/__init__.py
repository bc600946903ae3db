"""
Shared utilities for QUILL.

Common functionality used across contexts:
- PDF text extraction
- Logging setup
- Timestamps
"""

from quill.utils.pdf_processing import PDFDocument, has_pdf_header
from quill.utils.timestamp import now

__all__ = ["PDFDocument", "has_pdf_header", "now"]
