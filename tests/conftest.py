"""
Shared fixtures: in-memory PDF payloads.

build_text_pdf() writes a minimal but well-formed PDF (correct xref offsets)
with one Helvetica text line per entry, so pdfplumber extracts exactly the
lines given. Blank pages stand in for scanned documents without a text layer.
"""

import io
from typing import List

import pytest
from PyPDF2 import PdfWriter

SAMPLE_PAGE_ONE = [
    "Jane Doe",
    "jane.doe@example.com | (555) 123-4567",
    "Location: Austin, TX",
    "SKILLS",
    "Python, React, Docker",
    "EXPERIENCE",
    "Acme Corp Senior Engineer Jan 2020 - Present",
    "Globex | Data Analyst | Mar 2017 - Dec 2019",
    "EDUCATION",
    "University of Texas",
    "Bachelor of Science in Computer Science May 2016",
]

SAMPLE_PAGE_TWO = [
    "PROJECTS",
    "Resume Builder: A web app for building resumes (Jan 2023 - Mar 2023)",
]


def _escape_pdf_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_text_pdf(pages: List[List[str]]) -> bytes:
    """
    Build a PDF whose pages contain the given text lines, top to bottom.

    14pt Helvetica keeps inter-word gaps wider than pdfplumber's default
    x_tolerance so spaces survive extraction.
    """
    page_count = len(pages)
    kids = " ".join(f"{4 + 2 * index} 0 R" for index in range(page_count))

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]

    for index, lines in enumerate(pages):
        content_number = 5 + 2 * index
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_number} 0 R >>"
            ).encode()
        )
        shown = " ".join(f"({_escape_pdf_string(line)}) Tj T*" for line in lines)
        content = f"BT /F1 14 Tf 18 TL 72 740 Td {shown} ET".encode("latin-1")
        objects.append(
            f"<< /Length {len(content)} >>\nstream\n".encode() + content + b"\nendstream"
        )

    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_position = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    out += b"".join(f"{offset:010d} 00000 n \n".encode() for offset in offsets)
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_position}\n%%EOF\n"
    ).encode()
    return out


def build_blank_pdf(page_count: int = 1) -> bytes:
    """Build a PDF of empty pages (no text layer), like a scanned document."""
    writer = PdfWriter()
    for _ in range(page_count):
        writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_encrypted_pdf(password: str = "secret") -> bytes:
    """Build a one-page password-protected PDF."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.encrypt(password)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def text_pdf_factory():
    return build_text_pdf


@pytest.fixture
def blank_pdf_factory():
    return build_blank_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return build_text_pdf([SAMPLE_PAGE_ONE, SAMPLE_PAGE_TWO])


@pytest.fixture
def sample_pdf_path(tmp_path, sample_pdf_bytes):
    path = tmp_path / "jane_doe_resume.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture
def scanned_pdf_bytes() -> bytes:
    return build_blank_pdf(page_count=2)


@pytest.fixture
def encrypted_pdf_bytes() -> bytes:
    return build_encrypted_pdf()


@pytest.fixture
def vocabulary_file(tmp_path):
    """A small vocabulary table for registry tests."""
    path = tmp_path / "vocabulary.yaml"
    path.write_text(
        "version: 1\n"
        "categories:\n"
        "  languages:\n"
        "    - Python\n"
        "    - C++\n"
        "    - Java\n"
        "  frameworks:\n"
        "    - Node.js\n"
        "    - React\n"
        "  tools:\n"
        "    - Python\n",
        encoding="utf-8",
    )
    return path
