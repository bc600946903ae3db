"""Unit tests for importing context logging."""

import sys

import pytest
from loguru import logger

from quill.contexts.importing.logger import (
    CONTEXT_PREFIX,
    _log_info,
    log_import_result,
    setup_importing_logger,
)
from quill.contexts.importing.record_data_structure import ExtractedRecord


@pytest.fixture
def session_log(tmp_path):
    """Configure a session log, then restore loguru's default sink."""
    log_file = setup_importing_logger(tmp_path / "import_session", source="jane.pdf")
    yield log_file
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_log_file_created_with_provenance(session_log):
    assert session_log.name == "import.log"

    text = session_log.read_text(encoding="utf-8")
    assert "jane.pdf" in text
    assert "pdfplumber" in text
    assert "PyPDF2" in text


@pytest.mark.unit
def test_messages_prefixed(session_log):
    _log_info("hello")
    assert f"{CONTEXT_PREFIX} hello" in session_log.read_text(encoding="utf-8")


@pytest.mark.unit
def test_source_bound_per_record(session_log):
    """Records logged inside contextualize() carry the source column."""
    with logger.contextualize(source="cv_2026.pdf"):
        _log_info("inside")
    _log_info("outside")

    lines = session_log.read_text(encoding="utf-8").splitlines()
    assert any("| cv_2026.pdf |" in line and "inside" in line for line in lines)
    assert any("| - |" in line and "outside" in line for line in lines)


@pytest.mark.unit
def test_sparse_result_warns(session_log):
    log_import_result("scan.pdf", ExtractedRecord(), 0.1)

    text = session_log.read_text(encoding="utf-8")
    assert "0 experience" in text
    assert "limited information extracted" in text
