"""
Résumé import pipeline.

PDF bytes -> page texts -> corpus -> field extractors -> ExtractedRecord.

Only loading can fail (DocumentLoadError). Once the corpus exists the
pipeline always returns a record, however sparse.
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from quill.contexts.importing.document_loader import aggregate_pages, load_page_texts
from quill.contexts.importing.exceptions import DocumentLoadError
from quill.contexts.importing.field_extractors import (
    extract_education,
    extract_email,
    extract_experiences,
    extract_location,
    extract_name,
    extract_phone,
    extract_projects,
    extract_skills,
)
from quill.contexts.importing.logger import _log_error, log_import_result, log_import_start
from quill.contexts.importing.record_data_structure import ExtractedRecord, PersonalInfo
from quill.contexts.importing.skill_vocabulary import SkillVocabularyRegistry


def assemble_record(
    corpus: str, registry: Optional[SkillVocabularyRegistry] = None
) -> ExtractedRecord:
    """
    Run every field extractor over the corpus and merge the results.

    The extractors write disjoint fields, so there is nothing to reconcile.

    Args:
        corpus: Full résumé text
        registry: Vocabulary registry for skills (defaults to the process-wide one)

    Returns:
        ExtractedRecord with every field present (possibly empty)
    """
    return ExtractedRecord(
        personal_info=PersonalInfo(
            full_name=extract_name(corpus),
            email=extract_email(corpus),
            phone=extract_phone(corpus),
            location=extract_location(corpus),
        ),
        experiences=extract_experiences(corpus),
        education=extract_education(corpus),
        skills=extract_skills(corpus, registry=registry),
        projects=extract_projects(corpus),
    )


def import_resume(
    pdf_bytes: bytes,
    source: str = "<upload>",
    registry: Optional[SkillVocabularyRegistry] = None,
) -> ExtractedRecord:
    """
    Import a résumé PDF into a structured record.

    Args:
        pdf_bytes: Raw PDF content
        source: Name of the uploaded file, used in logs and errors
        registry: Vocabulary registry for skills (defaults to the process-wide one)

    Returns:
        ExtractedRecord (sparse or even empty for scanned PDFs)

    Raises:
        DocumentLoadError: If the PDF cannot be loaded
    """
    start_time = datetime.now()

    with logger.contextualize(source=source):
        log_import_start(source, len(pdf_bytes or b""))

        try:
            page_texts = load_page_texts(pdf_bytes, source=source)
        except DocumentLoadError as e:
            _log_error(f"Failed to import {source}: {e.message}")
            raise

        record = assemble_record(aggregate_pages(page_texts), registry=registry)

        elapsed_time = (datetime.now() - start_time).total_seconds()
        log_import_result(source, record, elapsed_time)

    return record


def import_resume_file(
    pdf_path: Path, registry: Optional[SkillVocabularyRegistry] = None
) -> ExtractedRecord:
    """
    Import a résumé PDF from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentLoadError: If the PDF cannot be loaded
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    return import_resume(pdf_path.read_bytes(), source=pdf_path.name, registry=registry)


async def import_resume_async(
    pdf_bytes: bytes,
    source: str = "<upload>",
    registry: Optional[SkillVocabularyRegistry] = None,
) -> ExtractedRecord:
    """
    Awaitable import_resume; PDF parsing runs in a worker thread.

    Abandoning the await has no side effects to roll back.
    """
    return await asyncio.to_thread(import_resume, pdf_bytes, source, registry)
