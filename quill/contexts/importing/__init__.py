"""
Importing Context

Responsibilities:
- Loads uploaded résumé PDFs and extracts their text
- Reconstructs structured fields (identity, contact, skills, experience,
  education, projects) with heuristic pattern matching
- Hands an ExtractedRecord back to the form layer

Owns: PDF text extraction, field extraction heuristics, skill vocabulary
Never: Merges into existing form state or renders documents
"""

from quill.contexts.importing.document_loader import aggregate_pages, load_page_texts
from quill.contexts.importing.exceptions import DocumentLoadError
from quill.contexts.importing.importer import (
    assemble_record,
    import_resume,
    import_resume_async,
    import_resume_file,
)
from quill.contexts.importing.record_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ExtractedRecord,
    PersonalInfo,
    ProjectEntry,
)
from quill.contexts.importing.skill_vocabulary import SkillVocabularyRegistry

__all__ = [
    # Pipeline entry points
    "import_resume",
    "import_resume_file",
    "import_resume_async",
    "assemble_record",
    # Loading stages
    "load_page_texts",
    "aggregate_pages",
    "DocumentLoadError",
    # Data structure classes
    "ExtractedRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "SkillVocabularyRegistry",
]
