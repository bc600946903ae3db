"""
Heuristic field extraction from résumé text.

Each extractor is a pure function of the corpus and writes one field of the
imported record. Extractors are independent of each other and never raise on
any string input; when nothing is found they return an empty value.

Note: This module is a best-effort pass over unstructured text. It
preserves known weaknesses (e.g., mis-segmented company/position pairs on
unusual layouts) rather than guessing harder.
"""

from typing import List, Optional

from quill.contexts.importing.extraction_patterns import (
    CURRENT,
    EXPERIENCE_DESCRIPTION_PLACEHOLDER,
    PRESENT,
    ROLE_KEYWORD_SET,
    UNKNOWN_START_DATE,
    ContactPatterns,
    EducationPatterns,
    ExperiencePatterns,
    IdentityPatterns,
    ProjectPatterns,
    SkillPatterns,
)
from quill.contexts.importing.logger import _log_debug
from quill.contexts.importing.record_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from quill.contexts.importing.section_patterns import SectionHeadings, extract_section_window
from quill.contexts.importing.skill_vocabulary import (
    SkillVocabularyRegistry,
    get_default_registry,
)

# =============================================================================
# IDENTITY AND CONTACT
# =============================================================================


def extract_name(corpus: str) -> str:
    """
    Extract the candidate's full name.

    Priority:
    1. Two or more capitalized words at the very start of the corpus
    2. A "Name:" label anywhere (case-insensitive label)
    """
    match = IdentityPatterns.LEADING_NAME.search(corpus)
    if match is None:
        match = IdentityPatterns.LABELED_NAME.search(corpus)
    return match.group(1).strip() if match else ""


def extract_email(corpus: str) -> str:
    match = ContactPatterns.EMAIL.search(corpus)
    return match.group() if match else ""


def extract_phone(corpus: str) -> str:
    match = ContactPatterns.PHONE.search(corpus)
    return match.group().strip() if match else ""


def extract_location(corpus: str) -> str:
    """Extract a labeled location (Address:/Location:/City:). There is no positional fallback."""
    match = ContactPatterns.LABELED_LOCATION.search(corpus)
    return match.group(1).strip() if match else ""


# =============================================================================
# SKILLS
# =============================================================================


def extract_skills(corpus: str, registry: Optional[SkillVocabularyRegistry] = None) -> List[str]:
    """
    Extract skills from the skills section and the vocabulary.

    Two sources are combined once a skills heading is found:
    1. Tokens of the skills window split on commas, bullets, hyphens and newlines
    2. Known vocabulary terms occurring anywhere in the corpus

    Without a skills heading nothing is returned, even when vocabulary terms
    appear elsewhere in the text.

    Args:
        corpus: Full résumé text
        registry: Vocabulary registry (defaults to the process-wide registry)

    Returns:
        Deduplicated skills (exact-string dedup), window tokens first
    """
    window = extract_section_window(
        corpus, SectionHeadings.SKILLS_START, SectionHeadings.SKILLS_END
    )
    if window is None:
        return []

    tokens = [token.strip() for token in SkillPatterns.TOKEN_SEPARATOR.split(window)]
    tokens = [token for token in tokens if len(token) > 1]

    registry = registry or get_default_registry()
    vocabulary_hits = registry.find_terms(corpus)

    skills = list(dict.fromkeys(tokens + vocabulary_hits))
    _log_debug(
        f"Skills: {len(tokens)} window token(s), {len(vocabulary_hits)} vocabulary hit(s), "
        f"{len(skills)} unique"
    )
    return skills


# =============================================================================
# EXPERIENCE
# =============================================================================


def split_company_position(header: str) -> Optional[tuple]:
    """
    Split an experience header into (company, position).

    Rules, in order:
    1. An explicit separator ("|", "@", "at", spaced dash, comma). "@" and
       "at" put the position first ("Engineer at Acme").
    2. The first role keyword after the leading word starts the position
       ("Acme Corp Senior Engineer" -> "Acme Corp", "Senior Engineer").
    3. Otherwise the first half of the words is the company.

    Returns:
        (company, position), or None when the header is a single word
    """
    header = header.strip()

    for pattern, position_first in ExperiencePatterns.HEADER_SEPARATORS:
        parts = pattern.split(header, maxsplit=1)
        if len(parts) == 2 and parts[0].strip() and parts[1].strip():
            left, right = parts[0].strip(), parts[1].strip()
            return (right, left) if position_first else (left, right)

    words = header.split()
    if len(words) < 2:
        return None

    for index, word in enumerate(words[1:], start=1):
        if word.strip(".,").lower() in ROLE_KEYWORD_SET:
            return " ".join(words[:index]), " ".join(words[index:])

    middle = (len(words) + 1) // 2
    return " ".join(words[:middle]), " ".join(words[middle:])


def _resolve_end_date(end: Optional[str], default: str) -> str:
    """Map a captured range end to its display value."""
    if not end:
        return default
    if ExperiencePatterns.PRESENT.fullmatch(end):
        return PRESENT
    return end


def extract_experiences(corpus: str) -> List[ExperienceEntry]:
    """
    Extract work experience entries from the experience window.

    Each "Company Position Month YYYY [- Month YYYY|Present]" record becomes
    one entry. Duties text is not extracted; every entry gets the same
    placeholder description.
    """
    window = extract_section_window(
        corpus, SectionHeadings.EXPERIENCE_START, SectionHeadings.EXPERIENCE_END
    )
    if window is None:
        return []

    experiences = []
    for match in ExperiencePatterns.RECORD.finditer(window):
        split = split_company_position(match.group("header"))
        if split is None:
            continue

        company, position = split
        experiences.append(
            ExperienceEntry(
                company=company,
                position=position,
                start_date=match.group("start") or UNKNOWN_START_DATE,
                end_date=_resolve_end_date(match.group("end"), default=CURRENT),
                description=EXPERIENCE_DESCRIPTION_PLACEHOLDER,
            )
        )

    _log_debug(f"Experience: {len(experiences)} entr{'y' if len(experiences) == 1 else 'ies'}")
    return experiences


# =============================================================================
# EDUCATION
# =============================================================================


def extract_education(corpus: str) -> List[EducationEntry]:
    """
    Extract education entries from the education window.

    The primary pattern ("University of X", degree, month-year) is tried
    first. Only when it finds nothing is the fallback ("X University",
    degree, year or year range) applied. GPA is never extracted.
    """
    window = extract_section_window(
        corpus, SectionHeadings.EDUCATION_START, SectionHeadings.EDUCATION_END
    )
    if window is None:
        return []

    education = [
        EducationEntry(
            school=match.group("school").strip(),
            degree=match.group("degree").strip(),
            graduation_date=match.group("date"),
        )
        for match in EducationPatterns.PRIMARY.finditer(window)
    ]

    if not education:
        education = [
            EducationEntry(
                school=match.group("school").strip(),
                degree=match.group("degree").strip(),
                graduation_date=_resolve_end_date(
                    match.group("end_year"), default=match.group("start_year")
                ),
            )
            for match in EducationPatterns.FALLBACK.finditer(window)
        ]
        if education:
            _log_debug("Education: primary pattern found nothing, used year-only fallback")

    _log_debug(f"Education: {len(education)} entr{'y' if len(education) == 1 else 'ies'}")
    return education


# =============================================================================
# PROJECTS
# =============================================================================


def extract_projects(corpus: str) -> List[ProjectEntry]:
    """
    Extract projects from the projects window.

    Technologies are left empty; skills are extracted separately.
    """
    window = extract_section_window(
        corpus, SectionHeadings.PROJECTS_START, SectionHeadings.PROJECTS_END
    )
    if window is None:
        return []

    projects = [
        ProjectEntry(
            title=match.group("title").strip(),
            description=match.group("description").strip(),
            start_date=match.group("start") or "",
            end_date=_resolve_end_date(match.group("end"), default=""),
        )
        for match in ProjectPatterns.RECORD.finditer(window)
    ]

    _log_debug(f"Projects: {len(projects)} entr{'y' if len(projects) == 1 else 'ies'}")
    return projects
