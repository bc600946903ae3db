"""
Heading keywords and window extraction for résumé sections.

A window is the stretch of corpus text between the first occurrence of a
section's start heading and the first end heading that follows it (or the
end of the corpus). Each field extractor that works on a section reads only
its window.

Pattern classes follow the convention from extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for keyword tuples
- Helper functions that use these keywords
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

# =============================================================================
# SECTION HEADINGS
# =============================================================================


@dataclass(frozen=True)
class SectionHeadings:
    """
    Start and end heading keywords for each section window.

    Matching is case-insensitive and whole-word, so "Skills", "SKILLS" and
    "skills:" all open a skills window. End lists differ per section and
    are deliberately not symmetric with the start lists.
    """

    SKILLS_START: tuple = (
        "SKILLS",
        "TECHNICAL SKILLS",
        "CORE COMPETENCIES",
        "TECHNOLOGIES",
        "TOOLS",
        "LANGUAGES",
    )
    SKILLS_END: tuple = (
        "EXPERIENCE",
        "EDUCATION",
        "PROJECTS",
        "WORK",
        "EMPLOYMENT",
        "CERTIFICATIONS",
        "ACHIEVEMENTS",
    )

    EXPERIENCE_START: tuple = (
        "EXPERIENCE",
        "WORK EXPERIENCE",
        "EMPLOYMENT",
        "PROFESSIONAL EXPERIENCE",
    )
    EXPERIENCE_END: tuple = (
        "EDUCATION",
        "PROJECTS",
        "SKILLS",
        "CERTIFICATIONS",
        "ACHIEVEMENTS",
    )

    EDUCATION_START: tuple = (
        "EDUCATION",
        "ACADEMIC BACKGROUND",
        "QUALIFICATIONS",
    )
    EDUCATION_END: tuple = (
        "EXPERIENCE",
        "WORK",
        "PROFESSIONAL EXPERIENCE",
        "PROJECTS",
        "SKILLS",
    )

    PROJECTS_START: tuple = (
        "PROJECTS",
        "PERSONAL PROJECTS",
        "PROFESSIONAL PROJECTS",
    )
    PROJECTS_END: tuple = (
        "EDUCATION",
        "EXPERIENCE",
        "SKILLS",
        "CERTIFICATIONS",
        "ACHIEVEMENTS",
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def heading_pattern(headings: tuple, consume_colon: bool = False) -> re.Pattern:
    """
    Compile an alternation matching any of the given headings.

    Longer headings are tried first so "WORK EXPERIENCE" wins over "WORK"
    at the same position. Words inside a heading may be separated by any
    whitespace, since PDF text often wraps or double-spaces headings.

    Args:
        headings: Heading keywords (case is ignored)
        consume_colon: Also consume an optional colon right after the heading

    Returns:
        Compiled case-insensitive pattern
    """
    alternatives = sorted(headings, key=len, reverse=True)
    body = "|".join(r"\s+".join(re.escape(word) for word in h.split()) for h in alternatives)
    suffix = r"[ \t]*:?" if consume_colon else ""
    return re.compile(rf"\b(?:{body})\b{suffix}", re.IGNORECASE)


def extract_section_window(
    corpus: str, start_headings: tuple, end_headings: tuple
) -> Optional[str]:
    """
    Return the text between a section's start heading and the next end heading.

    The first occurrence of any start heading opens the window; the first
    end heading found after it closes the window. Without an end heading the
    window runs to the end of the corpus.

    Args:
        corpus: Full résumé text
        start_headings: Keywords that open the section
        end_headings: Keywords that close it

    Returns:
        Window text (possibly empty), or None if no start heading occurs

    Example:
        >>> extract_section_window("SKILLS\\nPython\\nEDUCATION", ("SKILLS",), ("EDUCATION",))
        '\\nPython\\n'
    """
    start_match = heading_pattern(start_headings, consume_colon=True).search(corpus)
    if start_match is None:
        return None

    window_start = start_match.end()
    end_match = heading_pattern(end_headings).search(corpus, window_start)
    window_end = end_match.start() if end_match else len(corpus)

    return corpus[window_start:window_end]
