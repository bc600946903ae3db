"""
Reusable patterns and constants for résumé field extraction.

This module provides the regex patterns used by field_extractors.py, plus
the role keyword table used to split an unseparated "Company Position"
header into its two parts.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# PLACEHOLDERS AND DEFAULTS
# =============================================================================

EXPERIENCE_DESCRIPTION_PLACEHOLDER = (
    "Imported from your resume. Add a description of your responsibilities and achievements."
)
UNKNOWN_START_DATE = "Unknown Start Date"
PRESENT = "Present"
CURRENT = "Current"

# =============================================================================
# ROLE KEYWORDS
# =============================================================================

# Words that typically open or make up a job title. The first of these after
# the leading word of an experience header marks where the position starts.
ROLE_KEYWORDS = (
    "Senior",
    "Sr",
    "Junior",
    "Jr",
    "Lead",
    "Principal",
    "Staff",
    "Head",
    "Chief",
    "Associate",
    "Assistant",
    "Intern",
    "Trainee",
    "Apprentice",
    "Software",
    "Engineer",
    "Engineering",
    "Developer",
    "Programmer",
    "Manager",
    "Director",
    "Analyst",
    "Consultant",
    "Designer",
    "Architect",
    "Scientist",
    "Researcher",
    "Specialist",
    "Administrator",
    "Coordinator",
    "Officer",
    "Technician",
    "Representative",
    "Supervisor",
    "Executive",
    "President",
    "Vice",
    "VP",
    "CEO",
    "CTO",
    "CFO",
    "Founder",
    "Co-Founder",
    "Owner",
    "Partner",
    "Teacher",
    "Instructor",
    "Tutor",
    "Accountant",
    "Nurse",
    "Editor",
    "Writer",
)

ROLE_KEYWORD_SET = frozenset(word.lower() for word in ROLE_KEYWORDS)

# =============================================================================
# DATE FRAGMENTS
# =============================================================================

# Month names and common abbreviations, case-insensitive, optional trailing dot
_MONTH = (
    r"(?i:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
MONTH_YEAR = rf"\b{_MONTH}[ \t]+\d{{4}}\b"
PRESENT_KEYWORD = r"\b(?i:present|current)\b"
RANGE_SEPARATOR = r"[ \t]*(?:-|–|—|(?i:to))[ \t]*"
INSTITUTION_KEYWORD = r"(?:University|College|Institute|School)"

# Separator between phrases of one record: spaces, an optional punctuation
# mark, and at most one line break
_FIELD_SEPARATOR = r"[ \t]*(?:[|,–—-][ \t]*)?\n?[ \t]*"

# Capitalized word, allowing inner punctuation common in names (O'Brien, A.B.C., AT&T)
_CAP_WORD = r"[A-Z][\w.&'-]*"

# Start of a record: beginning of a line, optionally behind a bullet glyph.
# Records are only tried at line starts, which keeps matching linear in the
# line length.
_LINE_START = r"^[ \t]*(?:[•·▪●◦*][ \t]*)?"


# =============================================================================
# IDENTITY AND CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class IdentityPatterns:
    """
    Regex patterns for the candidate's name.

    Names are usually unlabeled and sit at the top of the page, so the
    leading position is the primary signal and a "Name:" label the fallback.
    """

    # Two or more capitalized words at the very start of the corpus, same line
    LEADING_NAME: re.Pattern = re.compile(r"^\s*([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+)")

    # "Name: Jane Doe" / "NAME: Jane Doe" anywhere
    LABELED_NAME: re.Pattern = re.compile(
        r"\b(?i:name)[ \t]*:[ \t]*([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+)"
    )


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for email, phone and location.
    """

    EMAIL: re.Pattern = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    # Optional country code, optional parenthesized area code, 3-3-4 digits
    # separated by -, ., space or tab; never part of a longer digit run.
    # A country code needs a leading + or a separator after it, so an 11-13
    # digit run (an ID, an order number) is not read as one.
    PHONE: re.Pattern = re.compile(
        r"(?<![\d+])(?:\+\d{1,3}[-. \t]?|\d{1,3}[-. \t])?\(?\d{3}\)?[-. \t]?\d{3}[-. \t]?\d{4}(?!\d)"
    )

    # "Location: Austin, TX" - value stops at newline, a run of commas,
    # a double space, or end of text
    LABELED_LOCATION: re.Pattern = re.compile(
        r"\b(?i:address|location|city)[ \t]*:[ \t]*(.+?)(?=\n|,{2,}| {2}|\Z)"
    )


# =============================================================================
# SKILL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """
    Regex patterns for splitting a skills window into candidate tokens.
    """

    # Comma, bullet glyphs, hyphen, newline
    TOKEN_SEPARATOR: re.Pattern = re.compile(r"[,•·▪●◦\-\n]")


def vocabulary_term_pattern(term: str) -> re.Pattern:
    """
    Compile a case-insensitive whole-word pattern for a vocabulary term.

    Uses alphanumeric lookarounds instead of \\b so that terms ending or
    starting in punctuation (C++, C#, .NET) still match as whole words.
    """
    return re.compile(rf"(?<![A-Za-z0-9]){re.escape(term)}(?![A-Za-z0-9])", re.IGNORECASE)


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Regex patterns for experience records.

    One record, starting a line: a capitalized header phrase holding
    company and position, a separator, a month-year start date, and
    optionally a range separator followed by a month-year end date or a
    present/current keyword.
    """

    RECORD: re.Pattern = re.compile(
        rf"{_LINE_START}(?P<header>[A-Z][^\n]*?){_FIELD_SEPARATOR}"
        rf"(?P<start>{MONTH_YEAR})"
        rf"(?:{RANGE_SEPARATOR}(?P<end>{MONTH_YEAR}|{PRESENT_KEYWORD}))?",
        re.MULTILINE,
    )

    # Explicit separators inside a header, in priority order. The boolean
    # marks separators that put the position before the company.
    HEADER_SEPARATORS: tuple = (
        (re.compile(r"[ \t]*\|[ \t]*"), False),
        (re.compile(r"[ \t]+@[ \t]+"), True),
        (re.compile(r"[ \t]+at[ \t]+"), True),
        (re.compile(r"[ \t]+[-–—][ \t]+"), False),
        (re.compile(r",[ \t]*"), False),
    )

    PRESENT: re.Pattern = re.compile(PRESENT_KEYWORD)


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """
    Regex patterns for education records.

    PRIMARY needs "University of X"-style names and a month-year date.
    FALLBACK accepts "X University"-style names and a bare year or year range.
    """

    PRIMARY: re.Pattern = re.compile(
        rf"(?P<school>{INSTITUTION_KEYWORD}[ \t]+of[ \t]+{_CAP_WORD}(?:[ \t]+{_CAP_WORD})*)"
        rf"{_FIELD_SEPARATOR}"
        rf"(?P<degree>[A-Z][^\n|]*?){_FIELD_SEPARATOR}"
        rf"(?P<date>{MONTH_YEAR})"
    )

    FALLBACK: re.Pattern = re.compile(
        rf"(?P<school>(?:{_CAP_WORD}[ \t]+)+{INSTITUTION_KEYWORD})\b"
        rf"{_FIELD_SEPARATOR}"
        rf"(?P<degree>[A-Z][^\n|]*?){_FIELD_SEPARATOR}"
        rf"\b(?P<start_year>\d{{4}})(?:{RANGE_SEPARATOR}(?P<end_year>\d{{4}}|{PRESENT_KEYWORD}))?\b"
    )


# =============================================================================
# PROJECT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ProjectPatterns:
    """
    Regex patterns for project records.

    One record, starting a line: a capitalized title, a separator (colon,
    pipe, spaced dash or line break), a one-line description, and an
    optional month-year date range, possibly in parentheses.
    """

    RECORD: re.Pattern = re.compile(
        rf"{_LINE_START}(?P<title>[A-Z][^\n:|–—]*?)(?:[ \t]*[:|–—][ \t]*|[ \t]+-[ \t]+|[ \t]*\n[ \t]*)"
        rf"(?P<description>[^\n]+?)"
        rf"(?:[ \t]*[|,–—-]?[ \t]*\(?(?P<start>{MONTH_YEAR})"
        rf"(?:{RANGE_SEPARATOR}(?P<end>{MONTH_YEAR}|{PRESENT_KEYWORD}))?\)?)?"
        rf"[ \t]*(?=\n|\Z)",
        re.MULTILINE,
    )
