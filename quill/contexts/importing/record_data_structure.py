"""
Imported résumé data structure for the Importing context.

Provides the ExtractedRecord class handed back to the form layer after an
import, plus the entry types it is made of. Every field always has a value:
nothing detected means an empty string or an empty list, never None.

to_dict() emits the camelCase shape the form model uses
(personalInfo.fullName, experiences[].startDate, ...).
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class PersonalInfo:
    """Identity and contact details."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""

    def to_dict(self) -> dict:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
        }


@dataclass
class ExperienceEntry:
    company: str
    position: str
    start_date: str
    end_date: str
    description: str

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "position": self.position,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "description": self.description,
        }


@dataclass
class EducationEntry:
    school: str
    degree: str
    graduation_date: str
    gpa: str = ""

    def to_dict(self) -> dict:
        return {
            "school": self.school,
            "degree": self.degree,
            "graduationDate": self.graduation_date,
            "gpa": self.gpa,
        }


@dataclass
class ProjectEntry:
    """
    One project. Dates are optional and empty when not detected;
    technologies are never populated by the importer.
    """

    title: str
    description: str
    start_date: str = ""
    end_date: str = ""
    technologies: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "technologies": list(self.technologies),
        }


@dataclass
class ExtractedRecord:
    """
    Partially populated résumé reconstructed from an uploaded PDF.

    Created fresh for each import and never cached. Skills behave as a set
    (deduplicated, order not significant) but are kept as a list so that
    serialization is deterministic.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experiences: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)

    def __post_init__(self):
        self.skills = list(dict.fromkeys(self.skills))

    def has_minimal_data(self) -> bool:
        """
        Whether the import found anything a user would recognize.

        False when name, email and skills are all empty, which usually means
        a scanned or unusually laid out PDF.
        """
        return bool(self.personal_info.email or self.personal_info.full_name or self.skills)

    def is_empty(self) -> bool:
        """True when no field at all was populated."""
        return self.to_dict() == ExtractedRecord().to_dict()

    def to_dict(self) -> dict:
        return {
            "personalInfo": self.personal_info.to_dict(),
            "experiences": [entry.to_dict() for entry in self.experiences],
            "education": [entry.to_dict() for entry in self.education],
            "skills": list(self.skills),
            "projects": [entry.to_dict() for entry in self.projects],
        }
