"""Unit tests for ExtractedRecord and its entry types."""

import pytest

from quill.contexts.importing.record_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ExtractedRecord,
    PersonalInfo,
    ProjectEntry,
)


@pytest.mark.unit
def test_empty_record_shape():
    """Every field is present even when nothing was extracted."""
    assert ExtractedRecord().to_dict() == {
        "personalInfo": {"fullName": "", "email": "", "phone": "", "location": ""},
        "experiences": [],
        "education": [],
        "skills": [],
        "projects": [],
    }


@pytest.mark.unit
def test_entry_keys_are_camel_case():
    experience = ExperienceEntry("Acme Corp", "Senior Engineer", "Jan 2020", "Present", "Built things")
    education = EducationEntry("University of Texas", "BS Computer Science", "May 2016")
    project = ProjectEntry("Resume Builder", "A web app")

    assert experience.to_dict() == {
        "company": "Acme Corp",
        "position": "Senior Engineer",
        "startDate": "Jan 2020",
        "endDate": "Present",
        "description": "Built things",
    }
    assert education.to_dict() == {
        "school": "University of Texas",
        "degree": "BS Computer Science",
        "graduationDate": "May 2016",
        "gpa": "",
    }
    assert project.to_dict() == {
        "title": "Resume Builder",
        "description": "A web app",
        "startDate": "",
        "endDate": "",
        "technologies": [],
    }


@pytest.mark.unit
def test_project_technologies_not_shared():
    first = ProjectEntry("One", "First")
    second = ProjectEntry("Two", "Second")
    first.technologies.append("Python")
    assert second.technologies == []


@pytest.mark.unit
def test_skills_deduplicated_keeping_first_occurrence():
    record = ExtractedRecord(skills=["Python", "React", "Python", "Docker", "React"])
    assert record.skills == ["Python", "React", "Docker"]


@pytest.mark.unit
def test_to_dict_nested():
    record = ExtractedRecord(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
        experiences=[ExperienceEntry("Globex", "Data Analyst", "Mar 2017", "Dec 2019", "x")],
        skills=["SQL"],
    )
    data = record.to_dict()

    assert data["personalInfo"]["fullName"] == "Jane Doe"
    assert data["personalInfo"]["phone"] == ""
    assert data["experiences"][0]["company"] == "Globex"
    assert data["skills"] == ["SQL"]


@pytest.mark.unit
def test_to_dict_is_a_copy():
    record = ExtractedRecord(skills=["SQL"])
    record.to_dict()["skills"].append("Excel")
    assert record.skills == ["SQL"]


class TestRecordChecks:
    """Tests for has_minimal_data and is_empty."""

    @pytest.mark.unit
    def test_empty_record(self):
        record = ExtractedRecord()
        assert record.is_empty()
        assert not record.has_minimal_data()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "record",
        [
            ExtractedRecord(personal_info=PersonalInfo(full_name="Jane Doe")),
            ExtractedRecord(personal_info=PersonalInfo(email="jane@example.com")),
            ExtractedRecord(skills=["Python"]),
        ],
    )
    def test_minimal_data(self, record):
        assert record.has_minimal_data()
        assert not record.is_empty()

    @pytest.mark.unit
    def test_phone_only_is_not_minimal_but_not_empty(self):
        record = ExtractedRecord(personal_info=PersonalInfo(phone="555 123 4567"))
        assert not record.has_minimal_data()
        assert not record.is_empty()

    @pytest.mark.unit
    def test_sections_only_is_not_minimal(self):
        record = ExtractedRecord(projects=[ProjectEntry("Resume Builder", "A web app")])
        assert not record.has_minimal_data()
        assert not record.is_empty()
