"""Data models for the resume document."""

from resume_studio.models.extraction import ExtractedResume, resume_json_schema
from resume_studio.models.resume import (
    EXAMPLE_RESUME,
    SECTION_MODELS,
    Certification,
    Education,
    Experience,
    Language,
    PersonalInfo,
    Project,
    ResumeData,
    Section,
    Skill,
    blank_resume,
)

__all__ = [
    "EXAMPLE_RESUME",
    "SECTION_MODELS",
    "Certification",
    "Education",
    "Experience",
    "ExtractedResume",
    "Language",
    "PersonalInfo",
    "Project",
    "ResumeData",
    "Section",
    "Skill",
    "blank_resume",
    "resume_json_schema",
]
