"""Schema the AI providers must fill when extracting a resume.

Mirrors ResumeData with every ``id`` left out: ids are assigned locally
after extraction, never taken from the model.
"""

from __future__ import annotations

from pydantic import Field

from resume_studio.models.resume import ResumeModel


class ExtractedPersonalInfo(ResumeModel):
    full_name: str = Field("", description="Full name of the person.")
    job_title: str = Field("", description="Most recent or desired job title.")
    email: str = Field("", description="Email address.")
    phone: str = Field("", description="Phone number.")
    address: str = Field("", description="City and State, e.g., 'San Francisco, CA'.")
    linkedin: str = Field("", description="URL of LinkedIn profile.")
    website: str = Field("", description="URL of personal website or portfolio.")


class ExtractedExperience(ResumeModel):
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: list[str] = Field(
        default_factory=list,
        description="List of responsibilities and achievements as bullet points.",
    )


class ExtractedEducation(ResumeModel):
    institution: str = ""
    degree: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""


class ExtractedSkill(ResumeModel):
    name: str = ""


class ExtractedProject(ResumeModel):
    name: str = ""
    link: str = ""
    description: list[str] = Field(
        default_factory=list,
        description="List of project details as bullet points.",
    )


class ExtractedCertification(ResumeModel):
    name: str = ""
    organization: str = ""
    date: str = ""


class ExtractedLanguage(ResumeModel):
    name: str = ""
    proficiency: str = ""


class ExtractedResume(ResumeModel):
    personal_info: ExtractedPersonalInfo = Field(default_factory=ExtractedPersonalInfo)
    summary: str = Field("", description="The professional summary or objective section.")
    experience: list[ExtractedExperience] = Field(default_factory=list)
    education: list[ExtractedEducation] = Field(default_factory=list)
    skills: list[ExtractedSkill] = Field(default_factory=list, description="List of skills.")
    projects: list[ExtractedProject] = Field(default_factory=list)
    certifications: list[ExtractedCertification] = Field(default_factory=list)
    languages: list[ExtractedLanguage] = Field(default_factory=list)


def resume_json_schema() -> dict:
    """JSON schema of the extraction shape, camelCase field names."""
    return ExtractedResume.model_json_schema(by_alias=True)
