"""Canonical resume document models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(ResumeModel):
    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    website: str = ""


class Experience(ResumeModel):
    id: str
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""  # free text, "Present" is valid
    description: list[str] = Field(default_factory=list)


class Education(ResumeModel):
    id: str
    institution: str = ""
    degree: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""


class Skill(ResumeModel):
    id: str
    name: str = ""


class Project(ResumeModel):
    id: str
    name: str = ""
    link: str = ""
    description: list[str] = Field(default_factory=list)


class Certification(ResumeModel):
    id: str
    name: str = ""
    organization: str = ""
    date: str = ""


class Language(ResumeModel):
    """A spoken language entry."""

    id: str
    name: str = ""
    proficiency: str = ""


ListItem = Experience | Education | Skill | Project | Certification | Language


class Section(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"


SECTION_MODELS: dict[Section, type[ResumeModel]] = {
    Section.EXPERIENCE: Experience,
    Section.EDUCATION: Education,
    Section.SKILLS: Skill,
    Section.PROJECTS: Project,
    Section.CERTIFICATIONS: Certification,
    Section.LANGUAGES: Language,
}


class ResumeData(ResumeModel):
    """The whole resume document. Collections are never None."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)

    def items(self, section: Section) -> list[ListItem]:
        return getattr(self, Section(section).value)

    def all_ids(self) -> list[str]:
        return [item.id for section in Section for item in self.items(section)]


def blank_resume() -> ResumeData:
    """Return an empty skeleton document."""
    return ResumeData()


EXAMPLE_RESUME = ResumeData(
    personal_info=PersonalInfo(
        full_name="Alex Doe",
        job_title="Senior Frontend Developer",
        email="alex.doe@email.com",
        phone="123-456-7890",
        address="San Francisco, CA",
        linkedin="linkedin.com/in/alexdoe",
        website="alexdoe.dev",
    ),
    summary=(
        "Innovative and detail-oriented Senior Frontend Developer with over 8 years of "
        "experience building and maintaining responsive and scalable web applications. "
        "Proficient in React, TypeScript, and modern JavaScript frameworks. Passionate "
        "about creating seamless user experiences and collaborating in agile environments "
        "to deliver high-quality software."
    ),
    experience=[
        Experience(
            id="exp1",
            job_title="Senior Frontend Developer",
            company="Tech Solutions Inc.",
            location="San Francisco, CA",
            start_date="Jan 2020",
            end_date="Present",
            description=[
                "Led the development of a new customer-facing dashboard using React and "
                "TypeScript, resulting in a 25% increase in user engagement.",
                "Mentored junior developers, conducted code reviews, and established best "
                "practices for frontend development.",
                "Collaborated with UX/UI designers to translate wireframes into high-quality, "
                "pixel-perfect code.",
            ],
        ),
        Experience(
            id="exp2",
            job_title="Frontend Developer",
            company="Web Innovators",
            location="Boston, MA",
            start_date="Jun 2016",
            end_date="Dec 2019",
            description=[
                "Developed and maintained components for a large-scale e-commerce platform "
                "using Angular.",
                "Improved website performance by 40% through code optimization and lazy "
                "loading techniques.",
                "Worked closely with backend developers to integrate RESTful APIs.",
            ],
        ),
    ],
    education=[
        Education(
            id="edu1",
            institution="University of Technology",
            degree="B.S. in Computer Science",
            location="Cambridge, MA",
            start_date="Sep 2012",
            end_date="May 2016",
        ),
    ],
    skills=[
        Skill(id=f"skill{i}", name=name)
        for i, name in enumerate(
            [
                "JavaScript (ES6+)",
                "TypeScript",
                "React & Redux",
                "Vue.js",
                "Node.js",
                "HTML5 & CSS3",
                "Tailwind CSS",
                "GraphQL",
                "Jest & React Testing Library",
                "Webpack",
                "Git & GitHub",
                "Agile Methodologies",
            ],
            start=1,
        )
    ],
)
