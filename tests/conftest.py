"""Shared test fixtures."""

from __future__ import annotations

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

from resume_studio.clients.base import AIProvider
from resume_studio.models.resume import EXAMPLE_RESUME
from resume_studio.parsers.resume_file import FilePart
from resume_studio.store.resume_store import ResumeStore
from resume_studio.templates.preview import LivePreview
from resume_studio.templates.registry import default_registry


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Roe
Data Engineer | jane.roe@example.com | 555-0100

Experience
- Data Engineer, Acme Corp (2021 - Present)
  - Built Spark ETL pipelines processing 2TB per day
  - Cut warehouse costs by 30%

Education
- B.S. Statistics, State University (2015 - 2019)

Skills: Python, SQL
"""


@pytest.fixture
def sample_raw_response() -> dict:
    """Provider output for the Jane Roe resume: valid except for missing collections."""
    return {
        "personalInfo": {"fullName": "Jane Roe", "jobTitle": "Data Engineer"},
        "summary": "",
        "experience": [
            {
                "jobTitle": "Data Engineer",
                "company": "Acme Corp",
                "startDate": "2021",
                "endDate": "Present",
                "description": ["Built Spark ETL pipelines processing 2TB per day"],
            }
        ],
        "education": [],
        "skills": [{"name": "Python"}, {"name": "SQL"}],
    }


@pytest.fixture
def text_part(sample_resume_text) -> FilePart:
    return FilePart(
        mime_type="text/plain",
        base64_data=base64.b64encode(sample_resume_text.encode()).decode("ascii"),
        filename="resume.txt",
    )


@pytest.fixture
def pdf_part() -> FilePart:
    return FilePart(
        mime_type="application/pdf",
        base64_data=base64.b64encode(b"%PDF-1.4 fake").decode("ascii"),
        filename="resume.pdf",
    )


@pytest.fixture
def resume_file(tmp_path, sample_resume_text):
    path = tmp_path / "resume.txt"
    path.write_text(sample_resume_text, encoding="utf-8")
    return path


@pytest.fixture
def example_store() -> ResumeStore:
    return ResumeStore(EXAMPLE_RESUME.model_copy(deep=True))


@pytest.fixture
def mock_provider(sample_raw_response) -> MagicMock:
    """AIProvider stand-in whose parse_resume returns the Jane Roe response."""
    provider = MagicMock(spec=AIProvider)
    provider.name = "mock"
    provider.parse_resume = AsyncMock(return_value=sample_raw_response)
    return provider


@pytest.fixture
def mounted_preview(example_store) -> LivePreview:
    preview = LivePreview(example_store, default_registry(), "classic")
    preview.mount()
    return preview
