"""Tests for export filenames."""

import pytest

from resume_studio.export.filename import default_filename, ensure_extension, resolve_filename


class TestDefaultFilename:
    def test_whitespace_runs_become_underscores(self):
        assert default_filename("Jane  Q.\tRoe") == "Resume-Jane_Q._Roe.pdf"

    def test_blank_name(self):
        assert default_filename("   ") == "Resume.pdf"


class TestEnsureExtension:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("my-cv", "my-cv.pdf"),
            ("my-cv.pdf", "my-cv.pdf"),
            ("my-cv.PDF", "my-cv.PDF"),
            ("cv.pdf.txt", "cv.pdf.txt.pdf"),
            ("../escape", ".._escape.pdf"),
        ],
    )
    def test_extension(self, name, expected):
        assert ensure_extension(name) == expected


class TestResolveFilename:
    def test_override_wins(self):
        assert resolve_filename("final", "Jane Roe") == "final.pdf"

    def test_default_when_missing(self):
        assert resolve_filename(None, "Jane Roe") == "Resume-Jane_Roe.pdf"
        assert resolve_filename("  ", "Jane Roe") == "Resume-Jane_Roe.pdf"
