"""Error taxonomy for AI import and export."""

from __future__ import annotations

IMPORT_FAILED_MESSAGE = (
    "The AI failed to parse the resume. The file might be in an unsupported format "
    "or corrupted. Please try a different file or build your resume from scratch."
)
EXPORT_FAILED_MESSAGE = "Sorry, there was an error generating the PDF. Please try again."


class ResumeStudioError(Exception):
    """Base class for every error raised by resume-studio."""


class AIError(ResumeStudioError):
    """An AI provider call failed.

    Attributes:
        provider: Name of the provider binding that failed
    """

    def __init__(self, message: str, provider: str | None = None):
        self.provider = provider
        super().__init__(f"[{provider}] {message}" if provider else message)


class AIResponseError(AIError):
    """The model answered, but not with a usable JSON object."""


class AITransportError(AIError):
    """Network, authentication or quota failure talking to the provider."""


class AITimeoutError(AIError):
    """The provider call exceeded the configured ceiling."""


class IngestionFailure(ResumeStudioError):
    """An AI import was aborted. The store was left untouched.

    Attributes:
        user_message: Text suitable for showing to the user
    """

    def __init__(self, message: str, user_message: str = IMPORT_FAILED_MESSAGE):
        self.user_message = user_message
        super().__init__(message)


class ImportBusyError(IngestionFailure):
    """An import was requested while another one is still running."""

    def __init__(self):
        super().__init__(
            "An import is already in progress",
            user_message="A resume is already being imported. Please wait for it to finish.",
        )


class ExportFailure(ResumeStudioError):
    """An export could not be produced. The store and preview are untouched.

    Attributes:
        user_message: Text suitable for showing to the user
    """

    def __init__(self, message: str, user_message: str = EXPORT_FAILED_MESSAGE):
        self.user_message = user_message
        super().__init__(message)


class ExportBusyError(ExportFailure):
    """An export was requested while another one is still in flight."""

    def __init__(self):
        super().__init__(
            "An export is already in progress",
            user_message="Your PDF is still being generated.",
        )
