"""Custom exceptions for rendering context."""

from pathlib import Path
from typing import Optional


class ResumeRenderError(Exception):
    """
    Exception raised when HTML template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidResumeError(ValueError):
    """
    Exception raised when a resume file cannot be read as a JSON Resume document.

    Raised for missing files, unsupported extensions, and top-level values that
    are not mappings.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)
