"""
Exceptions raised by the PDF Summarizer and rendered by the API error handlers.
"""

from typing import Optional


class UploadValidationError(Exception):
    """The uploaded file is missing or not acceptable (HTTP 400)."""

    def __init__(self, error: str, hint: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.hint = hint


class PDFExtractionError(Exception):
    """Text could not be extracted from the uploaded PDF."""


class ProcessingError(Exception):
    """Extraction or generation failed while handling a request (HTTP 500)."""
