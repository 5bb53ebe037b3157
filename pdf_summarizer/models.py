"""
Pydantic models for request/response validation.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field


class SummaryStyle(str, Enum):
    """Requested length of the generated summary."""
    BRIEF = "brief"
    NORMAL = "normal"
    DETAILED = "detailed"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SummaryStyle":
        """Parse a form value, falling back to NORMAL for unknown or empty input."""
        if value:
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.NORMAL


class SummaryResponse(BaseModel):
    """Response model for PDF summarization."""
    summary: str = Field(..., description="Bullet-point summary of the document")
    quiz: str = Field(..., description="Multiple-choice quiz derived from the summary")


class QuizResponse(BaseModel):
    """Response model for quiz generation."""
    quiz: str = Field(..., description="Multiple-choice quiz derived from the document summary")


class ErrorResponse(BaseModel):
    """Response model for errors."""
    error: str = Field(..., description="Error message")
    hint: Optional[str] = Field(default=None, description="How to fix the request")
    detail: Optional[str] = Field(default=None, description="Detailed error information")


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = Field(..., description="Health status")
    message: str = Field(..., description="Status message")
    version: str = Field(..., description="Application version")
    model: str = Field(..., description="Configured Gemini model")
    timestamp: str = Field(..., description="Current timestamp")


class ServiceInfoResponse(BaseModel):
    """Response model for the root endpoint."""
    message: str = Field(..., description="Service status message")
    version: str = Field(..., description="Application version")
    endpoints: Dict[str, str] = Field(default_factory=dict, description="Available endpoints")
    upload_field: str = Field(default="pdf", description="Form field name for the PDF file")
    timestamp: str = Field(..., description="Current timestamp")


class ExtractionResult(BaseModel):
    """Model for text extracted from a PDF."""
    filename: str = Field(..., description="Name of the PDF file")
    text: str = Field(..., description="Extracted text, pages separated by blank lines")
    total_pages: int = Field(..., ge=0, description="Number of pages in the PDF")
    pages_with_text: int = Field(..., ge=0, description="Number of pages that produced text")


class SummaryResult(BaseModel):
    """Model for the output of the summarization pipeline."""
    summary: str = Field(..., description="Generated summary")
    quiz: Optional[str] = Field(default=None, description="Generated quiz, if requested")
    style: SummaryStyle = Field(default=SummaryStyle.NORMAL, description="Summary style used")
