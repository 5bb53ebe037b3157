"""
Services package for the PDF Summarizer.
"""

from .pdf_processor import PDFProcessor
from .llm_service import LLMService
from .summary_service import SummaryService

__all__ = [
    "PDFProcessor",
    "LLMService",
    "SummaryService"
]
