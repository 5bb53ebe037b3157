"""
Summary service that orchestrates PDF text extraction, summary and quiz generation.
"""

import asyncio
from typing import Optional

from .pdf_processor import PDFProcessor
from .llm_service import LLMService
from ..config import Settings, get_settings
from ..exceptions import ProcessingError
from ..models import SummaryResult, SummaryStyle
from ..prompts import build_summary_prompt, build_quiz_prompt, word_limit_for
from ..utils import (
    log_processing_info,
    handle_processing_error
)
import logging

logger = logging.getLogger(__name__)

SUMMARY_FAILED_MESSAGE = "Failed to process PDF or generate summary"
QUIZ_FAILED_MESSAGE = "Failed to process PDF or generate quiz"


class SummaryService:
    """Main service for summarizing PDFs and generating quizzes."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        llm_service: Optional[LLMService] = None,
        pdf_processor: Optional[PDFProcessor] = None
    ):
        """Initialize the summary service."""
        self.settings = settings or get_settings()
        self.pdf_processor = pdf_processor or PDFProcessor()
        self.llm_service = llm_service or LLMService(self.settings)

    async def _run_pipeline(
        self,
        file_content: bytes,
        filename: str,
        style: SummaryStyle,
        include_quiz: bool
    ) -> SummaryResult:
        # Run synchronous PyPDF2 parsing in a thread
        extraction = await asyncio.to_thread(self.pdf_processor.extract_text, file_content, filename)

        log_processing_info("Summary generation started", {
            "filename": filename,
            "style": style.value,
            "word_limit": word_limit_for(style),
            "text_length": len(extraction.text)
        })

        summary = await self.llm_service.generate(build_summary_prompt(extraction.text, style))

        quiz = None
        if include_quiz:
            quiz_prompt = build_quiz_prompt(summary, self.settings.quiz_question_count)
            quiz = await self.llm_service.generate(quiz_prompt)

        log_processing_info("Summary generation completed", {
            "filename": filename,
            "summary_length": len(summary),
            "quiz_length": len(quiz) if quiz else 0
        })

        return SummaryResult(summary=summary, quiz=quiz, style=style)

    async def summarize_pdf(
        self,
        file_content: bytes,
        filename: str,
        style: SummaryStyle = SummaryStyle.NORMAL,
        include_quiz: bool = True
    ) -> SummaryResult:
        """
        Summarize a PDF and optionally build a quiz from the summary.

        Args:
            file_content: PDF file content as bytes
            filename: Name of the uploaded file
            style: Requested summary style
            include_quiz: Whether to also generate a quiz

        Returns:
            SummaryResult with the summary and quiz

        Raises:
            ProcessingError: If extraction or generation fails
        """
        try:
            return await self._run_pipeline(file_content, filename, style, include_quiz)
        except Exception as e:
            handle_processing_error(
                "summarize_pdf",
                e,
                {"filename": filename, "file_size": len(file_content), "style": style.value}
            )
            raise ProcessingError(SUMMARY_FAILED_MESSAGE) from e

    async def quiz_pdf(
        self,
        file_content: bytes,
        filename: str,
        style: SummaryStyle = SummaryStyle.NORMAL
    ) -> str:
        """
        Build a quiz for a PDF. The quiz is derived from the document summary.

        Raises:
            ProcessingError: If extraction or generation fails
        """
        try:
            result = await self._run_pipeline(file_content, filename, style, include_quiz=True)
        except Exception as e:
            handle_processing_error(
                "quiz_pdf",
                e,
                {"filename": filename, "file_size": len(file_content), "style": style.value}
            )
            raise ProcessingError(QUIZ_FAILED_MESSAGE) from e

        return result.quiz
