"""
PDF processing service for extracting text from PDF files.
"""

import PyPDF2
from io import BytesIO

from ..exceptions import PDFExtractionError
from ..models import ExtractionResult
from ..utils import (
    measure_time,
    clean_text,
    log_processing_info,
    handle_processing_error
)
import logging

logger = logging.getLogger(__name__)


class PDFProcessor:
    """Service for processing PDF files and extracting text."""

    @measure_time
    def extract_text(self, file_content: bytes, filename: str) -> ExtractionResult:
        """
        Extract text from PDF file content.

        Args:
            file_content: PDF file content as bytes
            filename: Name of the PDF file

        Returns:
            ExtractionResult with the text of every page that produced any

        Raises:
            PDFExtractionError: If the PDF cannot be read or contains no text
        """
        if not file_content:
            raise PDFExtractionError(f"Empty file content for {filename}")

        try:
            # Create BytesIO stream from file content
            pdf_stream = BytesIO(file_content)

            # Read PDF using PyPDF2
            pdf_reader = PyPDF2.PdfReader(pdf_stream)
            total_pages = len(pdf_reader.pages)
        except Exception as e:
            error_info = handle_processing_error(
                "pdf_extraction",
                e,
                {"filename": filename, "file_size": len(file_content)}
            )
            raise PDFExtractionError(f"Failed to read PDF {filename}: {error_info['error_message']}") from e

        log_processing_info("PDF extraction started", {
            "filename": filename,
            "total_pages": total_pages,
            "file_size": len(file_content)
        })

        page_texts = []
        for page_num, page in enumerate(pdf_reader.pages):
            try:
                cleaned_text = clean_text(page.extract_text() or "")
            except Exception as page_error:
                error_info = handle_processing_error(
                    "page_extraction",
                    page_error,
                    {"filename": filename, "page": page_num + 1}
                )
                logger.warning(f"Skipping page {page_num + 1}: {error_info}")
                continue

            if cleaned_text:
                page_texts.append(cleaned_text)

        if not page_texts:
            raise PDFExtractionError(f"No text could be extracted from {filename}")

        result = ExtractionResult(
            filename=filename,
            text="\n\n".join(page_texts),
            total_pages=total_pages,
            pages_with_text=len(page_texts)
        )

        log_processing_info("PDF extraction completed", {
            "filename": filename,
            "pages_with_text": result.pages_with_text,
            "total_pages": total_pages,
            "text_length": len(result.text)
        })

        return result
