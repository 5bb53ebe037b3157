"""
Utility functions for the PDF Summarizer.
"""

import time
import functools
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def format_timestamp() -> str:
    """Get current timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def is_pdf_content_type(content_type: Optional[str]) -> bool:
    """Check whether an upload's declared MIME type is a PDF."""
    if not content_type:
        return False
    # Ignore parameters such as "; charset=binary"
    return content_type.split(";")[0].strip().lower() == PDF_CONTENT_TYPE


def validate_file_size(file_size: int, max_file_size_mb: int) -> bool:
    """Validate if the file size is within limits."""
    max_size_bytes = max_file_size_mb * 1024 * 1024
    return file_size <= max_size_bytes


def measure_time(func):
    """Decorator to measure function execution time."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        execution_time = end_time - start_time

        logger.info(f"{func.__name__} executed in {execution_time:.2f} seconds")
        return result
    return wrapper


def clean_text(text: str) -> str:
    """Collapse runs of whitespace on each line and drop empty lines."""
    if not text:
        return ""

    lines = (" ".join(line.split()) for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def log_processing_info(operation: str, details: Dict[str, Any]) -> None:
    """Log processing information."""
    logger.info(f"{operation}: {details}")


def handle_processing_error(operation: str, error: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
    """Handle and log processing errors."""
    error_info = {
        'operation': operation,
        'error_type': type(error).__name__,
        'error_message': str(error),
        'timestamp': format_timestamp()
    }

    if context:
        error_info.update(context)

    logger.error(f"Processing error: {error_info}")
    return error_info
