"""
Command line entry point: ``pdf-summarizer`` or ``python -m pdf_summarizer``.
"""

import sys
import logging

import uvicorn

from .config import get_settings, validate_required_settings
from .utils import configure_logging

logger = logging.getLogger("pdf_summarizer")


def run() -> None:
    """Validate configuration and start the HTTP server."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        validate_required_settings(settings)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    uvicorn.run(
        "pdf_summarizer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
