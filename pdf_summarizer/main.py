"""
FastAPI application for the PDF Summarizer.
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional
from fastapi import FastAPI, File, Form, UploadFile, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .config import Settings, get_settings, validate_required_settings
from .exceptions import UploadValidationError, ProcessingError
from .models import (
    SummaryResponse, QuizResponse, ErrorResponse, HealthResponse,
    ServiceInfoResponse, SummaryStyle
)
from .services import SummaryService
from .utils import configure_logging, format_timestamp, is_pdf_content_type, validate_file_size

UPLOAD_FIELD = "pdf"
SUMMARIZE_PATH = "/api/summarize-pdf"
QUIZ_PATH = "/api/quiz-pdf"

NO_FILE_ERROR = "No PDF file uploaded"
NO_FILE_HINT = f"Send the PDF file with field name '{UPLOAD_FIELD}' in form-data"
NOT_PDF_ERROR = "Only PDF files are allowed"
UPLOAD_ERROR = "File upload error"
UPLOAD_ERROR_HINT = f"Make sure you're sending the PDF file with field name '{UPLOAD_FIELD}'"

UPLOAD_PATHS = (SUMMARIZE_PATH, QUIZ_PATH)

settings = get_settings()

# Configure logging
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Re-read so the check sees the environment at startup, not at import
    startup_settings = get_settings()

    # Refuse to start without the model API key
    try:
        validate_required_settings(startup_settings)
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    base_url = f"http://localhost:{startup_settings.port}"
    logger.info(f"Server running at {base_url}")
    logger.info(f"Send PDF files to: POST {base_url}{SUMMARIZE_PATH} or POST {base_url}{QUIZ_PATH}")
    logger.info(f"Use form-data with field name '{UPLOAD_FIELD}'")
    yield


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Summarize uploaded PDF documents and generate quizzes with Gemini",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_summary_service() -> SummaryService:
    """Get the shared summary service."""
    return SummaryService(get_settings())


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump(exclude_none=True))


@app.exception_handler(UploadValidationError)
async def upload_validation_exception_handler(request: Request, exc: UploadValidationError):
    logger.warning(f"Rejected upload to {request.url.path}: {exc.error}")
    return _error_response(400, ErrorResponse(error=exc.error, hint=exc.hint))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed upload to {request.url.path}: {exc.errors()}")
    return _error_response(400, ErrorResponse(error=UPLOAD_ERROR, hint=UPLOAD_ERROR_HINT))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unparseable multipart bodies are rejected by the form parser before validation
    if exc.status_code == 400 and request.url.path in UPLOAD_PATHS:
        logger.warning(f"Malformed upload to {request.url.path}: {exc.detail}")
        error = ErrorResponse(error=UPLOAD_ERROR, hint=UPLOAD_ERROR_HINT)
    else:
        error = ErrorResponse(error=str(exc.detail))

    response = _error_response(exc.status_code, error)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(ProcessingError)
async def processing_exception_handler(request: Request, exc: ProcessingError):
    return _error_response(500, ErrorResponse(error=str(exc)))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}")
    return _error_response(500, ErrorResponse(
        error="Internal server error",
        detail=str(exc) if settings.debug else None
    ))


async def read_pdf_upload(pdf: Optional[UploadFile], settings: Settings) -> bytes:
    """
    Validate an uploaded PDF and read it into memory.

    Raises:
        UploadValidationError: If the file is missing, not a PDF, empty or too large
    """
    if pdf is None:
        raise UploadValidationError(NO_FILE_ERROR, hint=NO_FILE_HINT)

    if not is_pdf_content_type(pdf.content_type):
        raise UploadValidationError(NOT_PDF_ERROR)

    content = await pdf.read()

    if not content:
        raise UploadValidationError(
            "Uploaded PDF file is empty",
            hint=f"Check that '{pdf.filename}' is a readable PDF document"
        )

    if not validate_file_size(len(content), settings.max_file_size_mb):
        file_size_mb = len(content) / (1024 * 1024)
        raise UploadValidationError(
            f"File {pdf.filename} is too large: {file_size_mb:.1f}MB",
            hint=f"Maximum size is {settings.max_file_size_mb}MB"
        )

    return content


@app.get("/", response_model=ServiceInfoResponse)
async def root(settings: Settings = Depends(get_settings)):
    """Root endpoint."""
    return ServiceInfoResponse(
        message="PDF Summarizer API is running",
        version=settings.app_version,
        endpoints={
            "summarize": f"POST {SUMMARIZE_PATH}",
            "quiz": f"POST {QUIZ_PATH}",
        },
        upload_field=UPLOAD_FIELD,
        timestamp=format_timestamp()
    )


@app.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check endpoint. Does not call the model API."""
    return HealthResponse(
        status="healthy",
        message="Service health check completed",
        version=settings.app_version,
        model=settings.gemini_model,
        timestamp=format_timestamp()
    )


@app.post(SUMMARIZE_PATH, response_model=SummaryResponse)
async def summarize_pdf(
    pdf: Optional[UploadFile] = File(default=None),
    summary_style: Optional[str] = Form(default=None, alias="summaryStyle"),
    settings: Settings = Depends(get_settings),
    summary_service: SummaryService = Depends(get_summary_service)
):
    """
    Summarize an uploaded PDF into bullet points and build a quiz from the summary.

    The PDF is processed in memory and never written to disk.
    """
    content = await read_pdf_upload(pdf, settings)
    style = SummaryStyle.parse(summary_style)

    result = await summary_service.summarize_pdf(content, pdf.filename or "upload.pdf", style)

    return SummaryResponse(summary=result.summary, quiz=result.quiz)


@app.post(QUIZ_PATH, response_model=QuizResponse)
async def quiz_pdf(
    pdf: Optional[UploadFile] = File(default=None),
    summary_style: Optional[str] = Form(default=None, alias="summaryStyle"),
    settings: Settings = Depends(get_settings),
    summary_service: SummaryService = Depends(get_summary_service)
):
    """Generate a multiple-choice quiz for an uploaded PDF."""
    content = await read_pdf_upload(pdf, settings)
    style = SummaryStyle.parse(summary_style)

    quiz = await summary_service.quiz_pdf(content, pdf.filename or "upload.pdf", style)

    return QuizResponse(quiz=quiz)
