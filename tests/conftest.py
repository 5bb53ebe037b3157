"""
Test Configuration and Fixtures
"""
import os

os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from pdf_summarizer.config import Settings
from pdf_summarizer.main import app, get_summary_service
from pdf_summarizer.services import LLMService, SummaryService

SUMMARY_TEXT = "- Photosynthesis turns light into chemical energy\n- It happens in chloroplasts"
QUIZ_TEXT = (
    "1. Where does photosynthesis happen?\n"
    "A) Nucleus\nB) Chloroplasts\nC) Ribosomes\nD) Cell wall\n"
    "Answer: B"
)
DOCUMENT_TEXT = "Photosynthesis converts light into chemical energy"


def build_pdf(text: Optional[str]) -> bytes:
    """Build a single-page PDF showing ``text`` in Helvetica, or a blank page for None."""
    content = b""
    if text is not None:
        content = b"BT /F1 18 Tf 72 720 Td (" + text.encode("latin-1") + b") Tj ET"

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def pdf_bytes():
    """A valid PDF containing DOCUMENT_TEXT"""
    return build_pdf(DOCUMENT_TEXT)


@pytest.fixture
def blank_pdf_bytes():
    """A valid PDF with no text layer"""
    return build_pdf(None)


@pytest.fixture
def settings():
    """Settings isolated from any local .env file"""
    return Settings(_env_file=None, gemini_api_key="test-gemini-key")


@pytest.fixture
def fake_llm():
    """Chat model stand-in answering with a summary, then a quiz"""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=[
        AIMessage(content=SUMMARY_TEXT),
        AIMessage(content=QUIZ_TEXT),
    ])
    return llm


@pytest.fixture
def summary_service(settings, fake_llm):
    return SummaryService(settings, llm_service=LLMService(settings, llm=fake_llm))


@pytest.fixture
def client(summary_service):
    """Test client with the model API replaced by fake_llm"""
    app.dependency_overrides[get_summary_service] = lambda: summary_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def sent_prompts(llm) -> list:
    """Prompts passed to the fake chat model, in call order"""
    return [call.args[0][0].content for call in llm.ainvoke.await_args_list]
