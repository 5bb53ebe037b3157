"""
LLM and Summary Service Tests
"""
import asyncio
import threading
from unittest.mock import AsyncMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from pdf_summarizer.exceptions import ProcessingError
from pdf_summarizer.models import ExtractionResult, SummaryStyle
from pdf_summarizer.services import LLMService, SummaryService
from pdf_summarizer.services.llm_service import message_text

from conftest import SUMMARY_TEXT, QUIZ_TEXT, sent_prompts


class TestLLMService:
    """Test LLMService.generate"""

    def test_generate_returns_text(self, settings):
        service = LLMService(settings, llm=FakeListChatModel(responses=['  - point one  ']))
        assert asyncio.run(service.generate('Summarize this')) == '- point one'

    def test_empty_response_is_an_error(self, settings):
        service = LLMService(settings, llm=FakeListChatModel(responses=['   ']))
        with pytest.raises(ValueError):
            asyncio.run(service.generate('Summarize this'))

    def test_message_text_from_content_blocks(self):
        message = AIMessage(content=[
            {'type': 'text', 'text': '- first'},
            {'type': 'text', 'text': '\n- second'},
        ])
        assert message_text(message) == '- first\n- second'


class TestSummaryService:
    """Test the extraction and generation pipeline"""

    def test_summarize_pdf(self, summary_service, pdf_bytes, fake_llm):
        result = asyncio.run(summary_service.summarize_pdf(pdf_bytes, 'biology.pdf', SummaryStyle.BRIEF))

        assert result.summary == SUMMARY_TEXT
        assert result.quiz == QUIZ_TEXT
        assert result.style is SummaryStyle.BRIEF
        assert 'no more than 100 words' in sent_prompts(fake_llm)[0]

    def test_summarize_without_quiz(self, summary_service, pdf_bytes, fake_llm):
        result = asyncio.run(summary_service.summarize_pdf(pdf_bytes, 'biology.pdf', include_quiz=False))

        assert result.summary == SUMMARY_TEXT
        assert result.quiz is None
        assert fake_llm.ainvoke.await_count == 1

    def test_quiz_question_count_from_settings(self, settings, pdf_bytes, fake_llm):
        settings.quiz_question_count = 8
        service = SummaryService(settings, llm_service=LLMService(settings, llm=fake_llm))

        quiz = asyncio.run(service.quiz_pdf(pdf_bytes, 'biology.pdf'))

        assert quiz == QUIZ_TEXT
        assert 'multiple-choice quiz with 8 questions' in sent_prompts(fake_llm)[1]

    def test_extraction_failure_is_wrapped(self, summary_service):
        with pytest.raises(ProcessingError, match='Failed to process PDF or generate summary'):
            asyncio.run(summary_service.summarize_pdf(b'not a pdf', 'broken.pdf'))

    def test_quiz_failure_message(self, summary_service):
        with pytest.raises(ProcessingError, match='Failed to process PDF or generate quiz'):
            asyncio.run(summary_service.quiz_pdf(b'not a pdf', 'broken.pdf'))

    def test_extractions_run_concurrently(self, summary_service, fake_llm, monkeypatch):
        """Two uploads are extracted in parallel, not one after the other"""
        barrier = threading.Barrier(2, timeout=5)

        def extract_text(file_content, filename):
            # Only returns once both extractions are in progress
            barrier.wait()
            return ExtractionResult(filename=filename, text='Photosynthesis', total_pages=1, pages_with_text=1)

        monkeypatch.setattr(summary_service.pdf_processor, 'extract_text', extract_text)
        fake_llm.ainvoke = AsyncMock(return_value=AIMessage(content=SUMMARY_TEXT))

        async def summarize_both():
            return await asyncio.gather(
                summary_service.summarize_pdf(b'%PDF-a', 'a.pdf', include_quiz=False),
                summary_service.summarize_pdf(b'%PDF-b', 'b.pdf', include_quiz=False),
            )

        results = asyncio.run(summarize_both())

        assert [result.summary for result in results] == [SUMMARY_TEXT, SUMMARY_TEXT]
