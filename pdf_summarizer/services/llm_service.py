"""
LLM service for generating text with Google Gemini.
"""

from typing import Any, Dict, Optional
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from ..config import Settings, get_settings
from ..utils import (
    log_processing_info,
    handle_processing_error
)
import logging

logger = logging.getLogger(__name__)


def message_text(message: BaseMessage) -> str:
    """Return the text of a chat model response."""
    content = message.content
    if isinstance(content, str):
        return content

    # Gemini may answer with a list of content blocks
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class LLMService:
    """Service for generating text using the Gemini model API."""

    def __init__(self, settings: Optional[Settings] = None, llm: Optional[BaseChatModel] = None):
        """Initialize the LLM service."""
        self.settings = settings or get_settings()
        self.llm = llm if llm is not None else self._initialize_llm()

    def _initialize_llm(self) -> ChatGoogleGenerativeAI:
        """Initialize the language model."""
        llm_kwargs: Dict[str, Any] = {
            "model": self.settings.gemini_model,
            "google_api_key": self.settings.gemini_api_key,
        }
        if self.settings.gemini_temperature is not None:
            llm_kwargs["temperature"] = self.settings.gemini_temperature

        try:
            llm = ChatGoogleGenerativeAI(**llm_kwargs)
        except Exception as e:
            error_info = handle_processing_error("llm_init", e, {"model": self.settings.gemini_model})
            raise RuntimeError(f"Failed to initialize LLM: {error_info['error_message']}") from e

        log_processing_info("LLM initialized", {
            "model": self.settings.gemini_model,
            "temperature": self.settings.gemini_temperature
        })

        return llm

    async def generate(self, prompt: str) -> str:
        """
        Send a prompt to the model and return its text response.

        Args:
            prompt: Complete prompt text

        Returns:
            Generated text

        Raises:
            ValueError: If the model returns no text
        """
        response = await self.llm.ainvoke([HumanMessage(content=prompt)])
        text = message_text(response).strip()

        if not text:
            raise ValueError("Model returned an empty response")

        log_processing_info("Response generated", {
            "model": self.settings.gemini_model,
            "prompt_length": len(prompt),
            "response_length": len(text)
        })

        return text
