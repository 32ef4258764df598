"""
OpenAI provider implementation.
"""
import logging
from typing import List, Optional
from openai import OpenAI, APIError

from app.core import config
from app.core.errors import UpstreamFailureError
from app.llm.provider import LLMProvider, LLMResponse, Message

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI provider using the official OpenAI SDK."""

    def __init__(self, api_key: Optional[str] = None, default_model: Optional[str] = None):
        """
        Raises:
            ConfigurationError: if no API key is passed and OPENAI_API_KEY is unset
        """
        self.api_key = api_key or config.require_settings("OPENAI_API_KEY")["OPENAI_API_KEY"]
        self.default_model = default_model or config.OPENAI_MODEL
        self.client = OpenAI(api_key=self.api_key)
        logger.info("OpenAI provider initialized")

    def chat(
        self,
        messages: List[Message],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        model = model or self.default_model
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens or 2000,
                **kwargs
            )
        except APIError as e:
            logger.error(f"OpenAI API error: {e}", exc_info=True)
            raise UpstreamFailureError("AI service temporarily unavailable. Please try again later.") from e

        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=model,
            metadata={"finish_reason": response.choices[0].finish_reason},
        )


def get_llm_provider() -> LLMProvider:
    """LLM provider dependency."""
    return OpenAIProvider()
