"""
LLM-backed interview question generation.

The model's JSON is passed through as a string; parsing it is the client's job.
"""
import logging

from app.llm.provider import LLMProvider
from app.llm.prompts import (
    SYSTEM_PROMPT,
    BEHAVIORAL_SYSTEM_PROMPT,
    generate_questions_prompt,
    generate_behavioral_questions_prompt,
    build_messages,
)

logger = logging.getLogger(__name__)


def generate_questions(provider: LLMProvider, name: str, objective: str, number: int, context: str) -> str:
    logger.info(f"Generating interview questions: name={name!r}, number={number}")
    messages = build_messages(SYSTEM_PROMPT, generate_questions_prompt(name, objective, number, context))
    response = provider.chat(messages, temperature=0.7, json_mode=True)
    logger.info(f"Interview questions generated: tokens_in={response.tokens_in}, tokens_out={response.tokens_out}")
    return response.content


def generate_behavioral_questions(provider: LLMProvider, name: str, objective: str, number: int, context: str) -> str:
    logger.info(f"Generating behavioral questions: name={name!r}, number={number}")
    messages = build_messages(
        BEHAVIORAL_SYSTEM_PROMPT,
        generate_behavioral_questions_prompt(name, objective, number, context),
    )
    response = provider.chat(messages, temperature=0.7, json_mode=True)
    logger.info(f"Behavioral questions generated: tokens_in={response.tokens_in}, tokens_out={response.tokens_out}")
    return response.content
