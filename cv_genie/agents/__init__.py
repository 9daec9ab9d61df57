"""Agent exports."""

from .curator_agent import run_curator_agent
from .extractor_agent import run_extractor_agent
from .llm_client import OpenAITextGenerator, TextGenerator, create_text_generator

__all__ = [
    "run_extractor_agent",
    "run_curator_agent",
    "OpenAITextGenerator",
    "TextGenerator",
    "create_text_generator",
]
