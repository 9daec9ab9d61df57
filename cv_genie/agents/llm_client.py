"""Text-generation client: one chat completion per prompt, text in and text out."""

from typing import Callable, Optional, Protocol

import openai
from openai import AsyncOpenAI

from cv_genie.agents.prompts import SYSTEM_PROMPT
from cv_genie.config import LLM_TIMEOUT_SECONDS
from cv_genie.errors import CollaboratorFailure
from cv_genie.utils.logger import get_logger

logger = get_logger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into model text."""

    async def __call__(self, prompt: str, temperature: float) -> str:
        ...

    async def aclose(self) -> None:
        ...


class OpenAITextGenerator:
    """
    Calls the chat completions API with the caller's credential and model.
    Output is returned verbatim (possibly empty); parsing is the caller's job.
    Failures of the call itself are raised as CollaboratorFailure and never retried.
    """

    def __init__(self, api_key: str, model: str, client: Optional[AsyncOpenAI] = None):
        self.model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            timeout=LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )

    async def __call__(self, prompt: str, temperature: float) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            logger.warning("Text generation call failed for model %s: %s", self.model, e)
            raise CollaboratorFailure("Text generation", str(e)) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            logger.warning("Text generation returned no content for model %s", self.model)
            return ""
        return choice.message.content

    async def aclose(self) -> None:
        await self._client.close()


GeneratorFactory = Callable[[str, str], TextGenerator]


def create_text_generator(api_key: str, model: str) -> TextGenerator:
    """Default factory: a fresh client per request, bound to the request's credential."""
    return OpenAITextGenerator(api_key=api_key, model=model)
