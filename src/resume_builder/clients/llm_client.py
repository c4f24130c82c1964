"""Claude API wrapper with async support and retry logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import retry, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

SECTION_SYSTEM_PROMPT = """\
You are an expert resume writer and career coach. You are drafting the \
"{section}" section of a resume.

Guidelines:
1. Use strong action verbs and quantify impact wherever the input allows.
2. Keep the tone professional and ATS friendly.
3. Do not invent employers, degrees or dates that the input does not support.
4. Follow any output format the request asks for exactly."""


def section_system_prompt(section_name: str) -> str:
    return SECTION_SYSTEM_PROMPT.format(section=section_name)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int
    model: str = DEFAULT_MODEL


class LLMClient:
    """Async Claude API client with exponential-backoff retries."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        model: str = DEFAULT_MODEL,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.model = model

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        reraise=True,
    )
    async def _call_api(
        self,
        prompt: str,
        system: str,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> anthropic.types.Message:
        """Make the actual API call with retry logic."""
        messages = [{"role": "user", "content": prompt}]
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system
        return await self.client.messages.create(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage."""
        model = model or self.model
        logger.debug("LLM call: model=%s", model)
        try:
            message = await self._call_api(
                prompt=prompt,
                system=system,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        return LLMResponse(
            text=message.content[0].text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model,
        )

    async def generate_content(
        self,
        section_name: str,
        prompt: str,
        *,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
    ) -> str:
        """Draft content for one resume section and return the raw text.

        The text is returned as-is; it may or may not contain JSON.
        """
        response = await self.generate(
            prompt=prompt,
            system=section_system_prompt(section_name),
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.text

