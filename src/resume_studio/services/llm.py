"""Language model access for text enhancement.

A :class:`GenerationConfig` describes how one kind of prompt should be
sampled; providers translate it into their own request options. The
:class:`LLMService` pairs a provider with the instruction/content prompt
layout used by every enhancement call.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

# GEMINI_API_KEY, LLM_PROVIDER and LLM_MODEL may come from a local .env file.
load_dotenv()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


class LLMError(RuntimeError):
    """The model could not be reached or answered with an error."""


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling settings for one kind of prompt; ``None`` leaves the provider default."""

    temperature: float | None = None
    max_tokens: int | None = None
    seed: int | None = None

    def options(self) -> dict[str, Any]:
        values = {
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "seed": self.seed,
        }
        return {key: value for key, value in values.items() if value is not None}


class LLMProvider(ABC):
    """A text completion backend."""

    def request_options(self, config: GenerationConfig) -> dict[str, Any]:
        """Provider-specific request options for ``config``."""
        return config.options()

    @abstractmethod
    def send_prompt(self, prompt: str, options: dict[str, Any]) -> str:
        """Send ``prompt`` and return the reply text.

        Raises:
            LLMError: If the request fails.
        """


class GeminiProvider(LLMProvider):
    """Google Gemini through the ``google-genai`` client."""

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        from google import genai

        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise LLMError("Missing GEMINI_API_KEY environment variable")

        self.model = model or os.environ.get("LLM_MODEL", DEFAULT_GEMINI_MODEL)
        self.client = genai.Client(api_key=self.api_key)

    def request_options(self, config: GenerationConfig) -> dict[str, Any]:
        options = config.options()
        if "max_tokens" in options:
            options["max_output_tokens"] = options.pop("max_tokens")
        return options

    def send_prompt(self, prompt: str, options: dict[str, Any]) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=prompt, config=options or None
            )
        except Exception as exc:
            raise LLMError(f"Gemini API call failed: {exc}") from exc
        return (response.text or "").strip()


_PROVIDERS = {"gemini": GeminiProvider}


def provider_from_env() -> LLMProvider:
    """Instantiate the provider named by ``LLM_PROVIDER`` (default ``gemini``)."""
    name = os.environ.get("LLM_PROVIDER", "gemini").lower()
    try:
        provider_cls = _PROVIDERS[name]
    except KeyError:
        raise LLMError(f"Unknown LLM provider: {name}.") from None
    return provider_cls()


class LLMService:
    """Sends instruction/content prompts to a provider."""

    def __init__(self, provider: LLMProvider | None = None) -> None:
        self.provider = provider or provider_from_env()

    @staticmethod
    def build_prompt(instructions: str, content: str) -> str:
        return f"System instruction:\n{instructions}\n\nUser content:\n{content}"

    def complete(
        self, instructions: str, content: str, config: GenerationConfig | None = None
    ) -> str:
        prompt = self.build_prompt(instructions, content)
        options = self.provider.request_options(config or GenerationConfig())
        return self.provider.send_prompt(prompt, options)
