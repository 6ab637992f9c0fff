"""Text enhancement: rewrite a snippet or generate a bullet point.

Backends (:class:`TextEnhancer`, :class:`RemoteEnhancementBackend`) raise on
failure. :class:`EnhancementGateway` is the boundary the editing surface
talks to and never raises.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from resume_studio.services.llm import GenerationConfig, LLMError, LLMService

logger = logging.getLogger(__name__)

__all__ = [
    "EnhancementBackend",
    "EnhancementGateway",
    "RemoteEnhancementBackend",
    "TextEnhancer",
]

IMPROVE_INSTRUCTIONS = (
    "You are a professional resume editor.\n"
    "Context: The user is writing a resume for a Software Engineering or Technical role.\n"
    "Task: Rewrite the following text to be more professional, impactful, and concise. "
    "Use action verbs.\n"
    "Output ONLY the rewritten text. Do not include quotes or explanations."
)

GENERATE_INSTRUCTIONS = (
    "Generate a professional resume bullet point for the given topic.\n"
    "Keep it under 20 words. Use strong action verbs.\n"
    "Output ONLY the bullet point."
)

# Rewrites stay close to the source text; generated bullets are short by construction.
IMPROVE_CONFIG = GenerationConfig(temperature=0.4, max_tokens=256)
GENERATE_CONFIG = GenerationConfig(temperature=0.7, max_tokens=60)


class EnhancementBackend(Protocol):
    def improve(self, text: str, context: str) -> str: ...

    def generate(self, topic: str) -> str: ...


class TextEnhancer:
    """Enhancement backed directly by an :class:`LLMService`."""

    def __init__(self, llm: LLMService | None = None) -> None:
        self._llm = llm

    @property
    def llm(self) -> LLMService:
        # Created lazily so a missing API key only matters once a call is made.
        if self._llm is None:
            self._llm = LLMService()
        return self._llm

    def improve(self, text: str, context: str) -> str:
        content = f'Context Description: {context}\nOriginal Text: "{text}"'
        improved = self.llm.complete(IMPROVE_INSTRUCTIONS, content, IMPROVE_CONFIG)
        return improved.strip() or text

    def generate(self, topic: str) -> str:
        content = f'Topic: "{topic}"'
        return self.llm.complete(GENERATE_INSTRUCTIONS, content, GENERATE_CONFIG).strip()


class RemoteEnhancementBackend:
    """Enhancement served by a remote ``/api/gemini`` endpoint."""

    def __init__(self, url: str, *, timeout: float = 30.0, client: httpx.Client | None = None):
        self.url = url
        self._client = client or httpx.Client(timeout=timeout)

    def _call(self, action: str, **body: str) -> str:
        try:
            response = self._client.post(self.url, json={"action": action, **body})
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise LLMError(f"Enhancement request failed: {exc}") from exc
        if not payload.get("success"):
            raise LLMError(f"Enhancement request failed: {payload.get('message')}")
        return str(payload.get("data") or "")

    def improve(self, text: str, context: str) -> str:
        return self._call("improveText", text=text, context=context)

    def generate(self, topic: str) -> str:
        return self._call("generateContent", topic=topic)

    def close(self) -> None:
        self._client.close()


class EnhancementGateway:
    """Fail-soft wrapper around an enhancement backend.

    ``improve`` falls back to the input text and ``generate`` to ``""`` on any
    error.
    """

    def __init__(self, backend: EnhancementBackend | None = None) -> None:
        self.backend = backend or TextEnhancer()

    def improve(self, text: str, context: str) -> str:
        try:
            return self.backend.improve(text, context)
        except Exception:
            logger.exception("Error enhancing text")
            return text

    def generate(self, topic: str) -> str:
        try:
            return self.backend.generate(topic)
        except Exception:
            logger.exception("Error generating content")
            return ""
