from __future__ import annotations

import json

import httpx
import pytest

from resume_studio.services.enhancement import (
    EnhancementGateway,
    RemoteEnhancementBackend,
    TextEnhancer,
)
from resume_studio.services.llm import LLMError, LLMService


def test_gateway_falls_back_on_failure(failing_enhancer) -> None:
    gateway = EnhancementGateway(failing_enhancer)
    assert gateway.improve("text", "ctx") == "text"
    assert gateway.generate("topic") == ""


def test_gateway_passes_through_success(stub_enhancer) -> None:
    gateway = EnhancementGateway(stub_enhancer)
    assert gateway.improve("text", "ctx") == "Improved text"
    assert gateway.generate("topic") == "Generated bullet"
    assert stub_enhancer.calls == [("improve", "text", "ctx"), ("generate", "topic")]


def test_text_enhancer_improve_prompt(mock_provider) -> None:
    mock_provider.response = "  Led a migration.  "
    enhancer = TextEnhancer(LLMService(provider=mock_provider))

    assert enhancer.improve("did migration", "Experience at Acme") == "Led a migration."
    assert "professional resume editor" in mock_provider.last_prompt
    assert 'Original Text: "did migration"' in mock_provider.last_prompt
    assert "Context Description: Experience at Acme" in mock_provider.last_prompt
    assert mock_provider.last_options == {"temperature": 0.4, "max_tokens": 256}


def test_text_enhancer_empty_reply_keeps_input(mock_provider) -> None:
    mock_provider.response = ""
    enhancer = TextEnhancer(LLMService(provider=mock_provider))

    assert enhancer.improve("original", "ctx") == "original"
    assert enhancer.generate("topic") == ""


def test_text_enhancer_generate_prompt(mock_provider) -> None:
    enhancer = TextEnhancer(LLMService(provider=mock_provider))

    enhancer.generate("Kafka pipeline")
    assert "under 20 words" in mock_provider.last_prompt
    assert '"Kafka pipeline"' in mock_provider.last_prompt
    assert mock_provider.last_options == {"temperature": 0.7, "max_tokens": 60}


def test_text_enhancer_without_api_key_fails_on_use(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    enhancer = TextEnhancer()

    with pytest.raises(LLMError):
        enhancer.generate("topic")
    assert EnhancementGateway(enhancer).generate("topic") == ""


def _remote(handler) -> RemoteEnhancementBackend:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return RemoteEnhancementBackend("http://enhancer.test/api/gemini", client=client)


def test_remote_backend_posts_action() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"success": True, "data": "Sharper"})

    backend = _remote(handler)
    assert backend.improve("text", "ctx") == "Sharper"
    assert seen == [{"action": "improveText", "text": "text", "context": "ctx"}]


@pytest.mark.parametrize(
    ("status_code", "body"),
    [
        (500, {"success": False, "message": "Internal Server Error"}),
        (200, {"success": False, "message": "nope"}),
        (200, None),
    ],
)
def test_remote_backend_raises_on_failure(status_code: int, body: dict | None) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if body is None:
            return httpx.Response(status_code, text="not json")
        return httpx.Response(status_code, json=body)

    with pytest.raises(LLMError):
        _remote(handler).generate("topic")


def test_gateway_over_failing_remote_falls_back() -> None:
    gateway = EnhancementGateway(_remote(lambda request: httpx.Response(503)))
    assert gateway.improve("keep me", "ctx") == "keep me"
    assert gateway.generate("topic") == ""
