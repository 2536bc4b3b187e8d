import json

import httpx
import pytest

from kidstory_ai.config import TextProviderKind
from kidstory_ai.exceptions import ProviderError
from kidstory_ai.llm import GrokTextProvider, OpenAITextProvider, create_text_provider

from tests.conftest import WELL_FORMED_STORY, make_settings


def _completion(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class Recorder:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def _client(recorder: Recorder) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))


async def test_openai_request_shape_and_content():
    recorder = Recorder(httpx.Response(200, json=_completion(WELL_FORMED_STORY)))
    settings = make_settings(openai_api_key="sk-test", text_max_tokens=900)
    provider = OpenAITextProvider.from_settings(settings, http_client=_client(recorder))

    text = await provider.generate_text("SYSTEM", "a fox story")

    assert text == WELL_FORMED_STORY
    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-4o-mini"
    assert body["messages"] == [
        {"role": "system", "content": "SYSTEM"},
        {"role": "user", "content": "a fox story"},
    ]
    assert body["max_tokens"] == 900
    assert body["temperature"] == pytest.approx(0.85)


async def test_grok_uses_xai_endpoint():
    recorder = Recorder(httpx.Response(200, json=_completion("TITLE: X\nPAGE 1: y")))
    settings = make_settings(text_provider="grok", grok_api_key="xai-test")
    provider = GrokTextProvider.from_settings(settings, http_client=_client(recorder))

    await provider.generate_text("SYSTEM", "prompt")

    request = recorder.requests[0]
    assert str(request.url) == "https://api.x.ai/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer xai-test"
    body = json.loads(request.content)
    assert body["model"] == "grok-3-mini"
    assert body["temperature"] == pytest.approx(0.8)


async def test_non_2xx_raises_provider_error_without_retry():
    recorder = Recorder(httpx.Response(500, json={"error": {"message": "upstream broke"}}))
    provider = OpenAITextProvider.from_settings(
        make_settings(openai_api_key="sk-test"), http_client=_client(recorder)
    )

    with pytest.raises(ProviderError) as exc_info:
        await provider.generate_text("SYSTEM", "prompt")

    assert exc_info.value.status_code == 500
    assert "upstream broke" in exc_info.value.body
    assert exc_info.value.provider == "openai"
    assert len(recorder.requests) == 1


async def test_unauthorized_raises_provider_error():
    recorder = Recorder(httpx.Response(401, json={"error": {"message": "bad key"}}))
    provider = GrokTextProvider.from_settings(
        make_settings(text_provider="grok", grok_api_key="xai-test"), http_client=_client(recorder)
    )
    with pytest.raises(ProviderError) as exc_info:
        await provider.generate_text("SYSTEM", "prompt")
    assert exc_info.value.status_code == 401
    assert exc_info.value.provider == "grok"


async def test_timeout_raises_provider_error():
    recorder = Recorder(error=httpx.ReadTimeout("too slow"))
    provider = OpenAITextProvider.from_settings(
        make_settings(openai_api_key="sk-test"), http_client=_client(recorder)
    )
    with pytest.raises(ProviderError) as exc_info:
        await provider.generate_text("SYSTEM", "prompt")
    assert exc_info.value.status_code is None
    assert "timed out" in str(exc_info.value)


async def test_connection_error_raises_provider_error():
    recorder = Recorder(error=httpx.ConnectError("refused"))
    provider = OpenAITextProvider.from_settings(
        make_settings(openai_api_key="sk-test"), http_client=_client(recorder)
    )
    with pytest.raises(ProviderError):
        await provider.generate_text("SYSTEM", "prompt")


async def test_null_content_returns_empty_text():
    recorder = Recorder(httpx.Response(200, json=_completion(None)))
    provider = OpenAITextProvider.from_settings(
        make_settings(openai_api_key="sk-test"), http_client=_client(recorder)
    )
    assert await provider.generate_text("SYSTEM", "prompt") == ""


async def test_aclose_releases_http_client():
    http_client = _client(Recorder(httpx.Response(200, json=_completion("TITLE: X\nPAGE 1: y"))))
    provider = OpenAITextProvider.from_settings(
        make_settings(openai_api_key="sk-test"), http_client=http_client
    )

    await provider.aclose()
    assert not http_client.is_closed

    await provider.generate_text("SYSTEM", "prompt")
    await provider.aclose()
    assert http_client.is_closed
    await provider.aclose()


def test_factory_selects_by_configuration():
    openai_provider = create_text_provider(make_settings(openai_api_key="sk-test"))
    grok_provider = create_text_provider(
        make_settings(text_provider=TextProviderKind.GROK, grok_api_key="xai-test")
    )
    assert isinstance(openai_provider, OpenAITextProvider)
    assert isinstance(grok_provider, GrokTextProvider)


def test_readiness_follows_selected_provider():
    assert make_settings(openai_api_key="sk-test").text_provider_ready
    assert not make_settings(openai_api_key="sk-...").text_provider_ready
    assert not make_settings(text_provider="grok", openai_api_key="sk-test").text_provider_ready
    assert make_settings(text_provider="grok", grok_api_key="xai-test").text_provider_ready
