import json

import httpx
import pytest
import respx

from devgenie.providers import ClaudeAdapter, GeminiAdapter, OpenAIAdapter
from devgenie.providers.claude_provider import ANTHROPIC_VERSION, CLAUDE_URL
from devgenie.providers.gemini_provider import GEMINI_BASE_URL
from devgenie.providers.openai_provider import OPENAI_URL

GEMINI_URL = f"{GEMINI_BASE_URL}/gemini-1.5-flash-latest:generateContent"


@pytest.mark.asyncio
@respx.mock
async def test_openai_returns_message_content():
    route = respx.post(OPENAI_URL).mock(
        return_value=httpx.Response(
            200, json={"choices": [{"message": {"role": "assistant", "content": "[]"}}]}
        )
    )

    result = await OpenAIAdapter(api_key="sk-test").invoke("Give me ideas")

    assert result.ok
    assert result.source == "openai"
    assert result.text == "[]"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-4o-mini"
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 2000
    assert body["messages"] == [{"role": "user", "content": "Give me ideas"}]


@pytest.mark.asyncio
@respx.mock
async def test_claude_returns_first_text_block():
    route = respx.post(CLAUDE_URL).mock(
        return_value=httpx.Response(
            200, json={"content": [{"type": "text", "text": "{\"structure\": \"MVC\"}"}]}
        )
    )

    result = await ClaudeAdapter(api_key="sk-ant-test").invoke("Details please")

    assert result.ok
    assert result.text == '{"structure": "MVC"}'
    request = route.calls.last.request
    assert request.headers["x-api-key"] == "sk-ant-test"
    assert request.headers["anthropic-version"] == ANTHROPIC_VERSION
    assert json.loads(request.content)["model"] == "claude-3-5-sonnet-20241022"


@pytest.mark.asyncio
@respx.mock
async def test_gemini_returns_first_candidate_part():
    route = respx.post(GEMINI_URL).mock(
        return_value=httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": "# Manual"}]}}]},
        )
    )

    result = await GeminiAdapter(api_key="gm-test").invoke("Write docs")

    assert result.ok
    assert result.text == "# Manual"
    request = route.calls.last.request
    assert request.headers["x-goog-api-key"] == "gm-test"
    body = json.loads(request.content)
    assert body["contents"] == [{"parts": [{"text": "Write docs"}]}]
    assert body["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 2000}


@pytest.mark.asyncio
@respx.mock
async def test_non_2xx_is_reported_not_raised():
    respx.post(OPENAI_URL).mock(return_value=httpx.Response(429, json={"error": "rate"}))

    result = await OpenAIAdapter(api_key="sk-test").invoke("prompt")

    assert not result.ok
    assert result.error == "HTTP 429"


@pytest.mark.asyncio
@respx.mock
async def test_transport_timeout_is_reported():
    respx.post(CLAUDE_URL).mock(side_effect=httpx.ReadTimeout("read timed out"))

    result = await ClaudeAdapter(api_key="sk-ant-test").invoke("prompt")

    assert not result.ok
    assert result.source == "claude"
    assert "timed out" in result.error


@pytest.mark.asyncio
@respx.mock
async def test_unexpected_envelope_is_reported():
    respx.post(GEMINI_URL).mock(return_value=httpx.Response(200, json={"candidates": []}))

    result = await GeminiAdapter(api_key="gm-test").invoke("prompt")

    assert not result.ok
    assert "Unexpected Gemini response format" in result.error


@pytest.mark.asyncio
@respx.mock
async def test_blank_reply_is_reported():
    respx.post(OPENAI_URL).mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": "   "}}]})
    )

    result = await OpenAIAdapter(api_key="sk-test").invoke("prompt")

    assert not result.ok
    assert result.error == "Empty OpenAI reply"


@pytest.mark.asyncio
async def test_missing_credential_skips_the_call():
    async with respx.mock(assert_all_called=False) as respx_mock:
        route = respx_mock.post(OPENAI_URL)

        result = await OpenAIAdapter(api_key=None).invoke("prompt")

    assert result.error == "credential_missing"
    assert not route.called


@pytest.mark.asyncio
async def test_call_exceeding_timeout_is_reported(fake_adapter):
    adapter = fake_adapter("openai", reply="[]", delay=1.0, timeout=0.05)

    result = await adapter.invoke("prompt")

    assert not result.ok
    assert result.error == "timed out after 0.05s"


@pytest.mark.asyncio
@respx.mock
async def test_claude_non_object_content_block_is_reported():
    respx.post(CLAUDE_URL).mock(return_value=httpx.Response(200, json={"content": ["text"]}))

    result = await ClaudeAdapter(api_key="sk-ant-test").invoke("prompt")

    assert not result.ok
    assert "Unexpected Claude response format" in result.error
