import logging

import httpx
import pytest

from blueprint_core.domain.exceptions import DecodeError, NetworkError, RequestTimeoutError, UpstreamError
from blueprint_core.domain.models import ConversationMessage, ProviderConfig
from blueprint_core.providers import create_provider
from blueprint_core.providers.anthropic_client import AnthropicClient
from blueprint_core.providers.gemini_client import GeminiClient
from blueprint_core.providers.openai_client import OpenAICompatibleClient


class SettingsStub:
    http_timeout = 60.0
    transcription_timeout = 120.0
    openai_base_url = "https://api.openai.com"
    transcription_language = "ru"


HISTORY = [
    ConversationMessage(role="user", content="привет"),
    ConversationMessage(role="assistant", content="здравствуй"),
    ConversationMessage(role="user", content="создай клиента Иван"),
]


def _config(provider="openai", base_url="", api_key="k", model="m"):
    return ProviderConfig(provider=provider, model=model, base_url=base_url, api_key=api_key)


def _fake_client(monkeypatch, status=200, body=None, text="", raise_exc=None):
    captured = {}

    class Resp:
        status_code = status

        def __init__(self):
            self.text = text

        def json(self):
            if body is None:
                raise ValueError("not json")
            return body

    class Client:
        def __init__(self, *a, **kw):
            captured["client_kwargs"] = kw

        def __enter__(self):
            return self

        def __exit__(self, *a):
            return False

        def post(self, url, **kw):
            captured["url"] = url
            captured.update(kw)
            if raise_exc is not None:
                raise raise_exc
            return Resp()

    monkeypatch.setattr("httpx.Client", Client)
    return captured


# ---- factory ----


@pytest.mark.parametrize(
    "name, cls",
    [
        ("anthropic", AnthropicClient),
        ("gemini", GeminiClient),
        ("openai", OpenAICompatibleClient),
        ("local", OpenAICompatibleClient),
        ("", OpenAICompatibleClient),
        (None, OpenAICompatibleClient),
        ("something-else", OpenAICompatibleClient),
    ],
)
def test_create_provider(name, cls):
    assert isinstance(create_provider(name, SettingsStub()), cls)


# ---- OpenAI compatible ----


def test_openai_payload_and_response(monkeypatch):
    captured = _fake_client(
        monkeypatch,
        body={"choices": [{"message": {"role": "assistant", "content": "ok"}}]},
    )
    text = OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)
    assert text == "ok"
    assert captured["url"] == "https://api.openai.com/v1/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer k"
    assert captured["client_kwargs"]["timeout"] == 60.0
    payload = captured["json"]
    assert payload["model"] == "m"
    assert payload["messages"][0] == {"role": "system", "content": "SYS"}
    assert [m["role"] for m in payload["messages"][1:]] == ["user", "assistant", "user"]
    assert payload["temperature"] == 0.3
    assert payload["max_tokens"] == 4096


def test_local_endpoint_strips_trailing_slash(monkeypatch):
    captured = _fake_client(monkeypatch, body={"choices": [{"message": {"content": "ok"}}]})
    client = OpenAICompatibleClient(SettingsStub())
    client.complete(_config(provider="local", base_url="http://x/y/", api_key=""), "SYS", HISTORY)
    assert captured["url"] == "http://x/y/v1/chat/completions"
    assert "Authorization" not in captured["headers"]


def test_local_without_base_url_uses_public_endpoint():
    client = OpenAICompatibleClient(SettingsStub())
    assert client.endpoint(_config(provider="local")) == "https://api.openai.com/v1/chat/completions"


def test_base_url_ignored_for_non_local_provider():
    client = OpenAICompatibleClient(SettingsStub())
    assert client.endpoint(_config(provider="openai", base_url="http://x/y")) == (
        "https://api.openai.com/v1/chat/completions"
    )


@pytest.mark.parametrize(
    "body",
    [
        {"choices": [{"message": {"content": None}}]},
        {"choices": []},
        {},
    ],
)
def test_openai_missing_content_is_empty_reply(monkeypatch, body):
    _fake_client(monkeypatch, body=body)
    assert OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY) == ""


def test_upstream_error_carries_status_and_body(monkeypatch):
    _fake_client(monkeypatch, status=401, text='{"error": "invalid api key"}')
    with pytest.raises(UpstreamError) as exc:
        OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)
    assert exc.value.status == 401
    assert exc.value.body == '{"error": "invalid api key"}'
    assert "401" in str(exc.value) and "invalid api key" in str(exc.value)


def test_rate_limit_is_plain_upstream_error(monkeypatch):
    _fake_client(monkeypatch, status=429, text="slow down")
    with pytest.raises(UpstreamError) as exc:
        OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)
    assert exc.value.status == 429


def test_timeout_maps_to_request_timeout(monkeypatch):
    _fake_client(monkeypatch, raise_exc=httpx.ReadTimeout("timed out"))
    with pytest.raises(RequestTimeoutError) as exc:
        OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)
    assert exc.value.code == "TIMEOUT"
    assert isinstance(exc.value, NetworkError)


def test_transport_error_maps_to_network_error(monkeypatch):
    _fake_client(monkeypatch, raise_exc=httpx.ConnectError("connection refused"))
    with pytest.raises(NetworkError) as exc:
        OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)
    assert not isinstance(exc.value, RequestTimeoutError)


def test_success_with_non_json_body_is_decode_error(monkeypatch):
    _fake_client(monkeypatch, body=None, text="<html>")
    with pytest.raises(DecodeError):
        OpenAICompatibleClient(SettingsStub()).complete(_config(), "SYS", HISTORY)


# ---- Anthropic ----


def test_anthropic_uses_top_level_system(monkeypatch):
    captured = _fake_client(monkeypatch, body={"content": [{"type": "text", "text": "ok"}]})
    text = AnthropicClient(SettingsStub()).complete(_config(provider="anthropic"), "SYS", HISTORY)
    assert text == "ok"
    assert captured["url"] == "https://api.anthropic.com/v1/messages"
    assert captured["headers"]["x-api-key"] == "k"
    assert captured["headers"]["anthropic-version"] == "2023-06-01"
    payload = captured["json"]
    assert payload["system"] == "SYS"
    assert all(m["role"] != "system" for m in payload["messages"])
    assert len(payload["messages"]) == 3
    assert payload["max_tokens"] == 4096


def test_anthropic_missing_text_is_empty(monkeypatch):
    _fake_client(monkeypatch, body={"content": []})
    assert AnthropicClient(SettingsStub()).complete(_config(provider="anthropic"), "SYS", HISTORY) == ""


def test_anthropic_error_label(monkeypatch):
    _fake_client(monkeypatch, status=529, text="overloaded")
    with pytest.raises(UpstreamError) as exc:
        AnthropicClient(SettingsStub()).complete(_config(provider="anthropic"), "SYS", HISTORY)
    assert str(exc.value).startswith("Anthropic API")


# ---- Gemini ----


def test_gemini_maps_assistant_to_model(monkeypatch):
    captured = _fake_client(
        monkeypatch,
        body={"candidates": [{"content": {"parts": [{"text": "ok"}]}}]},
    )
    text = GeminiClient(SettingsStub()).complete(_config(provider="gemini", model="gemini-2.0-flash"), "SYS", HISTORY)
    assert text == "ok"
    assert captured["url"] == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert captured["params"] == {"key": "k"}
    payload = captured["json"]
    assert payload["system_instruction"] == {"parts": [{"text": "SYS"}]}
    assert [c["role"] for c in payload["contents"]] == ["user", "model", "user"]
    assert payload["contents"][2]["parts"] == [{"text": "создай клиента Иван"}]
    assert payload["generationConfig"] == {"maxOutputTokens": 4096, "temperature": 0.3}


def test_gemini_missing_candidates_is_empty(monkeypatch):
    _fake_client(monkeypatch, body={"candidates": []})
    assert GeminiClient(SettingsStub()).complete(_config(provider="gemini"), "SYS", HISTORY) == ""


def test_gemini_timeout_log_has_no_api_key(monkeypatch, caplog):
    _fake_client(monkeypatch, raise_exc=httpx.ReadTimeout("timed out"))
    with caplog.at_level(logging.WARNING, logger="blueprint_core"):
        with pytest.raises(RequestTimeoutError):
            GeminiClient(SettingsStub()).complete(
                _config(provider="gemini", api_key="gm-secret-key"), "SYS", HISTORY
            )
    records = [r for r in caplog.records if r.getMessage() == "Provider request timed out"]
    assert records
    url = records[0].extra["url"]
    assert "key=" not in url
    assert "gm-secret-key" not in url
    assert all("gm-secret-key" not in r.getMessage() for r in caplog.records)
