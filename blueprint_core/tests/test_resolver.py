import pytest

from blueprint_core.config.resolver import resolve_provider_config
from blueprint_core.domain.exceptions import MissingCredentialError
from blueprint_core.infrastructure.storage.memory_store import InMemorySettingsStore


def _store(**values):
    return InMemorySettingsStore(values)


def test_reads_persisted_values():
    store = _store(ai_provider="anthropic", ai_model="claude-x", ai_base_url="", ai_api_key="secret")
    cfg = resolve_provider_config(store)
    assert (cfg.provider, cfg.model, cfg.base_url, cfg.api_key) == ("anthropic", "claude-x", "", "secret")


def test_explicit_arguments_win():
    store = _store(ai_provider="openai", ai_model="gpt-4o-mini", ai_base_url="http://old", ai_api_key="k")
    cfg = resolve_provider_config(store, provider="gemini", model="gemini-2.0-flash", base_url="http://new")
    assert cfg.provider == "gemini"
    assert cfg.model == "gemini-2.0-flash"
    assert cfg.base_url == "http://new"
    assert cfg.api_key == "k"


def test_explicit_empty_string_counts_as_explicit():
    store = _store(ai_model="gpt-4o-mini", ai_api_key="k")
    assert resolve_provider_config(store, model="").model == ""


def test_missing_keys_resolve_to_empty():
    cfg = resolve_provider_config(_store(ai_api_key="k"))
    assert (cfg.provider, cfg.model, cfg.base_url) == ("", "", "")


def test_missing_key_for_remote_provider_fails():
    with pytest.raises(MissingCredentialError) as exc:
        resolve_provider_config(_store(ai_provider="openai"))
    assert exc.value.code == "MISSING_API_KEY"


def test_local_provider_may_have_no_key():
    cfg = resolve_provider_config(_store(ai_provider="local", ai_base_url="http://localhost:11434"))
    assert cfg.is_local
    assert cfg.api_key == ""


def test_api_key_not_in_repr():
    cfg = resolve_provider_config(_store(ai_api_key="top-secret"))
    assert "top-secret" not in repr(cfg)
