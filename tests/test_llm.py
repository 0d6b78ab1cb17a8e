import pytest
from langchain_openai import ChatOpenAI

from reflexive_agent import llm as llm_module
from reflexive_agent.llm import PLACEHOLDER_API_KEY, get_api_key, get_llm, get_timeout


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LLM_PROVIDER", "LLM_MODEL", "LLM_BASE_URL", "TEMPERATURE", "LLM_TIMEOUT", "GROQ_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(llm_module, "_CONFIG", {})


def test_api_key_placeholder_when_unset():
    assert get_api_key() == PLACEHOLDER_API_KEY


def test_api_key_from_env(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "real-key")
    assert get_api_key() == "real-key"


def test_default_llm_targets_xai():
    model = get_llm()

    assert isinstance(model, ChatOpenAI)
    assert model.model_name == "grok-beta"
    assert model.openai_api_base == "https://api.x.ai/v1"
    assert model.openai_api_key.get_secret_value() == PLACEHOLDER_API_KEY


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "other-model")
    monkeypatch.setenv("LLM_BASE_URL", "http://localhost:9999/v1")

    model = get_llm()

    assert model.model_name == "other-model"
    assert model.openai_api_base == "http://localhost:9999/v1"


def test_config_precedence(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "env-model")
    monkeypatch.setattr(llm_module, "_CONFIG", {
        "llm": {"model": "global-model", "temperature": 0.5},
        "reviewer": {"llm": {"model": "reviewer-model"}},
    })

    assert get_llm().model_name == "global-model"
    assert get_llm("reviewer").model_name == "reviewer-model"
    assert get_llm("reviewer", model="override").model_name == "override"
    assert get_llm("reviewer").temperature == 0.5


def test_timeout_setting(monkeypatch):
    assert get_timeout() is None
    monkeypatch.setenv("LLM_TIMEOUT", "12.5")
    assert get_timeout() == 12.5


def test_unknown_provider():
    with pytest.raises(ValueError, match="Unknown provider: nope"):
        get_llm(provider="nope")


def test_invalid_timeout_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv("LLM_TIMEOUT", "sixty")

    assert get_timeout() is None
    assert "ignoring invalid timeout 'sixty'" in caplog.text


def test_invalid_config_timeout_is_ignored(monkeypatch):
    monkeypatch.setattr(llm_module, "_CONFIG", {"reviewer": {"llm": {"timeout": "soon"}}})

    assert get_timeout("reviewer") is None


def test_ollama_base_url_from_config(monkeypatch):
    pytest.importorskip("langchain_ollama")
    monkeypatch.delenv("OLLAMA_BASE_URL", raising=False)
    monkeypatch.setattr(llm_module, "_CONFIG", {
        "reviewer": {"llm": {"provider": "ollama", "model": "llama3", "base_url": "http://gpu-box:11434"}},
    })

    model = get_llm("reviewer")

    assert model.base_url == "http://gpu-box:11434"
