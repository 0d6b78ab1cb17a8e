# reflexive_agent/llm.py
import logging
import os
import yaml
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Load config once
_CONFIG_PATH = Path(__file__).parent / "config.yaml"
_CONFIG = {}

if _CONFIG_PATH.exists():
    with open(_CONFIG_PATH, "r") as f:
        _CONFIG = yaml.safe_load(f) or {}

# only a stand-in so the client can be constructed; requests with it will fail
PLACEHOLDER_API_KEY = "your-groq-api-key-here"


def _cfg(path: list[str], default=None):
    cur = _CONFIG
    for p in path:
        if not isinstance(cur, dict) or p not in cur:
            return default
        cur = cur[p]
    return cur


def _setting(agent: str | None, key: str, overrides: dict, env: str, default=None):
    # precedence: overrides > agent-specific config > global config > env > default
    value = overrides.get(key)
    if value is None:
        value = _cfg([agent, "llm", key]) if agent else None
    if value is None:
        value = _cfg(["llm", key])
    if value is None:
        value = os.getenv(env, default)
    return value


def get_api_key() -> str:
    return os.getenv("GROQ_API_KEY") or PLACEHOLDER_API_KEY


def get_timeout(agent: str | None = None) -> float | None:
    raw = _setting(agent, "timeout", {}, "LLM_TIMEOUT")
    if raw in (None, ""):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning("ignoring invalid timeout %r, waiting without a limit", raw)
        return None


def get_preamble(agent: str | None = None) -> str | None:
    return (_cfg([agent, "preamble"]) if agent else None) or _cfg(["preamble"])


def get_llm(agent: str | None = None, **overrides: Any):
    """
    agent: optional agent name (e.g., 'reviewer')
    """
    provider = str(_setting(agent, "provider", overrides, "LLM_PROVIDER", "openai")).lower()
    model = _setting(agent, "model", overrides, "LLM_MODEL", "grok-beta")
    temperature = float(_setting(agent, "temperature", overrides, "TEMPERATURE", 0))

    if provider == "openai":
        from langchain_openai import ChatOpenAI
        # any OpenAI-compatible endpoint, x.ai by default
        base_url = _setting(agent, "base_url", overrides, "LLM_BASE_URL", "https://api.x.ai/v1")
        api_key = overrides.get("api_key") or get_api_key()
        return ChatOpenAI(model=model, temperature=temperature, base_url=base_url, api_key=api_key)

    if provider == "anthropic":
        from langchain_anthropic import ChatAnthropic
        return ChatAnthropic(model=model, temperature=temperature)

    if provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(model=model, temperature=temperature)

    if provider == "ollama":
        from langchain_ollama import ChatOllama
        base_url = _setting(agent, "base_url", overrides, "OLLAMA_BASE_URL")
        kwargs = {"model": model, "temperature": temperature}
        if base_url:
            kwargs["base_url"] = base_url
        return ChatOllama(**kwargs)

    raise ValueError(f"Unknown provider: {provider}")
