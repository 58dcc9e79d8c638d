"""
LLM Service — unified interface to all providers via LiteLLM.

Responsibilities:
  • Accept an API key + model identifier per call (header key or server default)
  • Route to the correct provider (Groq, Google, OpenRouter) via LiteLLM
  • Provide a JSON-mode completion helper
  • Turn every provider failure into a ProviderError
"""

from __future__ import annotations

import json
import logging
from typing import Any

import litellm
from litellm import acompletion

from paraphraser.config import MODELS, PROMPT_CONFIG, settings
from paraphraser.errors import ProviderError, SchemaValidationError

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True
litellm.set_verbose = False


# ── Helpers ──────────────────────────────────────────────────────────────────

# Maps our provider key → the env var name that LiteLLM expects
PROVIDER_KEY_ENV = {
    "groq": "GROQ_API_KEY",
    "google": "GEMINI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ProviderError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ProviderError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str | None,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    json_mode: bool = False,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        provider:    "groq" | "google" | "openrouter"
        model_key:   Key from MODELS registry (e.g. "gemini-2.0-flash")
        api_key:     API key for the provider
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)
        json_mode:   If True, request JSON output

    Returns:
        The assistant's response text.

    Raises:
        ProviderError: unknown model, missing key, or any failure of the call.
    """
    model_id = resolve_model_id(provider, model_key)
    if not api_key:
        raise ProviderError(
            f"No API key available for provider '{provider}'",
            {"env_var": PROVIDER_KEY_ENV.get(provider, "")},
        )

    # Merge prompt config defaults → explicit overrides
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.3)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 1500)

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "temperature": temp,
        "max_tokens": tokens,
        "timeout": settings.request_timeout,
        "api_key": api_key,
    }

    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    logger.info(f"LLM call: provider={provider} model={model_id} temp={temp} tokens={tokens}")

    try:
        response = await acompletion(**kwargs)
    except Exception as e:
        logger.error(f"LLM error ({provider}/{model_key}): {e}")
        raise ProviderError(
            f"LLM call failed for {provider}/{model_key}",
            {"error": str(e), "type": type(e).__name__},
        ) from e

    content = response.choices[0].message.content or ""
    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content


def parse_json_reply(raw: str) -> Any:
    """
    Parse an LLM reply as JSON.
    Falls back to extracting JSON from markdown code blocks if needed.

    Raises:
        SchemaValidationError: nothing in the reply parses as JSON.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    # Try extracting from ```json ... ``` blocks, then bare ``` ... ``` blocks
    for fence in ("```json", "```"):
        if fence in raw:
            start = raw.index(fence) + len(fence)
            end = raw.find("```", start)
            if end != -1:
                try:
                    return json.loads(raw[start:end].strip())
                except json.JSONDecodeError:
                    continue

    raise SchemaValidationError(
        "Could not parse LLM response as JSON",
        {"preview": raw[:200]},
    )


async def complete_json(
    *,
    provider: str,
    model_key: str,
    api_key: str | None,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> Any:
    """Same as complete() but parses the response as JSON."""
    raw = await complete(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        messages=messages,
        prompt_name=prompt_name,
        temperature=temperature,
        max_tokens=max_tokens,
        json_mode=True,
    )
    return parse_json_reply(raw)
