"""
Request-scoped helpers — extract API keys from headers, resolve the active provider/model.
"""

from __future__ import annotations

from fastapi import Header, Query
from typing import Optional

from paraphraser.config import settings


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(
        self,
        groq: str | None = None,
        google: str | None = None,
        openrouter: str | None = None,
    ):
        self.groq = groq
        self.google = google
        self.openrouter = openrouter

    def get_key(self, provider: str) -> str | None:
        """Header key for a provider, falling back to the server-side key."""
        return getattr(self, provider, None) or settings.server_key_for(provider)


class ModelChoice:
    """Provider + model selected for one request."""

    def __init__(self, provider: str, model_key: str):
        self.provider = provider
        self.model_key = model_key


async def get_api_keys(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        groq=x_groq_key or None,
        google=x_google_key or None,
        openrouter=x_openrouter_key or None,
    )


async def get_model_choice(
    provider: Optional[str] = Query(None),
    model_key: Optional[str] = Query(None),
) -> ModelChoice:
    """FastAPI dependency: query overrides, else the configured defaults."""
    return ModelChoice(
        provider=provider or settings.default_provider,
        model_key=model_key or settings.default_model_key,
    )
