from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Job Paraphraser"
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:8000"

    # Default provider/model used by the paraphrase form
    default_provider: str = "google"
    default_model_key: str = "gemini-2.0-flash"
    request_timeout: float = 60.0

    # Minimum trimmed length of a job description before we call the LLM
    min_description_length: int = 50

    # Server-side LLM API keys (request headers take precedence)
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def server_key_for(self, provider: str) -> Optional[str]:
        """Return the server-side API key configured for a provider, if any."""
        return {
            "groq": self.groq_api_key,
            "google": self.gemini_api_key,
            "openrouter": self.openrouter_api_key,
        }.get(provider)


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Good all-rounder for summaries",
        },
        "llama-3.1-8b": {
            "name": "LLaMA 3.1 8B",
            "model_id": "groq/llama-3.1-8b-instant",
            "description": "Fastest, fine for short postings",
        },
    },
    "google": {
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Most reliable structured output",
        },
        "gemini-1.5-flash": {
            "name": "Gemini 1.5 Flash",
            "model_id": "gemini/gemini-1.5-flash",
            "description": "Fallback when 2.0 hits rate limits",
        },
    },
    "openrouter": {
        "deepseek-chat": {
            "name": "DeepSeek V3",
            "model_id": "openrouter/deepseek/deepseek-chat-v3-0324:free",
            "description": "Strong JSON adherence",
        },
        "kimi-k2": {
            "name": "Kimi K2",
            "model_id": "openrouter/moonshotai/kimi-k2:free",
            "description": "Good with tech-heavy postings",
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "job_summarizer": {"temperature": 0.2, "max_tokens": 1500},
}
