"""
Summarizer Service — one LLM call per job description, validated against the schema.

Responsibilities:
  • Fill the job summarizer prompt with the raw text
  • Make exactly one JSON-mode completion (no retries, no cache)
  • Validate the reply into SummarizeJobDescriptionOutput or raise
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from paraphraser.errors import SchemaValidationError
from paraphraser.models.summary_models import (
    SummarizeJobDescriptionInput,
    SummarizeJobDescriptionOutput,
)
from paraphraser.prompts.job_summarizer import build_messages
from paraphraser.services.llm_service import complete_json

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def summarize_job_description(
    payload: SummarizeJobDescriptionInput,
    *,
    provider: str,
    model_key: str,
    api_key: str | None,
) -> SummarizeJobDescriptionOutput:
    """
    Summarize a job description into the structured output schema.

    Raises:
        ProviderError: the LLM call failed (propagated from llm_service).
        SchemaValidationError: the reply is not JSON or does not match the schema.
    """
    logger.info(
        f"Summarizing job description ({len(payload.job_description)} chars) "
        f"with {provider}/{model_key}"
    )

    data = await complete_json(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        messages=build_messages(payload),
        prompt_name="job_summarizer",
    )

    summary = _validate_reply(data)
    logger.info(
        f"Summarized: title={summary.job_title!r} "
        f"responsibilities={len(summary.key_responsibilities)} key_terms={len(summary.key_terms)}"
    )
    return summary


# ── Helpers ──────────────────────────────────────────────────────────────────


def _validate_reply(data: Any) -> SummarizeJobDescriptionOutput:
    """Build the output model from untrusted LLM JSON, or raise SchemaValidationError."""
    # Some models wrap the object in a one-element array
    if isinstance(data, list) and len(data) == 1:
        data = data[0]

    if not isinstance(data, dict):
        raise SchemaValidationError(
            "LLM reply is not a JSON object",
            {"type": type(data).__name__},
        )

    try:
        return SummarizeJobDescriptionOutput.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(
            "LLM reply does not match the summary schema",
            {"errors": e.errors(include_url=False, include_input=False)},
        ) from e
