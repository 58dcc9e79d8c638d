"""
Action Service — the form action behind the paraphrase page.

Checks the submitted text, runs the summarizer once, and maps the outcome onto
an ActionResult envelope. Internal error detail never reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from paraphraser.config import settings
from paraphraser.errors import InputValidationError, SchemaValidationError
from paraphraser.models.summary_models import ActionResult, SummarizeJobDescriptionInput
from paraphraser.services.summarizer_service import summarize_job_description

logger = logging.getLogger(__name__)

FORM_FIELD = "jobDescription"

GENERIC_ERROR_MESSAGE = (
    "An unexpected error occurred while processing the job description. "
    "Please try again later."
)


def too_short_message() -> str:
    return (
        f"Please provide a job description of at least "
        f"{settings.min_description_length} characters."
    )


def check_job_description(raw: Any) -> str:
    """Return the submitted text, or raise InputValidationError if it is missing or too short."""
    if not isinstance(raw, str) or len(raw.strip()) < settings.min_description_length:
        raise InputValidationError(too_short_message())
    return raw


async def process_job_description(
    prev_state: ActionResult | None,
    form_data: Mapping[str, Any],
    *,
    provider: str | None = None,
    model_key: str | None = None,
    api_key: str | None = None,
) -> ActionResult:
    """
    Handle one form submission and return exactly one envelope.

    `prev_state` is part of the form-action contract; the new envelope
    always replaces it wholesale.
    """
    try:
        job_description = check_job_description(form_data.get(FORM_FIELD))
    except InputValidationError as e:
        return ActionResult.failure(e.message)

    provider = provider or settings.default_provider
    model_key = model_key or settings.default_model_key
    api_key = api_key or settings.server_key_for(provider)

    try:
        result = await summarize_job_description(
            SummarizeJobDescriptionInput(job_description=job_description),
            provider=provider,
            model_key=model_key,
            api_key=api_key,
        )
        if result is None or result.key_terms is None:
            raise SchemaValidationError("AI failed to generate a valid response.")
    except Exception:
        logger.exception("Job description processing failed")
        return ActionResult.failure(GENERIC_ERROR_MESSAGE)

    return ActionResult.success(result)
