from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from paraphraser.models.summary_models import (
    ActionResult,
    SummarizeJobDescriptionInput,
    SummarizeJobDescriptionOutput,
)
from paraphraser.services.action_service import FORM_FIELD, process_job_description
from paraphraser.utils.dependencies import APIKeys, ModelChoice, get_api_keys, get_model_choice
from paraphraser.utils.formatting import format_summary_to_text

router = APIRouter()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
async def paraphrase(
    req: SummarizeJobDescriptionInput,
    keys: APIKeys = Depends(get_api_keys),
    choice: ModelChoice = Depends(get_model_choice),
):
    """
    Summarize a job description into the structured envelope.
    Always 200: failures come back as {"error": "..."}.
    """
    return await process_job_description(
        None,
        {FORM_FIELD: req.job_description},
        provider=choice.provider,
        model_key=choice.model_key,
        api_key=keys.get_key(choice.provider),
    )


@router.post("/text", response_class=PlainTextResponse)
async def paraphrase_as_text(summary: SummarizeJobDescriptionOutput):
    """Render a summary in the plain-text layout used by the copy button."""
    return format_summary_to_text(summary)
