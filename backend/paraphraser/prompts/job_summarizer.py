"""
Job Summarizer Prompt — turns a raw job description into the structured summary.

Used by summarizer_service.py → llm_service.complete_json()

The field list is generated from SummarizeJobDescriptionOutput so the prompt and
the validator never drift apart.
"""

from __future__ import annotations

from typing import Any, get_args, get_origin

from paraphraser.models.summary_models import (
    SummarizeJobDescriptionInput,
    SummarizeJobDescriptionOutput,
)


def _field_kind(annotation: Any) -> str:
    """JSON kind for a field annotation; Optional[...] is looked through."""
    candidates = [annotation, *get_args(annotation)]
    if any(get_origin(candidate) is list for candidate in candidates):
        return "array of strings"
    return "string"


def _describe_fields() -> str:
    """Render one line per output field: alias, type, required/optional, description."""
    lines = []
    for name, field in SummarizeJobDescriptionOutput.model_fields.items():
        alias = field.alias or name
        kind = _field_kind(field.annotation)
        requirement = "required" if field.is_required() else "optional — omit the key if unknown"
        lines.append(f'- "{alias}" ({kind}, {requirement}): {field.description}')
    return "\n".join(lines)


SYSTEM_PROMPT = f"""You are an expert at summarizing job descriptions into a structured and easy-to-read format. You also extract key terms and technologies.

Given a job description, extract the key information and format it according to the output schema below.

You MUST respond with one valid JSON object only — no markdown, no code fences, no commentary.

Output schema:
{_describe_fields()}

Rules:
1. Use emojis to make the summary text more engaging (role overview, responsibilities, qualifications).
2. If a field like "rate" is not mentioned in the job description, omit the key entirely. Never invent a pay rate.
3. "keyResponsibilities" and "qualifications" are short, scannable bullet points, most important first.
4. "keyTerms" lists the technologies, tools, skills and domain terms named in the posting, without duplicates.
5. Use only facts present in the job description. If the company is not named, summarize what the posting says about the employer.
"""

USER_PROMPT_TEMPLATE = """Job Description:
{job_description}"""


def build_messages(payload: SummarizeJobDescriptionInput) -> list[dict[str, str]]:
    """Fill the template with one job description. Pure; the system text never changes."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": USER_PROMPT_TEMPLATE.format(job_description=payload.job_description),
        },
    ]
