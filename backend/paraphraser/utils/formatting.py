"""
Plain-text rendering of a summary for the "copy to clipboard" action.
"""

from __future__ import annotations

from paraphraser.models.summary_models import SummarizeJobDescriptionOutput


def company_heading(about_company: str) -> str:
    """First space-separated word of the company summary, used as the "About" heading."""
    return about_company.split(" ")[0]


def _bullets(items: list[str]) -> str:
    return "- " + "\n- ".join(items)


def format_summary_to_text(summary: SummarizeJobDescriptionOutput) -> str:
    """Serialize a summary into the fixed emoji-labelled layout. Deterministic."""
    text = ""
    text += f"🔎 Job Title: {summary.job_title}\n"
    text += f"📍 Location: {summary.location}\n"
    text += f"💼 Department: {summary.department}\n"
    text += f"📅 Type: {summary.job_type}\n"
    if summary.rate:
        text += f"💰 Rate: {summary.rate}\n"
    text += f"\n🏢 About {company_heading(summary.about_company)}\n{summary.about_company}\n"
    text += f"\n🎯 Role Overview\n{summary.role_overview}\n"
    text += f"\n🛠️ Key Responsibilities\n{_bullets(summary.key_responsibilities)}\n"
    text += f"\n✅ What You Bring\n{_bullets(summary.qualifications)}\n"
    return text
