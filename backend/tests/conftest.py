"""
Shared fixtures for the paraphraser tests.
"""

import pytest

from paraphraser.models.summary_models import SummarizeJobDescriptionOutput


@pytest.fixture
def job_description():
    """An 80-character generic job description."""
    text = ("Backend engineer wanted for Python APIs. " * 2)[:80]
    assert len(text) == 80
    return text


@pytest.fixture
def reply_dict():
    """A schema-conforming LLM reply without a rate."""
    return {
        "jobTitle": "Backend Engineer",
        "location": "Remote (EU)",
        "department": "Platform",
        "jobType": "Full-time",
        "aboutCompany": "Acme builds payment tooling for small businesses.",
        "roleOverview": "🚀 Own the APIs behind Acme's checkout.",
        "keyResponsibilities": ["Design REST APIs", "Run data pipelines"],
        "qualifications": ["3+ years of Python", "Comfortable with PostgreSQL"],
        "keyTerms": ["Python", "FastAPI", "PostgreSQL"],
    }


@pytest.fixture
def summary(reply_dict):
    return SummarizeJobDescriptionOutput.model_validate(reply_dict)
