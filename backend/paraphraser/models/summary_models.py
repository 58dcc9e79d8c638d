from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional


# Placeholder strings some models emit instead of leaving rate out
_RATE_PLACEHOLDERS = {"", "n/a", "na", "none", "null", "not specified", "not mentioned", "unspecified"}


# ── Request Models ──────────────────────────────────────────────────────────


class SummarizeJobDescriptionInput(BaseModel):
    """Input for the job description summarizer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    job_description: str = Field(description="The job description to summarize.")


# ── Response Models ─────────────────────────────────────────────────────────


class SummarizeJobDescriptionOutput(BaseModel):
    """Structured summary of a job description, as returned by the LLM.

    Field descriptions are rendered into the prompt, so keep them short and
    written for the model.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    job_title: str = Field(description="The job title.")
    location: str = Field(description="The job location.")
    department: str = Field(description="The department or team.")
    job_type: str = Field(description="The employment type (e.g., Contract, Full-time).")
    rate: Optional[str] = Field(
        default=None,
        description="The compensation or pay rate, if available.",
    )
    about_company: str = Field(description="A summary about the company.")
    role_overview: str = Field(description="An overview of the job role.")
    key_responsibilities: list[str] = Field(description="A list of key responsibilities.")
    qualifications: list[str] = Field(description="A list of qualifications and required skills.")
    key_terms: list[str] = Field(description="The list of key terms extracted from the job post.")

    @field_validator("rate", mode="before")
    @classmethod
    def _drop_placeholder_rate(cls, value):
        if isinstance(value, str) and value.strip().lower() in _RATE_PLACEHOLDERS:
            return None
        return value


class ActionResult(BaseModel):
    """Envelope returned to the page: either a summary or an error, never both.

    `key_terms` mirrors `summary.key_terms` for convenience. The empty
    envelope is only used as the page's initial state.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    summary: Optional[SummarizeJobDescriptionOutput] = None
    key_terms: Optional[list[str]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_one_side(self) -> "ActionResult":
        if self.summary is not None and self.error is not None:
            raise ValueError("An envelope cannot carry both a summary and an error")
        if (self.summary is None) != (self.key_terms is None):
            raise ValueError("key_terms must be set exactly when summary is set")
        return self

    @classmethod
    def initial(cls) -> "ActionResult":
        return cls()

    @classmethod
    def success(cls, summary: SummarizeJobDescriptionOutput) -> "ActionResult":
        return cls(summary=summary, key_terms=list(summary.key_terms))

    @classmethod
    def failure(cls, message: str) -> "ActionResult":
        return cls(error=message)

    @property
    def is_success(self) -> bool:
        return self.summary is not None

    @property
    def is_error(self) -> bool:
        return self.error is not None
