"""
State of the paraphrase page: IDLE → PENDING → SETTLED → PENDING → ...

Every transition returns a new PageState; nothing is mutated in place.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paraphraser.errors import InvalidTransitionError
from paraphraser.models.summary_models import ActionResult, SummarizeJobDescriptionOutput

logger = logging.getLogger(__name__)


class PageStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


class PageState(BaseModel):
    """What the page shows: the last good summary plus an optional one-shot notice."""

    model_config = ConfigDict(frozen=True)

    status: PageStatus = PageStatus.IDLE
    result: ActionResult = Field(default_factory=ActionResult.initial)
    notice: Optional[str] = None

    @classmethod
    def idle(cls) -> "PageState":
        return cls()

    @classmethod
    def restore(cls, snapshot: Optional[str]) -> "PageState":
        """Rebuild the settled page from the summary the browser sent back.

        The snapshot is re-validated against the summary schema; anything that
        does not validate restores an empty idle page.
        """
        if not snapshot or not snapshot.strip():
            return cls.idle()
        try:
            summary = SummarizeJobDescriptionOutput.model_validate_json(snapshot)
        except ValidationError:
            logger.warning("Discarding previous summary that failed validation")
            return cls.idle()
        return cls(status=PageStatus.SETTLED, result=ActionResult.success(summary))

    def snapshot(self) -> str:
        """The displayed summary as JSON, for the form to send back on the next submit."""
        if self.summary is None:
            return ""
        return self.summary.model_dump_json(by_alias=True, exclude_none=True)

    @property
    def pending(self) -> bool:
        return self.status is PageStatus.PENDING

    @property
    def summary(self) -> Optional[SummarizeJobDescriptionOutput]:
        return self.result.summary

    def submit(self) -> "PageState":
        """Start a submission. Only one may be in flight."""
        if self.pending:
            raise InvalidTransitionError("A submission is already in flight")
        return self.model_copy(update={"status": PageStatus.PENDING, "notice": None})

    def settle(self, envelope: ActionResult) -> "PageState":
        """Finish the in-flight submission with the handler's envelope.

        Errors become a notice and leave the displayed summary as it was.
        """
        if not self.pending:
            raise InvalidTransitionError(
                "Cannot settle without a pending submission",
                {"status": self.status.value},
            )
        if envelope.is_error:
            return self.model_copy(update={"status": PageStatus.SETTLED, "notice": envelope.error})
        return PageState(status=PageStatus.SETTLED, result=envelope)

    def consume_notice(self) -> tuple[Optional[str], "PageState"]:
        """Hand out the notice once; the returned state no longer carries it."""
        return self.notice, self.model_copy(update={"notice": None})
