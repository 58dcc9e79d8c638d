from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from paraphraser.config import settings
from paraphraser.services.action_service import FORM_FIELD, process_job_description
from paraphraser.ui.page_state import PageState
from paraphraser.utils.formatting import format_summary_to_text

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


async def _run_submission(job_description: str, previous_summary: str) -> tuple[str | None, PageState]:
    """
    One submit → settle cycle starting from what the page currently shows.
    Returns the one-shot notice and the settled state.
    """
    state = PageState.restore(previous_summary).submit()
    envelope = await process_job_description(state.result, {FORM_FIELD: job_description})
    return state.settle(envelope).consume_notice()


def _copy_text(state: PageState) -> str | None:
    return format_summary_to_text(state.summary) if state.summary else None


def _render_page(request: Request, state: PageState, notice: str | None, job_description: str):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "state": state,
            "notice": notice,
            "copy_text": _copy_text(state),
            "job_description": job_description,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def paraphraser_page(request: Request):
    return _render_page(request, PageState.idle(), None, "")


@router.post("/", response_class=HTMLResponse)
async def paraphraser_submit(
    request: Request,
    job_description: str = Form("", alias="jobDescription"),
    previous_summary: str = Form("", alias="previousSummary"),
):
    """Full-page submit for browsers without JavaScript."""
    notice, state = await _run_submission(job_description, previous_summary)
    return _render_page(request, state, notice, job_description)


@router.post("/paraphrase")
async def paraphraser_fragment(
    job_description: str = Form("", alias="jobDescription"),
    previous_summary: str = Form("", alias="previousSummary"),
):
    """
    Submit used by the page script: returns either {"error"} or the rendered
    result card, the copy text and the snapshot for the next submit.
    On error the page keeps what it shows.
    """
    notice, state = await _run_submission(job_description, previous_summary)
    if notice:
        return JSONResponse({"error": notice})
    html = templates.get_template("_result.html").render(state=state)
    return JSONResponse({"html": html, "text": _copy_text(state), "snapshot": state.snapshot()})
