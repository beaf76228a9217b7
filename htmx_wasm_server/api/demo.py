"""HTMX endpoints returning HTML fragments."""
from typing import Any, Dict
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ..services.fragments import echo_fragment, time_fragment
from ..services.wasm_report import format_js_value
from .deps import get_body_mapping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["htmx"])

ECHO_FIELD = "echo-input"


@router.get(
    "/time",
    response_class=HTMLResponse,
    summary="Current server time",
    description="HTML fragment with the server's local time, swapped in by an HTMX GET",
)
async def server_time() -> str:
    return time_fragment()


@router.post(
    "/echo",
    response_class=HTMLResponse,
    summary="Echo submitted text",
    description="HTML fragment echoing the `echo-input` field of a form or JSON body",
)
async def echo(body: Dict[str, Any] = Depends(get_body_mapping)) -> str:
    """Reflect the submitted text back into the page.

    A missing or empty field still answers 200, with an error-styled fragment.
    """

    echo_input = body.get(ECHO_FIELD)
    if not echo_input:
        logger.debug("Echo request without text")
        return echo_fragment(None)

    if not isinstance(echo_input, str):
        echo_input = format_js_value(echo_input)
    return echo_fragment(echo_input)
