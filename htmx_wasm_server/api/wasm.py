"""Receiver for results computed by the browser-side WASM module."""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..schemas.wasm import WasmResultAck, WasmResultError, WasmResultPayload
from ..services.wasm_report import build_ack
from .deps import RequestBodyError, get_body_mapping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wasm"])

INVALID_BODY = "Invalid request body"


async def invalid_body_handler(request: Request, exc: RequestBodyError) -> JSONResponse:
    """Answer undecodable bodies with the JSON error shape clients expect."""

    logger.warning("Rejected %s %s body: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=WasmResultError(error=INVALID_BODY).model_dump(),
    )


@router.post(
    "/wasm-result",
    response_model=WasmResultAck,
    responses={status.HTTP_400_BAD_REQUEST: {"model": WasmResultError}},
    summary="Report a WASM calculation result",
)
async def receive_wasm_result(body: Dict[str, Any] = Depends(get_body_mapping)) -> WasmResultAck:
    """Log the reported calculation and confirm receipt with a timestamp."""

    payload = WasmResultPayload.model_validate(body)

    logger.info(
        "Received WASM calculation result: result=%r num1=%r num2=%r",
        payload.result,
        payload.num1,
        payload.num2,
    )
    return build_ack(payload)
