"""
Dependency injection for FastAPI routes.
"""
import json
from typing import Any, Dict

from fastapi import Request, WebSocket

from ..core.config import Settings
from ..services.broadcast_hub import BroadcastHub

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class RequestBodyError(ValueError):
    """Raised when a request body cannot be decoded into a mapping."""


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""

    return request.app.state.settings


async def get_body_mapping(request: Request) -> Dict[str, Any]:
    """
    Decode the request body into a mapping, whichever encoding the client used.

    JSON bodies must hold an object; URL-encoded and multipart forms become a
    flat mapping of field name to value. Bodies of any other content type,
    and empty bodies, decode to an empty mapping.

    Raises:
        RequestBodyError: the body claims to be JSON but is not a JSON object
    """

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form.items())

    if content_type != "application/json" and not content_type.endswith("+json"):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise RequestBodyError(f"Malformed JSON body: {exc}") from exc

    if not isinstance(body, dict):
        raise RequestBodyError("Request body must be a JSON object")
    return body


def get_broadcast_hub(websocket: WebSocket) -> BroadcastHub:
    """
    Get the realtime hub shared by every WebSocket connection of this app.

    Returns:
        BroadcastHub created at application startup
    """

    return websocket.app.state.broadcast_hub
