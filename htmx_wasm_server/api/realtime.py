"""WebSocket endpoint relaying realtime messages between connected pages."""
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from ..schemas.realtime import SystemMessage
from ..services.broadcast_hub import BroadcastHub
from .deps import get_broadcast_hub

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


async def _relay_incoming(websocket: WebSocket, hub: BroadcastHub, client_id: str) -> None:
    while True:
        frame = await websocket.receive()
        if frame["type"] == "websocket.disconnect":
            raise WebSocketDisconnect(frame.get("code", 1000))

        text = frame.get("text")
        if text is None:
            logger.debug("Ignoring non-text frame from %s", client_id)
            continue

        logger.debug("Received from %s: %s", client_id, text)
        hub.broadcast(hub.parse_incoming(client_id, text))


async def _drain_outgoing(websocket: WebSocket, queue: asyncio.Queue) -> None:
    while True:
        message = await queue.get()
        await websocket.send_text(message.model_dump_json())


@router.websocket("/ws")
async def realtime(websocket: WebSocket, hub: BroadcastHub = Depends(get_broadcast_hub)) -> None:
    """Join the broadcast hub until either direction of the socket fails."""

    await websocket.accept()
    peer = f"{websocket.client.host}:{websocket.client.port}" if websocket.client else "anonymous"
    client_id, queue = hub.connect(peer)

    try:
        welcome = SystemMessage(message=f"🦀 Welcome {client_id}! WebSocket connected")
        await websocket.send_text(welcome.model_dump_json())

        incoming = asyncio.create_task(_relay_incoming(websocket, hub, client_id))
        outgoing = asyncio.create_task(_drain_outgoing(websocket, queue))
        done, pending = await asyncio.wait({incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                logger.error("WebSocket error for %s: %s", client_id, exc)
    finally:
        hub.disconnect(client_id)
