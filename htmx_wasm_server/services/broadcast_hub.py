"""In-process fan-out of realtime messages to connected WebSocket clients."""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Tuple

from pydantic import ValidationError

from ..schemas.realtime import ChatMessage, RealtimeMessage, realtime_message_adapter

logger = logging.getLogger(__name__)


class BroadcastHub:
    """Keeps one bounded outbound queue per connected client.

    All access happens on the event loop, so the registry needs no locking.
    A client that falls behind loses messages once its queue is full; the
    broadcaster never waits on a slow consumer.
    """

    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._clients: Dict[str, asyncio.Queue] = {}

    @property
    def client_ids(self) -> List[str]:
        return list(self._clients)

    def connect(self, peer: str) -> Tuple[str, asyncio.Queue]:
        """Register a client and return its id along with its outbound queue."""

        client_id = peer
        suffix = 1
        while client_id in self._clients:
            suffix += 1
            client_id = f"{peer}#{suffix}"

        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)
        self._clients[client_id] = queue
        logger.info("Realtime client connected: %s (%d online)", client_id, len(self._clients))
        return client_id, queue

    def disconnect(self, client_id: str) -> None:
        if self._clients.pop(client_id, None) is not None:
            logger.info("Realtime client disconnected: %s (%d online)", client_id, len(self._clients))

    def broadcast(self, message: RealtimeMessage) -> int:
        """Queue ``message`` for every client. Returns how many clients accepted it."""

        delivered = 0
        for client_id, queue in self._clients.items():
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                logger.warning("Dropping %s message for slow client %s", message.type, client_id)
                continue
            delivered += 1
        return delivered

    @staticmethod
    def parse_incoming(client_id: str, text: str) -> RealtimeMessage:
        """Decode a client frame; anything that is not a known message becomes chat."""

        try:
            return realtime_message_adapter.validate_json(text)
        except ValidationError:
            return ChatMessage(user=client_id, message=text)
