from __future__ import annotations

import asyncio
import json
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Deque, Dict, List

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder
from loguru import logger

from blogexpress.config import settings
from blogexpress.models.base import utcnow


@dataclass(frozen=True)
class BroadcastEvent:
    type: str
    data: Any
    timestamp: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "data": jsonable_encoder(self.data),
            "timestamp": self.timestamp.isoformat(),
        }


class Broadcaster:
    """
    Fans out change events (post_created, comment_deleted, ...).

    Every event is logged and kept in a bounded history. When enabled it is
    also pushed to in-process listeners and to connected WebSocket clients.
    Route handlers run in worker threads, so socket sends are scheduled on the
    loop that accepted the socket.
    """

    MAX_SUBSCRIBERS = 100
    SEND_TIMEOUT = 1.0

    def __init__(self, enabled: bool = True, history_size: int = 100) -> None:
        self.enabled = enabled
        self._history: Deque[BroadcastEvent] = deque(maxlen=history_size)
        self._listeners: List[Callable[[BroadcastEvent], None]] = []
        self._sockets: Dict[WebSocket, asyncio.AbstractEventLoop] = {}

    # ----- in-process listeners -----
    def add_listener(self, listener: Callable[[BroadcastEvent], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[BroadcastEvent], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ----- websocket subscribers -----
    def subscribe(self, ws: WebSocket) -> bool:
        if len(self._sockets) >= self.MAX_SUBSCRIBERS:
            return False
        self._sockets[ws] = asyncio.get_running_loop()
        return True

    def unsubscribe(self, ws: WebSocket) -> None:
        self._sockets.pop(ws, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._sockets)

    @property
    def history(self) -> List[BroadcastEvent]:
        return list(self._history)

    def clear(self) -> None:
        self._history.clear()

    def broadcast(self, event_type: str, data: Any) -> BroadcastEvent:
        event = BroadcastEvent(type=event_type, data=data)
        self._history.append(event)

        if not self.enabled:
            logger.info(f"[Broadcaster] Would broadcast: {event_type} with data: {json.dumps(event.to_dict()['data'])}")
            return event

        logger.info(f"[Broadcaster] {event_type} -> {len(self._listeners)} listener(s), {len(self._sockets)} socket(s)")
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.exception(f"[Broadcaster] listener failed on {event_type}: {e}")

        payload = event.to_dict()
        for ws, loop in list(self._sockets.items()):
            if loop.is_closed():
                self.unsubscribe(ws)
                continue
            asyncio.run_coroutine_threadsafe(self._send(ws, payload), loop)
        return event

    async def _send(self, ws: WebSocket, payload: Dict[str, Any]) -> None:
        try:
            await asyncio.wait_for(ws.send_json(payload), timeout=self.SEND_TIMEOUT)
        except Exception as e:
            # slow or dead consumer
            logger.warning(f"[Broadcaster] dropping websocket subscriber: {e!r}")
            self.unsubscribe(ws)


broadcaster = Broadcaster(
    enabled=settings.BROADCAST_ENABLED,
    history_size=settings.BROADCAST_HISTORY_SIZE,
)


def get_broadcaster() -> Broadcaster:
    return broadcaster
