"""WebSocket endpoint pushing a fresh dashboard snapshot on a timer."""

from __future__ import annotations

import logging
import random

import anyio
from fastapi import APIRouter, Depends, WebSocket
from starlette.concurrency import run_in_threadpool
from starlette.websockets import WebSocketState

from batteries_api.api.dependencies import get_clock, get_reader, get_rng, get_settings_dep
from batteries_api.composition.composer import Clock, compose_snapshot
from batteries_api.composition.models import Snapshot
from batteries_api.config import Settings
from batteries_api.observation.reader import ClusterReader
from batteries_api.streaming.push import PushLoop

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stream"])


class WebSocketConnection:
    """Adapts a Starlette WebSocket to the push loop's Connection."""

    def __init__(self, websocket: WebSocket) -> None:
        self._ws = websocket

    async def send_text(self, data: str) -> None:
        await self._ws.send_text(data)

    async def close(self) -> None:
        # Nothing to close once either side has gone away
        if (
            self._ws.application_state == WebSocketState.CONNECTED
            and self._ws.client_state == WebSocketState.CONNECTED
        ):
            await self._ws.close()


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    """Discard client frames until the client disconnects."""
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/ws")
async def push_snapshots(
    websocket: WebSocket,
    reader: ClusterReader = Depends(get_reader),
    settings: Settings = Depends(get_settings_dep),
    clock: Clock = Depends(get_clock),
    rng: random.Random = Depends(get_rng),
) -> None:
    """
    Push a Snapshot every ``push_interval_seconds`` until either side closes.

    One task runs the push loop, a second watches for the client going away;
    whichever ends first cancels the other.
    """
    await websocket.accept()
    logger.info("WebSocket client connected: %s", websocket.client)

    async def compose() -> Snapshot:
        reading = await run_in_threadpool(reader.read_cluster)
        return compose_snapshot(reading, clock=clock, rng=rng)

    push = PushLoop(
        WebSocketConnection(websocket),
        compose,
        interval=settings.push_interval_seconds,
    )
    try:
        async with anyio.create_task_group() as tg:

            async def run_push() -> None:
                await push.run()
                tg.cancel_scope.cancel()

            async def watch() -> None:
                await _wait_for_disconnect(websocket)
                tg.cancel_scope.cancel()

            tg.start_soon(run_push)
            tg.start_soon(watch)
    finally:
        logger.info(
            "WebSocket client %s closed after %d snapshot(s)",
            websocket.client,
            push.sent,
        )
