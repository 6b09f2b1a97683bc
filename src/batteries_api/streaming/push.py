"""Per-connection loop that recomposes and pushes a snapshot on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Protocol

import anyio

from batteries_api.composition.models import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_PUSH_INTERVAL = 5.0


class Connection(Protocol):
    """The subset of a WebSocket the loop needs."""

    async def send_text(self, data: str) -> None: ...

    async def close(self) -> None: ...


class PushState(str, Enum):
    """Lifecycle of a push loop."""

    CONNECTED = "connected"
    WAITING = "waiting"
    COMPOSING = "composing"
    SENDING = "sending"
    CLOSED = "closed"


class PushLoop:
    """
    Single-flight timer loop: wait, compose, send, repeat.

    Ends in CLOSED on the first send failure or on cancellation, and always
    closes the connection on the way out. Ticks that fall inside a slow cycle
    are dropped rather than fired back to back.
    """

    def __init__(
        self,
        connection: Connection,
        compose: Callable[[], Awaitable[Snapshot]],
        interval: float = DEFAULT_PUSH_INTERVAL,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.connection = connection
        self._compose = compose
        self.interval = interval
        self.state = PushState.CONNECTED
        self.sent = 0
        self.missed_ticks = 0

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval
        try:
            while True:
                self.state = PushState.WAITING
                await asyncio.sleep(max(0.0, next_tick - loop.time()))

                self.state = PushState.COMPOSING
                try:
                    snapshot = await self._compose()
                    payload = snapshot.model_dump_json(by_alias=True)
                except Exception:
                    logger.exception("Failed to compose snapshot; skipping this tick")
                    payload = None

                if payload is not None:
                    self.state = PushState.SENDING
                    try:
                        await self.connection.send_text(payload)
                    except Exception as e:
                        logger.warning("WebSocket send failed, closing connection: %s", e)
                        break
                    self.sent += 1

                next_tick = self._advance(next_tick, loop.time())
        finally:
            self.state = PushState.CLOSED
            await self._release()

    def _advance(self, next_tick: float, now: float) -> float:
        """Return the next deadline, skipping intervals that already elapsed."""
        next_tick += self.interval
        if next_tick <= now:
            missed = int((now - next_tick) // self.interval) + 1
            self.missed_ticks += missed
            next_tick += missed * self.interval
            logger.debug("Dropped %d push tick(s) after a slow cycle", missed)
        return next_tick

    async def _release(self) -> None:
        # Must complete even when the surrounding scope is cancelled
        with anyio.CancelScope(shield=True):
            try:
                await self.connection.close()
            except (RuntimeError, OSError) as e:
                logger.debug("Connection already closed: %s", e)
