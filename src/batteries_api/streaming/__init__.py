"""Streaming layer: periodic snapshot push over WebSocket."""

from batteries_api.streaming.push import Connection, PushLoop, PushState

__all__ = [
    "Connection",
    "PushLoop",
    "PushState",
]
