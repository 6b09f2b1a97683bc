"""Request dependencies; tests override these via ``app.dependency_overrides``."""

from __future__ import annotations

import random

from starlette.requests import HTTPConnection

from batteries_api.composition.composer import Clock, utc_now
from batteries_api.config import Settings
from batteries_api.observation.reader import ClusterReader


def get_reader(conn: HTTPConnection) -> ClusterReader:
    """Shared cluster reader; works for both HTTP and WebSocket routes."""
    return conn.app.state.reader


def get_settings_dep(conn: HTTPConnection) -> Settings:
    return conn.app.state.settings


def get_clock() -> Clock:
    return utc_now


def get_rng() -> random.Random:
    """Fresh generator per connection; no random state is shared."""
    return random.Random()
