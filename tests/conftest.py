"""Shared fixtures: fake Kubernetes objects and a stub cluster API."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from kubernetes.client.rest import ApiException

from batteries_api.observation.reader import ClusterReader

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def make_node(name: str, *conditions: tuple[str, str]) -> SimpleNamespace:
    return SimpleNamespace(
        metadata=SimpleNamespace(name=name),
        status=SimpleNamespace(
            conditions=[SimpleNamespace(type=t, status=s) for t, s in conditions] or None
        ),
    )


def make_named(name: str, namespace: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(metadata=SimpleNamespace(name=name, namespace=namespace))


def item_list(items: list) -> SimpleNamespace:
    return SimpleNamespace(items=items)


class FakeCoreV1Api:
    """
    Stand-in for ``kubernetes.client.CoreV1Api``.

    ``fail`` maps a method name (or ``"<method>:<namespace>"``) to the
    exception that call should raise.
    """

    def __init__(
        self,
        nodes: list | None = None,
        namespaces: dict[str, tuple[int, int]] | None = None,
        services: list | None = None,
        fail: dict[str, Exception] | None = None,
    ) -> None:
        self.nodes = nodes or []
        self.namespaces = namespaces or {}
        self.services = services or []
        self.fail = fail or {}
        self.calls: list[tuple[str, dict]] = []

    def _maybe_fail(self, method: str, namespace: str | None = None) -> None:
        for key in (method, f"{method}:{namespace}"):
            if key in self.fail:
                raise self.fail[key]

    def list_node(self, **kwargs):
        self.calls.append(("list_node", kwargs))
        self._maybe_fail("list_node")
        return item_list(self.nodes)

    def list_namespace(self, **kwargs):
        self.calls.append(("list_namespace", kwargs))
        self._maybe_fail("list_namespace")
        return item_list([make_named(n) for n in self.namespaces])

    def list_namespaced_pod(self, namespace: str, **kwargs):
        self.calls.append(("list_namespaced_pod", {"namespace": namespace, **kwargs}))
        self._maybe_fail("list_namespaced_pod", namespace)
        pods, _ = self.namespaces[namespace]
        return item_list([make_named(f"pod-{i}", namespace) for i in range(pods)])

    def list_namespaced_service(self, namespace: str, **kwargs):
        self.calls.append(("list_namespaced_service", {"namespace": namespace, **kwargs}))
        self._maybe_fail("list_namespaced_service", namespace)
        _, services = self.namespaces[namespace]
        return item_list([make_named(f"svc-{i}", namespace) for i in range(services)])

    def list_service_for_all_namespaces(self, **kwargs):
        self.calls.append(("list_service_for_all_namespaces", kwargs))
        self._maybe_fail("list_service_for_all_namespaces")
        return item_list(self.services)


def make_reader(core: FakeCoreV1Api, request_timeout: float = 10.0) -> ClusterReader:
    reader = ClusterReader(MagicMock(), request_timeout=request_timeout)
    reader._core = core
    return reader


def api_error(status: int = 403, reason: str = "Forbidden") -> ApiException:
    return ApiException(status=status, reason=reason)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def scenario_core() -> FakeCoreV1Api:
    """2 nodes (1 ready) and namespace "default" with 3 pods / 1 service."""
    return FakeCoreV1Api(
        nodes=[
            make_node("node-a", ("MemoryPressure", "False"), ("Ready", "True")),
            make_node("node-b", ("Ready", "False")),
        ],
        namespaces={"default": (3, 1)},
        services=[make_named("kubernetes", "default")],
    )
