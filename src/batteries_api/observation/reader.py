"""Read node, namespace, pod and service counts from a Kubernetes cluster."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Any, Callable

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from batteries_api.observation.models import (
    ClusterReading,
    NamespaceCounts,
    NodeSummary,
    ServiceRef,
)

logger = logging.getLogger(__name__)

# Seconds before a single list call is abandoned
DEFAULT_REQUEST_TIMEOUT = 10.0


def load_cluster_config(kubeconfig_path: str | None = None, context: str | None = None) -> client.ApiClient:
    """Load in-cluster credentials, else kubeconfig, and return an API client.

    Raises ``config.ConfigException`` (or ``OSError`` for an unreadable
    kubeconfig) when neither source yields usable credentials.
    """
    try:
        config.load_incluster_config()
        logger.info("Using in-cluster service account credentials")
        return client.ApiClient(client.Configuration.get_default_copy())
    except config.ConfigException:
        pass
    kwargs: dict[str, Any] = {}
    if kubeconfig_path:
        kwargs["config_file"] = str(kubeconfig_path)
    if context:
        kwargs["context"] = context
    config.load_kube_config(**kwargs)
    logger.info("Using kubeconfig credentials (%s)", kubeconfig_path or "default location")
    return client.ApiClient(client.Configuration.get_default_copy())


def _node_ready(node: Any) -> bool:
    """Return True if the node reports a Ready condition with status True."""
    for c in getattr(node.status, "conditions", None) or []:
        if c.type == "Ready" and c.status == "True":
            return True
    return False


class ClusterReader:
    """Best-effort, read-only queries against the cluster API.

    A single reader is shared by every request and WebSocket connection.
    It only issues list calls, so concurrent use from worker threads is safe.
    """

    def __init__(
        self,
        api_client: client.ApiClient,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._core = client.CoreV1Api(api_client)
        self.request_timeout = request_timeout
        self.failures: Counter[str] = Counter()
        self._failures_lock = threading.Lock()

    @classmethod
    def from_kubeconfig(
        cls,
        kubeconfig: str | None = None,
        context: str | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> "ClusterReader":
        return cls(load_cluster_config(kubeconfig, context), request_timeout=request_timeout)

    def _best_effort(self, label: str, call: Callable[..., Any], **kwargs: Any) -> list[Any]:
        """Run a list call; on failure log, count, and return no items."""
        try:
            result = call(_request_timeout=self.request_timeout, **kwargs)
        except ApiException as e:
            self._record_failure(label)
            logger.warning("Failed to list %s: %s %s", label, e.status, e.reason)
            return []
        except Exception as e:
            self._record_failure(label)
            logger.warning("Failed to list %s: %s", label, e)
            return []
        return list(result.items or [])

    def _record_failure(self, label: str) -> None:
        with self._failures_lock:
            self.failures[label] += 1

    def read_cluster(self) -> ClusterReading:
        """Read nodes, namespaces, and per-namespace pod and service counts."""
        nodes = [
            NodeSummary(name=n.metadata.name, ready=_node_ready(n))
            for n in self._best_effort("nodes", self._core.list_node)
        ]

        namespaces: list[NamespaceCounts] = []
        for ns in self._best_effort("namespaces", self._core.list_namespace):
            name = ns.metadata.name
            pods = self._best_effort(f"pods/{name}", self._core.list_namespaced_pod, namespace=name)
            services = self._best_effort(
                f"services/{name}", self._core.list_namespaced_service, namespace=name
            )
            namespaces.append(
                NamespaceCounts(name=name, pod_count=len(pods), service_count=len(services))
            )

        return ClusterReading(nodes=nodes, namespaces=namespaces)

    def read_services(self) -> list[ServiceRef]:
        """List services across all namespaces, in API order."""
        return [
            ServiceRef(namespace=s.metadata.namespace or "default", name=s.metadata.name)
            for s in self._best_effort("services", self._core.list_service_for_all_namespaces)
        ]

    @property
    def failure_count(self) -> int:
        return sum(self.failures.values())
