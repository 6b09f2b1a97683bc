"""Structured models for the Kubernetes state read on each cycle."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NodeSummary(BaseModel):
    """Node name and readiness."""

    name: str
    ready: bool = False


class NamespaceCounts(BaseModel):
    """Live object counts for one namespace."""

    name: str
    pod_count: int = 0
    service_count: int = 0


class ServiceRef(BaseModel):
    """A service discovered in the cluster."""

    namespace: str
    name: str

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}/{self.name}"


class ClusterReading(BaseModel):
    """Whatever subset of cluster state could be read in one pass.

    Queries that failed contribute empty lists, so a reading is always
    complete in shape even when the API server is unreachable.
    """

    nodes: list[NodeSummary] = Field(default_factory=list)
    namespaces: list[NamespaceCounts] = Field(
        default_factory=list,
        description="Namespaces in API return order",
    )

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def ready_node_count(self) -> int:
        return sum(1 for n in self.nodes if n.ready)
