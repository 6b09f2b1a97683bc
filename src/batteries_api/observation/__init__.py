"""Observation layer: read Kubernetes cluster counts for the dashboard."""

from batteries_api.observation.models import (
    ClusterReading,
    NamespaceCounts,
    NodeSummary,
    ServiceRef,
)
from batteries_api.observation.reader import ClusterReader, load_cluster_config

__all__ = [
    "ClusterReader",
    "ClusterReading",
    "NamespaceCounts",
    "NodeSummary",
    "ServiceRef",
    "load_cluster_config",
]
