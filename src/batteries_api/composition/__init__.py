"""Composition layer: turn cluster readings into dashboard payloads."""

from batteries_api.composition.composer import (
    compose_databases,
    compose_services,
    compose_snapshot,
    utc_now,
)
from batteries_api.composition.models import (
    ActivityEntry,
    Alert,
    ClusterUsage,
    DatabaseMetrics,
    NamespaceRecord,
    ServiceMetrics,
    Snapshot,
)

__all__ = [
    "ActivityEntry",
    "Alert",
    "ClusterUsage",
    "DatabaseMetrics",
    "NamespaceRecord",
    "ServiceMetrics",
    "Snapshot",
    "compose_databases",
    "compose_services",
    "compose_snapshot",
    "utc_now",
]
