"""Wire models served to the dashboard (camelCase JSON keys)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Return the JSON-compatible dict sent to clients."""
        return self.model_dump(mode="json", by_alias=True)


class InstallationsSummary(WireModel):
    total: int
    healthy: int
    degraded: int
    offline: int


class ServicesSummary(WireModel):
    total: int
    uptime: float  # percent
    error_rate: float
    p95_latency: int  # ms
    deployments: int


class DatabasesSummary(WireModel):
    total: int
    all_synced: bool
    backup_status: str
    replication_lag: int
    next_backup_hours: int


class ClusterUsage(WireModel):
    """Cluster-wide usage; node counts are live, usage is simulated."""

    cpu_usage: float
    memory_usage: float
    nodes: int
    nodes_ready: int


class SecurityPosture(WireModel):
    status: str
    certificates_ok: bool
    sso_active: bool
    cert_expire_days: int


class ProjectStatus(WireModel):
    name: str
    version: str
    status: str
    health: str
    deployment: str


class NamespaceRecord(WireModel):
    """Per-namespace resources; counts are live, usage is simulated."""

    name: str
    cpu_usage: float
    memory_usage: float
    pod_count: int
    service_count: int


class Alert(WireModel):
    type: str  # warning | info | error
    severity: str  # low | medium | high
    message: str
    source: str
    timestamp: datetime


class ActivityEntry(WireModel):
    type: str
    message: str
    timestamp: datetime


class Snapshot(WireModel):
    """One complete dashboard snapshot, composed in a single pass."""

    installations: InstallationsSummary
    services: ServicesSummary
    databases: DatabasesSummary
    cluster: ClusterUsage
    security: SecurityPosture
    projects: list[ProjectStatus] = Field(default_factory=list)
    namespaces: list[NamespaceRecord] = Field(default_factory=list)
    alerts: list[Alert] = Field(default_factory=list)
    recent_activity: list[ActivityEntry] = Field(default_factory=list)


class ServiceMetrics(WireModel):
    """One row of /api/services."""

    name: str
    error_rate: float
    p95_latency: int
    requests_per_sec: int
    status: str


class DatabaseMetrics(WireModel):
    """One row of /api/databases (fully simulated)."""

    name: str
    type: str
    status: str
    cpu_usage: float
    memory_usage: float
    connections: int
    max_connections: int
    cache_hit_rate: float
    replication_lag: int
    last_backup: str
