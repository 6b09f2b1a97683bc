"""Compose dashboard snapshots from a cluster reading plus simulated filler."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable, Sequence

from batteries_api.composition import samples
from batteries_api.composition.models import (
    ActivityEntry,
    Alert,
    ClusterUsage,
    DatabaseMetrics,
    DatabasesSummary,
    InstallationsSummary,
    NamespaceRecord,
    ProjectStatus,
    SecurityPosture,
    ServiceMetrics,
    ServicesSummary,
    Snapshot,
)
from batteries_api.observation.models import ClusterReading, ServiceRef

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _jitter(rng: random.Random, base: float, spread: float) -> float:
    """base + uniform[0, spread)."""
    return base + rng.random() * spread


def _jitter_int(rng: random.Random, base: int, spread: int) -> int:
    """base + integer uniform[0, spread); spread 0 means fixed."""
    return base + (rng.randrange(spread) if spread > 0 else 0)


def _namespace_record(name: str, pod_count: int, service_count: int, rng: random.Random) -> NamespaceRecord:
    return NamespaceRecord(
        name=name,
        cpu_usage=_jitter(rng, 0.0, 100.0),
        memory_usage=_jitter(rng, 0.0, 100.0),
        pod_count=pod_count,
        service_count=service_count,
    )


def compose_snapshot(
    reading: ClusterReading,
    *,
    clock: Clock = utc_now,
    rng: random.Random | None = None,
) -> Snapshot:
    """
    Merge a cluster reading with filler fields into one Snapshot.

    Node and namespace counts come from the reading; usage percentages,
    alerts and activity are placeholders. Pure apart from calling ``clock``
    once and drawing from ``rng``.
    """
    rng = rng or random.Random()
    now = clock()

    cpu_base, cpu_spread = samples.CLUSTER_CPU_USAGE
    mem_base, mem_spread = samples.CLUSTER_MEMORY_USAGE
    cluster = ClusterUsage(
        cpu_usage=_jitter(rng, cpu_base, cpu_spread),
        memory_usage=_jitter(rng, mem_base, mem_spread),
        nodes=reading.node_count,
        nodes_ready=reading.ready_node_count,
    )

    namespaces = [
        _namespace_record(ns.name, ns.pod_count, ns.service_count, rng)
        for ns in reading.namespaces
    ]

    alerts = [
        Alert(
            type=a["type"],
            severity=a["severity"],
            message=a["message"],
            source=a["source"],
            timestamp=now - a["age"],
        )
        for a in samples.ALERTS
    ]
    activity = [
        ActivityEntry(type=a["type"], message=a["message"], timestamp=now - a["age"])
        for a in samples.RECENT_ACTIVITY
    ]

    return Snapshot(
        installations=InstallationsSummary(**samples.INSTALLATIONS),
        services=ServicesSummary(**samples.SERVICES_SUMMARY),
        databases=DatabasesSummary(**samples.DATABASES_SUMMARY),
        cluster=cluster,
        security=SecurityPosture(**samples.SECURITY),
        projects=[ProjectStatus(**p) for p in samples.PROJECTS],
        namespaces=namespaces,
        alerts=alerts,
        recent_activity=activity,
    )


def compose_services(
    services: Sequence[ServiceRef],
    *,
    rng: random.Random | None = None,
    limit: int = samples.DEFAULT_SERVICE_LIMIT,
) -> list[ServiceMetrics]:
    """Fixed sample services followed by up to ``limit`` (never more than 5) live services."""
    rng = rng or random.Random()
    result = [ServiceMetrics(**s) for s in samples.SAMPLE_SERVICES]
    lat_min, lat_spread = samples.LIVE_SERVICE_LATENCY
    rps_min, rps_spread = samples.LIVE_SERVICE_RPS
    limit = max(0, min(limit, samples.DEFAULT_SERVICE_LIMIT))
    for svc in list(services)[:limit]:
        result.append(
            ServiceMetrics(
                name=svc.qualified_name,
                error_rate=_jitter(rng, 0.0, samples.LIVE_SERVICE_ERROR_RATE_MAX),
                p95_latency=_jitter_int(rng, lat_min, lat_spread),
                requests_per_sec=_jitter_int(rng, rps_min, rps_spread),
                status="healthy",
            )
        )
    return result


def compose_databases(*, rng: random.Random | None = None) -> list[DatabaseMetrics]:
    """Simulated database list; no cluster data is involved."""
    rng = rng or random.Random()
    result = []
    for db in samples.SAMPLE_DATABASES:
        conn_base, conn_spread = db["connections"]
        result.append(
            DatabaseMetrics(
                name=db["name"],
                type=db["type"],
                status=db["status"],
                cpu_usage=_jitter(rng, *db["cpu_usage"]),
                memory_usage=_jitter(rng, *db["memory_usage"]),
                connections=_jitter_int(rng, conn_base, conn_spread),
                max_connections=db["max_connections"],
                cache_hit_rate=db["cache_hit_rate"],
                replication_lag=db["replication_lag"],
                last_backup=db["last_backup"],
            )
        )
    return result
