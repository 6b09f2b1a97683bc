"""HTTP routes: health, dashboard snapshot, services and databases."""

from __future__ import annotations

import random

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from batteries_api.api.dependencies import get_clock, get_reader, get_rng, get_settings_dep
from batteries_api.composition.composer import (
    Clock,
    compose_databases,
    compose_services,
    compose_snapshot,
)
from batteries_api.composition.models import DatabaseMetrics, ServiceMetrics, Snapshot
from batteries_api.config import Settings
from batteries_api.observation.reader import ClusterReader

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health() -> dict[str, str]:
    """Liveness check; does not touch the cluster API."""
    return {"status": "healthy"}


@router.get("/dashboard", response_model=Snapshot)
async def dashboard(
    reader: ClusterReader = Depends(get_reader),
    clock: Clock = Depends(get_clock),
    rng: random.Random = Depends(get_rng),
) -> Snapshot:
    reading = await run_in_threadpool(reader.read_cluster)
    return compose_snapshot(reading, clock=clock, rng=rng)


@router.get("/services", response_model=list[ServiceMetrics])
async def services(
    reader: ClusterReader = Depends(get_reader),
    settings: Settings = Depends(get_settings_dep),
    rng: random.Random = Depends(get_rng),
) -> list[ServiceMetrics]:
    live = await run_in_threadpool(reader.read_services)
    return compose_services(live, rng=rng, limit=settings.service_sample_limit)


@router.get("/databases", response_model=list[DatabaseMetrics])
async def databases(rng: random.Random = Depends(get_rng)) -> list[DatabaseMetrics]:
    return compose_databases(rng=rng)
