"""Placeholder values for dashboard fields with no metrics backend behind them."""

from datetime import timedelta

INSTALLATIONS = {"total": 3, "healthy": 2, "degraded": 1, "offline": 0}

SERVICES_SUMMARY = {
    "total": 47,
    "uptime": 99.2,
    "error_rate": 0.02,
    "p95_latency": 145,
    "deployments": 3,
}

DATABASES_SUMMARY = {
    "total": 8,
    "all_synced": True,
    "backup_status": "Completed",
    "replication_lag": 0,
    "next_backup_hours": 2,
}

SECURITY = {
    "status": "OK",
    "certificates_ok": True,
    "sso_active": True,
    "cert_expire_days": 82,
}

# (base, spread): value = base + uniform[0, spread)
CLUSTER_CPU_USAGE = (42.0, 10.0)
CLUSTER_MEMORY_USAGE = (58.0, 10.0)

PROJECTS = [
    {"name": "batteries-core", "version": "v2.1.0", "status": "Running", "health": "Healthy", "deployment": "Stable"},
    {"name": "ml-workspace", "version": "v1.0.0", "status": "Deploying", "health": "Degraded", "deployment": "In Progress"},
    {"name": "api-gateway", "version": "v1.8.3", "status": "Running", "health": "Healthy", "deployment": "Stable"},
]

# Timestamps are relative to composition time
ALERTS = [
    {
        "type": "warning",
        "severity": "medium",
        "message": "High Memory Usage",
        "source": "mongo-analytics",
        "age": timedelta(minutes=15),
    },
    {
        "type": "info",
        "severity": "low",
        "message": "Scheduled Maintenance",
        "source": "system",
        "age": timedelta(hours=2),
    },
]

RECENT_ACTIVITY = [
    {"type": "deployment", "message": "Deployment completed", "age": timedelta(minutes=5)},
    {"type": "scaling", "message": "Auto-scaling triggered", "age": timedelta(minutes=12)},
    {"type": "backup", "message": "Backup completed", "age": timedelta(hours=2)},
]

SAMPLE_SERVICES = [
    {"name": "auth-service", "error_rate": 0.8, "p95_latency": 234, "requests_per_sec": 1200, "status": "healthy"},
    {"name": "data-processor", "error_rate": 0.02, "p95_latency": 845, "requests_per_sec": 450, "status": "healthy"},
    {"name": "webhook-handler", "error_rate": 0.5, "p95_latency": 123, "requests_per_sec": 890, "status": "degraded"},
    {"name": "api-gateway", "error_rate": 0.01, "p95_latency": 89, "requests_per_sec": 3400, "status": "healthy"},
    {"name": "ml-inference", "error_rate": 0.03, "p95_latency": 567, "requests_per_sec": 230, "status": "healthy"},
]

# Live services appended after SAMPLE_SERVICES
DEFAULT_SERVICE_LIMIT = 5
LIVE_SERVICE_ERROR_RATE_MAX = 0.5
LIVE_SERVICE_LATENCY = (50, 500)  # (min, spread) in ms
LIVE_SERVICE_RPS = (100, 1000)

# Randomized fields are (base, spread); fixed ones are plain values
SAMPLE_DATABASES = [
    {
        "name": "postgres-main",
        "type": "PostgreSQL",
        "status": "Ready",
        "cpu_usage": (12.0, 5.0),
        "memory_usage": (45.0, 10.0),
        "connections": (24, 20),
        "max_connections": 100,
        "cache_hit_rate": 98.2,
        "replication_lag": 0,
        "last_backup": "2h ago",
    },
    {
        "name": "redis-cache",
        "type": "Redis",
        "status": "Ready",
        "cpu_usage": (8.0, 3.0),
        "memory_usage": (22.0, 10.0),
        "connections": (145, 50),
        "max_connections": 500,
        "cache_hit_rate": 99.1,
        "replication_lag": 0,
        "last_backup": "N/A",
    },
    {
        "name": "mongo-analytics",
        "type": "MongoDB",
        "status": "Degraded",
        "cpu_usage": (78.0, 10.0),
        "memory_usage": (82.0, 10.0),
        "connections": (89, 0),
        "max_connections": 100,
        "cache_hit_rate": 87.3,
        "replication_lag": 4200,
        "last_backup": "4h ago",
    },
]
