"""CLI entrypoint for the Batteries API server."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from kubernetes.config import ConfigException
from rich.logging import RichHandler

from batteries_api import __version__
from batteries_api.api import create_app
from batteries_api.config import get_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Batteries API: serve Kubernetes cluster status to the dashboard.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Interface to listen on (default: from env or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Port to listen on (default: PORT env or 8080)",
    )
    parser.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="Path to kubeconfig (default: KUBECONFIG env or ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubernetes context to use",
    )
    parser.add_argument(
        "--push-interval",
        type=float,
        default=None,
        help="Seconds between snapshots pushed over /ws (default: 5)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the batteries-api CLI."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    logger = logging.getLogger("batteries_api")

    try:
        settings = get_settings()
        if not args.verbose:
            logging.getLogger().setLevel(settings.log_level.upper())

        if args.host:
            settings.host = args.host
        if args.port:
            settings.port = args.port
        if args.kubeconfig:
            settings.kubeconfig = args.kubeconfig
        if args.context:
            settings.context = args.context
        if args.push_interval:
            settings.push_interval_seconds = args.push_interval

        app = create_app(settings)
    except (ConfigException, OSError, ValueError) as e:
        # ValueError covers pydantic ValidationError and unknown log levels
        logger.exception("Failed to start")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info("Starting Batteries API server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=args.verbose,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
