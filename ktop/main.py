"""Command-line entry point for ktop."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from ktop import __version__
from ktop.constants.values import EXPORT_CHOICES
from ktop.controllers.cluster import ClusterController, KubectlError
from ktop.controllers.metrics import CollectionError, MetricsCollector
from ktop.models.core.cluster_metrics import ClusterIdentity
from ktop.models.state.app_settings import AppSettings, ConfigLoadError, ConfigManager
from ktop.utils.export import render_export
from ktop.utils.formatting import parse_duration

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ktop",
        description="Terminal dashboard for live Kubernetes node and pod resource usage.",
    )
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file")
    parser.add_argument("--context", help="Kubernetes context to use")
    parser.add_argument(
        "--refresh-interval",
        type=_duration,
        help="Collection interval, e.g. 2s or 500ms (default: 2s)",
    )
    parser.add_argument(
        "--timeout",
        type=_duration,
        help="Time budget for one collection cycle (default: 10s)",
    )
    parser.add_argument("--top-pods", type=int, help="Number of pods to show (default: 30)")
    parser.add_argument(
        "--all-namespaces",
        action="store_true",
        help="Include system namespaces in the pods table",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML settings file")
    parser.add_argument(
        "--show",
        choices=EXPORT_CHOICES,
        help="Print one JSON document and exit instead of starting the dashboard",
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--version", action="version", version=f"ktop {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Settings file values with command-line flags applied on top.

    Raises:
        ConfigLoadError: The settings file is invalid.
        ValidationError: A flag value is out of bounds.
    """
    settings = ConfigManager.load(args.config)
    return settings.with_overrides(
        kubeconfig_path=args.kubeconfig,
        context=args.context,
        refresh_interval=args.refresh_interval,
        timeout=args.timeout,
        top_pods=args.top_pods,
        all_namespaces=True if args.all_namespaces else None,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def configure_logging(settings: AppSettings, export_mode: bool) -> None:
    """Route log records away from the terminal the dashboard draws on."""
    handler: logging.Handler
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    elif export_mode:
        handler = logging.StreamHandler(sys.stderr)
    else:
        from textual.logging import TextualHandler

        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logging.basicConfig(level=settings.log_level, handlers=[handler], force=True)


def build_controller(settings: AppSettings) -> ClusterController:
    # A merged $KUBECONFIG list is left for kubectl to read from the environment
    kubeconfig = settings.kubeconfig_path
    if os.pathsep in kubeconfig:
        kubeconfig = ""
    return ClusterController(
        kubeconfig=kubeconfig or None,
        context=settings.context or None,
        request_timeout=settings.timeout,
    )


async def connect(controller: ClusterController) -> ClusterIdentity:
    """Resolve the cluster identity and probe the metrics API.

    Raises:
        KubectlError: The kubeconfig or cluster cannot be reached.
    """
    identity = await controller.resolve_cluster_identity()
    try:
        await controller.check_metrics_api()
    except (KubectlError, asyncio.TimeoutError) as e:
        logger.warning("Metrics API check failed: %s", e)
        print(f"Warning: metrics API not available: {e}", file=sys.stderr)
        print("Make sure metrics-server is installed in your cluster.", file=sys.stderr)
        print("Continuing anyway; usage will show as zero...", file=sys.stderr)
    return identity


async def export_once(collector: MetricsCollector, resource: str) -> int:
    """Collect one snapshot and print it as JSON."""
    try:
        metrics = await collector.collect()
    except CollectionError as e:
        logger.error("Collection failed: %s", e)
        print(f"Error collecting metrics: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(render_export(metrics, resource))
    sys.stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except (ConfigLoadError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    export_mode = args.show is not None
    configure_logging(settings, export_mode)

    controller = build_controller(settings)
    try:
        identity = asyncio.run(connect(controller))
    except KubectlError as e:
        logger.error("Failed to connect to cluster: %s", e)
        print(f"Error connecting to cluster: {e}", file=sys.stderr)
        print("\nMake sure you have:", file=sys.stderr)
        print("  1. A valid kubeconfig file (~/.kube/config or $KUBECONFIG)", file=sys.stderr)
        print("  2. Access to a Kubernetes cluster", file=sys.stderr)
        print("  3. kubectl installed and configured", file=sys.stderr)
        return 1

    collector = MetricsCollector(controller, cluster=identity, timeout=settings.timeout)

    if export_mode:
        return asyncio.run(export_once(collector, args.show))

    from ktop.app import KtopApp

    try:
        KtopApp(collector, settings).run()
    except Exception:
        logger.exception("Application error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
