import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from supabase import SupabaseException, create_client

from application.exceptions import RepositoryError
from backend.core.chart_normalizer import ALL_METRICS
from backend.core.progress_service import ProgressReport, ProgressService
from backend.settings import Settings, get_settings
from backend.utils.rounding import round_half_up
from infrastructure import SupabasePerformanceMetricRepository, SupabaseWorkoutRepository

BAR_WIDTH = 30


def _build_service(settings: Settings) -> ProgressService:
    """Create a ProgressService backed by Supabase; raises if not configured."""
    if not settings.supabase_url or not settings.supabase_key:
        raise RuntimeError("Supabase credentials not configured (SUPABASE_URL / SUPABASE_*_KEY)")

    client = create_client(settings.supabase_url, settings.supabase_key)
    return ProgressService(
        SupabasePerformanceMetricRepository(client),
        SupabaseWorkoutRepository(client),
        recent_window_days=settings.recent_window_days,
    )


def format_report(report: ProgressReport, window_days: int) -> str:
    """Render a progress report as plain text."""
    if not report.has_data:
        return (
            f"Athlete {report.athlete_id}: no data available yet.\n"
            "Add workouts and performance metrics to see progress."
        )

    w = report.workouts
    m = report.metrics
    lines = [
        f"Athlete {report.athlete_id}",
        f"  Workouts:  {w.total_workouts} ({w.recent_count} in last {window_days} days)",
        f"  Minutes:   {w.total_minutes} ({w.hours_trained} hours trained)",
        f"  Average:   {w.avg_duration} minutes per workout",
        f"  Metrics:   {m.total_metrics} ({len(m.metric_types)} different types)",
    ]

    if report.trends:
        lines.append("")
        lines.append("Performance trends")
        for t in report.trends:
            change = f"{t.change_percent}%" if t.change_percent > 0 else "-"
            lines.append(f"  {t.metric_type:<12} {t.trend.value:<8} {change:>5}  {t.label}")

    if m.metric_types:
        lines.append("")
        lines.append(f"Chart ({report.selected_metric_type})")
        if not report.chart:
            lines.append("  No metrics available for the selected type")
        for bar in report.chart:
            filled = round_half_up(bar.height * BAR_WIDTH / 100)
            lines.append(
                f"  {bar.label:<7} {'#' * filled}{'.' * (BAR_WIDTH - filled)} "
                f"{bar.value:g} {bar.unit}".rstrip()
            )

    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="athlete-monitor",
        description="Athlete Monitor: progress reports and API server",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser("report", help="Print the progress report for an athlete")
    report_parser.add_argument("athlete_id", help="Athlete ID")
    report_parser.add_argument(
        "-m", "--metric-type",
        default=ALL_METRICS,
        help="Chart category filter (default: all)",
    )
    report_parser.add_argument("--json", action="store_true", help="Output JSON instead of text")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8001)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        uvicorn.run("backend.main:app", host=args.host, port=args.port, reload=args.reload)
        return 0

    settings = get_settings()
    try:
        service = _build_service(settings)
        report = asyncio.run(service.get_report(args.athlete_id, metric_type=args.metric_type))
    except RepositoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (RuntimeError, SupabaseException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = asdict(report)
        payload["has_data"] = report.has_data
        print(json.dumps(payload, indent=2, default=str))
    else:
        print(format_report(report, settings.recent_window_days))

    return 0


if __name__ == "__main__":
    sys.exit(main())
