"""
Progress Service for the athlete progress view.

This module ties the data fetch to the progress transforms:
- Concurrent fetch of an athlete's metrics and workouts into one snapshot
- Stale-refresh protection when the selected athlete changes mid-fetch
- Report assembly (workout summary, metrics overview, chart, trends)

The transforms are pure functions of the snapshot; running them twice on
the same snapshot gives the same report.
"""
from typing import Optional, List, Tuple
from dataclasses import dataclass, field
from datetime import datetime
from concurrent.futures import Executor
from functools import partial
import asyncio
import logging

from application.ports import PerformanceMetricRepository, WorkoutRepository
from backend.core.chart_normalizer import ALL_METRICS, ChartBar, build_chart
from backend.core.progress_summary import (
    RECENT_WINDOW_DAYS,
    MetricsOverview,
    WorkoutSummary,
    summarize_metrics,
    summarize_workouts,
)
from backend.core.trend_analyzer import MetricTrend, metric_trends
from domain.models import PerformanceMetric, Workout, parse_records

logger = logging.getLogger(__name__)


# =============================================================================
# Snapshot and State
# =============================================================================


@dataclass(frozen=True)
class ProgressSnapshot:
    """Immutable copy of one athlete's metrics and workouts, oldest first."""
    athlete_id: str
    metrics: Tuple[PerformanceMetric, ...]
    workouts: Tuple[Workout, ...]
    fetched_at: datetime


class ProgressState:
    """
    Current progress snapshot for a viewer plus a refresh generation counter.

    Every refresh takes a new generation before it starts fetching. A result
    is only committed if its generation is still the latest, so a slow
    response for a previously selected athlete cannot overwrite a newer one.
    """

    def __init__(self):
        self._generation = 0
        self.snapshot: Optional[ProgressSnapshot] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def athlete_id(self) -> Optional[str]:
        return self.snapshot.athlete_id if self.snapshot else None

    def begin(self) -> int:
        """Start a refresh and return its generation."""
        self._generation += 1
        return self._generation

    def commit(self, generation: int, snapshot: ProgressSnapshot) -> bool:
        """
        Replace the snapshot if the refresh is still current.

        Returns:
            True if committed, False if a newer refresh superseded this one
        """
        if generation != self._generation:
            logger.info(
                f"Discarding stale progress snapshot for athlete {snapshot.athlete_id} "
                f"(generation {generation}, current {self._generation})"
            )
            return False
        self.snapshot = snapshot
        return True


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass(frozen=True)
class ProgressReport:
    """Everything the progress view shows for one athlete."""
    athlete_id: str
    selected_metric_type: str
    workouts: WorkoutSummary
    metrics: MetricsOverview
    chart: List[ChartBar] = field(default_factory=list)
    trends: List[MetricTrend] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return self.metrics.total_metrics > 0 or self.workouts.total_workouts > 0


# =============================================================================
# Progress Service
# =============================================================================


class ProgressService:
    """
    Service for the athlete progress view.

    Repositories are synchronous (the Supabase client blocks), so reads run
    in an executor and are awaited together.

    Two entry points:
    - get_report(): one fetch, one report. Used by the HTTP endpoint and the
      CLI, where each request owns its result and nothing can supersede it.
    - refresh(): for long-lived viewers that keep a ProgressState and may
      start a new refresh (e.g. on athlete switch) before the previous one
      finishes. Only the latest refresh is committed.
    """

    def __init__(
        self,
        metric_repo: PerformanceMetricRepository,
        workout_repo: WorkoutRepository,
        *,
        executor: Optional[Executor] = None,
        recent_window_days: int = RECENT_WINDOW_DAYS,
    ):
        """
        Initialize the progress service.

        Args:
            metric_repo: Repository for performance metrics
            workout_repo: Repository for workouts
            executor: Executor for blocking reads (None uses the loop default)
            recent_window_days: Length of the recent-workouts window
        """
        self._metric_repo = metric_repo
        self._workout_repo = workout_repo
        self._executor = executor
        self._recent_window_days = recent_window_days

    async def fetch_snapshot(self, athlete_id: str) -> ProgressSnapshot:
        """
        Fetch an athlete's metrics and workouts, oldest first.

        The two reads are independent and run concurrently. If either one
        fails, its RepositoryError propagates and no snapshot is produced.
        """
        loop = asyncio.get_running_loop()
        metric_rows, workout_rows = await asyncio.gather(
            loop.run_in_executor(
                self._executor,
                partial(self._metric_repo.list_for_athlete, athlete_id, ascending=True),
            ),
            loop.run_in_executor(
                self._executor,
                partial(self._workout_repo.list_for_athlete, athlete_id, ascending=True),
            ),
        )

        return ProgressSnapshot(
            athlete_id=athlete_id,
            metrics=tuple(parse_records(PerformanceMetric, metric_rows)),
            workouts=tuple(parse_records(Workout, workout_rows)),
            fetched_at=datetime.now(),
        )

    async def refresh(
        self,
        state: ProgressState,
        athlete_id: str,
    ) -> Optional[ProgressSnapshot]:
        """
        Refresh state with a new snapshot for athlete_id.

        Returns:
            The committed snapshot, or None if a newer refresh started while
            this one was in flight
        """
        generation = state.begin()
        snapshot = await self.fetch_snapshot(athlete_id)
        if not state.commit(generation, snapshot):
            return None
        return snapshot

    def build_report(
        self,
        snapshot: ProgressSnapshot,
        *,
        metric_type: str = ALL_METRICS,
        now: Optional[datetime] = None,
    ) -> ProgressReport:
        """
        Assemble the progress report from a snapshot.

        Args:
            snapshot: Metrics and workouts for one athlete
            metric_type: Chart category filter, or "all"
            now: Reference moment for the recent-workouts window

        Returns:
            ProgressReport
        """
        return ProgressReport(
            athlete_id=snapshot.athlete_id,
            selected_metric_type=metric_type,
            workouts=summarize_workouts(
                snapshot.workouts,
                now=now,
                window_days=self._recent_window_days,
            ),
            metrics=summarize_metrics(snapshot.metrics),
            chart=build_chart(snapshot.metrics, metric_type),
            trends=metric_trends(snapshot.metrics),
        )

    async def get_report(
        self,
        athlete_id: str,
        *,
        metric_type: str = ALL_METRICS,
        now: Optional[datetime] = None,
    ) -> ProgressReport:
        """Fetch a fresh snapshot and build its report."""
        snapshot = await self.fetch_snapshot(athlete_id)
        logger.debug(
            f"Progress snapshot for athlete {athlete_id}: "
            f"{len(snapshot.metrics)} metrics, {len(snapshot.workouts)} workouts"
        )
        return self.build_report(snapshot, metric_type=metric_type, now=now)
