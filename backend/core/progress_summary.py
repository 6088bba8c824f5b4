"""
Aggregate summaries for the progress view.

- Workout totals, average duration and the recent-activity count
- Metrics overview (how many readings, which categories)
"""
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Optional, Sequence, Tuple

from backend.utils.rounding import round_half_up
from domain.models import PerformanceMetric, Workout

# Trailing window for "recent" workouts
RECENT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class WorkoutSummary:
    """Summary counts over an athlete's workouts."""
    total_workouts: int = 0
    total_minutes: int = 0
    avg_duration: int = 0
    recent_count: int = 0
    hours_trained: int = 0


@dataclass(frozen=True)
class MetricsOverview:
    """How many metrics are tracked and in which categories."""
    total_metrics: int = 0
    metric_types: Tuple[str, ...] = ()


def _local_naive(moment: datetime) -> datetime:
    """Express an aware datetime as naive local time; naive input is kept."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def summarize_workouts(
    workouts: Sequence[Workout],
    *,
    now: Optional[datetime] = None,
    window_days: int = RECENT_WINDOW_DAYS,
) -> WorkoutSummary:
    """
    Summarize an athlete's workouts.

    A workout counts as recent when its date, taken as local midnight, is
    on or after now - window_days. Dates in the future count as recent.

    Args:
        workouts: All workouts for one athlete (any order)
        now: Reference moment; defaults to the current local time
        window_days: Length of the recency window

    Returns:
        WorkoutSummary; all zeros for an empty collection
    """
    total_workouts = len(workouts)
    if total_workouts == 0:
        return WorkoutSummary()

    total_minutes = sum(w.duration_minutes for w in workouts)
    cutoff = _local_naive(now or datetime.now()) - timedelta(days=window_days)
    recent_count = sum(
        1 for w in workouts
        if datetime.combine(w.workout_date, time.min) >= cutoff
    )

    return WorkoutSummary(
        total_workouts=total_workouts,
        total_minutes=total_minutes,
        avg_duration=round_half_up(total_minutes / total_workouts),
        recent_count=recent_count,
        hours_trained=round_half_up(total_minutes / 60),
    )


def summarize_metrics(metrics: Sequence[PerformanceMetric]) -> MetricsOverview:
    """Count metrics and list their distinct categories in first-seen order."""
    metric_types = tuple(dict.fromkeys(m.metric_type for m in metrics))
    return MetricsOverview(total_metrics=len(metrics), metric_types=metric_types)
