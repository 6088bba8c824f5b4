"""
Progress router for the athlete progress view.

This router provides:
- GET /athletes/{athlete_id}/progress - workout summary, metrics overview,
  normalized metric chart and per-category trends
"""
from dataclasses import asdict
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel, Field

from api.deps import get_progress_service
from backend.core.chart_normalizer import ALL_METRICS
from backend.core.progress_service import ProgressService
from backend.core.trend_analyzer import Trend
from domain.models import MetricType

router = APIRouter(
    tags=["Progress"],
)


# =============================================================================
# Response Models
# =============================================================================


class WorkoutSummaryResponse(BaseModel):
    """Workout totals for the stat cards."""
    total_workouts: int
    total_minutes: int
    avg_duration: int
    recent_count: int
    hours_trained: int


class MetricsOverviewResponse(BaseModel):
    """Metric count and distinct categories."""
    total_metrics: int
    metric_types: List[str] = Field(default_factory=list)


class ChartBarResponse(BaseModel):
    """A single chart bar."""
    metric_id: str
    metric_type: str
    recorded_date: date
    label: str
    value: float
    unit: str
    height: float
    color: str


class MetricTrendResponse(BaseModel):
    """Trend for one metric category."""
    metric_type: str
    category: MetricType
    trend: Trend
    change_percent: int
    label: str
    color: str


class ProgressApiResponse(BaseModel):
    """Response model for the progress endpoint."""
    athlete_id: str
    selected_metric_type: str
    has_data: bool
    workouts: WorkoutSummaryResponse
    metrics: MetricsOverviewResponse
    chart: List[ChartBarResponse] = Field(default_factory=list)
    trends: List[MetricTrendResponse] = Field(default_factory=list)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/athletes/{athlete_id}/progress", response_model=ProgressApiResponse)
async def get_progress(
    athlete_id: str = Path(..., description="Athlete ID"),
    metric_type: str = Query(
        ALL_METRICS,
        min_length=1,
        description="Chart category filter ('all' for every category)",
    ),
    service: ProgressService = Depends(get_progress_service),
) -> ProgressApiResponse:
    """
    Get the progress report for an athlete.

    Metrics and workouts are fetched together; if either read fails the
    request fails with 502 and no partial report is returned.
    """
    report = await service.get_report(athlete_id, metric_type=metric_type)

    return ProgressApiResponse(
        athlete_id=report.athlete_id,
        selected_metric_type=report.selected_metric_type,
        has_data=report.has_data,
        workouts=WorkoutSummaryResponse(**asdict(report.workouts)),
        metrics=MetricsOverviewResponse(
            total_metrics=report.metrics.total_metrics,
            metric_types=list(report.metrics.metric_types),
        ),
        chart=[ChartBarResponse(**asdict(bar)) for bar in report.chart],
        trends=[MetricTrendResponse(**asdict(t)) for t in report.trends],
    )
