"""
Performance metrics router.

This router contains endpoints for:
- GET /athletes/{athlete_id}/metrics - List metrics, newest first
- POST /athletes/{athlete_id}/metrics - Record a metric
- DELETE /metrics/{metric_id} - Delete a metric
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, Field

from api.deps import get_metric_repo
from application.ports import PerformanceMetricRepository
from domain.models import PerformanceMetric, parse_records

router = APIRouter(
    tags=["Performance Metrics"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateMetricRequest(BaseModel):
    """Request model for recording a performance metric."""
    metric_type: str = Field(default="speed", min_length=1)
    value: float = Field(..., allow_inf_nan=False)
    unit: str = Field(..., min_length=1, description="e.g. m/s, kg, min")
    recorded_date: date
    notes: str = ""


class MetricResponse(PerformanceMetric):
    """A metric plus its category badge color."""
    badge_color: str

    @classmethod
    def from_record(cls, metric: PerformanceMetric) -> "MetricResponse":
        return cls(**metric.model_dump(), badge_color=metric.category.badge_color)


class MetricListResponse(BaseModel):
    """Response model for the metric list."""
    metrics: List[MetricResponse]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/athletes/{athlete_id}/metrics", response_model=MetricListResponse)
def list_metrics(
    athlete_id: str = Path(..., description="Athlete ID"),
    metric_repo: PerformanceMetricRepository = Depends(get_metric_repo),
) -> MetricListResponse:
    """List an athlete's performance metrics, most recent first."""
    metrics = parse_records(PerformanceMetric, metric_repo.list_for_athlete(athlete_id))
    return MetricListResponse(
        metrics=[MetricResponse.from_record(m) for m in metrics],
        count=len(metrics),
    )


@router.post(
    "/athletes/{athlete_id}/metrics",
    response_model=MetricResponse,
    status_code=201,
)
def create_metric(
    request: CreateMetricRequest,
    athlete_id: str = Path(..., description="Athlete ID"),
    metric_repo: PerformanceMetricRepository = Depends(get_metric_repo),
) -> MetricResponse:
    """Record a performance metric for an athlete."""
    row = metric_repo.create(athlete_id, request.model_dump(mode="json"))
    return MetricResponse.from_record(PerformanceMetric.model_validate(row))


@router.delete("/metrics/{metric_id}")
def delete_metric(
    metric_id: str = Path(..., description="Metric ID"),
    metric_repo: PerformanceMetricRepository = Depends(get_metric_repo),
):
    """Delete a performance metric."""
    if not metric_repo.delete(metric_id):
        raise HTTPException(status_code=404, detail=f"Metric '{metric_id}' not found")

    return {
        "success": True,
        "message": "Metric deleted",
    }
