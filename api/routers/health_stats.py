"""
Health stats router.

This router contains endpoints for:
- GET /athletes/{athlete_id}/health-stats - List readings, newest first
- GET /athletes/{athlete_id}/health-stats/latest - Most recent reading
- POST /athletes/{athlete_id}/health-stats - Record a reading
- DELETE /health-stats/{stat_id} - Delete a reading
"""

from datetime import date
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, Field

from api.deps import get_health_stat_repo
from application.ports import HealthStatRepository
from domain.models import HealthStat, parse_records

router = APIRouter(
    tags=["Health Stats"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateHealthStatRequest(BaseModel):
    """Request model for recording health stats. Blank vitals are stored as 0."""
    heart_rate: int = Field(default=0, ge=0)
    blood_pressure_systolic: int = Field(default=0, ge=0)
    blood_pressure_diastolic: int = Field(default=0, ge=0)
    sleep_hours: float = Field(default=0.0, ge=0, le=24)
    hydration_level: Literal["poor", "fair", "good", "excellent"] = "fair"
    stress_level: int = Field(default=5, ge=1, le=10)
    recorded_date: date
    notes: str = ""


class HealthStatResponse(HealthStat):
    """A health reading plus hydration and stress display bands."""
    hydration_color: str
    stress_label: str
    stress_color: str

    @classmethod
    def from_record(cls, stat: HealthStat) -> "HealthStatResponse":
        band = stat.stress_band
        return cls(
            **stat.model_dump(),
            hydration_color=stat.hydration_level.color,
            stress_label=band.value,
            stress_color=band.color,
        )


class HealthStatListResponse(BaseModel):
    """Response model for the health stat list."""
    health_stats: List[HealthStatResponse]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/athletes/{athlete_id}/health-stats",
    response_model=HealthStatListResponse,
)
def list_health_stats(
    athlete_id: str = Path(..., description="Athlete ID"),
    health_stat_repo: HealthStatRepository = Depends(get_health_stat_repo),
) -> HealthStatListResponse:
    """List an athlete's health readings, most recent first."""
    stats = parse_records(HealthStat, health_stat_repo.list_for_athlete(athlete_id))
    return HealthStatListResponse(
        health_stats=[HealthStatResponse.from_record(s) for s in stats],
        count=len(stats),
    )


@router.get(
    "/athletes/{athlete_id}/health-stats/latest",
    response_model=HealthStatResponse,
)
def get_latest_health_stat(
    athlete_id: str = Path(..., description="Athlete ID"),
    health_stat_repo: HealthStatRepository = Depends(get_health_stat_repo),
) -> HealthStatResponse:
    """Get the most recent health reading for an athlete."""
    stats = parse_records(HealthStat, health_stat_repo.list_for_athlete(athlete_id))
    if not stats:
        raise HTTPException(
            status_code=404,
            detail=f"No health stats recorded for athlete '{athlete_id}'",
        )
    return HealthStatResponse.from_record(stats[0])


@router.post(
    "/athletes/{athlete_id}/health-stats",
    response_model=HealthStatResponse,
    status_code=201,
)
def create_health_stat(
    request: CreateHealthStatRequest,
    athlete_id: str = Path(..., description="Athlete ID"),
    health_stat_repo: HealthStatRepository = Depends(get_health_stat_repo),
) -> HealthStatResponse:
    """Record a health reading for an athlete."""
    row = health_stat_repo.create(athlete_id, request.model_dump(mode="json"))
    return HealthStatResponse.from_record(HealthStat.model_validate(row))


@router.delete("/health-stats/{stat_id}")
def delete_health_stat(
    stat_id: str = Path(..., description="Health stat ID"),
    health_stat_repo: HealthStatRepository = Depends(get_health_stat_repo),
):
    """Delete a health reading."""
    if not health_stat_repo.delete(stat_id):
        raise HTTPException(status_code=404, detail=f"Health stat '{stat_id}' not found")

    return {
        "success": True,
        "message": "Health stat deleted",
    }
