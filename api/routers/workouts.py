"""
Workouts router.

This router contains endpoints for:
- GET /athletes/{athlete_id}/workouts - List workouts, newest first
- POST /athletes/{athlete_id}/workouts - Log a workout
- DELETE /workouts/{workout_id} - Delete a workout
"""

from datetime import date
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, Field

from api.deps import get_workout_repo
from application.ports import WorkoutRepository
from domain.models import Workout, parse_records

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateWorkoutRequest(BaseModel):
    """Request model for logging a workout."""
    workout_type: str = Field(..., min_length=1, description="e.g. Running, Swimming")
    duration_minutes: int = Field(..., ge=0)
    intensity: Literal["low", "moderate", "high"] = "moderate"
    workout_date: date
    notes: str = ""


class WorkoutResponse(Workout):
    """A workout plus its intensity badge color."""
    intensity_color: str

    @classmethod
    def from_record(cls, workout: Workout) -> "WorkoutResponse":
        return cls(**workout.model_dump(), intensity_color=workout.intensity.color)


class WorkoutListResponse(BaseModel):
    """Response model for the workout list."""
    workouts: List[WorkoutResponse]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/athletes/{athlete_id}/workouts", response_model=WorkoutListResponse)
def list_workouts(
    athlete_id: str = Path(..., description="Athlete ID"),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> WorkoutListResponse:
    """List an athlete's workouts, most recent first."""
    workouts = parse_records(Workout, workout_repo.list_for_athlete(athlete_id))
    return WorkoutListResponse(
        workouts=[WorkoutResponse.from_record(w) for w in workouts],
        count=len(workouts),
    )


@router.post(
    "/athletes/{athlete_id}/workouts",
    response_model=WorkoutResponse,
    status_code=201,
)
def create_workout(
    request: CreateWorkoutRequest,
    athlete_id: str = Path(..., description="Athlete ID"),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> WorkoutResponse:
    """Log a workout for an athlete."""
    row = workout_repo.create(athlete_id, request.model_dump(mode="json"))
    return WorkoutResponse.from_record(Workout.model_validate(row))


@router.delete("/workouts/{workout_id}")
def delete_workout(
    workout_id: str = Path(..., description="Workout ID"),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Delete a workout."""
    if not workout_repo.delete(workout_id):
        raise HTTPException(status_code=404, detail=f"Workout '{workout_id}' not found")

    return {
        "success": True,
        "message": "Workout deleted",
    }
