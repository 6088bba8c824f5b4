"""
Athletes router for athlete profile management.

This router contains endpoints for:
- GET /athletes - List athletes ordered by name
- POST /athletes - Create an athlete profile
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import get_athlete_repo
from application.ports import AthleteRepository
from domain.models import Athlete, parse_records

router = APIRouter(
    tags=["Athletes"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateAthleteRequest(BaseModel):
    """Request model for creating an athlete."""
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    sport: str = ""
    team: str = ""
    date_of_birth: Optional[date] = None
    height_cm: float = Field(default=0.0, ge=0)
    weight_kg: float = Field(default=0.0, ge=0)


class AthleteListResponse(BaseModel):
    """Response model for the athlete list."""
    athletes: List[Athlete]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/athletes", response_model=AthleteListResponse)
def list_athletes(
    athlete_repo: AthleteRepository = Depends(get_athlete_repo),
) -> AthleteListResponse:
    """
    List all athletes ordered by name.

    The first athlete is the default selection for the dashboard.
    """
    athletes = parse_records(Athlete, athlete_repo.list_all())
    return AthleteListResponse(athletes=athletes, count=len(athletes))


@router.post("/athletes", response_model=Athlete, status_code=201)
def create_athlete(
    request: CreateAthleteRequest,
    athlete_repo: AthleteRepository = Depends(get_athlete_repo),
) -> Athlete:
    """
    Create an athlete profile.

    Only the name is required; height and weight default to 0.
    """
    row = athlete_repo.create(request.model_dump(mode="json"))
    return Athlete.model_validate(row)
