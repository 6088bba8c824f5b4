"""
Athlete profile entity.

Every other record (metrics, workouts, health stats) belongs to exactly one
athlete via its athlete_id.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class Athlete(BaseModel):
    """
    Athlete profile as stored in the `athletes` table.

    Examples:
        >>> athlete = Athlete(id="a1", name="Jane Runner", sport="Track")
        >>> athlete.height_cm
        0.0
    """

    id: str
    name: str = Field(..., min_length=1, description="Display name")
    email: Optional[str] = None
    sport: Optional[str] = ""
    team: Optional[str] = ""
    date_of_birth: Optional[date] = None
    height_cm: float = Field(default=0.0, description="Height in centimetres")
    weight_kg: float = Field(default=0.0, description="Weight in kilograms")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "frozen": True,  # Records are snapshots; mutate through the store
        "extra": "ignore",
    }
