"""
Athlete Record Repository Interfaces (Ports).

Performance metrics, workouts and health stats share one access pattern:
per-athlete listing ordered by a date column, insert, and delete by id.
Each record kind gets its own named protocol so services and dependency
providers can ask for exactly the collection they need.
"""
from typing import Protocol, List, Dict, Any


class AthleteRecordRepository(Protocol):
    """
    Abstract interface for a per-athlete, date-ordered record collection.

    Implementations raise application.exceptions.RepositoryError when the
    data store cannot be reached or rejects the query. A failed read never
    returns a partial list.
    """

    def list_for_athlete(
        self,
        athlete_id: str,
        *,
        ascending: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        List all records for an athlete ordered by the record date.

        Args:
            athlete_id: Owning athlete
            ascending: Oldest first when True, newest first otherwise

        Returns:
            List of record rows
        """
        ...

    def create(self, athlete_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a record for an athlete.

        Args:
            athlete_id: Owning athlete
            data: Column values (without athlete_id)

        Returns:
            The stored row, including generated id
        """
        ...

    def delete(self, record_id: str) -> bool:
        """
        Delete a record by id.

        Returns:
            True if a row was deleted, False if no row matched
        """
        ...


class PerformanceMetricRepository(AthleteRecordRepository, Protocol):
    """Performance metrics, ordered by recorded_date."""


class WorkoutRepository(AthleteRecordRepository, Protocol):
    """Workouts, ordered by workout_date."""


class HealthStatRepository(AthleteRecordRepository, Protocol):
    """Health stats, ordered by recorded_date."""
