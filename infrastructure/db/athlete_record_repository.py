"""
Supabase implementations of the per-athlete record repositories.

This module provides the concrete Supabase implementation for performance
metrics, workouts and health stats. The three tables share columns
(id, athlete_id, a date column) so one base class carries the queries and
each subclass names its table and ordering column.
"""
import logging
from typing import List, Dict, Any

from supabase import Client

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SupabaseAthleteRecordRepository:
    """
    Supabase implementation of AthleteRecordRepository protocol.

    All Supabase query logic for one record table is encapsulated here.
    The client is injected via constructor for testability.
    """

    table: str = ""
    date_column: str = ""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_for_athlete(
        self,
        athlete_id: str,
        *,
        ascending: bool = False,
    ) -> List[Dict[str, Any]]:
        """List all records for an athlete ordered by the table's date column."""
        try:
            result = self._client.table(self.table) \
                .select("*") \
                .eq("athlete_id", athlete_id) \
                .order(self.date_column, desc=not ascending) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to load {self.table} for athlete {athlete_id}: {e}")
            raise RepositoryError(self.table, "select", str(e)) from e
        return result.data or []

    def create(self, athlete_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a record and return the stored row."""
        row = {**data, "athlete_id": athlete_id}
        try:
            result = self._client.table(self.table).insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to insert into {self.table} for athlete {athlete_id}: {e}")
            raise RepositoryError(self.table, "insert", str(e)) from e

        if not result.data:
            # RLS can silently swallow inserts
            raise RepositoryError(self.table, "insert", "no row returned")
        logger.info(f"Created {self.table} row {result.data[0].get('id')} for athlete {athlete_id}")
        return result.data[0]

    def delete(self, record_id: str) -> bool:
        """Delete a record by id. Returns False when nothing matched."""
        try:
            result = self._client.table(self.table).delete().eq("id", record_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete {self.table} row {record_id}: {e}")
            raise RepositoryError(self.table, "delete", str(e)) from e

        deleted = len(result.data or [])
        if deleted:
            logger.info(f"Deleted {self.table} row {record_id}")
        else:
            logger.warning(f"No {self.table} row with id {record_id} (0 rows deleted)")
        return deleted > 0


class SupabasePerformanceMetricRepository(SupabaseAthleteRecordRepository):
    """Performance metrics stored in `performance_metrics`."""

    table = "performance_metrics"
    date_column = "recorded_date"


class SupabaseWorkoutRepository(SupabaseAthleteRecordRepository):
    """Workouts stored in `workouts`."""

    table = "workouts"
    date_column = "workout_date"


class SupabaseHealthStatRepository(SupabaseAthleteRecordRepository):
    """Health stats stored in `health_stats`."""

    table = "health_stats"
    date_column = "recorded_date"
