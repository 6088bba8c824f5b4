"""
Supabase implementation of AthleteRepository.

This module provides the concrete Supabase implementation for athlete
profile persistence.
"""
import logging
from typing import List, Dict, Any

from supabase import Client

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)

TABLE = "athletes"


class SupabaseAthleteRepository:
    """
    Supabase implementation of AthleteRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_all(self) -> List[Dict[str, Any]]:
        """List every athlete, ordered by name."""
        try:
            result = self._client.table(TABLE).select("*").order("name").execute()
        except Exception as e:
            logger.error(f"Failed to load athletes: {e}")
            raise RepositoryError(TABLE, "select", str(e)) from e
        return result.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an athlete profile and return the stored row."""
        try:
            result = self._client.table(TABLE).insert(data).execute()
        except Exception as e:
            logger.error(f"Failed to create athlete: {e}")
            raise RepositoryError(TABLE, "insert", str(e)) from e

        if not result.data:
            raise RepositoryError(TABLE, "insert", "no row returned")
        logger.info(f"Created athlete {result.data[0].get('id')}")
        return result.data[0]
