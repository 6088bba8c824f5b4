"""
Athlete Repository Interface (Port).

This module defines the abstract interface for athlete profile persistence.
"""
from typing import Protocol, List, Dict, Any


class AthleteRepository(Protocol):
    """
    Abstract interface for athlete profiles.

    Implementations raise application.exceptions.RepositoryError when the
    data store cannot be reached or rejects the query.
    """

    def list_all(self) -> List[Dict[str, Any]]:
        """
        List every athlete, ordered by name.

        Returns:
            List of athlete rows
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an athlete profile.

        Args:
            data: Column values (name is required)

        Returns:
            The stored row, including generated id and timestamps
        """
        ...
