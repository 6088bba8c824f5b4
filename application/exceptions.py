"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class RepositoryError(Exception):
    """Error talking to the data store.

    Raised by repository adapters when a query fails (network error,
    PostgREST error, permission denied). Callers get no partial result:
    the whole operation fails.
    """

    def __init__(self, table: str, operation: str, message: str):
        self.table = table
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} on '{table}' failed: {message}")
