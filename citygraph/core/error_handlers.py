"""
Custom exception classes for the CityGraph API.

Provides domain-specific exceptions with error codes and structured details.
"""

from typing import Optional


class CityGraphException(Exception):
    """
    Base exception for the CityGraph backend.

    All custom exceptions inherit from this class and include:
    - Human-readable message
    - Machine-readable error code
    - Reason string carrying the underlying failure
    - Optional details dictionary for debugging
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        reason: str,
        details: Optional[dict] = None,
    ):
        """
        Initialize CityGraph exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code (e.g., "DB_QUERY_ERROR")
            reason: Underlying failure text surfaced to API clients
            details: Optional dictionary with additional error context
        """
        self.message = message
        self.error_code = error_code
        self.reason = reason
        self.details = {"reason": reason, **(details or {})}
        super().__init__(f"{message}: {reason}")


class Neo4jConnectionError(CityGraphException):
    """Raised when a Neo4j connection or session cannot be acquired."""

    def __init__(self, reason: str):
        """
        Initialize Neo4j connection error.

        Args:
            reason: Detailed error message from Neo4j driver
        """
        super().__init__(
            message="Database connection failed",
            error_code="DB_CONNECTION_ERROR",
            reason=reason,
        )


class Neo4jQueryError(CityGraphException):
    """Raised when Neo4j query execution fails."""

    def __init__(self, query: str, error: str):
        """
        Initialize Neo4j query error.

        Args:
            query: The Cypher query that failed (truncated for safety)
            error: Error message from Neo4j
        """
        # Truncate query to keep log lines bounded
        truncated_query = " ".join(query.split())
        if len(truncated_query) > 100:
            truncated_query = truncated_query[:100] + "..."

        super().__init__(
            message="Database query failed",
            error_code="DB_QUERY_ERROR",
            reason=error,
            details={"query": truncated_query},
        )


class RecordProjectionError(CityGraphException):
    """Raised when a graph record does not match the expected entity shape."""

    def __init__(self, entity: str, error: str):
        """
        Initialize projection error.

        Args:
            entity: Entity type being projected ("Person" or "City")
            error: Validation error text
        """
        super().__init__(
            message=f"Invalid {entity} record returned by the database",
            error_code="RECORD_PROJECTION_ERROR",
            reason=error,
            details={"entity": entity},
        )


class PersonCreationError(CityGraphException):
    """Raised when creating a person returns no record."""

    def __init__(self, person_id: int, city_name: str):
        super().__init__(
            message="Person could not be created",
            error_code="PERSON_CREATION_ERROR",
            reason=f"No record returned for person {person_id} in city '{city_name}'",
            details={"person_id": person_id, "city": city_name},
        )
