"""Pydantic models for API v1."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from citygraph.models.graph import City, Person


class MessageResponse(BaseModel):
    """Plain status message."""

    message: str = Field(description="Human-readable status message")


class PeoplePage(BaseModel):
    """Response payload for GET /people."""

    page: int = Field(description="Resolved page number (>= 1)")
    per_page: int = Field(alias="perPage", description="Fixed page size")
    results: List[Person] = Field(description="People on this page")

    model_config = ConfigDict(populate_by_name=True)


class CitiesPage(BaseModel):
    """Response payload for GET /cities."""

    page: int = Field(description="Resolved page number (>= 1)")
    per_page: int = Field(alias="perPage", description="Fixed page size")
    results: List[City] = Field(description="Cities on this page")

    model_config = ConfigDict(populate_by_name=True)


class PersonCreatedResponse(BaseModel):
    """Response payload for POST /people."""

    message: str = Field(description="Human-readable status message")
    person: Person = Field(description="The created person")


class ErrorResponse(BaseModel):
    """Body returned for failed requests."""

    error: str = Field(description="Generic error message")
    details: str = Field(description="Underlying failure detail")
    error_code: str = Field(description="Machine-readable error code")
    request_id: str = Field(description="Request ID for log correlation")


class ForcedErrorResponse(BaseModel):
    """Body returned by the forced-status debug routes."""

    error: str = Field(description="Fixed error message")
