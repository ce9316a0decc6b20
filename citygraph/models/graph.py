"""
Typed records for graph entities.

Person and City nodes have no enforced schema in the store. These models
validate records at the store boundary while letting any additional
stored attributes pass through to API responses.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class City(BaseModel):
    """A City node, identified by its name."""

    name: str = Field(..., description="City name (natural key)")

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Bogotá"}},
    )


class Person(BaseModel):
    """A Person node with the name of the city it lives in."""

    person_id: int = Field(
        ...,
        alias="personId",
        description="Generator-assigned identifier (not guaranteed unique)",
    )
    name: str = Field(..., description="First name")
    age: int = Field(..., description="Age in years")
    city: str = Field(..., description="Name of the linked City")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "personId": 42,
                "name": "Camilo",
                "age": 30,
                "city": "Bogotá",
            }
        },
    )


@dataclass(frozen=True)
class PersonFixture:
    """Attribute values for a person about to be created."""

    person_id: int
    name: str
    age: int
    city_name: str
