"""Models package for the CityGraph API."""

from citygraph.models.graph import City, Person, PersonFixture

__all__ = [
    "City",
    "Person",
    "PersonFixture",
]
