"""
Shared pytest fixtures.

Provides an in-memory graph store that mimics the Neo4j semantics the API
relies on (get-or-create on city name, one LIVES_IN edge per person) and a
deterministic person generator, both wired into the app through
dependency overrides.
"""

from itertools import cycle
from typing import Any, Dict, Iterable, List, Tuple

import pytest
from fastapi.testclient import TestClient

from citygraph.api.v1.dependencies import get_graph_service, get_person_generator
from citygraph.core.graph.projection import project_city, project_person
from citygraph.core.pagination import PageWindow
from citygraph.main import app
from citygraph.models.graph import City, Person, PersonFixture


class InMemoryGraphStore:
    """Graph store fake keeping nodes and edges in dictionaries."""

    def __init__(self) -> None:
        self.cities: Dict[str, Dict[str, Any]] = {}
        self.people: List[Dict[str, Any]] = []
        self.lives_in: List[Tuple[int, str]] = []

    def _person_rows(self) -> List[Dict[str, Any]]:
        return [
            {"person": {**self.people[index], "city": self.cities[city]["name"]}}
            for index, city in self.lives_in
        ]

    async def list_people(self, window: PageWindow) -> List[Person]:
        rows = self._person_rows()[window.skip : window.skip + window.limit]
        return [project_person(row) for row in rows]

    async def list_cities(self, window: PageWindow) -> List[City]:
        rows = list(self.cities.values())[window.skip : window.skip + window.limit]
        return [project_city({"city": row}) for row in rows]

    async def create_person(self, fixture: PersonFixture) -> Person:
        city = self.cities.setdefault(fixture.city_name, {"name": fixture.city_name})
        self.people.append(
            {"personId": fixture.person_id, "name": fixture.name, "age": fixture.age}
        )
        self.lives_in.append((len(self.people) - 1, city["name"]))
        return project_person(self._person_rows()[-1])


class FixedPersonGenerator:
    """Person generator replaying a fixed list of fixtures."""

    def __init__(self, fixtures: Iterable[PersonFixture]) -> None:
        self._fixtures = cycle(list(fixtures))

    def generate(self) -> PersonFixture:
        return next(self._fixtures)


@pytest.fixture
def graph_store() -> InMemoryGraphStore:
    """Create an empty in-memory graph store."""
    return InMemoryGraphStore()


@pytest.fixture
def camilo_fixture() -> PersonFixture:
    """Fixture for Camilo, 30, living in Bogotá."""
    return PersonFixture(person_id=42, name="Camilo", age=30, city_name="Bogotá")


@pytest.fixture
def person_generator(camilo_fixture) -> FixedPersonGenerator:
    """Generator that always returns the Camilo fixture."""
    return FixedPersonGenerator([camilo_fixture])


@pytest.fixture
def api_client(graph_store, person_generator):
    """TestClient with the graph store and generator overridden."""
    app.dependency_overrides[get_graph_service] = lambda: graph_store
    app.dependency_overrides[get_person_generator] = lambda: person_generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def use_people(api_client):
    """Replace the generator so POST /people replays the given fixtures."""

    def _use(fixtures: Iterable[PersonFixture]) -> None:
        generator = FixedPersonGenerator(fixtures)
        app.dependency_overrides[get_person_generator] = lambda: generator

    return _use
