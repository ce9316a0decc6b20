"""
Unit tests for Cypher query construction.

Tests that values are bound as parameters with integer types and never
interpolated into query text.
"""

import pytest

from citygraph.core.graph.queries import (
    as_store_int,
    city_constraint_query,
    count_cities_query,
    create_person_query,
    list_cities_query,
    list_people_query,
)
from citygraph.core.pagination import PageWindow, resolve_page
from citygraph.models.graph import PersonFixture


class TestListQueries:
    """Test list people / list cities builders."""

    def test_list_people_binds_skip_and_limit(self):
        """Pagination values are bound, not embedded."""
        query = list_people_query(resolve_page("3"))

        assert query.parameters == {"skip": 100, "limit": 50}
        assert "$skip" in query.text
        assert "$limit" in query.text
        assert "100" not in query.text

    def test_list_people_projects_city_name(self):
        """People rows embed the linked city's name."""
        text = list_people_query(resolve_page(None)).text

        assert "MATCH (p:Person)-[:LIVES_IN]->(c:City)" in text
        assert "p {.*, city: c.name} AS person" in text

    def test_list_cities_returns_city_maps(self):
        """City rows are map projections of the node."""
        query = list_cities_query(resolve_page("1"))

        assert "MATCH (c:City)" in query.text
        assert "c {.*} AS city" in query.text
        assert query.parameters == {"skip": 0, "limit": 50}

    @pytest.mark.parametrize("builder", [list_people_query, list_cities_query])
    def test_list_queries_have_no_ordering(self, builder):
        """List queries leave ordering to the store."""
        assert "ORDER BY" not in builder(resolve_page("2")).text

    @pytest.mark.parametrize("builder", [list_people_query, list_cities_query])
    def test_window_values_are_ints(self, builder):
        """Float windows are coerced to int parameters."""
        query = builder(PageWindow(page=2, skip=50.0, limit=50.0))

        assert type(query.parameters["skip"]) is int
        assert type(query.parameters["limit"]) is int


class TestCreatePersonQuery:
    """Test the create person builder."""

    def test_parameters_are_bound(self, camilo_fixture):
        """All person attributes and the city name are parameters."""
        query = create_person_query(camilo_fixture)

        assert query.parameters == {
            "id": 42,
            "name": "Camilo",
            "age": 30,
            "cityName": "Bogotá",
        }
        assert type(query.parameters["id"]) is int
        assert type(query.parameters["age"]) is int

    def test_city_is_merged_and_person_created(self, camilo_fixture):
        """City is get-or-create, person is always new, edge in same statement."""
        text = create_person_query(camilo_fixture).text

        assert "MERGE (c:City {name: $cityName})" in text
        assert "CREATE (p:Person {personId: $id, name: $name, age: $age})" in text
        assert "MERGE (p)-[:LIVES_IN]->(c)" in text
        assert "RETURN p {.*, city: c.name} AS person" in text

    def test_hostile_values_stay_out_of_query_text(self):
        """Injection attempts end up only in parameters."""
        fixture = PersonFixture(
            person_id=1,
            name="x'}) DETACH DELETE (n) //",
            age=20,
            city_name="Cali'}) MATCH (n) DETACH DELETE n //",
        )

        query = create_person_query(fixture)

        assert "DETACH DELETE" not in query.text
        assert query.parameters["name"] == fixture.name
        assert query.parameters["cityName"] == fixture.city_name


class TestAuxiliaryQueries:
    """Test count and constraint builders."""

    def test_count_all_cities(self):
        """Counting without a name has no parameters."""
        query = count_cities_query()

        assert "count(c) AS total" in query.text
        assert query.parameters == {}

    def test_count_cities_by_name(self):
        """Counting by name binds the name."""
        query = count_cities_query("Bogotá")

        assert "{name: $name}" in query.text
        assert query.parameters == {"name": "Bogotá"}

    def test_constraint_is_idempotent(self):
        """The uniqueness constraint is created only if missing."""
        text = city_constraint_query().text

        assert "IF NOT EXISTS" in text
        assert "REQUIRE c.name IS UNIQUE" in text


class TestAsStoreInt:
    """Test integer coercion."""

    def test_integral_float_becomes_int(self):
        assert as_store_int(5.0, "skip") == 5

    def test_fractional_float_is_rejected(self):
        with pytest.raises(TypeError):
            as_store_int(1.5, "skip")

    def test_bool_is_rejected(self):
        with pytest.raises(TypeError):
            as_store_int(True, "limit")
