"""
Cypher query construction.

Every builder returns query text plus a parameter dict. Caller-controlled
values are only ever bound as parameters, never formatted into the text.
Numeric parameters are coerced to ``int`` so the driver sends them as
Neo4j Integer values; SKIP and LIMIT reject floats.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from citygraph.core.constants import (
    CITY_LABEL,
    CITY_NAME_CONSTRAINT,
    LIVES_IN,
    PERSON_LABEL,
)
from citygraph.core.pagination import PageWindow
from citygraph.models.graph import PersonFixture


@dataclass(frozen=True)
class CypherQuery:
    """Parameterized Cypher statement."""

    text: str
    parameters: Dict[str, Any] = field(default_factory=dict)


def as_store_int(value: Any, name: str) -> int:
    """
    Coerce a value into a plain ``int`` for binding as a Neo4j Integer.

    Args:
        value: Value to coerce
        name: Parameter name used in error messages

    Returns:
        The value as ``int``

    Raises:
        TypeError: If the value is a bool or a non-integral number
    """
    if isinstance(value, bool):
        raise TypeError(f"Parameter '{name}' must be an integer, got bool")
    if isinstance(value, float):
        if not value.is_integer():
            raise TypeError(f"Parameter '{name}' must be an integer, got {value!r}")
        return int(value)
    return int(value)


def _window_parameters(window: PageWindow) -> Dict[str, int]:
    return {
        "skip": as_store_int(window.skip, "skip"),
        "limit": as_store_int(window.limit, "limit"),
    }


def list_people_query(window: PageWindow) -> CypherQuery:
    """
    Build the query listing people with their city name.

    No ORDER BY is applied; result order is whatever the store returns.

    Args:
        window: Resolved pagination window

    Returns:
        CypherQuery returning one ``person`` map per row
    """
    text = f"""
    MATCH (p:{PERSON_LABEL})-[:{LIVES_IN}]->(c:{CITY_LABEL})
    RETURN p {{.*, city: c.name}} AS person
    SKIP $skip LIMIT $limit
    """
    return CypherQuery(text=text, parameters=_window_parameters(window))


def list_cities_query(window: PageWindow) -> CypherQuery:
    """
    Build the query listing cities.

    Args:
        window: Resolved pagination window

    Returns:
        CypherQuery returning one ``city`` map per row
    """
    text = f"""
    MATCH (c:{CITY_LABEL})
    RETURN c {{.*}} AS city
    SKIP $skip LIMIT $limit
    """
    return CypherQuery(text=text, parameters=_window_parameters(window))


def create_person_query(fixture: PersonFixture) -> CypherQuery:
    """
    Build the single-statement query that creates a person in a city.

    The city is matched or created by name, the person is always created,
    and the LIVES_IN edge is created in the same statement so the person
    never exists without it.

    Args:
        fixture: Attributes of the person to create

    Returns:
        CypherQuery returning the created ``person`` map with its city name
    """
    text = f"""
    MERGE (c:{CITY_LABEL} {{name: $cityName}})
    CREATE (p:{PERSON_LABEL} {{personId: $id, name: $name, age: $age}})
    MERGE (p)-[:{LIVES_IN}]->(c)
    RETURN p {{.*, city: c.name}} AS person
    """
    return CypherQuery(
        text=text,
        parameters={
            "id": as_store_int(fixture.person_id, "id"),
            "name": str(fixture.name),
            "age": as_store_int(fixture.age, "age"),
            "cityName": str(fixture.city_name),
        },
    )


def count_cities_query(name: Optional[str] = None) -> CypherQuery:
    """
    Build a query counting City nodes, optionally only those with a name.

    Args:
        name: Restrict the count to cities with this name

    Returns:
        CypherQuery returning a single ``total`` column
    """
    if name is None:
        return CypherQuery(text=f"MATCH (c:{CITY_LABEL}) RETURN count(c) AS total")
    return CypherQuery(
        text=f"MATCH (c:{CITY_LABEL} {{name: $name}}) RETURN count(c) AS total",
        parameters={"name": str(name)},
    )


def city_constraint_query() -> CypherQuery:
    """
    Build the statement ensuring City names are unique.

    MERGE on a label/property pair is only race-free under concurrent
    writers when a uniqueness constraint backs it.
    """
    text = f"""
    CREATE CONSTRAINT {CITY_NAME_CONSTRAINT} IF NOT EXISTS
    FOR (c:{CITY_LABEL})
    REQUIRE c.name IS UNIQUE
    """
    return CypherQuery(text=text)
