"""
Graph service for people and cities.

Runs the Cypher statements built in ``queries`` on a single Neo4j session
and projects the rows into typed records. One service instance serves one
request; the session it wraps is owned and released by the caller.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from neo4j import AsyncSession
from neo4j.exceptions import DriverError, Neo4jError

from citygraph.core.error_handlers import Neo4jQueryError, PersonCreationError
from citygraph.core.graph.neo4j_client import Neo4jClient
from citygraph.core.graph.projection import project_city, project_person
from citygraph.core.graph.queries import (
    CypherQuery,
    city_constraint_query,
    count_cities_query,
    create_person_query,
    list_cities_query,
    list_people_query,
)
from citygraph.core.pagination import PageWindow
from citygraph.models.graph import City, Person, PersonFixture

logger = logging.getLogger(__name__)


class GraphService:
    """
    Service for reading and creating people and cities in the graph.

    Provides methods for:
    - Paginated listing of people with their city name
    - Paginated listing of cities
    - Creating a person linked to a city (get-or-create on the city)
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize graph service.

        Args:
            session: Open Neo4j session for the current unit of work
        """
        self.session = session

    async def _run(self, query: CypherQuery) -> List[Dict[str, Any]]:
        start_time = time.time()
        try:
            result = await self.session.run(query.text, query.parameters)
            records = await result.data()
        except (Neo4jError, DriverError) as e:
            logger.error("Neo4j query execution failed: %s", e)
            raise Neo4jQueryError(query.text, str(e)) from e

        logger.debug(
            "Query executed: params=%s, records=%d, duration_ms=%d",
            list(query.parameters.keys()),
            len(records),
            int((time.time() - start_time) * 1000),
        )
        return records

    async def list_people(self, window: PageWindow) -> List[Person]:
        """
        List one page of people.

        Args:
            window: Resolved pagination window

        Returns:
            People on the page, in store-defined order
        """
        records = await self._run(list_people_query(window))
        return [project_person(record) for record in records]

    async def list_cities(self, window: PageWindow) -> List[City]:
        """
        List one page of cities.

        Args:
            window: Resolved pagination window

        Returns:
            Cities on the page, in store-defined order
        """
        records = await self._run(list_cities_query(window))
        return [project_city(record) for record in records]

    async def create_person(self, fixture: PersonFixture) -> Person:
        """
        Create a person and its LIVES_IN edge in one statement.

        Args:
            fixture: Attributes of the person to create

        Returns:
            The created person with its city name

        Raises:
            PersonCreationError: If the statement returned no row
            Neo4jQueryError: If the statement failed
        """
        records = await self._run(create_person_query(fixture))
        if not records:
            raise PersonCreationError(fixture.person_id, fixture.city_name)

        person = project_person(records[0])
        logger.info(
            "Person created: person_id=%d, city=%s",
            person.person_id,
            person.city,
        )
        return person

    async def count_cities(self, name: Optional[str] = None) -> int:
        """
        Count City nodes.

        Args:
            name: Only count cities with this name

        Returns:
            Number of matching City nodes
        """
        records = await self._run(count_cities_query(name))
        return records[0]["total"] if records else 0


async def ensure_constraints(client: Neo4jClient) -> None:
    """
    Create the City.name uniqueness constraint if it is missing.

    Args:
        client: Connected Neo4j client
    """
    logger.info("Ensuring Neo4j constraints...")
    query = city_constraint_query()
    try:
        await client.execute_query(query.text, query.parameters)
        logger.info("City name constraint in place")
    except Neo4jQueryError as e:
        logger.warning("Constraint creation skipped: %s", e)
