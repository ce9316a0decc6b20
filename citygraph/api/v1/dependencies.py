"""
FastAPI dependencies providing per-request resources.

The Neo4j client is created once in the application lifespan and stored
on ``app.state``. Each request borrows its own session from it; tests
replace these dependencies through ``app.dependency_overrides``.
"""

from typing import AsyncIterator

from fastapi import Depends, Request

from citygraph.core.error_handlers import Neo4jConnectionError
from citygraph.core.fixtures import PersonGenerator
from citygraph.core.graph.graph_service import GraphService
from citygraph.core.graph.neo4j_client import Neo4jClient


def get_neo4j_client(request: Request) -> Neo4jClient:
    """
    Return the process-wide Neo4j client.

    Raises:
        Neo4jConnectionError: If the application did not create a client
    """
    client = getattr(request.app.state, "neo4j_client", None)
    if client is None:
        raise Neo4jConnectionError("Neo4j client has not been initialized")
    return client


async def get_graph_service(
    client: Neo4jClient = Depends(get_neo4j_client),
) -> AsyncIterator[GraphService]:
    """
    Yield a GraphService bound to a session owned by this request.

    The session is released when the request finishes, including when the
    endpoint raises.

    Yields:
        GraphService instance
    """
    async with client.session() as session:
        yield GraphService(session)


def get_person_generator() -> PersonGenerator:
    """Return a generator with its own random source."""
    return PersonGenerator()
