"""Neo4j database client with connection pooling and error handling."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from neo4j import AsyncDriver, AsyncGraphDatabase, AsyncSession
from neo4j.exceptions import (
    AuthError,
    DriverError,
    Neo4jError,
    ServiceUnavailable,
)

from citygraph.config import settings
from citygraph.core.error_handlers import Neo4jConnectionError, Neo4jQueryError

logger = logging.getLogger(__name__)


class Neo4jClient:
    """
    Async Neo4j client wrapping one process-wide driver.

    The driver owns the connection pool. Callers borrow a session per
    unit of work through ``session()``, which always releases it.

    Usage:
        client = Neo4jClient()
        await client.connect()

        async with client.session() as session:
            result = await session.run("MATCH (c:City) RETURN c LIMIT 10")

        await client.close()
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
    ):
        """
        Initialize Neo4j client.

        Args:
            uri: Neo4j connection URI (defaults to settings)
            user: Username (defaults to settings)
            password: Password (defaults to settings)
            database: Database name (defaults to settings)
        """
        self.uri = uri or settings.neo4j_uri
        self.user = user or settings.neo4j_user
        self.password = password or settings.neo4j_password
        self.database = database or settings.neo4j_database

        self._driver: Optional[AsyncDriver] = None
        self._connected = False
        self._connect_lock = asyncio.Lock()

        logger.info(
            "Neo4j client initialized: uri=%s, database=%s",
            self.uri,
            self.database,
        )

    @property
    def connected(self) -> bool:
        """Whether the driver has been created and verified."""
        return self._connected

    async def connect(self) -> None:
        """
        Establish connection to Neo4j database.

        Safe to call repeatedly and concurrently; at most one driver is
        built at a time and nothing happens once connected.

        Raises:
            Neo4jConnectionError: If connection fails
        """
        if self._connected:
            logger.debug("Neo4j client already connected")
            return

        async with self._connect_lock:
            if self._connected:
                return
            await self._open_driver()

    async def _open_driver(self) -> None:
        try:
            logger.info("Connecting to Neo4j database...")

            self._driver = AsyncGraphDatabase.driver(
                self.uri,
                auth=(self.user, self.password),
                max_connection_lifetime=settings.neo4j_max_connection_lifetime,
                max_connection_pool_size=settings.neo4j_max_connection_pool_size,
                connection_acquisition_timeout=settings.neo4j_connection_acquisition_timeout,
            )

            # Verify connectivity
            await self._driver.verify_connectivity()

            self._connected = True
            logger.info("Successfully connected to Neo4j database")

        except AuthError as e:
            logger.error("Neo4j authentication failed: %s", str(e))
            await self._discard_driver()
            raise Neo4jConnectionError(f"Authentication failed: {e}") from e
        except ServiceUnavailable as e:
            logger.error("Neo4j service unavailable: %s", str(e))
            await self._discard_driver()
            raise Neo4jConnectionError(f"Service unavailable: {e}") from e
        except Exception as e:
            logger.error("Unexpected Neo4j connection error: %s", str(e))
            await self._discard_driver()
            raise Neo4jConnectionError(f"Connection failed: {e}") from e

    async def _discard_driver(self) -> None:
        if self._driver is not None:
            try:
                await self._driver.close()
            except Exception as e:
                logger.warning("Error closing unverified Neo4j driver: %s", e)
            self._driver = None

    @asynccontextmanager
    async def session(self, database: Optional[str] = None) -> AsyncIterator[AsyncSession]:
        """
        Borrow a Neo4j session as async context manager.

        Connects first if the client is not connected yet. The session is
        closed exactly once when the block exits, whether it returns or
        raises.

        Args:
            database: Database name (defaults to configured database)

        Yields:
            AsyncSession instance

        Raises:
            Neo4jConnectionError: If the driver cannot be reached
        """
        await self.connect()
        if self._driver is None:
            raise Neo4jConnectionError("Not connected to Neo4j")

        database = database or self.database

        try:
            session = self._driver.session(database=database)
        except DriverError as e:
            logger.error("Failed to open Neo4j session: %s", str(e))
            raise Neo4jConnectionError(f"Session acquisition failed: {e}") from e

        logger.debug("Neo4j session acquired: database=%s", database)
        try:
            yield session
        finally:
            try:
                await session.close()
                logger.debug("Neo4j session released")
            except Exception as e:
                logger.warning("Error releasing Neo4j session: %s", e)

    async def execute_query(
        self,
        query: str,
        parameters: Optional[Dict[str, Any]] = None,
        database: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Execute a Cypher query in its own session and return results.

        Args:
            query: Cypher query string
            parameters: Query parameters
            database: Database name (defaults to configured database)

        Returns:
            List of result records as dictionaries

        Raises:
            Neo4jQueryError: If query execution fails
            Neo4jConnectionError: If the database cannot be reached
        """
        parameters = parameters or {}

        logger.debug(
            "Executing Neo4j query: query_length=%d, params=%s",
            len(query),
            list(parameters.keys()),
        )

        async with self.session(database=database) as session:
            try:
                result = await session.run(query, parameters)
                records = await result.data()
            except (Neo4jError, DriverError) as e:
                logger.error("Neo4j query execution failed: %s", str(e))
                raise Neo4jQueryError(query, str(e)) from e

        logger.debug("Query executed successfully: records=%d", len(records))
        return records

    async def close(self) -> None:
        """Close Neo4j driver and cleanup connections."""
        async with self._connect_lock:
            if self._driver is not None:
                logger.info("Closing Neo4j driver...")
                await self._driver.close()
                self._driver = None
                self._connected = False
                logger.info("Neo4j driver closed")

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


def create_neo4j_client() -> Neo4jClient:
    """
    Create a Neo4j client using settings.

    Returns:
        Configured Neo4jClient instance
    """
    return Neo4jClient(
        uri=settings.neo4j_uri,
        user=settings.neo4j_user,
        password=settings.neo4j_password,
        database=settings.neo4j_database,
    )
