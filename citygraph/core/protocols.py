"""Protocol definitions for core components.

This module defines abstract interfaces so route handlers depend on
behaviour rather than on the Neo4j driver or the global random module.
"""

from typing import List, Protocol, Sequence, TypeVar

from citygraph.core.pagination import PageWindow
from citygraph.models.graph import City, Person, PersonFixture

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the person generator."""

    def randrange(self, stop: int) -> int:
        """Return a random integer in [0, stop)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        ...


class PersonGeneratorProtocol(Protocol):
    """Protocol for sources of new person attributes."""

    def generate(self) -> PersonFixture:
        """Return attributes for the next person to create."""
        ...


class GraphStoreProtocol(Protocol):
    """Protocol for the graph operations exposed over HTTP."""

    async def list_people(self, window: PageWindow) -> List[Person]:
        """
        List people with the name of the city they live in.

        Args:
            window: Resolved pagination window

        Returns:
            At most ``window.limit`` people
        """
        ...

    async def list_cities(self, window: PageWindow) -> List[City]:
        """
        List cities.

        Args:
            window: Resolved pagination window

        Returns:
            At most ``window.limit`` cities
        """
        ...

    async def create_person(self, fixture: PersonFixture) -> Person:
        """
        Create a person linked to a (possibly new) city.

        Args:
            fixture: Attributes of the person to create

        Returns:
            The created person with its city name
        """
        ...
