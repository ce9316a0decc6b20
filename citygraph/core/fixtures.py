"""Random attribute generation for new people."""

import logging
import random
from typing import Optional, Sequence

from citygraph.core.constants import (
    CITY_NAMES,
    MAX_PERSON_ID,
    MIN_PERSON_AGE,
    PERSON_AGE_SPAN,
    PERSON_NAMES,
)
from citygraph.core.protocols import RandomSource
from citygraph.models.graph import PersonFixture

logger = logging.getLogger(__name__)


class PersonGenerator:
    """
    Produce plausible random attributes for a new Person.

    The random source is injected so tests can pass a seeded
    ``random.Random`` or a stub returning fixed values.

    Usage:
        generator = PersonGenerator(random.Random(7))
        fixture = generator.generate()
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        names: Sequence[str] = PERSON_NAMES,
        cities: Sequence[str] = CITY_NAMES,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source (defaults to a fresh SystemRandom)
            names: Pool of first names
            cities: Pool of city names
        """
        if not names or not cities:
            raise ValueError("Name and city pools must not be empty")

        self._rng = rng or random.SystemRandom()
        self._names = tuple(names)
        self._cities = tuple(cities)

    def generate(self) -> PersonFixture:
        """
        Draw a new set of person attributes.

        Returns:
            PersonFixture with id in [0, 10000), age in [18, 98) and
            name/city taken from the configured pools
        """
        fixture = PersonFixture(
            person_id=self._rng.randrange(MAX_PERSON_ID),
            name=self._rng.choice(self._names),
            age=MIN_PERSON_AGE + self._rng.randrange(PERSON_AGE_SPAN),
            city_name=self._rng.choice(self._cities),
        )
        logger.debug("Generated person fixture: %s", fixture)
        return fixture
