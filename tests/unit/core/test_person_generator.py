"""
Unit tests for random person generation.

Tests value bounds, pool membership and substitution of the random source.
"""

import random
from unittest.mock import MagicMock

import pytest

from citygraph.core.constants import CITY_NAMES, PERSON_NAMES
from citygraph.core.fixtures import PersonGenerator
from citygraph.models.graph import PersonFixture


def test_pools_match_expected_values():
    """Name and city pools hold the fixed values."""
    assert PERSON_NAMES == (
        "Camilo",
        "Laura",
        "Andrés",
        "María",
        "Sofía",
        "Carlos",
        "Valentina",
        "Daniel",
    )
    assert CITY_NAMES == ("Bogotá", "Medellín", "Cali", "Barranquilla", "Cartagena")


def test_generated_values_stay_in_bounds():
    """Every generated fixture respects id, age, name and city bounds."""
    generator = PersonGenerator(random.Random(1234))

    for _ in range(2000):
        fixture = generator.generate()

        assert 0 <= fixture.person_id < 10000
        assert 18 <= fixture.age <= 98
        assert fixture.name in PERSON_NAMES
        assert fixture.city_name in CITY_NAMES


def test_seeded_generators_are_reproducible():
    """Two generators with the same seed produce the same sequence."""
    first = PersonGenerator(random.Random(7))
    second = PersonGenerator(random.Random(7))

    assert [first.generate() for _ in range(10)] == [
        second.generate() for _ in range(10)
    ]


def test_random_source_can_be_stubbed():
    """A stub random source yields a fully deterministic fixture."""
    rng = MagicMock()
    rng.randrange.side_effect = [42, 12]
    rng.choice.side_effect = ["Camilo", "Bogotá"]

    fixture = PersonGenerator(rng).generate()

    assert fixture == PersonFixture(
        person_id=42, name="Camilo", age=30, city_name="Bogotá"
    )
    rng.randrange.assert_any_call(10000)
    rng.randrange.assert_any_call(80)


def test_extreme_draws_map_to_age_bounds():
    """The lowest and highest offsets give ages 18 and 97."""
    low = MagicMock()
    low.randrange.side_effect = [0, 0]
    low.choice.side_effect = lambda pool: pool[0]

    high = MagicMock()
    high.randrange.side_effect = [9999, 79]
    high.choice.side_effect = lambda pool: pool[-1]

    assert PersonGenerator(low).generate().age == 18
    assert PersonGenerator(high).generate().age == 97


def test_custom_pools_are_used():
    """Custom pools replace the defaults."""
    generator = PersonGenerator(random.Random(0), names=["Ana"], cities=["Pasto"])

    fixture = generator.generate()

    assert fixture.name == "Ana"
    assert fixture.city_name == "Pasto"


def test_empty_pool_is_rejected():
    """An empty pool cannot produce values."""
    with pytest.raises(ValueError):
        PersonGenerator(names=[])
