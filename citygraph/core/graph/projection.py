"""Map raw graph records onto typed Person and City records."""

import logging
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from citygraph.core.error_handlers import RecordProjectionError
from citygraph.models.graph import City, Person

logger = logging.getLogger(__name__)

# Keys the store or driver may attach that are not modeled attributes
INTERNAL_KEYS = frozenset(
    {
        "elementId",
        "element_id",
        "identity",
        "labels",
        "<id>",
        "<elementId>",
        "<labels>",
    }
)


def own_attributes(value: Any) -> Dict[str, Any]:
    """
    Shallow-copy a node's attributes, dropping internal store identifiers.

    Args:
        value: A mapping from a map projection or a driver ``Node``

    Returns:
        New dictionary with only modeled attributes
    """
    if value is None:
        return {}
    return {
        key: item for key, item in dict(value.items()).items() if key not in INTERNAL_KEYS
    }


def project_person(record: Mapping[str, Any], key: str = "person") -> Person:
    """
    Project a ``person`` row into a Person.

    Args:
        record: Result row containing the person map under ``key``
        key: Column name holding the person map

    Returns:
        Person with its own attributes plus ``city``

    Raises:
        RecordProjectionError: If the row does not describe a person
    """
    try:
        return Person.model_validate(own_attributes(record.get(key)))
    except ValidationError as e:
        logger.error("Invalid Person record: %s", e)
        raise RecordProjectionError("Person", str(e)) from e


def project_city(record: Mapping[str, Any], key: str = "city") -> City:
    """
    Project a ``city`` row into a City.

    Args:
        record: Result row containing the city map under ``key``
        key: Column name holding the city map

    Returns:
        City with its own attributes

    Raises:
        RecordProjectionError: If the row does not describe a city
    """
    try:
        return City.model_validate(own_attributes(record.get(key)))
    except ValidationError as e:
        logger.error("Invalid City record: %s", e)
        raise RecordProjectionError("City", str(e)) from e
