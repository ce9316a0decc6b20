"""API routes for version 1.

People and cities endpoints. Each request gets its own graph session
through ``get_graph_service``; store failures are raised as
``CityGraphException`` and answered by the registered exception handlers.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from citygraph.api.v1 import debug_routes
from citygraph.api.v1.dependencies import get_graph_service, get_person_generator
from citygraph.api.v1.schemas import (
    CitiesPage,
    ErrorResponse,
    PeoplePage,
    PersonCreatedResponse,
)
from citygraph.core.constants import PERSON_CREATED_MESSAGE
from citygraph.core.pagination import resolve_page
from citygraph.core.protocols import GraphStoreProtocol, PersonGeneratorProtocol

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

PAGE_QUERY_DESCRIPTION = "Page number (>= 1); invalid or missing values mean 1"


@router.get(
    "/people",
    response_model=PeoplePage,
    responses=ERROR_RESPONSES,
    tags=["people"],
)
async def list_people(
    page: Optional[str] = Query(default=None, description=PAGE_QUERY_DESCRIPTION),
    service: GraphStoreProtocol = Depends(get_graph_service),
) -> PeoplePage:
    """
    List people with the name of the city they live in.

    Example: GET /people?page=2
    """
    window = resolve_page(page)
    people = await service.list_people(window)

    logger.debug("Listed people: page=%d, count=%d", window.page, len(people))
    return PeoplePage(page=window.page, per_page=window.limit, results=people)


@router.get(
    "/cities",
    response_model=CitiesPage,
    responses=ERROR_RESPONSES,
    tags=["cities"],
)
async def list_cities(
    page: Optional[str] = Query(default=None, description=PAGE_QUERY_DESCRIPTION),
    service: GraphStoreProtocol = Depends(get_graph_service),
) -> CitiesPage:
    """
    List cities.

    Example: GET /cities?page=1
    """
    window = resolve_page(page)
    cities = await service.list_cities(window)

    logger.debug("Listed cities: page=%d, count=%d", window.page, len(cities))
    return CitiesPage(page=window.page, per_page=window.limit, results=cities)


@router.post(
    "/people",
    response_model=PersonCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    tags=["people"],
)
async def create_person(
    service: GraphStoreProtocol = Depends(get_graph_service),
    generator: PersonGeneratorProtocol = Depends(get_person_generator),
) -> PersonCreatedResponse:
    """
    Create a person with random attributes living in a random city.

    The city is reused when one with the same name already exists.
    """
    fixture = generator.generate()
    person = await service.create_person(fixture)

    return PersonCreatedResponse(message=PERSON_CREATED_MESSAGE, person=person)


router.include_router(debug_routes.router)
