"""
Debug routes returning fixed error statuses.

Used to exercise how proxies and gateways in front of the API handle
upstream 400, 404 and 502 responses.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from citygraph.api.v1.schemas import ForcedErrorResponse
from citygraph.core.constants import (
    FORCED_BAD_GATEWAY_MESSAGE,
    FORCED_BAD_REQUEST_MESSAGE,
    FORCED_NOT_FOUND_MESSAGE,
)

router = APIRouter(tags=["debug"])


@router.get(
    "/force-400",
    status_code=status.HTTP_400_BAD_REQUEST,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ForcedErrorResponse}},
)
async def force_400() -> JSONResponse:
    """Always answer 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": FORCED_BAD_REQUEST_MESSAGE},
    )


@router.get(
    "/force-404",
    status_code=status.HTTP_404_NOT_FOUND,
    responses={status.HTTP_404_NOT_FOUND: {"model": ForcedErrorResponse}},
)
async def force_404() -> JSONResponse:
    """Always answer 404 Not Found."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": FORCED_NOT_FOUND_MESSAGE},
    )


@router.get(
    "/force-502",
    status_code=status.HTTP_502_BAD_GATEWAY,
    response_class=PlainTextResponse,
)
async def force_502() -> PlainTextResponse:
    """Always answer 502 Bad Gateway with a plain-text body."""
    return PlainTextResponse(
        FORCED_BAD_GATEWAY_MESSAGE,
        status_code=status.HTTP_502_BAD_GATEWAY,
    )
