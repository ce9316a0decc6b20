"""Main FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from citygraph.api.v1.dependencies import get_neo4j_client
from citygraph.api.v1.routes import router as api_router
from citygraph.api.v1.schemas import MessageResponse
from citygraph.config import settings
from citygraph.core.constants import ROOT_MESSAGE
from citygraph.core.graph.graph_service import ensure_constraints
from citygraph.core.graph.neo4j_client import create_neo4j_client
from citygraph.core.middleware import RequestIDMiddleware, register_exception_handlers
from citygraph.core.services.logging_config import setup_logging

# Set up structured logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    client = create_neo4j_client()
    app.state.neo4j_client = client
    try:
        logger.info("Initializing Neo4j connection...")
        await client.connect()
        if settings.neo4j_ensure_constraints:
            await ensure_constraints(client)
        logger.info("Neo4j initialization completed")
    except Exception as e:
        # Requests retry the connection lazily and answer 500 while it is down
        logger.warning("Neo4j initialization failed (continuing): %s", e)

    yield

    logger.info(f"Shutting down {settings.app_name}")
    try:
        await client.close()
        logger.info("Neo4j connection closed")
    except Exception as e:
        logger.warning("Error closing Neo4j connection: %s", e)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Paginated people and cities API backed by Neo4j",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Register exception handlers
register_exception_handlers(app)

# Add RequestID middleware
app.add_middleware(RequestIDMiddleware)

allowed_origins = settings.cors_origins

if "*" in allowed_origins:
    logger.warning(
        "CORS is configured to allow all origins. "
        "This is acceptable for development but should be restricted in production."
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/", response_model=MessageResponse)
async def root() -> MessageResponse:
    """Root endpoint."""
    return MessageResponse(message=ROOT_MESSAGE)


@app.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """
    Health check endpoint with Neo4j connectivity verification.

    Returns 200 with "healthy" or "degraded" status depending on
    whether Neo4j is accessible.
    """
    health_status = {
        "status": "healthy",
        "version": settings.app_version,
        "services": {
            "api": {"status": "up"},
            "neo4j": {"status": "down", "response_time_ms": None},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }

    try:
        client = get_neo4j_client(request)
        start_time = time.time()
        await client.execute_query("RETURN 1 AS ok")
        response_time_ms = int((time.time() - start_time) * 1000)

        health_status["services"]["neo4j"] = {
            "status": "up",
            "response_time_ms": response_time_ms,
        }
        logger.debug("Health check: Neo4j up (%dms)", response_time_ms)

    except Exception as e:
        # Neo4j is down, but API is still functional (degraded)
        logger.warning("Health check: Neo4j down - %s", str(e))
        health_status["status"] = "degraded"

    return health_status


# Include API routes
app.include_router(api_router)
