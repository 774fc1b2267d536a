"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from grocerylist import __version__
from grocerylist.config import get_settings
from grocerylist.logging_config import LoggingContext, configure_logging, get_logger
from grocerylist.routers import groceries_router, units_router

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Grocerylist API ({settings.environment})")
    yield
    logger.info("Shutting down Grocerylist API")


app = FastAPI(
    title="Grocerylist API",
    description="Combine recipe ingredients into a single grocery list",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with its request, user and grocery list ids."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(
        request_id=request_id,
        user_id=request.headers.get("X-User-ID"),
        list_id=request.headers.get("X-List-ID"),
    ):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(units_router)
app.include_router(groceries_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "grocerylist-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Grocerylist API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
