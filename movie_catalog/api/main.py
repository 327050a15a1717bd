"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_catalog import __version__
from movie_catalog.api.config import (
    get_allowed_origins,
    get_api_host,
    get_api_port,
    get_seed_path,
)
from movie_catalog.api.routers import movies, system
from movie_catalog.core.catalog.origins import OriginGate, OriginRejectedError
from movie_catalog.core.catalog.store import MovieStore
from movie_catalog.core.catalog.validation import describe_error
from movie_catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[MovieStore] = None,
    allowed_origins: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Movie store to serve (default: loaded from the seed file)
        allowed_origins: CORS allow-list (default: from config)

    Returns:
        Configured FastAPI app owning the store and origin gate
    """
    if store is None:
        store = MovieStore.from_seed_file(get_seed_path())
    gate = OriginGate(allowed_origins if allowed_origins is not None else get_allowed_origins())

    app = FastAPI(
        title="Movie Catalog API",
        description="REST API for an in-memory movie catalog",
        version=__version__,
    )
    app.state.store = store
    app.state.origin_gate = gate

    # Starlette runs the last registered middleware outermost. The error
    # catcher goes first so CORS headers still reach a 500, and the origin
    # gate goes last so it also sees preflights.
    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(gate.allowed_origins),
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def enforce_origin(request: Request, call_next):
        try:
            gate.check(request.headers.get("origin"))
        except OriginRejectedError as e:
            return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(e)})
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [describe_error(err, skip=1).model_dump() for err in exc.errors()]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": errors})

    app.include_router(movies.router)
    app.include_router(system.router)
    return app


def run() -> None:
    """Start the API server with uvicorn."""
    configure_api_logging()
    host, port = get_api_host(), get_api_port()
    logger.info("Server listening on http://localhost:%d", port)
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
