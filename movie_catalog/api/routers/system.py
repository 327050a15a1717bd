"""
System API endpoints (root, health).
"""

from fastapi import APIRouter, Depends

from movie_catalog import __version__
from movie_catalog.api.dependencies import get_store
from movie_catalog.core.catalog.store import MovieStore

router = APIRouter(tags=["system"])


@router.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/health",
    }


@router.get("/health")
def health_check(store: MovieStore = Depends(get_store)):
    """Health check: service is up and the catalog is loaded."""
    return {
        "status": "healthy",
        "version": __version__,
        "movies": store.count(),
    }
