from fastapi import APIRouter

# Subrouters are imported and re-exported for convenience
from .analyze import router as analyze_router  # noqa: F401
from .competitions import router as competitions_router  # noqa: F401

__all__ = [
    "APIRouter",
    "analyze_router",
    "competitions_router",
]
