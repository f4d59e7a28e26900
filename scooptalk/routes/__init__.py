"""FastAPI routes package."""

from scooptalk.routes.ask import router as ask_router
from scooptalk.routes.health import router as health_router
from scooptalk.routes.query import router as query_router

__all__ = ["ask_router", "health_router", "query_router"]
