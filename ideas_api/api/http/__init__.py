from ideas_api.api.http.health import router as health_router
from ideas_api.api.http.ideas import router as ideas_router

__all__ = [
    "health_router",
    "ideas_router"
]
