import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ideas_api.api.http import health_router, ideas_router
from ideas_api.core.config import Settings
from ideas_api.core.db import create_engine, create_session_factory, init_models
from ideas_api.core.errors import register_exception_handlers
from ideas_api.core.security import TokenCodec

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application"""
    if app_settings is None:
        from ideas_api.core.config import settings as app_settings

    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(app_settings.database_url)
        await init_models(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info("Ideas API started")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database connections closed")

    app = FastAPI(
        title="Ideas API",
        description="CRUD API for user-submitted ideas",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = app_settings
    # Fails on a missing or unusable secret before the app accepts requests
    app.state.token_codec = TokenCodec.from_settings(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, show_stack=not app_settings.is_production)

    app.include_router(health_router)
    app.include_router(ideas_router)

    return app


def run() -> None:
    """Console entry point"""
    from ideas_api.core.config import settings

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
