import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from identity import __version__
from identity.api import create_api_router
from identity.core.config import Settings, get_settings
from identity.core.container import ApplicationContainer
from identity.core.logging_config import configure_logging
from identity.interfaces.http.errors import register_exception_handlers
from identity.interfaces.http.middleware import register_middleware
from identity.schemas import HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    container = ApplicationContainer(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # StorageUnavailableError propagates and aborts startup.
        await container.startup()
        logger.info("%s ready, database %s", settings.project_name, container.engine.url.render_as_string())
        yield
        await container.shutdown()
        logger.info("%s stopped", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        description="Account registration and credential login",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials="*" not in settings.cors.origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middleware(app)
    register_exception_handlers(app)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse()

    return app


app = create_app()
