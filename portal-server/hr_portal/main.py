import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_portal import __version__
from hr_portal.api import create_api_router
from hr_portal.core.config import Settings, get_settings
from hr_portal.core.container import ApplicationContainer, build_container
from hr_portal.interfaces.http.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or (container.settings if container else get_settings())
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.container.shutdown()

    app = FastAPI(
        title=settings.project_name,
        description="HR portal: accounts, departments, employees and requests",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container or build_container(settings)
    logger.info("Portal ready (%s environment)", settings.environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", summary="Liveness probe")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
