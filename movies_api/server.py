"""
Primary FastAPI application entry point
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from movies_api.api.api import api_router
from movies_api.api.deps import MalformedBodyError
from movies_api.core.config import Settings, get_settings
from movies_api.core.cors import OriginPolicy
from movies_api.data_access.memory_store import MovieStore, load_seed_movies

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )


def create_app(settings: Optional[Settings] = None, store: Optional[MovieStore] = None) -> FastAPI:
    """
    Builds the application.

    Args:
        settings: Settings to use. Defaults to the cached environment settings.
        store: A pre-built MovieStore. When omitted, the store is seeded from
            SEED_DATA_PATH (or the bundled dataset) at startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if store is None:
            logger.info("Application startup: Loading seed movies...")
            app.state.movie_store = MovieStore(load_seed_movies(settings.SEED_DATA_PATH))
        else:
            app.state.movie_store = store
        logger.info(f"Serving {len(app.state.movie_store)} movies")
        yield
        # Shutdown. The collection is not persisted.
        logger.info("Application shutdown: Discarding in-memory movies...")
        app.state.movie_store = None

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.origin_policy = OriginPolicy(settings.ACCEPTED_ORIGINS)

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Malformed JSON body"},
        )

    app.include_router(api_router)
    return app


configure_logging(get_settings().LOG_LEVEL)
app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting {settings.PROJECT_NAME} on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        server_header=False,
    )


if __name__ == "__main__":
    main()
