"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from prms.application.interfaces import KeyValueStore
from prms.application.services import ApplicationState
from prms.config import Settings, get_settings
from prms.infrastructure.database import build_engine
from prms.infrastructure.logging.log_config import setup_logging
from prms.infrastructure.storage import InMemoryKeyValueStore, SQLAlchemyKeyValueStore
from prms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> tuple[KeyValueStore, Engine | None]:
    """Return the configured key-value storage and the engine behind it, if any."""
    if not settings.storage_url.strip():
        logger.warning("STORAGE_URL is empty; session state will not survive a restart.")
        return InMemoryKeyValueStore(), None

    engine = build_engine(settings.storage_url, echo=(settings.log_level_sql.upper() == "DEBUG"))
    return SQLAlchemyKeyValueStore(engine), engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and restore the session."""
    settings = get_settings()
    setup_logging(settings)

    engine = None
    if getattr(app.state, "prms", None) is None:
        storage, engine = build_storage(settings)
        app.state.prms = ApplicationState.load_from_persistence(storage, settings)

    yield

    # Shutdown
    app.state.prms.store.reset()
    if engine is not None:
        engine.dispose()


def create_app(state: ApplicationState | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Passing ``state`` skips storage construction in the lifespan.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.prms = state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "prms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
