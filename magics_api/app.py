import logging
from functools import partial
from typing import Any, Callable

from fastapi import FastAPI

from magics_api.api.routes import router
from magics_api.auth import WorkerGate, WorkerGateMiddleware
from magics_api.core.env import Settings, load_settings
from magics_api.db.mongo import MongoStore, close_mongo_client, get_mongo_client

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    client_factory: Callable[[], Any] | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    if client_factory is None:
        client_factory = partial(get_mongo_client, settings.mongo_uri)

    # Docs stay off: every non-actuator route sits behind the worker gate
    application = FastAPI(
        title="magics-api", docs_url=None, redoc_url=None, openapi_url=None
    )
    application.state.settings = settings
    application.state.store = MongoStore(settings.mongo_db, client_factory)
    application.add_middleware(
        WorkerGateMiddleware, gate=WorkerGate(settings.worker_gate_key)
    )

    @application.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Starting magics-api: db=%s uri=%s",
            settings.mongo_db,
            settings.masked_mongo_uri(),
        )

    @application.on_event("shutdown")
    async def shutdown_event() -> None:
        """Clean up resources on shutdown."""
        close_mongo_client()

    application.include_router(router)
    return application
