"""
signrequest_demo.api.app

FastAPI app factory for the SignRequest demo service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Configure logging once and keep the injected settings on `app.state`.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from signrequest_demo import __version__
from signrequest_demo.api.routers.demo import router as demo_router
from signrequest_demo.api.routers.health import router as health_router
from signrequest_demo.api.routers.signing_sessions import router as signing_sessions_router
from signrequest_demo.observability.logging import configure_logging, get_logger
from signrequest_demo.observability.middleware import RequestContextMiddleware
from signrequest_demo.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        if not settings.provider_configured:
            # Not fatal: each trigger call reports the missing secret as a 400.
            log.warning(
                "provider_not_configured",
                api_key_present=bool(settings.signrequest_api_key),
                template_id_present=bool(settings.signrequest_template_id),
            )
        yield
        log.info("shutdown")

    app = FastAPI(
        title="SignRequest Embedded Signing Demo",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(signing_sessions_router)
    app.include_router(demo_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; orchestration lives in services/orchestrator.
