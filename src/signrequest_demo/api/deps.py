"""
signrequest_demo.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the settings instance the app was built with.
- Provide a request-scoped HTTP client for provider calls.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Request

from signrequest_demo.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Stored on app startup in `signrequest_demo.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


async def provider_http() -> AsyncIterator[httpx.AsyncClient]:
    # One client per invocation; closed when the request finishes.
    async with httpx.AsyncClient() as http:
        yield http


# --- Module Notes -----------------------------------------------------------
# Tests override `provider_http` or mock the transport with respx.
