"""
tests.conftest

Shared fixtures: test settings, an in-process API client, and a respx router
standing in for the SignRequest API.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio
import respx
from fastapi import FastAPI

from signrequest_demo.api.app import create_app
from signrequest_demo.settings import Settings
from tests.fakes import PROVIDER_BASE_URL, make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def provider_mock() -> Iterator[respx.MockRouter]:
    # Only real network transports are patched; ASGITransport calls pass through.
    with respx.mock(base_url=PROVIDER_BASE_URL, assert_all_called=False) as router:
        yield router
