"""Tests for the Client Requester state machine."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio
import respx

from signrequest_demo.ui.requester import RequestStatus, SigningSessionRequester
from tests.fakes import EMBED_URL, FUNCTION_URL

FUNCTIONS_BASE_URL = "http://functions.test"


@pytest.fixture
def functions_mock() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=FUNCTIONS_BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def http() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


def _requester(http: httpx.AsyncClient, **overrides) -> SigningSessionRequester:
    kwargs = {
        "http": http,
        "functions_base_url": FUNCTIONS_BASE_URL,
        "public_api_key": "anon-key",
    }
    kwargs.update(overrides)
    return SigningSessionRequester(**kwargs)


@pytest.mark.asyncio
async def test_success_transitions_and_sends_public_key(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    route = functions_mock.post(FUNCTION_URL).mock(
        return_value=httpx.Response(
            200, json={"embed_url": EMBED_URL, "document_id": "d1", "signrequest_id": "s1"}
        )
    )
    seen: list[RequestStatus] = []
    requester = _requester(http, on_change=seen.append)
    assert requester.status is RequestStatus.idle

    status = await requester.load()

    assert status is RequestStatus.success
    assert requester.transitions == [
        RequestStatus.idle,
        RequestStatus.loading,
        RequestStatus.success,
    ]
    assert seen == [RequestStatus.loading, RequestStatus.success]
    assert requester.embed_url == EMBED_URL
    assert requester.error == ""
    assert requester.is_loading is False

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer anon-key"
    assert request.headers["apikey"] == "anon-key"
    assert json.loads(request.content) == {}


@pytest.mark.asyncio
async def test_error_body_message_is_shown_verbatim(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(return_value=httpx.Response(400, json={"error": "boom"}))
    requester = _requester(http)

    status = await requester.load()

    assert status is RequestStatus.error
    assert requester.error == "boom"
    assert requester.embed_url == ""
    assert requester.transitions[-2:] == [RequestStatus.loading, RequestStatus.error]


@pytest.mark.asyncio
async def test_error_without_message_falls_back_to_status_line(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(return_value=httpx.Response(502, json={}))
    requester = _requester(http)

    await requester.load()

    assert requester.error == "HTTP 502: Bad Gateway"


@pytest.mark.asyncio
async def test_success_without_embed_url_is_an_error(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(return_value=httpx.Response(200, json={"document_id": "d1"}))
    requester = _requester(http)

    assert await requester.load() is RequestStatus.error
    assert requester.error == "No embed URL returned from the function"


@pytest.mark.asyncio
async def test_non_json_response_is_an_error(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(return_value=httpx.Response(200, text="<html></html>"))
    requester = _requester(http)

    assert await requester.load() is RequestStatus.error
    assert requester.error


@pytest.mark.asyncio
async def test_network_failure_is_an_error(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(side_effect=httpx.ConnectError("connection refused"))
    requester = _requester(http)

    assert await requester.load() is RequestStatus.error
    assert requester.error == "connection refused"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"functions_base_url": None}, {"public_api_key": None}, {"public_api_key": ""}],
)
async def test_missing_configuration_fails_without_request(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter, overrides: dict
) -> None:
    requester = _requester(http, **overrides)

    assert await requester.load() is RequestStatus.error
    assert "configuration missing" in requester.error
    assert len(functions_mock.calls) == 0


@pytest.mark.asyncio
async def test_reload_clears_previous_outcome(
    http: httpx.AsyncClient, functions_mock: respx.MockRouter
) -> None:
    functions_mock.post(FUNCTION_URL).mock(
        side_effect=[
            httpx.Response(400, json={"error": "boom"}),
            httpx.Response(200, json={"embed_url": EMBED_URL}),
        ]
    )
    requester = _requester(http)

    await requester.load()
    assert requester.error == "boom"

    await requester.load()
    assert requester.status is RequestStatus.success
    assert requester.error == ""
    assert requester.embed_url == EMBED_URL
    assert requester.transitions == [
        RequestStatus.idle,
        RequestStatus.loading,
        RequestStatus.error,
        RequestStatus.loading,
        RequestStatus.success,
    ]
