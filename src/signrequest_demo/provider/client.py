"""
signrequest_demo.provider.client

HTTP client boundary used by the orchestrator to call SignRequest.

Responsibilities:
- Attach the provider token header to every call.
- Map transport failures, non-2xx statuses and malformed payloads onto the
  `signrequest_demo.errors` taxonomy.
- Return typed records (`Document`, `SignRequest`).
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from signrequest_demo.errors import (
    ProviderResponseError,
    ProviderStatusError,
    ProviderTransportError,
)
from signrequest_demo.observability.logging import get_logger
from signrequest_demo.provider.models import (
    Document,
    DocumentCreate,
    ProviderConfig,
    SignRequest,
    SignRequestCreate,
)

log = get_logger(__name__)

_ResponseT = TypeVar("_ResponseT", bound=BaseModel)


class SignRequestClient:
    """
    Thin wrapper over the two provider endpoints the demo needs.
    The `httpx.AsyncClient` is owned by the caller.
    """

    def __init__(self, *, config: ProviderConfig, http: httpx.AsyncClient) -> None:
        self._config = config
        self._http = http

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def _authz(self) -> dict[str, str]:
        return {"Authorization": f"Token {self._config.api_key}"}

    async def create_document(self, body: DocumentCreate) -> Document:
        r = await self._post("/documents/", body, operation="document creation")
        return _parse(r, Document, operation="document creation")

    async def create_signrequest(self, body: SignRequestCreate) -> SignRequest:
        r = await self._post("/signrequests/", body, operation="signing request")
        return _parse(r, SignRequest, operation="signing request")

    async def _post(self, path: str, body: BaseModel, *, operation: str) -> httpx.Response:
        url = f"{self._config.base_url}{path}"
        try:
            r = await self._http.post(url, headers=self._authz(), json=body.model_dump(mode="json"))
        except httpx.HTTPError as e:
            log.error("provider_unreachable", operation=operation, url=url, error=str(e))
            raise ProviderTransportError(f"SignRequest {operation} failed: {e}") from e

        log.info("provider_response", operation=operation, status_code=r.status_code)
        if not r.is_success:
            log.error(
                "provider_status_error",
                operation=operation,
                status_code=r.status_code,
                body=r.text,
            )
            raise ProviderStatusError(
                f"SignRequest {operation} failed ({r.status_code}): {r.text}",
                status_code=r.status_code,
                body=r.text,
            )
        return r


def _parse(r: httpx.Response, model: type[_ResponseT], *, operation: str) -> _ResponseT:
    try:
        return model.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError; both mean "2xx but unusable".
        log.error("provider_payload_invalid", operation=operation, body=r.text)
        raise ProviderResponseError(
            f"SignRequest {operation} returned an unexpected payload: {e}"
        ) from e


# --- Module Notes -----------------------------------------------------------
# No retries and no custom timeouts: a failed call aborts the whole session and
# the caller starts over from scratch.
