"""
signrequest_demo.api.routers.signing_sessions

Orchestrator trigger endpoint (`create-signrequest-document`).

Responsibilities:
- Answer CORS preflight without touching the provider.
- Validate provider configuration, run the signing-session service and
  reshape its outcome into the success or error body.
"""

from __future__ import annotations

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from signrequest_demo.api.cors import CORS_HEADERS
from signrequest_demo.api.deps import provider_http, settings_dep
from signrequest_demo.auth.deps import require_public_key
from signrequest_demo.errors import SigningSessionError
from signrequest_demo.observability.logging import get_logger
from signrequest_demo.provider.models import ProviderConfig, SignerIdentity
from signrequest_demo.services.signing_session_service import SigningSessionService
from signrequest_demo.settings import Settings

log = get_logger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["signing-sessions"])

FUNCTION_PATH = "/create-signrequest-document"


def _utc_timestamp() -> str:
    # ISO-8601, millisecond precision, "Z" suffix.
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ErrorBody(BaseModel):
    error: str
    timestamp: str = Field(default_factory=_utc_timestamp)


@router.options(FUNCTION_PATH)
async def preflight() -> Response:
    return Response(status_code=HTTP_200_OK, headers=CORS_HEADERS)


@router.post(FUNCTION_PATH, dependencies=[Depends(require_public_key)])
async def create_signrequest_document(
    settings: Settings = Depends(settings_dep),
    http: httpx.AsyncClient = Depends(provider_http),
) -> JSONResponse:
    try:
        # Raises ConfigurationError before any outbound call when a secret is missing.
        config = ProviderConfig.from_settings(settings)
        svc = SigningSessionService(
            config=config,
            http=http,
            signer=SignerIdentity.from_settings(settings),
            from_email=settings.from_email,
        )
        session = await svc.create_session()
    except SigningSessionError as e:
        log.error("create_signrequest_document_failed", kind=e.kind, error=e.message)
        return JSONResponse(
            ErrorBody(error=e.message).model_dump(),
            status_code=HTTP_400_BAD_REQUEST,
            headers=CORS_HEADERS,
        )

    return JSONResponse(
        session.model_dump(exclude_none=True),
        status_code=HTTP_200_OK,
        headers=CORS_HEADERS,
    )


# --- Module Notes -----------------------------------------------------------
# Every expected failure (configuration, transport, status, data shape) maps to 400;
# see DESIGN.md for why configuration errors are not reported as 5xx.
