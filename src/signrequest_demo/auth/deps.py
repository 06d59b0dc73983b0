"""
signrequest_demo.auth.deps

FastAPI dependency functions for the public-credential gate.

Responsibilities:
- Accept the public key as `Authorization: Bearer <key>` or as an `apikey` header.
- Reject with 401 (carrying CORS headers so browsers can read the failure).
"""

from __future__ import annotations

import secrets

from fastapi import Depends, Header, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from signrequest_demo.api.cors import CORS_HEADERS
from signrequest_demo.api.deps import settings_dep
from signrequest_demo.settings import Settings

_bearer = HTTPBearer(auto_error=False)


def require_public_key(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    apikey: str | None = Header(default=None),
    settings: Settings = Depends(settings_dep),
) -> None:
    expected = settings.public_api_key
    if not expected:
        # Gate disabled: no public key configured.
        return

    presented = [c for c in (creds.credentials if creds else None, apikey) if c]
    if not presented:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="Missing public API key",
            headers=CORS_HEADERS,
        )
    if not any(secrets.compare_digest(c, expected) for c in presented):
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="Invalid public API key",
            headers=CORS_HEADERS,
        )


# --- Module Notes -----------------------------------------------------------
# Preflight (OPTIONS) requests never carry credentials and are not gated.
