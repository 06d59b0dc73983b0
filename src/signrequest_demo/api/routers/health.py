"""
signrequest_demo.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) reporting whether provider secrets are present.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from signrequest_demo.api.deps import settings_dep
from signrequest_demo.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(settings: Settings = Depends(settings_dep)) -> dict[str, Any]:
    # Missing secrets do not make the service unready: the endpoint still answers 400.
    return {"status": "ready", "provider_configured": settings.provider_configured}


# --- Module Notes -----------------------------------------------------------
# No provider call is made here; probing SignRequest would create real documents.
