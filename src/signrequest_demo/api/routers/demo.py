"""
signrequest_demo.api.routers.demo

Server-rendered demo page.

Responsibilities:
- Drive the Client Requester once per page view (auto-load on display, reload on revisit).
- Render its state with the Jinja2 page template.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from signrequest_demo.api.deps import settings_dep
from signrequest_demo.settings import Settings
from signrequest_demo.ui.requester import RequestStatus, SigningSessionRequester

router = APIRouter(tags=["demo"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "ui" / "templates"))

STATUS_MESSAGES: dict[RequestStatus, str] = {
    RequestStatus.idle: "Ready to load SignRequest",
    RequestStatus.loading: "Creating SignRequest document...",
    RequestStatus.success: "SignRequest embed loaded successfully!",
    RequestStatus.error: "Failed to load SignRequest embed",
}


@router.get("/", response_class=HTMLResponse)
async def signing_demo(request: Request, settings: Settings = Depends(settings_dep)) -> HTMLResponse:
    if settings.functions_base_url:
        base_url = settings.functions_base_url
        transport = None
    else:
        # Same pattern as an internal tool call: hit our own endpoint without network.
        base_url = str(request.base_url).rstrip("/")
        transport = httpx.ASGITransport(app=request.app)

    forwarded: dict[str, str] = {}
    # Share the page request id with the in-process orchestrator call.
    if request_id := structlog.contextvars.get_contextvars().get("request_id"):
        forwarded["x-request-id"] = str(request_id)

    async with httpx.AsyncClient(transport=transport) as http:
        requester = SigningSessionRequester(
            http=http,
            functions_base_url=base_url,
            public_api_key=settings.public_api_key,
            extra_headers=forwarded,
        )
        await requester.load()

    return templates.TemplateResponse(
        request,
        "signing_session.html",
        {
            "view": requester.view(),
            "status_messages": STATUS_MESSAGES,
            "reload_url": str(request.url_for("signing_demo")),
            "signer_email": settings.signer_email,
        },
    )
